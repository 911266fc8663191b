PROFILE = {
    "age": 25,
    "height": 170,
    "weight": 70,
    "gender": "Masculino",
    "activityLevel": "Moderado",
    "goal": "Mantener peso",
    "allergies": ["Nueces"],
}


def test_profile_absent(client):
    assert client.get("/api/profile").json() is None
    assert client.get("/api/profile/goals").json() is None
    assert client.put("/api/profile", json={"age": 30}).status_code == 404


def test_create_and_calculated_goals(client):
    r = client.post("/api/profile", json=PROFILE)
    assert r.status_code == 200
    assert r.json()["activityLevel"] == "Moderado"
    goals = client.get("/api/profile/goals").json()
    assert goals == {"calories": 2546, "protein": 159, "carbs": 286, "fat": 85, "fiber": 25, "sodium": 2300}


def test_partial_update_keeps_other_fields(client):
    client.post("/api/profile", json=PROFILE)
    r = client.put("/api/profile", json={"goal": "Perder peso", "activityLevel": None})
    assert r.status_code == 200
    body = r.json()
    assert body["goal"] == "Perder peso"
    assert body["activityLevel"] == "Moderado"
    assert body["allergies"] == ["Nueces"]
    assert client.get("/api/profile/goals").json()["calories"] == 2046


def test_clearing_biometrics_disables_goals(client):
    client.post("/api/profile", json=PROFILE)
    r = client.put("/api/profile", json={"weight": None})
    assert r.json()["weight"] is None
    assert client.get("/api/profile/goals").json() is None


def test_post_replaces_profile(client):
    first = client.post("/api/profile", json=PROFILE).json()
    second = client.post("/api/profile", json={"age": 40}).json()
    assert second["id"] == first["id"]
    assert second["gender"] is None
    assert second["allergies"] == []


def test_profile_validation(client):
    assert client.post("/api/profile", json={**PROFILE, "age": 9}).status_code == 422
    assert client.post("/api/profile", json={**PROFILE, "gender": "X"}).status_code == 422
    assert client.post("/api/profile", json={**PROFILE, "activityLevel": "Extremo"}).status_code == 422
