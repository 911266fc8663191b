from api.config import settings


def test_size_limit_middleware(client):
    """El middleware debe rechazar cuerpos que exceden el límite configurado."""
    big_body = "x" * (settings.max_body_bytes + 1)
    resp = client.post("/api/recipes/search", content=big_body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 413
    assert resp.json()["code"] == "payload_too_large"


def test_unknown_api_key_is_rejected(client):
    """Una API key desconocida devuelve 401; sin cabecera se usa el usuario por defecto."""
    assert client.get("/api/nutrition/goals", headers={"X-API-Key": "nope"}).status_code == 401
    assert client.get("/api/nutrition/goals").status_code == 200


def test_api_key_selects_user(monkeypatch, client):
    monkeypatch.setattr(settings, "api_keys", "ana:tok-ana")
    goal = {"dailyCalories": 1800, "dailyProtein": 100, "dailyCarbs": 200, "dailyFat": 60, "dailyFiber": 30, "dailySodium": 2000}
    r = client.post("/api/nutrition/goals", json=goal, headers={"X-API-Key": "tok-ana"})
    assert r.status_code == 201
    assert r.json()["userId"] == "ana"
    # el usuario por defecto no ve el objetivo de ana
    assert client.get("/api/nutrition/goals").json() is None


def test_validation_errors_use_envelope(client):
    resp = client.post("/api/recipes/search", json={"ingredient1": "pollo"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    fields = {e["field"] for e in body["meta"]["errors"]}
    assert "body.ingredient2" in fields
