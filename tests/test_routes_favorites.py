def test_favorites_flow(client, add_recipe):
    r = add_recipe(name="Bowl")
    assert client.get(f"/api/favorites/{r.id}/status").json() == {"recipeId": r.id, "isFavorite": False}
    first = client.post(f"/api/favorites/{r.id}")
    assert first.status_code == 200
    again = client.post(f"/api/favorites/{r.id}")
    assert again.json()["id"] == first.json()["id"]
    assert [x["name"] for x in client.get("/api/favorites").json()] == ["Bowl"]
    assert client.get(f"/api/favorites/{r.id}/status").json()["isFavorite"] is True
    assert client.delete(f"/api/favorites/{r.id}").status_code == 204
    assert client.get("/api/favorites").json() == []


def test_favorite_unknown_recipe_404(client):
    assert client.post("/api/favorites/999").status_code == 404


def test_remove_missing_favorite_is_noop(client, add_recipe):
    r = add_recipe()
    assert client.delete(f"/api/favorites/{r.id}").status_code == 204


def test_favorites_are_per_user(monkeypatch, client, add_recipe):
    from api.config import settings

    monkeypatch.setattr(settings, "api_keys", "ana:tok-ana")
    r = add_recipe()
    client.post(f"/api/favorites/{r.id}", headers={"X-API-Key": "tok-ana"})
    assert client.get("/api/favorites").json() == []
    assert len(client.get("/api/favorites", headers={"X-API-Key": "tok-ana"}).json()) == 1
