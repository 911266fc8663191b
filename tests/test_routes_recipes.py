from decimal import Decimal

from conftest import recipe_data

SEARCH = {"ingredient1": "pollo", "ingredient2": "arroz", "ingredient3": "brócoli", "ingredient4": "salmón"}


def _payload(**overrides):
    data = recipe_data(**overrides)
    data["estimated_cost"] = float(data["estimated_cost"])
    return data


def test_create_and_get_recipe(client):
    r = client.post("/api/recipes", json=_payload(name="Bowl", estimated_cost=Decimal("12.50")))
    assert r.status_code == 201
    body = r.json()
    assert body["id"] >= 1
    assert body["estimatedCost"] == 12.5
    assert body["baseIngredients"] == ["pollo", "arroz", "brócoli", "limón"]
    got = client.get(f"/api/recipes/{body['id']}")
    assert got.status_code == 200
    assert got.json()["name"] == "Bowl"


def test_get_unknown_recipe_404(client):
    r = client.get("/api/recipes/999")
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"


def test_create_requires_four_base_ingredients(client):
    r = client.post("/api/recipes", json=_payload(base_ingredients=["pollo", "arroz"]))
    assert r.status_code == 422
    r = client.post("/api/recipes", json=_payload(base_ingredients=["pollo", "arroz", " ", "limón"]))
    assert r.status_code == 422


def test_list_recipes(client, add_recipe):
    add_recipe(name="a")
    add_recipe(name="b")
    assert [r["name"] for r in client.get("/api/recipes").json()] == ["a", "b"]


def test_search_filters_and_sorts(client, add_recipe, store):
    add_recipe(name="lenta", prep_time=30, cook_time=40, health_score=95)
    add_recipe(name="rapida", prep_time=5, cook_time=10, health_score=60)
    add_recipe(name="media", prep_time=10, cook_time=20, health_score=80)
    add_recipe(name="otra", base_ingredients=["tofu", "soja", "pasta", "tomate"])
    r = client.post("/api/recipes/search", json={**SEARCH, "maxTime": 30, "sortBy": "time"})
    assert r.status_code == 200
    assert [x["name"] for x in r.json()] == ["rapida", "media"]
    assert store.search_requests[-1].max_time == 30


def test_search_default_sort_is_health(client, add_recipe):
    add_recipe(name="70", health_score=70)
    add_recipe(name="90", health_score=90)
    r = client.post("/api/recipes/search", json=SEARCH)
    assert [x["name"] for x in r.json()] == ["90", "70"]


def test_search_cost_and_difficulty(client, add_recipe):
    add_recipe(name="barata", estimated_cost=Decimal("8.00"), difficulty="Fácil")
    add_recipe(name="cara", estimated_cost=Decimal("20.00"), difficulty="Fácil")
    add_recipe(name="dificil", estimated_cost=Decimal("8.00"), difficulty="Avanzado")
    r = client.post("/api/recipes/search", json={**SEARCH, "maxCost": 10, "difficulty": "Fácil"})
    assert [x["name"] for x in r.json()] == ["barata"]


def test_search_no_matches_returns_empty_list(client, add_recipe):
    add_recipe()
    r = client.post("/api/recipes/search", json={"ingredient1": "tofu", "ingredient2": "soja", "ingredient3": "pasta", "ingredient4": "tomate"})
    assert r.status_code == 200
    assert r.json() == []


def test_search_rejects_bad_input(client):
    assert client.post("/api/recipes/search", json={**SEARCH, "ingredient4": ""}).status_code == 422
    assert client.post("/api/recipes/search", json={**SEARCH, "difficulty": "Imposible"}).status_code == 422
    assert client.post("/api/recipes/search", json={**SEARCH, "sortBy": "name"}).status_code == 422
    assert client.post("/api/recipes/search", json={**SEARCH, "maxTime": -1}).status_code == 422
    assert client.post("/api/recipes/search", json={**SEARCH, "maxCost": -0.5}).status_code == 422


def test_admin_seed_is_idempotent(client):
    first = client.post("/admin/seed-recipes").json()
    assert first["ok"] is True
    assert first["created"] == first["count"] > 0
    second = client.post("/admin/seed-recipes").json()
    assert second["created"] == 0
    assert len(client.get("/api/recipes").json()) == first["count"]


def test_seeded_catalog_is_searchable(client):
    client.post("/admin/seed-recipes")
    for recipe in client.get("/api/recipes").json():
        base = recipe["baseIngredients"]
        query = dict(zip(["ingredient1", "ingredient2", "ingredient3", "ingredient4"], base))
        names = [x["name"] for x in client.post("/api/recipes/search", json=query).json()]
        assert recipe["name"] in names


def test_zero_filters_keep_only_zero_time_or_cost(client, add_recipe):
    add_recipe(name="cruda", prep_time=0, cook_time=0, estimated_cost=Decimal("0"))
    add_recipe(name="cocinada", prep_time=5, cook_time=10, estimated_cost=Decimal("4.00"))
    r = client.post("/api/recipes/search", json={**SEARCH, "maxTime": 0})
    assert r.status_code == 200
    assert [x["name"] for x in r.json()] == ["cruda"]
    r = client.post("/api/recipes/search", json={**SEARCH, "maxCost": 0})
    assert [x["name"] for x in r.json()] == ["cruda"]
