import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure project root on path for imports when executing from tests dir
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient
from sqlmodel import Session, create_engine

import api.main as main
from api.db import init_db
from api.schemas import Recipe, RecipeCreate
from api.storage.memory import MemoryStorage
from api.storage.provider import get_storage
from api.storage.sql import SqlStorage


def recipe_data(**overrides) -> dict:
    """Datos mínimos válidos de una receta; se sobreescriben por keyword."""
    data = {
        "name": "Receta de prueba",
        "description": "",
        "ingredients": [],
        "base_ingredients": ["pollo", "arroz", "brócoli", "limón"],
        "steps": [],
        "nutrition": {"calories": 300, "protein": 20, "carbs": 30, "fat": 10, "fiber": 4, "sodium": 500},
        "estimated_cost": Decimal("10.00"),
        "prep_time": 10,
        "cook_time": 20,
        "difficulty": "Fácil",
        "health_score": 70,
        "servings": 2,
        "tags": [],
    }
    data.update(overrides)
    return data


def make_recipe(recipe_id: int = 1, **overrides) -> Recipe:
    return Recipe(id=recipe_id, **recipe_data(**overrides))


@pytest.fixture
def store():
    return MemoryStorage()


@pytest.fixture
def add_recipe(store):
    def _add(**overrides) -> Recipe:
        return store.create_recipe(RecipeCreate.model_validate(recipe_data(**overrides)))
    return _add


@pytest.fixture
def sql_storage(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    init_db(engine)
    with Session(engine, expire_on_commit=False) as session:
        yield SqlStorage(session)
    engine.dispose()


@pytest.fixture
def client(store):
    """
    TestClient sobre un almacenamiento en memoria limpio por test.
    No se usa el contexto `with`, así que el startup (init_db + seed) no se ejecuta.
    """
    main.app.dependency_overrides[get_storage] = lambda: store
    yield TestClient(main.app)
    main.app.dependency_overrides.pop(get_storage, None)


@pytest.fixture
def sql_client(sql_storage):
    """TestClient sobre el backend SQL (SQLite temporal)."""
    main.app.dependency_overrides[get_storage] = lambda: sql_storage
    yield TestClient(main.app)
    main.app.dependency_overrides.pop(get_storage, None)
