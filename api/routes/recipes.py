from __future__ import annotations

from typing import List
from fastapi import APIRouter, Body, Depends, HTTPException

from ..errors import ErrorResponse
from ..schemas import Recipe, RecipeCreate, RecipeSearchParams
from ..services.search import run_search
from ..storage.base import Storage
from ..storage.provider import get_storage

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.post(
    "/search",
    response_model=List[Recipe],
    summary="Buscar recetas por 4 ingredientes (mínimo 3 coincidencias), con filtros y orden",
    responses={422: {"model": ErrorResponse}},
)
def search(
    params: RecipeSearchParams = Body(..., examples=[{
        "ingredient1": "pollo",
        "ingredient2": "brócoli",
        "ingredient3": "arroz",
        "ingredient4": "limón",
        "maxTime": 60,
        "sortBy": "health",
    }]),
    storage: Storage = Depends(get_storage),
):
    return run_search(storage, params)


@router.get("", response_model=List[Recipe], summary="Listar todas las recetas")
def list_recipes(storage: Storage = Depends(get_storage)):
    return storage.get_all_recipes()


@router.get(
    "/{recipe_id}",
    response_model=Recipe,
    summary="Obtener una receta por id",
    responses={404: {"model": ErrorResponse}},
)
def get_recipe(recipe_id: int, storage: Storage = Depends(get_storage)):
    recipe = storage.get_recipe(recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Receta no encontrada")
    return recipe


@router.post(
    "",
    response_model=Recipe,
    status_code=201,
    summary="Crear una receta en el catálogo",
    responses={422: {"model": ErrorResponse}},
)
def create_recipe(data: RecipeCreate, storage: Storage = Depends(get_storage)):
    return storage.create_recipe(data)
