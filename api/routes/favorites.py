from __future__ import annotations

from typing import List
from fastapi import APIRouter, Depends, HTTPException

from ..errors import ErrorResponse
from ..schemas import FavoriteRecipe, FavoriteStatus, Recipe
from ..security import get_current_user
from ..storage.base import Storage
from ..storage.provider import get_storage

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=List[Recipe], summary="Recetas favoritas del usuario")
def list_favorites(
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return storage.get_favorite_recipes(user_id)


@router.post(
    "/{recipe_id}",
    response_model=FavoriteRecipe,
    summary="Marcar como favorita (idempotente)",
    responses={404: {"model": ErrorResponse}},
)
def add_favorite(
    recipe_id: int,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    if storage.get_recipe(recipe_id) is None:
        raise HTTPException(status_code=404, detail="Receta no encontrada")
    return storage.add_favorite_recipe(user_id, recipe_id)


@router.delete("/{recipe_id}", status_code=204, summary="Quitar de favoritas")
def remove_favorite(
    recipe_id: int,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    storage.remove_favorite_recipe(user_id, recipe_id)


@router.get("/{recipe_id}/status", response_model=FavoriteStatus, summary="¿Es favorita?")
def favorite_status(
    recipe_id: int,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return FavoriteStatus(recipe_id=recipe_id, is_favorite=storage.is_recipe_favorite(user_id, recipe_id))
