from __future__ import annotations
from fastapi import APIRouter, Depends

from ..services.seed import BASE_RECIPES, seed_recipes
from ..storage.base import Storage
from ..storage.provider import get_storage

router = APIRouter(prefix="/admin", tags=["admin"])

@router.post("/seed-recipes", summary="Cargar el catálogo base de recetas (idempotente por nombre)")
def seed_recipes_endpoint(storage: Storage = Depends(get_storage)):
    created = seed_recipes(storage)
    return {"ok": True, "created": created, "count": len(BASE_RECIPES)}
