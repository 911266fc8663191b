from __future__ import annotations

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Path

from ..errors import ErrorResponse
from ..schemas import (
    DailyNutritionSummary,
    MealEntry,
    MealEntryCreate,
    NutritionalGoal,
    NutritionalGoalIn,
    NutritionalGoalUpdate,
)
from ..security import get_current_user
from ..services.nutrition import summarize
from ..storage.base import Storage
from ..storage.provider import get_storage

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


# -------- Objetivos --------
@router.get(
    "/goals",
    response_model=Optional[NutritionalGoal],
    summary="Objetivo nutricional vigente del usuario (null si no hay)",
)
def get_goals(
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return storage.get_nutritional_goal(user_id)


@router.post(
    "/goals",
    response_model=NutritionalGoal,
    status_code=201,
    summary="Fijar un objetivo nutricional diario",
    responses={422: {"model": ErrorResponse}},
)
def create_goals(
    goal: NutritionalGoalIn,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return storage.create_nutritional_goal(user_id, goal)


@router.put(
    "/goals",
    response_model=NutritionalGoal,
    summary="Actualizar parcialmente el objetivo vigente",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def update_goals(
    goal: NutritionalGoalUpdate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    updated = storage.update_nutritional_goal(user_id, goal)
    if updated is None:
        raise HTTPException(status_code=404, detail="No hay objetivo nutricional")
    return updated


# -------- Comidas --------
@router.post(
    "/meals",
    response_model=MealEntry,
    status_code=201,
    summary="Registrar una comida",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def create_meal(
    entry: MealEntryCreate,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    if storage.get_recipe(entry.recipe_id) is None:
        raise HTTPException(status_code=404, detail="Receta no encontrada")
    return storage.create_meal_entry(user_id, entry)


@router.get(
    "/meals/{day}",
    response_model=List[MealEntry],
    summary="Comidas registradas en una fecha",
    responses={422: {"model": ErrorResponse}},
)
def list_meals(
    day: date = Path(..., description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return storage.get_meal_entries_for_date(day, user_id)


@router.delete(
    "/meals/{entry_id}",
    status_code=204,
    summary="Eliminar una comida registrada del usuario (no-op si no existe o es de otro)",
)
def delete_meal(
    entry_id: int,
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    storage.delete_meal_entry(entry_id, user_id)


# -------- Resumen --------
@router.get(
    "/summary/{day}",
    response_model=DailyNutritionSummary,
    summary="Totales del día frente a los objetivos",
    responses={422: {"model": ErrorResponse}},
)
def daily_summary(
    day: date = Path(..., description="YYYY-MM-DD"),
    storage: Storage = Depends(get_storage),
    user_id: str = Depends(get_current_user),
):
    return summarize(storage, day, user_id)
