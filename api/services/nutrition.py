from __future__ import annotations
import logging
from datetime import date
from decimal import Decimal
from typing import Dict

from ..schemas import DailyNutritionSummary, NutritionalGoal
from ..storage.base import Storage
from ..utils.numbers import round_half_up, to_decimal

logger = logging.getLogger(__name__)

NUTRIENTS = ("calories", "protein", "carbs", "fat", "fiber", "sodium")

# Objetivos por defecto cuando el usuario no ha fijado ninguno
DEFAULT_GOALS: Dict[str, int] = {
    "calories": 2000,
    "protein": 150,
    "carbs": 250,
    "fat": 65,
    "fiber": 25,
    "sodium": 2300,
}


def goal_values(goal: NutritionalGoal | None) -> Dict[str, int]:
    if goal is None:
        return dict(DEFAULT_GOALS)
    return {n: getattr(goal, f"daily_{n}") for n in NUTRIENTS}


def summarize(storage: Storage, day: date, user_id: str) -> DailyNutritionSummary:
    """
    Suma la nutrición de las comidas del día escalada por raciones y la combina
    con el objetivo del usuario (o los valores por defecto).

    Se redondea una sola vez sobre el total, nunca por comida. Las entradas cuya
    receta ya no existe se omiten.
    """
    totals: Dict[str, Decimal] = {n: Decimal("0") for n in NUTRIENTS}

    for entry in storage.get_meal_entries_for_date(day, user_id):
        recipe = storage.get_recipe(entry.recipe_id)
        if recipe is None:
            logger.debug("Skipping meal entry %s: recipe %s not found", entry.id, entry.recipe_id)
            continue
        servings = to_decimal(entry.servings)
        for n in NUTRIENTS:
            totals[n] += to_decimal(getattr(recipe.nutrition, n)) * servings

    goals = goal_values(storage.get_nutritional_goal(user_id))

    return DailyNutritionSummary(
        date=day,
        **{f"total_{n}": round_half_up(totals[n]) for n in NUTRIENTS},
        **{f"goal_{n}": goals[n] for n in NUTRIENTS},
    )
