"""
Cálculo de objetivos nutricionales a partir del perfil (Mifflin-St Jeor).

Función pura: no lee ni escribe almacenamiento.
"""
from __future__ import annotations
from typing import Dict, Optional

from ..schemas import ActivityLevel, CalculatedGoals, Gender, UserProfileIn, WeightGoal
from ..utils.numbers import round_half_up

ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARIO: 1.2,
    ActivityLevel.LIGERO: 1.375,
    ActivityLevel.MODERADO: 1.55,
    ActivityLevel.ACTIVO: 1.725,
    ActivityLevel.MUY_ACTIVO: 1.9,
}

GOAL_ADJUSTMENT_KCAL: Dict[WeightGoal, int] = {
    WeightGoal.PERDER_PESO: -500,
    WeightGoal.MANTENER_PESO: 0,
    WeightGoal.GANAR_PESO: 500,
    WeightGoal.GANAR_MASA_MUSCULAR: 500,
}

# Reparto de macros sobre las calorías diarias: (fracción, kcal por gramo)
PROTEIN_SPLIT = (0.25, 4)
CARBS_SPLIT = (0.45, 4)
FAT_SPLIT = (0.30, 9)

FIBER_G = 25
SODIUM_MG = 2300


def basal_metabolic_rate(weight: float, height: float, age: int, gender: Gender) -> float:
    base = 10 * weight + 6.25 * height - 5 * age
    # Femenino y Otro comparten la fórmula femenina
    return base + 5 if gender == Gender.MASCULINO else base - 161


def calculate_goals(profile: UserProfileIn) -> Optional[CalculatedGoals]:
    if profile.age is None or profile.height is None or profile.weight is None or profile.gender is None:
        return None

    bmr = basal_metabolic_rate(profile.weight, profile.height, profile.age, profile.gender)
    calories = bmr * ACTIVITY_MULTIPLIERS[profile.activity_level]
    calories += GOAL_ADJUSTMENT_KCAL[profile.goal]

    def grams(split) -> int:
        fraction, kcal_per_g = split
        return round_half_up(calories * fraction / kcal_per_g)

    return CalculatedGoals(
        calories=round_half_up(calories),
        protein=grams(PROTEIN_SPLIT),
        carbs=grams(CARBS_SPLIT),
        fat=grams(FAT_SPLIT),
        fiber=FIBER_G,
        sodium=SODIUM_MG,
    )
