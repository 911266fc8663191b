from __future__ import annotations
import logging
from typing import Any, Dict, List

from ..schemas import RecipeCreate
from ..storage.base import Storage

logger = logging.getLogger(__name__)

# Catálogo base de recetas. Cada una con sus 4 ingredientes base para la búsqueda.
BASE_RECIPES: List[Dict[str, Any]] = [
    {
        "name": "Pollo al limón con brócoli y arroz integral",
        "description": "Pechuga de pollo marinada en limón, con brócoli al vapor y arroz integral.",
        "ingredients": [
            {"name": "pechuga de pollo", "amount": "300", "unit": "g"},
            {"name": "brócoli", "amount": "1", "unit": "cabeza"},
            {"name": "arroz integral", "amount": "150", "unit": "g"},
            {"name": "limón", "amount": "1", "unit": "unidad"},
            {"name": "aceite de oliva", "amount": "2", "unit": "cucharadas"},
        ],
        "base_ingredients": ["pollo", "brócoli", "arroz integral", "limón"],
        "steps": [
            {"step_number": 1, "instruction": "Marinar el pollo con zumo de limón y sal.", "time_minutes": 10},
            {"step_number": 2, "instruction": "Cocer el arroz integral.", "time_minutes": 25},
            {"step_number": 3, "instruction": "Cocinar el pollo a la plancha y el brócoli al vapor.", "time_minutes": 15},
        ],
        "nutrition": {"calories": 520, "protein": 42, "carbs": 55, "fat": 12, "fiber": 7, "sodium": 480},
        "estimated_cost": "12.00",
        "prep_time": 15,
        "cook_time": 30,
        "difficulty": "Fácil",
        "health_score": 92,
        "servings": 2,
        "tags": ["alto en proteína", "sin gluten"],
    },
    {
        "name": "Salmón al horno con espárragos y quinoa",
        "description": "Lomos de salmón al horno con espárragos trigueros y quinoa.",
        "ingredients": [
            {"name": "salmón", "amount": "2", "unit": "lomos"},
            {"name": "espárragos", "amount": "250", "unit": "g"},
            {"name": "quinoa", "amount": "120", "unit": "g"},
            {"name": "limón", "amount": "1", "unit": "unidad"},
        ],
        "base_ingredients": ["salmón", "espárragos", "quinoa", "limón"],
        "steps": [
            {"step_number": 1, "instruction": "Precalentar el horno a 200 ºC.", "time_minutes": 10},
            {"step_number": 2, "instruction": "Hornear salmón y espárragos con limón.", "time_minutes": 18},
            {"step_number": 3, "instruction": "Cocer la quinoa y servir.", "time_minutes": 15},
        ],
        "nutrition": {"calories": 610, "protein": 40, "carbs": 38, "fat": 30, "fiber": 6, "sodium": 320},
        "estimated_cost": "22.00",
        "prep_time": 10,
        "cook_time": 25,
        "difficulty": "Intermedio",
        "health_score": 95,
        "servings": 2,
        "tags": ["omega 3", "sin gluten"],
    },
    {
        "name": "Tortilla de espinacas y tomate",
        "description": "Tortilla jugosa de huevos con espinacas frescas y tomate.",
        "ingredients": [
            {"name": "huevos", "amount": "4", "unit": "unidades"},
            {"name": "espinacas", "amount": "100", "unit": "g"},
            {"name": "tomate", "amount": "1", "unit": "unidad"},
            {"name": "cebolla", "amount": "1/2", "unit": "unidad"},
        ],
        "base_ingredients": ["huevos", "espinacas", "tomate", "cebolla"],
        "steps": [
            {"step_number": 1, "instruction": "Pochar la cebolla y añadir las espinacas.", "time_minutes": 8},
            {"step_number": 2, "instruction": "Batir los huevos, mezclar y cuajar.", "time_minutes": 7},
        ],
        "nutrition": {"calories": 320, "protein": 24, "carbs": 9, "fat": 20, "fiber": 3, "sodium": 410},
        "estimated_cost": "5.50",
        "prep_time": 5,
        "cook_time": 15,
        "difficulty": "Muy Fácil",
        "health_score": 80,
        "servings": 2,
        "tags": ["vegetariano", "rápido"],
    },
    {
        "name": "Salteado de tofu con zanahoria y arroz",
        "description": "Tofu crujiente salteado con zanahoria y salsa de soja sobre arroz.",
        "ingredients": [
            {"name": "tofu firme", "amount": "250", "unit": "g"},
            {"name": "zanahoria", "amount": "2", "unit": "unidades"},
            {"name": "arroz", "amount": "150", "unit": "g"},
            {"name": "salsa de soja", "amount": "2", "unit": "cucharadas"},
        ],
        "base_ingredients": ["tofu", "zanahoria", "arroz", "soja"],
        "steps": [
            {"step_number": 1, "instruction": "Cocer el arroz.", "time_minutes": 18},
            {"step_number": 2, "instruction": "Dorar el tofu y saltear con la zanahoria y la soja.", "time_minutes": 12},
        ],
        "nutrition": {"calories": 480, "protein": 22, "carbs": 62, "fat": 14, "fiber": 5, "sodium": 890},
        "estimated_cost": "8.00",
        "prep_time": 10,
        "cook_time": 20,
        "difficulty": "Fácil",
        "health_score": 78,
        "servings": 2,
        "tags": ["vegano"],
    },
    {
        "name": "Avena con plátano y manzana",
        "description": "Porridge de avena con plátano, manzana y canela.",
        "ingredients": [
            {"name": "avena", "amount": "80", "unit": "g"},
            {"name": "leche", "amount": "250", "unit": "ml"},
            {"name": "plátano", "amount": "1", "unit": "unidad"},
            {"name": "manzana", "amount": "1", "unit": "unidad"},
        ],
        "base_ingredients": ["avena", "leche", "plátano", "manzana"],
        "steps": [
            {"step_number": 1, "instruction": "Cocer la avena en la leche.", "time_minutes": 6},
            {"step_number": 2, "instruction": "Añadir la fruta troceada y canela.", "time_minutes": 2},
        ],
        "nutrition": {"calories": 390, "protein": 13, "carbs": 68, "fat": 8, "fiber": 9, "sodium": 110},
        "estimated_cost": "3.00",
        "prep_time": 5,
        "cook_time": 8,
        "difficulty": "Muy Fácil",
        "health_score": 85,
        "servings": 1,
        "tags": ["desayuno", "vegetariano"],
    },
    {
        "name": "Pasta integral con atún y tomate",
        "description": "Pasta integral con salsa de tomate casera, atún y aguacate.",
        "ingredients": [
            {"name": "pasta integral", "amount": "200", "unit": "g"},
            {"name": "atún", "amount": "2", "unit": "latas"},
            {"name": "tomate triturado", "amount": "400", "unit": "g"},
            {"name": "aguacate", "amount": "1", "unit": "unidad"},
        ],
        "base_ingredients": ["pasta integral", "atún", "tomate", "aguacate"],
        "steps": [
            {"step_number": 1, "instruction": "Cocer la pasta.", "time_minutes": 12},
            {"step_number": 2, "instruction": "Preparar la salsa de tomate con el atún.", "time_minutes": 15},
            {"step_number": 3, "instruction": "Servir con aguacate en dados.", "time_minutes": 3},
        ],
        "nutrition": {"calories": 640, "protein": 38, "carbs": 78, "fat": 18, "fiber": 11, "sodium": 720},
        "estimated_cost": "9.50",
        "prep_time": 10,
        "cook_time": 25,
        "difficulty": "Fácil",
        "health_score": 74,
        "servings": 2,
        "tags": ["mediterránea"],
    },
    {
        "name": "Wellington de pollo con espinacas",
        "description": "Pollo envuelto en hojaldre con espinacas y champiñones.",
        "ingredients": [
            {"name": "pechuga de pollo", "amount": "2", "unit": "unidades"},
            {"name": "espinacas", "amount": "150", "unit": "g"},
            {"name": "hojaldre", "amount": "1", "unit": "lámina"},
            {"name": "champiñones", "amount": "200", "unit": "g"},
        ],
        "base_ingredients": ["pollo", "espinacas", "hojaldre", "champiñones"],
        "steps": [
            {"step_number": 1, "instruction": "Saltear champiñones y espinacas.", "time_minutes": 10},
            {"step_number": 2, "instruction": "Envolver el pollo en hojaldre con el relleno.", "time_minutes": 20},
            {"step_number": 3, "instruction": "Hornear hasta dorar.", "time_minutes": 40},
        ],
        "nutrition": {"calories": 780, "protein": 48, "carbs": 45, "fat": 44, "fiber": 4, "sodium": 950},
        "estimated_cost": "18.00",
        "prep_time": 30,
        "cook_time": 40,
        "difficulty": "Avanzado",
        "health_score": 55,
        "servings": 2,
        "tags": ["ocasión especial"],
    },
]


def seed_recipes(storage: Storage) -> int:
    """Inserta las recetas base que falten (por nombre). Devuelve cuántas se crearon."""
    existing = {r.name for r in storage.get_all_recipes()}
    created = 0
    for raw in BASE_RECIPES:
        if raw["name"] in existing:
            continue
        storage.create_recipe(RecipeCreate.model_validate(raw))
        created += 1
    if created:
        logger.info("Seeded %d recipes", created)
    return created
