from __future__ import annotations
from typing import Optional, List, Dict, Any
from datetime import datetime, date
from decimal import Decimal

from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON as SAJSON, UniqueConstraint

from .utils.clock import utcnow


class RecipeRow(SQLModel, table=True):
    """
    Receta del catálogo. Ingredientes, pasos y nutrición se guardan como JSON
    (listas/dicts serializados desde los esquemas Pydantic).
    """
    __tablename__ = "recipe"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: str = ""
    ingredients: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(SAJSON))
    base_ingredients: List[str] = Field(default_factory=list, sa_column=Column(SAJSON))
    steps: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(SAJSON))
    nutrition: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(SAJSON))
    estimated_cost: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    prep_time: int = 0
    cook_time: int = 0
    difficulty: str = Field(index=True)  # "Muy Fácil" | "Fácil" | "Intermedio" | "Avanzado"
    health_score: int = 50
    servings: int = 2
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list, sa_column=Column(SAJSON))


class SearchRequestRow(SQLModel, table=True):
    __tablename__ = "search_request"

    id: Optional[int] = Field(default=None, primary_key=True)
    ingredient1: str
    ingredient2: str
    ingredient3: str
    ingredient4: str
    max_time: Optional[int] = None
    difficulty: Optional[str] = None
    max_cost: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    sort_by: str = "health"
    created_at: datetime = Field(default_factory=utcnow)


class NutritionalGoalRow(SQLModel, table=True):
    __tablename__ = "nutritional_goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(default="default_user", index=True)
    daily_calories: int
    daily_protein: int  # gramos
    daily_carbs: int  # gramos
    daily_fat: int  # gramos
    daily_fiber: int  # gramos
    daily_sodium: int  # miligramos
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, index=True)


class MealEntryRow(SQLModel, table=True):
    __tablename__ = "meal_entry"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(default="default_user", index=True)
    # Sin FK estricta: una entrada puede quedar huérfana si se borra la receta.
    recipe_id: int = Field(index=True)
    servings: Decimal = Field(default=Decimal("1"), max_digits=4, decimal_places=2)
    meal_type: str = Field(description="Desayuno|Almuerzo|Cena|Snack")
    entry_date: date = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)


class UserProfileRow(SQLModel, table=True):
    __tablename__ = "user_profile"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(default="default_user", index=True, unique=True)
    age: Optional[int] = None
    height: Optional[float] = None  # cm
    weight: Optional[float] = None  # kg
    gender: Optional[str] = None
    activity_level: str = "Moderado"
    goal: str = "Mantener peso"
    restrictions: List[str] = Field(default_factory=list, sa_column=Column(SAJSON))
    allergies: List[str] = Field(default_factory=list, sa_column=Column(SAJSON))
    preferences: List[str] = Field(default_factory=list, sa_column=Column(SAJSON))
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class FavoriteRecipeRow(SQLModel, table=True):
    __tablename__ = "favorite_recipe"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_favorite_user_recipe"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(default="default_user", index=True)
    recipe_id: int = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
