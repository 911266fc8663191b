from __future__ import annotations
from datetime import date as date_type, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modelo base: atributos snake_case en Python, camelCase en el JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# === Enumeraciones ===

class Difficulty(str, Enum):
    """Dificultad de una receta, con orden total Muy Fácil < Fácil < Intermedio < Avanzado."""
    MUY_FACIL = "Muy Fácil"
    FACIL = "Fácil"
    INTERMEDIO = "Intermedio"
    AVANZADO = "Avanzado"

    @property
    def rank(self) -> int:
        return _DIFFICULTY_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank >= other.rank


_DIFFICULTY_RANK = {d: i for i, d in enumerate(Difficulty, start=1)}


class SortBy(str, Enum):
    HEALTH = "health"
    TIME = "time"
    COST = "cost"
    DIFFICULTY = "difficulty"


class MealType(str, Enum):
    DESAYUNO = "Desayuno"
    ALMUERZO = "Almuerzo"
    CENA = "Cena"
    SNACK = "Snack"


class Gender(str, Enum):
    MASCULINO = "Masculino"
    FEMENINO = "Femenino"
    OTRO = "Otro"


class ActivityLevel(str, Enum):
    SEDENTARIO = "Sedentario"
    LIGERO = "Ligero"
    MODERADO = "Moderado"
    ACTIVO = "Activo"
    MUY_ACTIVO = "Muy Activo"


class WeightGoal(str, Enum):
    PERDER_PESO = "Perder peso"
    MANTENER_PESO = "Mantener peso"
    GANAR_PESO = "Ganar peso"
    GANAR_MASA_MUSCULAR = "Ganar masa muscular"


# === Recetas ===

class NutritionInfo(CamelModel):
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0, description="gramos")
    carbs: float = Field(0, ge=0, description="gramos")
    fat: float = Field(0, ge=0, description="gramos")
    fiber: float = Field(0, ge=0, description="gramos")
    sodium: float = Field(0, ge=0, description="miligramos")


class RecipeIngredient(CamelModel):
    name: str
    amount: str
    unit: str = ""


class RecipeStep(CamelModel):
    step_number: int = Field(..., ge=1)
    instruction: str
    time_minutes: int = Field(0, ge=0)


class RecipeCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    base_ingredients: List[str] = Field(..., min_length=4, max_length=4, description="Los 4 ingredientes base usados en la búsqueda")
    steps: List[RecipeStep] = Field(default_factory=list)
    nutrition: NutritionInfo
    estimated_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    prep_time: int = Field(..., ge=0, description="minutos")
    cook_time: int = Field(..., ge=0, description="minutos")
    difficulty: Difficulty
    health_score: int = Field(..., ge=1, le=100)
    servings: int = Field(2, ge=1)
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator("base_ingredients")
    @classmethod
    def _base_not_blank(cls, v: List[str]) -> List[str]:
        cleaned = [s.strip() for s in v]
        if any(not s for s in cleaned):
            raise ValueError("base ingredients must not be blank")
        return cleaned

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, v: List[str]) -> List[str]:
        return _unique_stripped(v)

    @field_serializer("estimated_cost", when_used="json")
    def _cost_as_float(self, v: Decimal) -> float:
        return float(v)

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


class Recipe(RecipeCreate):
    id: int


# === Búsqueda ===

class RecipeSearchParams(CamelModel):
    ingredient1: str = Field(..., min_length=1)
    ingredient2: str = Field(..., min_length=1)
    ingredient3: str = Field(..., min_length=1)
    ingredient4: str = Field(..., min_length=1)
    max_time: Optional[int] = Field(None, ge=0, description="Tiempo total máximo (prep + cocción) en minutos")
    difficulty: Optional[Difficulty] = None
    max_cost: Optional[Decimal] = Field(None, ge=0)
    sort_by: SortBy = SortBy.HEALTH

    def query(self) -> List[str]:
        return [self.ingredient1, self.ingredient2, self.ingredient3, self.ingredient4]


class SearchRequest(RecipeSearchParams):
    """Registro de una búsqueda (solo escritura)."""
    id: int
    created_at: datetime


# === Objetivos y comidas ===

class NutritionalGoalIn(CamelModel):
    daily_calories: int = Field(..., ge=1000, le=5000)
    daily_protein: int = Field(..., ge=10, le=300)
    daily_carbs: int = Field(..., ge=50, le=800)
    daily_fat: int = Field(..., ge=20, le=200)
    daily_fiber: int = Field(..., ge=15, le=100)
    daily_sodium: int = Field(..., ge=500, le=5000)


class NutritionalGoalUpdate(CamelModel):
    daily_calories: Optional[int] = Field(None, ge=1000, le=5000)
    daily_protein: Optional[int] = Field(None, ge=10, le=300)
    daily_carbs: Optional[int] = Field(None, ge=50, le=800)
    daily_fat: Optional[int] = Field(None, ge=20, le=200)
    daily_fiber: Optional[int] = Field(None, ge=15, le=100)
    daily_sodium: Optional[int] = Field(None, ge=500, le=5000)


class NutritionalGoal(NutritionalGoalIn):
    id: int
    user_id: str
    created_at: datetime
    updated_at: datetime


class MealEntryCreate(CamelModel):
    recipe_id: int
    servings: Decimal = Field(Decimal("1"), ge=Decimal("0.1"), le=Decimal("10"), max_digits=4, decimal_places=2)
    meal_type: MealType
    date: date_type = Field(..., description="YYYY-MM-DD")

    @field_serializer("servings", when_used="json")
    def _servings_as_float(self, v: Decimal) -> float:
        return float(v)


class MealEntry(MealEntryCreate):
    id: int
    user_id: str
    created_at: datetime


class DailyNutritionSummary(CamelModel):
    date: date_type
    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    total_fiber: int
    total_sodium: int
    goal_calories: int
    goal_protein: int
    goal_carbs: int
    goal_fat: int
    goal_fiber: int
    goal_sodium: int


# === Perfil ===

class UserProfileIn(CamelModel):
    age: Optional[int] = Field(None, ge=10, le=120)
    height: Optional[float] = Field(None, ge=50, le=250, description="cm")
    weight: Optional[float] = Field(None, ge=20, le=400, description="kg")
    gender: Optional[Gender] = None
    activity_level: ActivityLevel = ActivityLevel.MODERADO
    goal: WeightGoal = WeightGoal.MANTENER_PESO
    restrictions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    preferences: List[str] = Field(default_factory=list)

    @field_validator("restrictions", "allergies", "preferences")
    @classmethod
    def _dedupe(cls, v: List[str]) -> List[str]:
        return _unique_stripped(v)


class UserProfileUpdate(CamelModel):
    age: Optional[int] = Field(None, ge=10, le=120)
    height: Optional[float] = Field(None, ge=50, le=250)
    weight: Optional[float] = Field(None, ge=20, le=400)
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    goal: Optional[WeightGoal] = None
    restrictions: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
    preferences: Optional[List[str]] = None

    @field_validator("restrictions", "allergies", "preferences")
    @classmethod
    def _dedupe(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return None if v is None else _unique_stripped(v)

    def changes(self, mode: str = "python") -> Dict[str, Any]:
        """Campos enviados; age/height/weight/gender admiten null para borrarlos, el resto no."""
        data = self.model_dump(mode=mode, exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k in _NULLABLE_PROFILE_FIELDS}


_NULLABLE_PROFILE_FIELDS = {"age", "height", "weight", "gender"}


class UserProfile(UserProfileIn):
    id: int
    user_id: str


class CalculatedGoals(CamelModel):
    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int
    sodium: int


# === Favoritos ===

class FavoriteRecipe(CamelModel):
    id: int
    user_id: str
    recipe_id: int
    created_at: datetime


class FavoriteStatus(CamelModel):
    recipe_id: int
    is_favorite: bool


def _unique_stripped(items: List[str]) -> List[str]:
    # desduplicar preservando orden
    seen = set()
    out: List[str] = []
    for raw in items:
        s = raw.strip()
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return out
