"""
Interfaz de almacenamiento común a los backends en memoria y SQL.

Los servicios (búsqueda, resumen nutricional, favoritos) dependen sólo de
``Storage``; cualquier clase con estos métodos la satisface sin herencia.
Las ausencias se devuelven como ``None``, nunca como excepción.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, runtime_checkable

from ..schemas import (
    FavoriteRecipe,
    MealEntry,
    MealEntryCreate,
    NutritionalGoal,
    NutritionalGoalIn,
    NutritionalGoalUpdate,
    Recipe,
    RecipeCreate,
    RecipeSearchParams,
    SearchRequest,
    UserProfile,
    UserProfileIn,
    UserProfileUpdate,
)


@runtime_checkable
class Storage(Protocol):
    # --- Recetas ---
    def get_recipe(self, recipe_id: int) -> Optional[Recipe]: ...

    def get_all_recipes(self) -> List[Recipe]: ...

    def create_recipe(self, data: RecipeCreate) -> Recipe: ...

    def delete_recipe(self, recipe_id: int) -> None: ...

    # --- Registro de búsquedas ---
    def create_search_request(self, params: RecipeSearchParams) -> SearchRequest: ...

    # --- Objetivos nutricionales ---
    def get_nutritional_goal(self, user_id: str) -> Optional[NutritionalGoal]: ...

    def create_nutritional_goal(self, user_id: str, goal: NutritionalGoalIn) -> NutritionalGoal: ...

    def update_nutritional_goal(self, user_id: str, goal: NutritionalGoalUpdate) -> Optional[NutritionalGoal]: ...

    # --- Comidas ---
    def create_meal_entry(self, user_id: str, entry: MealEntryCreate) -> MealEntry: ...

    def get_meal_entries_for_date(self, day: date, user_id: str) -> List[MealEntry]: ...

    def delete_meal_entry(self, entry_id: int, user_id: Optional[str] = None) -> None:
        """Borra la entrada; con `user_id` sólo si le pertenece. No-op si no existe."""
        ...

    # --- Perfil ---
    def get_user_profile(self, user_id: str) -> Optional[UserProfile]: ...

    def create_user_profile(self, user_id: str, profile: UserProfileIn) -> UserProfile: ...

    def update_user_profile(self, user_id: str, profile: UserProfileUpdate) -> Optional[UserProfile]: ...

    # --- Favoritos ---
    def get_favorite_recipes(self, user_id: str) -> List[Recipe]: ...

    def add_favorite_recipe(self, user_id: str, recipe_id: int) -> FavoriteRecipe: ...

    def remove_favorite_recipe(self, user_id: str, recipe_id: int) -> None: ...

    def is_recipe_favorite(self, user_id: str, recipe_id: int) -> bool: ...
