from __future__ import annotations

import threading
from datetime import date
from itertools import count
from typing import Dict, List, Optional, Tuple

from ..utils.clock import utcnow
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


class MemoryStorage:
    """
    Almacenamiento en memoria (un proceso). Útil para desarrollo y tests.
    Todas las operaciones se serializan con un único lock; los endpoints
    síncronos de FastAPI se ejecutan en un threadpool.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._ids: Dict[str, count] = {}
        self.recipes: Dict[int, Recipe] = {}
        self.search_requests: List[SearchRequest] = []
        self.goals: Dict[int, NutritionalGoal] = {}
        self.meal_entries: Dict[int, MealEntry] = {}
        self.profiles: Dict[str, UserProfile] = {}
        self.favorites: Dict[Tuple[str, int], FavoriteRecipe] = {}

    def _next_id(self, kind: str) -> int:
        if kind not in self._ids:
            self._ids[kind] = count(1)
        return next(self._ids[kind])

    # --- Recetas ---
    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        with self._lock:
            return self.recipes.get(recipe_id)

    def get_all_recipes(self) -> List[Recipe]:
        with self._lock:
            # dict conserva el orden de inserción
            return list(self.recipes.values())

    def create_recipe(self, data: RecipeCreate) -> Recipe:
        with self._lock:
            recipe = Recipe(id=self._next_id("recipe"), **data.model_dump())
            self.recipes[recipe.id] = recipe
            return recipe

    def delete_recipe(self, recipe_id: int) -> None:
        with self._lock:
            self.recipes.pop(recipe_id, None)

    # --- Registro de búsquedas ---
    def create_search_request(self, params: RecipeSearchParams) -> SearchRequest:
        with self._lock:
            req = SearchRequest(id=self._next_id("search"), created_at=utcnow(), **params.model_dump())
            self.search_requests.append(req)
            return req

    # --- Objetivos nutricionales ---
    def get_nutritional_goal(self, user_id: str) -> Optional[NutritionalGoal]:
        with self._lock:
            rows = [g for g in self.goals.values() if g.user_id == user_id]
            if not rows:
                return None
            return max(rows, key=lambda g: (g.updated_at, g.id))

    def create_nutritional_goal(self, user_id: str, goal: NutritionalGoalIn) -> NutritionalGoal:
        with self._lock:
            now = utcnow()
            row = NutritionalGoal(
                id=self._next_id("goal"), user_id=user_id, created_at=now, updated_at=now, **goal.model_dump()
            )
            self.goals[row.id] = row
            return row

    def update_nutritional_goal(self, user_id: str, goal: NutritionalGoalUpdate) -> Optional[NutritionalGoal]:
        with self._lock:
            current = self.get_nutritional_goal(user_id)
            if current is None:
                return None
            changes = goal.model_dump(exclude_none=True)
            updated = current.model_copy(update={**changes, "updated_at": utcnow()})
            self.goals[updated.id] = updated
            return updated

    # --- Comidas ---
    def create_meal_entry(self, user_id: str, entry: MealEntryCreate) -> MealEntry:
        with self._lock:
            row = MealEntry(id=self._next_id("meal"), user_id=user_id, created_at=utcnow(), **entry.model_dump())
            self.meal_entries[row.id] = row
            return row

    def get_meal_entries_for_date(self, day: date, user_id: str) -> List[MealEntry]:
        with self._lock:
            return [e for e in self.meal_entries.values() if e.date == day and e.user_id == user_id]

    def delete_meal_entry(self, entry_id: int, user_id: Optional[str] = None) -> None:
        with self._lock:
            entry = self.meal_entries.get(entry_id)
            if entry is not None and (user_id is None or entry.user_id == user_id):
                del self.meal_entries[entry_id]

    # --- Perfil ---
    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        with self._lock:
            return self.profiles.get(user_id)

    def create_user_profile(self, user_id: str, profile: UserProfileIn) -> UserProfile:
        with self._lock:
            existing = self.profiles.get(user_id)
            pid = existing.id if existing else self._next_id("profile")
            row = UserProfile(id=pid, user_id=user_id, **profile.model_dump())
            self.profiles[user_id] = row
            return row

    def update_user_profile(self, user_id: str, profile: UserProfileUpdate) -> Optional[UserProfile]:
        with self._lock:
            current = self.profiles.get(user_id)
            if current is None:
                return None
            updated = current.model_copy(update=profile.changes())
            self.profiles[user_id] = updated
            return updated

    # --- Favoritos ---
    def get_favorite_recipes(self, user_id: str) -> List[Recipe]:
        with self._lock:
            out: List[Recipe] = []
            for (uid, rid) in self.favorites:
                if uid == user_id and rid in self.recipes:
                    out.append(self.recipes[rid])
            return out

    def add_favorite_recipe(self, user_id: str, recipe_id: int) -> FavoriteRecipe:
        with self._lock:
            key = (user_id, recipe_id)
            existing = self.favorites.get(key)
            if existing is not None:
                return existing
            fav = FavoriteRecipe(id=self._next_id("favorite"), user_id=user_id, recipe_id=recipe_id, created_at=utcnow())
            self.favorites[key] = fav
            return fav

    def remove_favorite_recipe(self, user_id: str, recipe_id: int) -> None:
        with self._lock:
            self.favorites.pop((user_id, recipe_id), None)

    def is_recipe_favorite(self, user_id: str, recipe_id: int) -> bool:
        with self._lock:
            return (user_id, recipe_id) in self.favorites
