from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ..utils.clock import utcnow
from ..models_db import (
    FavoriteRecipeRow,
    MealEntryRow,
    NutritionalGoalRow,
    RecipeRow,
    SearchRequestRow,
    UserProfileRow,
)
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

logger = logging.getLogger(__name__)


def _recipe_out(row: RecipeRow) -> Recipe:
    return Recipe(
        id=row.id,
        name=row.name,
        description=row.description,
        ingredients=row.ingredients or [],
        base_ingredients=row.base_ingredients or [],
        steps=row.steps or [],
        nutrition=row.nutrition or {},
        estimated_cost=row.estimated_cost,
        prep_time=row.prep_time,
        cook_time=row.cook_time,
        difficulty=row.difficulty,
        health_score=row.health_score,
        servings=row.servings,
        image_url=row.image_url,
        tags=row.tags or [],
    )


def _meal_out(row: MealEntryRow) -> MealEntry:
    return MealEntry(
        id=row.id,
        user_id=row.user_id,
        recipe_id=row.recipe_id,
        servings=row.servings,
        meal_type=row.meal_type,
        date=row.entry_date,
        created_at=row.created_at,
    )


class SqlStorage:
    """Implementación sobre SQLModel. Una instancia por petición (una Session)."""

    def __init__(self, session: Session):
        self.session = session

    # --- Recetas ---
    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        row = self.session.get(RecipeRow, recipe_id)
        return _recipe_out(row) if row else None

    def get_all_recipes(self) -> List[Recipe]:
        rows = self.session.exec(select(RecipeRow).order_by(RecipeRow.id)).all()
        return [_recipe_out(r) for r in rows]

    def create_recipe(self, data: RecipeCreate) -> Recipe:
        payload = data.model_dump(mode="json", include={"ingredients", "steps", "nutrition"})
        row = RecipeRow(
            name=data.name,
            description=data.description,
            ingredients=payload["ingredients"],
            base_ingredients=list(data.base_ingredients),
            steps=payload["steps"],
            nutrition=payload["nutrition"],
            estimated_cost=data.estimated_cost,
            prep_time=data.prep_time,
            cook_time=data.cook_time,
            difficulty=data.difficulty.value,
            health_score=data.health_score,
            servings=data.servings,
            image_url=data.image_url,
            tags=list(data.tags),
        )
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return _recipe_out(row)

    def delete_recipe(self, recipe_id: int) -> None:
        row = self.session.get(RecipeRow, recipe_id)
        if row:
            self.session.delete(row)
            self.session.commit()

    # --- Registro de búsquedas ---
    def create_search_request(self, params: RecipeSearchParams) -> SearchRequest:
        row = SearchRequestRow(
            ingredient1=params.ingredient1,
            ingredient2=params.ingredient2,
            ingredient3=params.ingredient3,
            ingredient4=params.ingredient4,
            max_time=params.max_time,
            difficulty=params.difficulty.value if params.difficulty else None,
            max_cost=params.max_cost,
            sort_by=params.sort_by.value,
        )
        self.session.add(row)
        try:
            self.session.commit()
        except SQLAlchemyError:
            # deja la sesión usable para el resto de la petición
            self.session.rollback()
            raise
        self.session.refresh(row)
        return SearchRequest.model_validate(row)

    # --- Objetivos nutricionales ---
    def _current_goal_row(self, user_id: str) -> Optional[NutritionalGoalRow]:
        stmt = (
            select(NutritionalGoalRow)
            .where(NutritionalGoalRow.user_id == user_id)
            .order_by(NutritionalGoalRow.updated_at.desc(), NutritionalGoalRow.id.desc())
            .limit(1)
        )
        return self.session.exec(stmt).first()

    def get_nutritional_goal(self, user_id: str) -> Optional[NutritionalGoal]:
        row = self._current_goal_row(user_id)
        return NutritionalGoal.model_validate(row) if row else None

    def create_nutritional_goal(self, user_id: str, goal: NutritionalGoalIn) -> NutritionalGoal:
        now = utcnow()
        row = NutritionalGoalRow(user_id=user_id, created_at=now, updated_at=now, **goal.model_dump())
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return NutritionalGoal.model_validate(row)

    def update_nutritional_goal(self, user_id: str, goal: NutritionalGoalUpdate) -> Optional[NutritionalGoal]:
        row = self._current_goal_row(user_id)
        if row is None:
            return None
        for k, v in goal.model_dump(exclude_none=True).items():
            setattr(row, k, v)
        row.updated_at = utcnow()
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return NutritionalGoal.model_validate(row)

    # --- Comidas ---
    def create_meal_entry(self, user_id: str, entry: MealEntryCreate) -> MealEntry:
        row = MealEntryRow(
            user_id=user_id,
            recipe_id=entry.recipe_id,
            servings=entry.servings,
            meal_type=entry.meal_type.value,
            entry_date=entry.date,
        )
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return _meal_out(row)

    def get_meal_entries_for_date(self, day: date, user_id: str) -> List[MealEntry]:
        rows = self.session.exec(
            select(MealEntryRow)
            .where(MealEntryRow.entry_date == day, MealEntryRow.user_id == user_id)
            .order_by(MealEntryRow.created_at, MealEntryRow.id)
        ).all()
        return [_meal_out(r) for r in rows]

    def delete_meal_entry(self, entry_id: int, user_id: Optional[str] = None) -> None:
        row = self.session.get(MealEntryRow, entry_id)
        if row and (user_id is None or row.user_id == user_id):
            self.session.delete(row)
            self.session.commit()

    # --- Perfil ---
    def _profile_row(self, user_id: str) -> Optional[UserProfileRow]:
        return self.session.exec(select(UserProfileRow).where(UserProfileRow.user_id == user_id)).first()

    def get_user_profile(self, user_id: str) -> Optional[UserProfile]:
        row = self._profile_row(user_id)
        return UserProfile.model_validate(row) if row else None

    def create_user_profile(self, user_id: str, profile: UserProfileIn) -> UserProfile:
        row = self._profile_row(user_id) or UserProfileRow(user_id=user_id)
        for k, v in profile.model_dump(mode="json").items():
            setattr(row, k, v)
        row.updated_at = utcnow()
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return UserProfile.model_validate(row)

    def update_user_profile(self, user_id: str, profile: UserProfileUpdate) -> Optional[UserProfile]:
        row = self._profile_row(user_id)
        if row is None:
            return None
        for k, v in profile.changes(mode="json").items():
            setattr(row, k, v)
        row.updated_at = utcnow()
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return UserProfile.model_validate(row)

    # --- Favoritos ---
    def _favorite_row(self, user_id: str, recipe_id: int) -> Optional[FavoriteRecipeRow]:
        return self.session.exec(
            select(FavoriteRecipeRow).where(
                FavoriteRecipeRow.user_id == user_id,
                FavoriteRecipeRow.recipe_id == recipe_id,
            )
        ).first()

    def get_favorite_recipes(self, user_id: str) -> List[Recipe]:
        rows = self.session.exec(
            select(RecipeRow)
            .join(FavoriteRecipeRow, FavoriteRecipeRow.recipe_id == RecipeRow.id)
            .where(FavoriteRecipeRow.user_id == user_id)
            .order_by(FavoriteRecipeRow.created_at, FavoriteRecipeRow.id)
        ).all()
        return [_recipe_out(r) for r in rows]

    def add_favorite_recipe(self, user_id: str, recipe_id: int) -> FavoriteRecipe:
        existing = self._favorite_row(user_id, recipe_id)
        if existing:
            return FavoriteRecipe.model_validate(existing)
        row = FavoriteRecipeRow(user_id=user_id, recipe_id=recipe_id)
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError:
            # otra petición insertó el mismo par entre el select y el insert
            self.session.rollback()
            logger.debug("Favorite (%s, %s) inserted concurrently, reusing it", user_id, recipe_id)
            existing = self._favorite_row(user_id, recipe_id)
            if existing is None:
                raise
            return FavoriteRecipe.model_validate(existing)
        self.session.refresh(row)
        return FavoriteRecipe.model_validate(row)

    def remove_favorite_recipe(self, user_id: str, recipe_id: int) -> None:
        row = self._favorite_row(user_id, recipe_id)
        if row:
            self.session.delete(row)
            self.session.commit()

    def is_recipe_favorite(self, user_id: str, recipe_id: int) -> bool:
        return self._favorite_row(user_id, recipe_id) is not None
