from __future__ import annotations
import logging
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..schemas import Difficulty, Recipe, RecipeSearchParams, SortBy
from ..storage.base import Storage
from .matching import matches

logger = logging.getLogger(__name__)

# Claves de orden: sorted() es estable, los empates conservan el orden del repositorio.
SORT_KEYS: Dict[SortBy, Callable[[Recipe], object]] = {
    SortBy.HEALTH: lambda r: -r.health_score,
    SortBy.TIME: lambda r: r.prep_time + r.cook_time,
    SortBy.COST: lambda r: r.estimated_cost,
    SortBy.DIFFICULTY: lambda r: r.difficulty.rank,
}


def passes_filters(
    recipe: Recipe,
    max_time: Optional[int] = None,
    difficulty: Optional[Difficulty] = None,
    max_cost: Optional[Decimal] = None,
) -> bool:
    if max_time is not None and recipe.prep_time + recipe.cook_time > max_time:
        return False
    if difficulty is not None and recipe.difficulty != difficulty:
        return False
    if max_cost is not None and recipe.estimated_cost > max_cost:
        return False
    return True


def sort_recipes(recipes: Iterable[Recipe], sort_by: Optional[SortBy] = None) -> List[Recipe]:
    key = SORT_KEYS.get(sort_by or SortBy.HEALTH, SORT_KEYS[SortBy.HEALTH])
    return sorted(recipes, key=key)


def search_recipes(
    recipes: Iterable[Recipe],
    query: Sequence[str],
    max_time: Optional[int] = None,
    difficulty: Optional[Difficulty] = None,
    max_cost: Optional[Decimal] = None,
    sort_by: Optional[SortBy] = None,
) -> List[Recipe]:
    """
    Filtra por coincidencia 3-de-4 con los ingredientes base, aplica los filtros
    opcionales (tiempo total, dificultad exacta, coste) y ordena por `sort_by`.
    """
    found = [
        r for r in recipes
        if matches(query, r.base_ingredients) and passes_filters(r, max_time, difficulty, max_cost)
    ]
    return sort_recipes(found, sort_by)


def record_search(storage: Storage, params: RecipeSearchParams) -> None:
    """Registra la búsqueda. Un fallo del registro nunca debe romper la búsqueda."""
    try:
        storage.create_search_request(params)
    except Exception:
        logger.warning("Could not record search request %s", params.query(), exc_info=True)


def run_search(storage: Storage, params: RecipeSearchParams) -> List[Recipe]:
    record_search(storage, params)
    results = search_recipes(
        storage.get_all_recipes(),
        params.query(),
        max_time=params.max_time,
        difficulty=params.difficulty,
        max_cost=params.max_cost,
        sort_by=params.sort_by,
    )
    logger.debug("Search %s -> %d recipes", params.query(), len(results))
    return results
