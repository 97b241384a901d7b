"""Pre-condition checks for ingredient exclusion requests."""

from __future__ import annotations

from collections.abc import Collection

from recipe_service.models.recipe import Recipe
from recipe_service.observability.logging import get_logger
from recipe_service.services.nutrition.constants import (
    INGREDIENT_IDS_EMPTY_MESSAGE,
    INGREDIENT_IDS_NULL_MESSAGE,
    INVALID_INGREDIENT_IDS_MESSAGE,
    RECIPE_NULL_MESSAGE,
)
from recipe_service.services.nutrition.exceptions import (
    EmptyExclusionError,
    InvalidExclusionError,
    NullInputError,
)


logger = get_logger(__name__)


def require_non_empty(excluded_ids: Collection[int] | None) -> None:
    """Require at least one ingredient ID.

    Raises:
        NullInputError: If ``excluded_ids`` is None.
        EmptyExclusionError: If ``excluded_ids`` is empty.
    """
    if excluded_ids is None:
        raise NullInputError(INGREDIENT_IDS_NULL_MESSAGE)
    if not excluded_ids:
        raise EmptyExclusionError(INGREDIENT_IDS_EMPTY_MESSAGE)


def validate_exist(recipe: Recipe | None, excluded_ids: Collection[int] | None) -> None:
    """Check that every requested ID belongs to the recipe.

    An empty collection is accepted as a no-op. On failure, every offending
    ID is reported, sorted ascending.

    Args:
        recipe: Recipe the IDs must belong to.
        excluded_ids: Ingredient IDs requested for exclusion.

    Raises:
        NullInputError: If either argument is None.
        InvalidExclusionError: If any ID is not an ingredient of the recipe.
    """
    if recipe is None:
        raise NullInputError(RECIPE_NULL_MESSAGE)
    if excluded_ids is None:
        raise NullInputError(INGREDIENT_IDS_NULL_MESSAGE)
    if not excluded_ids:
        return

    invalid_ids = sorted(set(excluded_ids) - recipe.ingredient_ids)
    if invalid_ids:
        logger.warning(
            "Exclusion request names unknown ingredients",
            recipe_id=recipe.id,
            invalid_ids=invalid_ids,
        )
        raise InvalidExclusionError(
            INVALID_INGREDIENT_IDS_MESSAGE.format(ids=invalid_ids),
            invalid_ids,
        )
