"""Recipe detail service.

Looks up single recipes and produces recalculated versions with chosen
ingredients excluded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_service.mappers.recipe import build_recipe_detail_response
from recipe_service.observability.logging import get_logger
from recipe_service.services.nutrition.calculator import recalculate
from recipe_service.services.nutrition.validation import (
    require_non_empty,
    validate_exist,
)
from recipe_service.services.recipes.exceptions import RecipeNotFoundError


if TYPE_CHECKING:
    from collections.abc import Collection

    from recipe_service.models.recipe import Recipe
    from recipe_service.repositories.protocol import RecipeRepository
    from recipe_service.schemas.recipe import RecipeDetailResponse


logger = get_logger(__name__)


class RecipeDetailService:
    """Recipe lookup and ingredient exclusion."""

    def __init__(self, repository: RecipeRepository) -> None:
        """Initialize the service.

        Args:
            repository: Source of recipe data.
        """
        self._repository = repository

    async def get_recipe(self, recipe_id: int) -> RecipeDetailResponse:
        """Return the details of a recipe.

        Raises:
            RecipeNotFoundError: If the recipe does not exist.
        """
        recipe = await self._fetch(recipe_id)
        return build_recipe_detail_response(recipe)

    async def exclude_ingredients(
        self,
        recipe_id: int,
        ingredient_ids: Collection[int] | None,
    ) -> RecipeDetailResponse:
        """Return a recipe recalculated without the given ingredients.

        Args:
            recipe_id: Recipe to recalculate.
            ingredient_ids: Ingredients to remove; at least one is required
                and all must belong to the recipe.

        Raises:
            NullInputError: If ``ingredient_ids`` is None.
            EmptyExclusionError: If ``ingredient_ids`` is empty.
            RecipeNotFoundError: If the recipe does not exist.
            InvalidExclusionError: If any ID is not an ingredient of the recipe.
        """
        require_non_empty(ingredient_ids)
        excluded = frozenset(ingredient_ids)  # type: ignore[arg-type]

        recipe = await self._fetch(recipe_id)
        validate_exist(recipe, excluded)
        updated = recalculate(recipe, excluded)

        logger.info(
            "Recipe recalculated without ingredients",
            recipe_id=recipe_id,
            excluded=sorted(excluded),
            remaining=len(updated.ingredients),
        )
        return build_recipe_detail_response(updated)

    async def _fetch(self, recipe_id: int) -> Recipe:
        logger.debug("Fetching recipe", recipe_id=recipe_id)
        recipe = await self._repository.get_by_id(recipe_id)
        if recipe is None:
            logger.warning("Recipe not found", recipe_id=recipe_id)
            raise RecipeNotFoundError(recipe_id)
        return recipe
