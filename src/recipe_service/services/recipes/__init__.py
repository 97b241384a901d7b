"""Recipe search and detail services."""

from recipe_service.services.recipes.detail import RecipeDetailService
from recipe_service.services.recipes.exceptions import (
    RecipeNotFoundError,
    RecipeServiceError,
)
from recipe_service.services.recipes.search import RecipeSearchService


__all__ = [
    "RecipeDetailService",
    "RecipeNotFoundError",
    "RecipeSearchService",
    "RecipeServiceError",
]
