"""Recipe data repositories."""

from recipe_service.repositories.mock import MockRecipeRepository
from recipe_service.repositories.protocol import RecipeRepository
from recipe_service.repositories.spoonacular import SpoonacularRecipeRepository


__all__ = [
    "MockRecipeRepository",
    "RecipeRepository",
    "SpoonacularRecipeRepository",
]
