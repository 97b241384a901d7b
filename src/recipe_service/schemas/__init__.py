"""API and provider schemas."""

from recipe_service.schemas.base import (
    APIRequest,
    APIResponse,
    DownstreamRequest,
    DownstreamResponse,
)
from recipe_service.schemas.recipe import (
    ExcludeIngredientsRequest,
    IngredientResponse,
    NutritionResponse,
    RecipeDetailResponse,
    RecipeSearchResponse,
    RecipeSummary,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "DownstreamRequest",
    "DownstreamResponse",
    "ExcludeIngredientsRequest",
    "IngredientResponse",
    "NutritionResponse",
    "RecipeDetailResponse",
    "RecipeSearchResponse",
    "RecipeSummary",
]
