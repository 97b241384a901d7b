"""Recipe data mappers.

Functions for turning provider responses and domain recipes into API
response schemas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_service.observability.logging import get_logger
from recipe_service.schemas.recipe import (
    IngredientResponse,
    NutritionResponse,
    RecipeDetailResponse,
    RecipeSearchResponse,
    RecipeSummary,
)
from recipe_service.services.nutrition.constants import (
    CALORIES,
    CARBOHYDRATES,
    FAT,
    FIBER,
    PROTEIN,
)


if TYPE_CHECKING:
    from recipe_service.clients.spoonacular.schemas import SpoonacularSearchResponse
    from recipe_service.models.recipe import Ingredient, NutritionProfile, Recipe


logger = get_logger(__name__)


def build_search_response(
    provider_response: SpoonacularSearchResponse,
    page: int,
    page_size: int,
) -> RecipeSearchResponse:
    """Build a search page from a provider search response.

    Args:
        provider_response: Provider search results.
        page: Requested 1-based page number.
        page_size: Effective page size.

    Returns:
        API search response.
    """
    return RecipeSearchResponse(
        results=[
            RecipeSummary(id=hit.id, title=hit.title, image=hit.image)
            for hit in provider_response.results
        ],
        page=page,
        page_size=page_size,
        total_results=provider_response.total_results,
    )


def build_ingredient_response(ingredient: Ingredient) -> IngredientResponse:
    """Map an ingredient line."""
    return IngredientResponse(
        id=ingredient.id,
        name=ingredient.name,
        amount=ingredient.amount,
        unit=ingredient.unit,
    )


def build_nutrition_response(nutrition: NutritionProfile | None) -> NutritionResponse:
    """Extract headline nutrients and the caloric breakdown.

    Recipes without nutrition map to all zeros.
    """
    if nutrition is None:
        return NutritionResponse()

    breakdown = nutrition.caloric_breakdown
    return NutritionResponse(
        calories=nutrition.find_amount(CALORIES),
        protein=nutrition.find_amount(PROTEIN),
        fat=nutrition.find_amount(FAT),
        carbohydrates=nutrition.find_amount(CARBOHYDRATES),
        fiber=nutrition.find_amount(FIBER),
        percent_protein=breakdown.percent_protein if breakdown else 0.0,
        percent_fat=breakdown.percent_fat if breakdown else 0.0,
        percent_carbs=breakdown.percent_carbs if breakdown else 0.0,
    )


def extract_instructions(recipe: Recipe) -> list[str]:
    """Flatten a recipe's method into a list of steps.

    Structured steps are preferred. Otherwise the free-text instructions
    are split into sentences on ". ", each ending with a period.
    """
    steps = [
        step.step
        for instruction in recipe.analyzed_instructions
        for step in instruction.steps
    ]
    if steps:
        return steps

    text = recipe.instructions
    if text and text.strip():
        sentences = (part.strip() for part in text.split(". "))
        return [s if s.endswith(".") else f"{s}." for s in sentences if s]

    logger.debug("No instructions available", recipe_id=recipe.id)
    return []


def build_recipe_detail_response(recipe: Recipe) -> RecipeDetailResponse:
    """Build the API detail response for a recipe.

    Args:
        recipe: Domain recipe, original or recalculated.

    Returns:
        API recipe detail response.
    """
    return RecipeDetailResponse(
        id=recipe.id,
        title=recipe.title,
        image=recipe.image,
        ready_in_minutes=recipe.ready_in_minutes,
        servings=recipe.servings,
        ingredients=[build_ingredient_response(i) for i in recipe.ingredients],
        nutrition=build_nutrition_response(recipe.nutrition),
        instructions=extract_instructions(recipe),
    )
