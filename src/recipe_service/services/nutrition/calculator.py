"""Nutrition recalculation after ingredient exclusion.

Given a recipe and the IDs of ingredients to drop, builds a new recipe
snapshot with those ingredients removed and the nutrition totals adjusted.

Two strategies are chained:
    - Subtractive: when any excluded ingredient carries itemized nutrients,
      those amounts are summed by name and subtracted from the totals.
    - Proportional: otherwise the excluded share of the recipe's estimated
      weight is removed from every nutrient.

Nutrients never itemized on an excluded ingredient subtract nothing on the
subtractive path, so partially itemized data may under-subtract.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from recipe_service.models.recipe import (
    Ingredient,
    Nutrient,
    NutritionProfile,
    Recipe,
)
from recipe_service.observability.logging import get_logger
from recipe_service.services.nutrition.breakdown import recalculate_caloric_breakdown
from recipe_service.services.nutrition.constants import (
    INGREDIENT_IDS_NULL_MESSAGE,
    RECIPE_NULL_MESSAGE,
)
from recipe_service.services.nutrition.converter import to_grams
from recipe_service.services.nutrition.exceptions import NullInputError


logger = get_logger(__name__)


def recalculate(recipe: Recipe | None, excluded_ids: Collection[int] | None) -> Recipe:
    """Remove ingredients from a recipe and adjust its nutrition.

    Args:
        recipe: Source recipe, never mutated.
        excluded_ids: IDs of ingredients to remove. Expected to be validated
            against the recipe beforehand.

    Returns:
        The input recipe when ``excluded_ids`` is empty, otherwise a new
        recipe with the remaining ingredients and recalculated nutrition.

    Raises:
        NullInputError: If either argument is None.
    """
    if recipe is None:
        raise NullInputError(RECIPE_NULL_MESSAGE)
    if excluded_ids is None:
        raise NullInputError(INGREDIENT_IDS_NULL_MESSAGE)
    if not excluded_ids:
        return recipe

    excluded_set = frozenset(excluded_ids)
    remaining, excluded = partition_ingredients(recipe.ingredients, excluded_set)

    nutrition = recipe.nutrition
    if nutrition is not None:
        nutrition = _recalculate_nutrition(recipe, nutrition, excluded)

    return recipe.model_copy(update={"ingredients": remaining, "nutrition": nutrition})


def partition_ingredients(
    ingredients: Iterable[Ingredient],
    excluded_ids: Collection[int],
) -> tuple[tuple[Ingredient, ...], tuple[Ingredient, ...]]:
    """Split ingredients into (remaining, excluded), preserving order."""
    remaining: list[Ingredient] = []
    excluded: list[Ingredient] = []
    for ingredient in ingredients:
        if ingredient.id in excluded_ids:
            excluded.append(ingredient)
        else:
            remaining.append(ingredient)
    return tuple(remaining), tuple(excluded)


def _recalculate_nutrition(
    recipe: Recipe,
    nutrition: NutritionProfile,
    excluded: tuple[Ingredient, ...],
) -> NutritionProfile:
    """Pick a strategy and build the adjusted nutrition profile."""
    if any(ingredient.itemized_nutrients for ingredient in excluded):
        accumulated = accumulate_itemized_nutrients(excluded)
        logger.debug(
            "Subtracting itemized nutrients",
            recipe_id=recipe.id,
            nutrients=sorted(accumulated),
        )
        nutrients = subtract_nutrients(nutrition.nutrients, accumulated)
    else:
        proportion = excluded_weight_proportion(recipe.ingredients, excluded)
        logger.debug(
            "Estimating nutrients by weight",
            recipe_id=recipe.id,
            proportion=proportion,
        )
        if proportion <= 0:
            return nutrition
        nutrients = scale_nutrients(nutrition.nutrients, 1 - proportion)

    return NutritionProfile(
        nutrients=nutrients,
        caloric_breakdown=recalculate_caloric_breakdown(nutrients),
    )


def accumulate_itemized_nutrients(ingredients: Iterable[Ingredient]) -> dict[str, float]:
    """Sum itemized nutrient amounts by case-insensitive name."""
    totals: dict[str, float] = {}
    for ingredient in ingredients:
        for nutrient in ingredient.itemized_nutrients:
            key = nutrient.name.casefold()
            totals[key] = totals.get(key, 0.0) + nutrient.amount
    return totals


def subtract_nutrients(
    nutrients: Iterable[Nutrient],
    accumulated: dict[str, float],
) -> tuple[Nutrient, ...]:
    """Subtract accumulated amounts from each nutrient, clamping at zero."""
    return tuple(
        nutrient.model_copy(
            update={
                "amount": max(
                    0.0, nutrient.amount - accumulated.get(nutrient.name.casefold(), 0.0)
                )
            }
        )
        for nutrient in nutrients
    )


def excluded_weight_proportion(
    ingredients: Iterable[Ingredient],
    excluded: Iterable[Ingredient],
) -> float:
    """Share of the recipe's estimated weight held by the excluded ingredients.

    Returns 0 when the recipe has no measurable weight; the result is
    clamped to [0, 1].
    """
    total = sum(to_grams(i.amount, i.unit) for i in ingredients)
    if total <= 0:
        logger.warning("Recipe has no measurable ingredient weight")
        return 0.0

    removed = sum(to_grams(i.amount, i.unit) for i in excluded)
    return min(1.0, max(0.0, removed / total))


def scale_nutrients(nutrients: Iterable[Nutrient], factor: float) -> tuple[Nutrient, ...]:
    """Multiply every nutrient amount by ``factor``, never below zero."""
    return tuple(
        nutrient.model_copy(update={"amount": max(0.0, nutrient.amount * factor)})
        for nutrient in nutrients
    )
