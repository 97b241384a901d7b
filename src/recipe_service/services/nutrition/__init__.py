"""Nutrition recalculation engine.

Validates exclusion requests and recomputes a recipe's nutrition after
ingredients are removed.
"""

from recipe_service.services.nutrition.breakdown import recalculate_caloric_breakdown
from recipe_service.services.nutrition.calculator import recalculate
from recipe_service.services.nutrition.converter import to_grams
from recipe_service.services.nutrition.exceptions import (
    EmptyExclusionError,
    InvalidExclusionError,
    NullInputError,
    NutritionError,
)
from recipe_service.services.nutrition.validation import (
    require_non_empty,
    validate_exist,
)


__all__ = [
    "EmptyExclusionError",
    "InvalidExclusionError",
    "NullInputError",
    "NutritionError",
    "recalculate",
    "recalculate_caloric_breakdown",
    "require_non_empty",
    "to_grams",
    "validate_exist",
]
