"""Constants for nutrition recalculation.

Contains:
- Nutrient display names used for lookups
- Grams-per-unit tables for approximate weight estimation
- Macronutrient energy factors (4-4-9 rule)
- User-facing error messages
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Nutrient Names
# =============================================================================

CALORIES: Final[str] = "Calories"
PROTEIN: Final[str] = "Protein"
FAT: Final[str] = "Fat"
CARBOHYDRATES: Final[str] = "Carbohydrates"
FIBER: Final[str] = "Fiber"


# =============================================================================
# Unit Conversion Tables
# =============================================================================
# Approximate grams per unit. Keys are lower-cased, whitespace-trimmed units.

# Assumed weight for unitless and "serving" quantities
DEFAULT_GRAMS_PER_UNIT: Final[float] = 100.0

SERVING_UNITS: Final[frozenset[str]] = frozenset({"", "serving", "servings"})

WEIGHT_GRAMS: Final[dict[str, float]] = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
    "oz": 28.35,
    "ounce": 28.35,
    "ounces": 28.35,
    "lb": 453.592,
    "pound": 453.592,
    "pounds": 453.592,
}

COUNT_GRAMS: Final[dict[str, float]] = {
    "clove": 50.0,
    "cloves": 50.0,
    "piece": 50.0,
    "pieces": 50.0,
    "whole": 50.0,
}

VOLUME_GRAMS: Final[dict[str, float]] = {
    "cup": 240.0,
    "cups": 240.0,
    "tablespoon": 15.0,
    "tablespoons": 15.0,
    "tbsp": 15.0,
    "teaspoon": 5.0,
    "teaspoons": 5.0,
    "tsp": 5.0,
    "fluid ounce": 30.0,
    "fluid ounces": 30.0,
    "fl oz": 30.0,
    "pint": 473.0,
    "pints": 473.0,
    "quart": 946.0,
    "quarts": 946.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "l": 1000.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "ml": 1.0,
}

# Substring rules applied after exact matching, in priority order.
# "milliliter" precedes "liter" and "fluid ounce" precedes anything shorter.
VOLUME_SUBSTRING_RULES: Final[tuple[tuple[str, float], ...]] = (
    ("fluid ounce", 30.0),
    ("fl oz", 30.0),
    ("tablespoon", 15.0),
    ("tbsp", 15.0),
    ("teaspoon", 5.0),
    ("tsp", 5.0),
    ("cup", 240.0),
    ("pint", 473.0),
    ("quart", 946.0),
    ("milliliter", 1.0),
    ("liter", 1000.0),
)


# =============================================================================
# Caloric Breakdown
# =============================================================================

PROTEIN_KCAL_PER_G: Final[float] = 4.0
FAT_KCAL_PER_G: Final[float] = 9.0
CARBS_KCAL_PER_G: Final[float] = 4.0


# =============================================================================
# Error Messages
# =============================================================================

RECIPE_NULL_MESSAGE: Final[str] = "Recipe cannot be null"
INGREDIENT_IDS_NULL_MESSAGE: Final[str] = "Ingredient IDs cannot be null"
INGREDIENT_IDS_EMPTY_MESSAGE: Final[str] = "At least one ingredient ID must be provided"
INVALID_INGREDIENT_IDS_MESSAGE: Final[str] = (
    "The following ingredient IDs are not in this recipe: {ids}"
)
