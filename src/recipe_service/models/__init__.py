"""Domain models for recipes, ingredients and nutrition."""

from recipe_service.models.recipe import (
    AnalyzedInstruction,
    CaloricBreakdown,
    Ingredient,
    IngredientNutrition,
    InstructionStep,
    Nutrient,
    NutritionProfile,
    Recipe,
    find_nutrient_amount,
)


__all__ = [
    "AnalyzedInstruction",
    "CaloricBreakdown",
    "Ingredient",
    "IngredientNutrition",
    "InstructionStep",
    "Nutrient",
    "NutritionProfile",
    "Recipe",
    "find_nutrient_amount",
]
