"""Caloric breakdown derived from macronutrient amounts (4-4-9 rule)."""

from __future__ import annotations

from collections.abc import Iterable

from recipe_service.models.recipe import (
    CaloricBreakdown,
    Nutrient,
    find_nutrient_amount,
)
from recipe_service.services.nutrition.constants import (
    CARBOHYDRATES,
    CARBS_KCAL_PER_G,
    FAT,
    FAT_KCAL_PER_G,
    PROTEIN,
    PROTEIN_KCAL_PER_G,
)


def recalculate_caloric_breakdown(nutrients: Iterable[Nutrient]) -> CaloricBreakdown:
    """Compute the share of derived calories from each macronutrient.

    Missing Protein, Fat or Carbohydrates entries count as zero. When the
    macros contribute no calories at all, every percentage is zero.

    Args:
        nutrients: Nutrient amounts to derive the breakdown from.

    Returns:
        Percentages of protein, fat and carbohydrate calories.
    """
    items = tuple(nutrients)
    protein_kcal = find_nutrient_amount(items, PROTEIN) * PROTEIN_KCAL_PER_G
    fat_kcal = find_nutrient_amount(items, FAT) * FAT_KCAL_PER_G
    carbs_kcal = find_nutrient_amount(items, CARBOHYDRATES) * CARBS_KCAL_PER_G

    total = protein_kcal + fat_kcal + carbs_kcal
    if total <= 0:
        return CaloricBreakdown()

    return CaloricBreakdown(
        percent_protein=protein_kcal / total * 100,
        percent_fat=fat_kcal / total * 100,
        percent_carbs=carbs_kcal / total * 100,
    )
