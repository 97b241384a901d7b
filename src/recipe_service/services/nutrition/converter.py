"""Approximate ingredient weight estimation.

Converts an ingredient's free-text ``amount`` + ``unit`` to grams using the
fixed tables in :mod:`recipe_service.services.nutrition.constants`. The
result only needs to be good enough to compare ingredients by weight within
one recipe, so densities are ignored and unknown units fall back to a flat
default.

Matching runs in two explicit passes:
    1. Exact match of the whole normalized unit against the weight, count
       and volume tables.
    2. Ordered substring scan over multi-letter volume tokens, so that
       "heaping cup" still matches "cup".
"""

from __future__ import annotations

from recipe_service.observability.logging import get_logger
from recipe_service.services.nutrition.constants import (
    COUNT_GRAMS,
    DEFAULT_GRAMS_PER_UNIT,
    SERVING_UNITS,
    VOLUME_GRAMS,
    VOLUME_SUBSTRING_RULES,
    WEIGHT_GRAMS,
)


logger = get_logger(__name__)


def normalize_unit(unit: str | None) -> str:
    """Lower-case a unit and collapse its whitespace."""
    if unit is None:
        return ""
    return " ".join(unit.lower().split())


def grams_per_unit(unit: str | None) -> float:
    """Resolve the approximate grams represented by one unit.

    Args:
        unit: Free-text unit, may be None or blank.

    Returns:
        Grams per unit; unrecognized units use the default of 100 g.
    """
    normalized = normalize_unit(unit)

    if normalized in SERVING_UNITS:
        return DEFAULT_GRAMS_PER_UNIT

    for table in (WEIGHT_GRAMS, COUNT_GRAMS, VOLUME_GRAMS):
        factor = table.get(normalized)
        if factor is not None:
            return factor

    for token, factor in VOLUME_SUBSTRING_RULES:
        if token in normalized:
            return factor

    logger.debug("Unrecognized unit, using default weight", unit=normalized)
    return DEFAULT_GRAMS_PER_UNIT


def to_grams(amount: float | None, unit: str | None) -> float:
    """Estimate the weight of an ingredient quantity in grams.

    Args:
        amount: Quantity of the ingredient; absent or non-positive amounts
            weigh nothing.
        unit: Free-text unit.

    Returns:
        Approximate weight in grams, never negative.

    Example:
        >>> to_grams(2, "tbsp")
        30.0
        >>> to_grams(1, "heaping cup")
        240.0
    """
    if amount is None or amount <= 0:
        return 0.0
    return amount * grams_per_unit(unit)
