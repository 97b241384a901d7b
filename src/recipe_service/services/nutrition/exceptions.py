"""Exceptions for the nutrition recalculation engine.

All of these are caller/input errors. The engine raises them immediately and
never catches them; the API layer maps them to 400 responses.
"""

from __future__ import annotations

from collections.abc import Iterable


class NutritionError(Exception):
    """Base exception for nutrition recalculation errors."""


class NullInputError(NutritionError):
    """Raised when a required argument is missing."""


class EmptyExclusionError(NutritionError):
    """Raised when at least one exclusion is required but none was supplied."""


class InvalidExclusionError(NutritionError):
    """Raised when requested ingredient IDs do not belong to the recipe.

    The message names every invalid ID so the caller can fix the request
    in a single round trip.
    """

    def __init__(self, message: str, invalid_ids: Iterable[int]) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            invalid_ids: Every requested ID missing from the recipe.
        """
        self.invalid_ids = tuple(invalid_ids)
        super().__init__(message)
