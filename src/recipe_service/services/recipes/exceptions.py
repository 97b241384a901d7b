"""Recipe service exceptions."""

from __future__ import annotations


class RecipeServiceError(Exception):
    """Base exception for recipe lookup errors."""


class RecipeNotFoundError(RecipeServiceError):
    """Raised when no recipe exists for the requested ID."""

    def __init__(self, recipe_id: int) -> None:
        self.recipe_id = recipe_id
        super().__init__(
            f"Recipe with ID {recipe_id} not found. Please try another recipe."
        )
