"""Fixtures for nutrition engine tests."""

from __future__ import annotations

import pytest

from recipe_service.models.recipe import Recipe
from tests.fixtures.recipes import (
    itemized_recipe_payload,
    proportional_recipe_payload,
)


@pytest.fixture
def itemized_recipe() -> Recipe:
    """Recipe whose ingredients carry per-ingredient nutrition."""
    return Recipe.model_validate(itemized_recipe_payload())


@pytest.fixture
def proportional_recipe() -> Recipe:
    """Recipe without per-ingredient nutrition."""
    return Recipe.model_validate(proportional_recipe_payload())
