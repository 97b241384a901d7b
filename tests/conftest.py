"""Shared test configuration for the recipe service tests.

Selects the ``test`` configuration environment before any settings are
loaded and clears the cached settings around every test.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from recipe_service.core.config import get_settings


if TYPE_CHECKING:
    from collections.abc import Generator


os.environ["APP_ENV"] = "test"


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Reload settings for each test so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
