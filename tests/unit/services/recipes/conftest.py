"""Fixtures for recipe service tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def repository() -> MagicMock:
    """Mocked recipe repository."""
    mock = MagicMock()
    mock.source_name = "test"
    mock.get_by_id = AsyncMock()
    mock.search = AsyncMock()
    return mock
