"""Integration test fixtures.

Runs the full application, lifespan included, against the bundled mock
recipes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from recipe_service.core.config import Settings
from recipe_service.core.config.settings import (
    AppSettings,
    LoggingSettings,
    RateLimitingSettings,
    RecipeSourceSettings,
)
from recipe_service.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration


@pytest.fixture
def test_settings() -> Settings:
    """Settings serving the bundled mock recipes without rate limits."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(name="test-app", version="0.0.1-test"),
        logging=LoggingSettings(level="DEBUG", format="text"),
        rate_limiting=RateLimitingSettings(enabled=False),
        recipe_source=RecipeSourceSettings(mode="mock"),
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings."""
    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client with application startup and shutdown applied."""
    async with (
        app.router.lifespan_context(app),
        AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac,
    ):
        yield ac
