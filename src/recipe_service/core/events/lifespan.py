"""Application lifespan event handlers.

Startup configures logging, builds the recipe repository selected by
``recipe_source.mode`` and attaches the recipe services to ``app.state``.
Shutdown releases the repository.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipe_service.cache import RecipeCache
from recipe_service.clients.spoonacular import SpoonacularClient
from recipe_service.core.config import Settings, get_settings
from recipe_service.observability.logging import get_logger, setup_logging
from recipe_service.repositories import (
    MockRecipeRepository,
    SpoonacularRecipeRepository,
)
from recipe_service.services.recipes import RecipeDetailService, RecipeSearchService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipe_service.repositories import RecipeRepository


logger = get_logger(__name__)


def build_repository(settings: Settings) -> RecipeRepository:
    """Create the recipe repository for the configured source mode."""
    if settings.use_mock_data:
        source = settings.recipe_source
        return MockRecipeRepository(
            source.mock_data_dir,
            file_names=source.mock_files or None,
        )
    cache_settings = settings.recipe_cache
    cache = (
        RecipeCache(
            max_size=cache_settings.max_size,
            ttl_seconds=cache_settings.ttl_seconds,
        )
        if cache_settings.enabled
        else None
    )
    return SpoonacularRecipeRepository(SpoonacularClient(), cache=cache)


async def _startup(app: FastAPI, settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        recipe_source=settings.recipe_source.mode,
    )

    app.state.recipe_repository = None
    app.state.search_service = None
    app.state.detail_service = None

    try:
        repository = build_repository(settings)
        await repository.initialize()
    except Exception:
        logger.exception("Failed to initialize recipe repository - recipes unavailable")
        return

    app.state.recipe_repository = repository
    app.state.search_service = RecipeSearchService(repository)
    app.state.detail_service = RecipeDetailService(repository)
    logger.info("Recipe services initialized", source=repository.source_name)


async def _shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")

    repository = getattr(app.state, "recipe_repository", None)
    if repository is not None:
        await repository.shutdown()
        logger.debug("Recipe repository shutdown", source=repository.source_name)

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
