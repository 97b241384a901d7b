"""Unit tests for application lifespan handling."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from recipe_service.cache import RecipeCache
from recipe_service.core.config import Settings
from recipe_service.core.config.settings import RecipeCacheSettings, RecipeSourceSettings
from recipe_service.core.events import build_repository, lifespan
from recipe_service.repositories import MockRecipeRepository, SpoonacularRecipeRepository
from recipe_service.services.recipes import RecipeDetailService, RecipeSearchService


pytestmark = pytest.mark.unit


class TestBuildRepository:
    """Tests for build_repository."""

    def test_mock_mode(self) -> None:
        """Should read bundled files in mock mode."""
        settings = Settings(recipe_source=RecipeSourceSettings(mode="mock"))

        assert isinstance(build_repository(settings), MockRecipeRepository)

    def test_spoonacular_mode(self) -> None:
        """Should call the live provider in spoonacular mode."""
        settings = Settings(recipe_source=RecipeSourceSettings(mode="spoonacular"))

        assert isinstance(build_repository(settings), SpoonacularRecipeRepository)

    def test_spoonacular_mode_caches_lookups(self) -> None:
        """Should give the provider repository a cache sized from settings."""
        settings = Settings(
            recipe_source=RecipeSourceSettings(mode="spoonacular"),
            recipe_cache=RecipeCacheSettings(max_size=10, ttl_seconds=60),
        )

        repository = build_repository(settings)

        assert isinstance(repository._cache, RecipeCache)
        assert repository._cache.max_size == 10
        assert repository._cache.ttl_seconds == 60

    def test_cache_can_be_disabled(self) -> None:
        """Should build an uncached repository when caching is off."""
        settings = Settings(
            recipe_source=RecipeSourceSettings(mode="spoonacular"),
            recipe_cache=RecipeCacheSettings(enabled=False),
        )

        assert build_repository(settings)._cache is None


class TestLifespan:
    """Tests for the lifespan context manager."""

    @pytest.fixture
    def app(self) -> FastAPI:
        """Bare app carrying test settings."""
        app = FastAPI()
        app.state.settings = Settings(recipe_source=RecipeSourceSettings(mode="mock"))
        return app

    async def test_startup_creates_services(self, app: FastAPI) -> None:
        """Should attach the repository and services, then release them."""
        async with lifespan(app):
            assert isinstance(app.state.recipe_repository, MockRecipeRepository)
            assert len(app.state.recipe_repository) == 4
            assert isinstance(app.state.search_service, RecipeSearchService)
            assert isinstance(app.state.detail_service, RecipeDetailService)

        assert len(app.state.recipe_repository) == 0

    async def test_failed_repository_leaves_services_unset(self, app: FastAPI) -> None:
        """Should keep running without services when the source fails to start."""
        repository = MagicMock()
        repository.initialize = AsyncMock(side_effect=RuntimeError("no api key"))

        with patch(
            "recipe_service.core.events.lifespan.build_repository",
            return_value=repository,
        ):
            async with lifespan(app):
                assert app.state.recipe_repository is None
                assert app.state.search_service is None
                assert app.state.detail_service is None

        repository.shutdown.assert_not_called()
