"""Recipe repository backed by the live Spoonacular API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_service.cache import cached
from recipe_service.clients.spoonacular.exceptions import ExternalApiNotFoundError
from recipe_service.observability.logging import get_logger


if TYPE_CHECKING:
    from recipe_service.cache import RecipeCache
    from recipe_service.clients.spoonacular.client import SpoonacularClient
    from recipe_service.clients.spoonacular.schemas import SpoonacularSearchResponse
    from recipe_service.models.recipe import Recipe


logger = get_logger(__name__)


class SpoonacularRecipeRepository:
    """Repository that delegates to :class:`SpoonacularClient`.

    The repository owns the client lifecycle. A provider 404 is reported as
    a missing recipe; every other provider error propagates. When a cache is
    given, found recipes are kept per ID so repeated lookups do not reach
    the provider.
    """

    def __init__(
        self,
        client: SpoonacularClient,
        cache: RecipeCache | None = None,
    ) -> None:
        self._client = client
        self._cache = cache

    @property
    def source_name(self) -> str:
        """Short name of the data source for logging."""
        return "spoonacular"

    async def initialize(self) -> None:
        """Initialize the underlying client."""
        await self._client.initialize()

    async def shutdown(self) -> None:
        """Shut down the underlying client and drop cached recipes."""
        await self._client.shutdown()
        if self._cache is not None:
            self._cache.clear()

    @cached("recipes")
    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Fetch a recipe from the provider, or None if it does not exist."""
        try:
            return await self._client.get_recipe_information(recipe_id)
        except ExternalApiNotFoundError:
            logger.debug("Provider has no recipe", recipe_id=recipe_id)
            return None

    async def search(
        self,
        query: str,
        number: int,
        offset: int,
    ) -> SpoonacularSearchResponse:
        """Search the provider by recipe title."""
        return await self._client.search_recipes(query, number, offset)
