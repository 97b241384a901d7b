"""Recipe repository protocol definition."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from recipe_service.clients.spoonacular.schemas import SpoonacularSearchResponse
    from recipe_service.models.recipe import Recipe


@runtime_checkable
class RecipeRepository(Protocol):
    """Source of recipe data for the recipe services.

    Implementations return provider-shaped search pages and full recipe
    snapshots; mapping to API responses happens in the services.
    """

    @property
    def source_name(self) -> str:
        """Short name of the data source for logging."""
        ...

    async def initialize(self) -> None:
        """Prepare the repository (load data, open connections)."""
        ...

    async def shutdown(self) -> None:
        """Release resources."""
        ...

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Return the recipe with ``recipe_id``, or None if it does not exist.

        Raises:
            ValueError: If ``recipe_id`` is not positive.
        """
        ...

    async def search(
        self,
        query: str,
        number: int,
        offset: int,
    ) -> SpoonacularSearchResponse:
        """Return one page of recipes whose title matches ``query``."""
        ...
