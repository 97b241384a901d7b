"""Recipe repository backed by bundled JSON files.

Serves recipes without network access for local development, demos and
tests. Files are read once during startup; recipes are then served from
memory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import orjson
from pydantic import ValidationError

from recipe_service.clients.spoonacular.schemas import (
    SpoonacularRecipeSummary,
    SpoonacularSearchResponse,
)
from recipe_service.models.recipe import Recipe
from recipe_service.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Sequence


logger = get_logger(__name__)

RECIPE_FILE_PATTERN = "recipe-*.json"


class MockDataError(Exception):
    """Raised when a mock data file exists but cannot be parsed."""


class MockRecipeRepository:
    """In-memory recipe repository loaded from JSON files.

    Each file holds one provider recipe-information payload. Files that are
    missing or whose recipe has no ID are skipped with a warning; files that
    cannot be parsed are logged and skipped as well, so one bad file never
    prevents startup.
    """

    def __init__(
        self,
        data_dir: Path | str,
        file_names: Sequence[str] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            data_dir: Directory holding the recipe files.
            file_names: Files to load; every ``recipe-*.json`` file in
                ``data_dir`` when empty or None.
        """
        self._data_dir = Path(data_dir)
        self._file_names = list(file_names or ())
        self._recipes: dict[int, Recipe] = {}

    @property
    def source_name(self) -> str:
        """Short name of the data source for logging."""
        return "mock"

    @property
    def recipe_ids(self) -> frozenset[int]:
        """IDs of every loaded recipe."""
        return frozenset(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    async def initialize(self) -> None:
        """Load every configured recipe file into memory."""
        self.load()

    async def shutdown(self) -> None:
        """Drop loaded recipes."""
        self._recipes.clear()

    def load(self) -> None:
        """Read recipe files from disk, replacing anything loaded before."""
        logger.info("Loading mock recipe data", data_dir=str(self._data_dir))
        self._recipes.clear()

        paths = (
            [self._data_dir / name for name in self._file_names]
            if self._file_names
            else sorted(self._data_dir.glob(RECIPE_FILE_PATTERN))
        )

        loaded = failed = 0
        for path in paths:
            try:
                recipe = self._load_file(path)
            except MockDataError as e:
                logger.error("Failed to load recipe file", file=path.name, error=str(e))
                failed += 1
                continue
            if recipe is not None:
                self._recipes[recipe.id] = recipe  # type: ignore[index]
                loaded += 1

        logger.info(
            "Mock recipe loading complete",
            loaded=loaded,
            failed=failed,
            total=len(self._recipes),
        )

    @staticmethod
    def _load_file(path: Path) -> Recipe | None:
        """Parse one recipe file, or return None when it should be skipped."""
        if not path.is_file():
            logger.warning("Recipe file not found", file=path.name)
            return None

        try:
            recipe = Recipe.model_validate(orjson.loads(path.read_bytes()))
        except (orjson.JSONDecodeError, ValidationError) as e:
            msg = f"Invalid mock data format: {path.name}"
            raise MockDataError(msg) from e

        if recipe.id is None:
            logger.warning("Recipe file has no ID, skipping", file=path.name)
            return None

        logger.debug("Loaded recipe", recipe_id=recipe.id, title=recipe.title)
        return recipe

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Return a loaded recipe by ID.

        Raises:
            ValueError: If ``recipe_id`` is not positive.
        """
        if recipe_id <= 0:
            logger.warning("Invalid recipe ID requested", recipe_id=recipe_id)
            msg = "Recipe ID must be positive"
            raise ValueError(msg)
        return self._recipes.get(recipe_id)

    async def search(
        self,
        query: str,
        number: int,
        offset: int,
    ) -> SpoonacularSearchResponse:
        """Case-insensitive title search over loaded recipes.

        A recipe matches when every whitespace-separated token of ``query``
        appears in its title.
        """
        if number < 0 or offset < 0:
            msg = "Number and offset must not be negative"
            raise ValueError(msg)

        tokens = query.casefold().split()
        matches = [
            recipe
            for recipe in self._recipes.values()
            if tokens and all(token in (recipe.title or "").casefold() for token in tokens)
        ]
        page = matches[offset : offset + number]

        return SpoonacularSearchResponse(
            results=[
                SpoonacularRecipeSummary(id=r.id, title=r.title or "", image=r.image)
                for r in page
            ],
            offset=offset,
            number=len(page),
            total_results=len(matches),
        )
