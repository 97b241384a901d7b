"""Recipe search service."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from recipe_service.core.config import get_settings
from recipe_service.mappers.recipe import build_search_response
from recipe_service.observability.logging import get_logger
from recipe_service.schemas.recipe import RecipeSearchResponse
from recipe_service.utils.sanitize import sanitize_for_logging, sanitize_for_query


if TYPE_CHECKING:
    from recipe_service.repositories.protocol import RecipeRepository


logger = get_logger(__name__)


class RecipeSearchService:
    """Title search with paging limits applied.

    Oversized page sizes are capped at the configured maximum rather than
    rejected, and a query that is empty after sanitization returns an empty
    page without calling the repository.
    """

    def __init__(self, repository: RecipeRepository) -> None:
        """Initialize the service.

        Args:
            repository: Source of recipe data.
        """
        search_settings = get_settings().recipe_search
        self._repository = repository
        self._max_page_size = search_settings.max_page_size
        self._max_query_length = search_settings.max_query_length
        self._slow_threshold_ms = search_settings.slow_search_threshold_ms

    async def search(
        self,
        query: str,
        page: int,
        page_size: int,
    ) -> RecipeSearchResponse:
        """Search recipes by title.

        Args:
            query: User search text.
            page: 1-based page number.
            page_size: Requested results per page.

        Returns:
            The requested page of results.
        """
        start = time.perf_counter()

        effective_page_size = min(page_size, self._max_page_size)
        if effective_page_size < page_size:
            logger.warning(
                "Page size exceeds maximum, capping",
                requested=page_size,
                maximum=self._max_page_size,
            )

        sanitized = sanitize_for_query(query, self._max_query_length)
        if not sanitized:
            logger.warning("Empty query after sanitization")
            return RecipeSearchResponse(
                results=[],
                page=page,
                page_size=effective_page_size,
                total_results=0,
            )

        offset = (page - 1) * effective_page_size
        log_query = sanitize_for_logging(sanitized)
        logger.debug(
            "Searching recipes",
            query=log_query,
            page=page,
            page_size=effective_page_size,
            offset=offset,
        )

        provider_response = await self._repository.search(
            sanitized, effective_page_size, offset
        )
        response = build_search_response(provider_response, page, effective_page_size)

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        if duration_ms > self._slow_threshold_ms:
            logger.warning(
                "Slow search detected",
                query=log_query,
                duration_ms=duration_ms,
                threshold_ms=self._slow_threshold_ms,
            )

        logger.info(
            "Search completed",
            query=log_query,
            total=response.total_results,
            returned=len(response.results),
            page=page,
            duration_ms=duration_ms,
        )
        return response
