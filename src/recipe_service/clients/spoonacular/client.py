"""Spoonacular API HTTP client.

Async client for the two provider endpoints the service uses: recipe title
search and recipe information with nutrition.
"""

from __future__ import annotations

from typing import Any, Final, TypeVar

import httpx
import orjson
from pydantic import BaseModel, ValidationError

from recipe_service.clients.spoonacular.exceptions import (
    SERVICE_NAME,
    ExternalApiError,
    ExternalApiNotFoundError,
    ExternalApiResponseError,
)
from recipe_service.clients.spoonacular.schemas import SpoonacularSearchResponse
from recipe_service.core.config import get_settings
from recipe_service.models.recipe import Recipe
from recipe_service.observability.logging import get_logger


logger = get_logger(__name__)

SEARCH_ENDPOINT: Final[str] = "/recipes/complexSearch"
RECIPE_INFO_ENDPOINT: Final[str] = "/recipes/{id}/information"
API_KEY_HEADER: Final[str] = "x-api-key"

ModelT = TypeVar("ModelT", bound=BaseModel)


class SpoonacularClient:
    """HTTP client for the Spoonacular API.

    Transient failures (timeouts, connection errors, 5xx responses) are
    retried up to ``max_retries`` times. Every failure surfaces as an
    :class:`ExternalApiError`.

    Example:
        ```python
        client = SpoonacularClient()
        await client.initialize()

        results = await client.search_recipes("pasta", number=9, offset=0)
        recipe = await client.get_recipe_information(716429)

        await client.shutdown()
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Provider API key; defaults to ``SPOONACULAR_API_KEY``.
            http_client: Pre-built HTTP client, mainly for tests.
        """
        settings = get_settings()
        self._base_url = settings.spoonacular.base_url.rstrip("/")
        self._timeout = settings.spoonacular.timeout
        self._max_retries = settings.spoonacular.max_retries
        self._api_key = api_key if api_key is not None else settings.SPOONACULAR_API_KEY
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def base_url(self) -> str:
        """Provider base URL."""
        return self._base_url

    async def initialize(self) -> None:
        """Create the HTTP client.

        Raises:
            RuntimeError: If no API key is configured.
        """
        if not self._api_key:
            msg = "Spoonacular API key must not be blank. Set SPOONACULAR_API_KEY."
            raise RuntimeError(msg)

        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers={
                    API_KEY_HEADER: self._api_key,
                    "Accept": "application/json",
                },
            )
        logger.info("SpoonacularClient initialized", base_url=self._base_url)

    async def shutdown(self) -> None:
        """Release resources."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("SpoonacularClient shutdown")

    async def search_recipes(
        self,
        query: str,
        number: int,
        offset: int,
    ) -> SpoonacularSearchResponse:
        """Search recipes by title.

        Args:
            query: Title text to match.
            number: Maximum number of results.
            offset: Number of results to skip.

        Returns:
            Parsed search response with defaults for missing fields.

        Raises:
            ValueError: If the query is blank or paging values are negative.
            ExternalApiError: If the provider call fails.
        """
        if not query or not query.strip():
            msg = "Search query must not be null or blank"
            raise ValueError(msg)
        if number < 0:
            msg = "Number of results must not be negative"
            raise ValueError(msg)
        if offset < 0:
            msg = "Offset must not be negative"
            raise ValueError(msg)

        logger.debug("Searching recipes", query=query, number=number, offset=offset)

        data = await self._get_json(
            SEARCH_ENDPOINT,
            params={"titleMatch": query, "number": number, "offset": offset},
            action="search recipes",
        )
        if not isinstance(data, dict):
            msg = "Received empty search response"
            raise ExternalApiResponseError(msg)

        response = _parse(SpoonacularSearchResponse, data, action="search recipes")
        logger.info(
            "Recipe search successful",
            query=query,
            total=response.total_results,
            returned=len(response.results),
        )
        return response

    async def get_recipe_information(self, recipe_id: int) -> Recipe:
        """Fetch a recipe with ingredients and nutrition.

        Args:
            recipe_id: Provider recipe ID.

        Returns:
            The recipe snapshot.

        Raises:
            ValueError: If ``recipe_id`` is not positive.
            ExternalApiNotFoundError: If the provider has no such recipe.
            ExternalApiResponseError: If the body is not a usable recipe.
            ExternalApiError: For any other provider failure.
        """
        if recipe_id <= 0:
            msg = "Recipe ID must be positive"
            raise ValueError(msg)

        logger.debug("Fetching recipe information", recipe_id=recipe_id)

        data = await self._get_json(
            RECIPE_INFO_ENDPOINT.format(id=recipe_id),
            params={"includeNutrition": "true"},
            action="fetch recipe information",
            not_found_message=f"Recipe with ID {recipe_id} not found",
        )
        if not isinstance(data, dict):
            msg = "Received empty recipe from Spoonacular API"
            raise ExternalApiResponseError(msg)

        recipe = _parse(Recipe, data, action="fetch recipe information")
        if recipe.id is None:
            msg = "Recipe response missing ID field"
            raise ExternalApiResponseError(msg)
        if recipe.id != recipe_id:
            logger.warning(
                "Recipe ID mismatch",
                expected=recipe_id,
                received=recipe.id,
            )

        logger.info(
            "Recipe information retrieved",
            recipe_id=recipe.id,
            title=recipe.title,
        )
        return recipe

    async def _get_json(
        self,
        path: str,
        *,
        params: dict[str, Any],
        action: str,
        not_found_message: str = "Resource not found",
    ) -> Any:
        """GET a provider endpoint with retries and return the decoded body."""
        if self._http_client is None:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        last_error: ExternalApiError | None = None

        for attempt in range(self._max_retries + 1):
            try:
                response = await self._http_client.get(path, params=params)
            except httpx.TimeoutException as e:
                logger.warning(
                    "Spoonacular request timed out",
                    attempt=attempt + 1,
                    max_retries=self._max_retries,
                    path=path,
                )
                last_error = ExternalApiError(
                    f"Timed out while trying to {action}",
                    status_code=0,
                )
                last_error.__cause__ = e
                continue
            except httpx.RequestError as e:
                logger.warning(
                    "Failed to connect to Spoonacular",
                    attempt=attempt + 1,
                    max_retries=self._max_retries,
                    error=str(e),
                )
                last_error = ExternalApiError(
                    f"Network error while trying to {action}: {e}",
                    status_code=0,
                )
                last_error.__cause__ = e
                continue

            if response.is_success:
                try:
                    return orjson.loads(response.content)
                except orjson.JSONDecodeError as e:
                    msg = f"Unreadable response while trying to {action}"
                    raise ExternalApiResponseError(msg) from e

            error = self._map_http_error(response.status_code, action, not_found_message)
            if not error.is_server_error:
                raise error
            last_error = error

        assert last_error is not None
        raise last_error

    @staticmethod
    def _map_http_error(
        status_code: int,
        action: str,
        not_found_message: str,
    ) -> ExternalApiError:
        """Build the exception for an error status from the provider."""
        if status_code == 404:
            logger.debug("Spoonacular resource not found", action=action)
            return ExternalApiNotFoundError(not_found_message)
        if status_code == 429:
            logger.warning("Spoonacular rate limit exceeded")
            return ExternalApiError(
                "Rate limit exceeded. Please try again later.",
                status_code=status_code,
            )
        if status_code >= 500:
            logger.error("Spoonacular server error", status_code=status_code)
            return ExternalApiError(
                f"{SERVICE_NAME} server error (HTTP {status_code})",
                status_code=status_code,
            )
        return ExternalApiError(
            f"Failed to {action} (HTTP {status_code})",
            status_code=status_code,
        )


def _parse(model: type[ModelT], data: dict[str, Any], *, action: str) -> ModelT:
    """Validate a provider payload, reporting bad shapes as provider errors."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Malformed Spoonacular response",
            action=action,
            errors=e.error_count(),
        )
        msg = f"Malformed response while trying to {action}"
        raise ExternalApiResponseError(msg) from e
