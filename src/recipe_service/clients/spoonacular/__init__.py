"""Spoonacular recipe provider client."""

from recipe_service.clients.spoonacular.client import SpoonacularClient
from recipe_service.clients.spoonacular.exceptions import (
    ExternalApiError,
    ExternalApiNotFoundError,
    ExternalApiResponseError,
)
from recipe_service.clients.spoonacular.schemas import (
    SpoonacularRecipeSummary,
    SpoonacularSearchResponse,
)


__all__ = [
    "ExternalApiError",
    "ExternalApiNotFoundError",
    "ExternalApiResponseError",
    "SpoonacularClient",
    "SpoonacularRecipeSummary",
    "SpoonacularSearchResponse",
]
