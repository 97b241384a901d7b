"""Recipe endpoints.

Provides:
- GET /recipes/search for paged title search
- GET /recipes/{recipeId} for recipe details with nutrition
- POST /recipes/{recipeId}/exclude-ingredients for nutrition recalculated
  without selected ingredients
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from recipe_service.api.dependencies import get_detail_service, get_search_service
from recipe_service.core.config import get_settings
from recipe_service.core.exceptions import BadRequestException, ErrorResponse
from recipe_service.observability.logging import get_logger
from recipe_service.schemas.recipe import (
    ExcludeIngredientsRequest,
    RecipeDetailResponse,
    RecipeSearchResponse,
)
from recipe_service.services.recipes import (  # noqa: TC001
    RecipeDetailService,
    RecipeSearchService,
)
from recipe_service.utils.sanitize import sanitize_for_logging


logger = get_logger(__name__)

router = APIRouter(prefix="/recipes", tags=["Recipes"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    503: {"model": ErrorResponse, "description": "Recipe source unavailable"},
}


def validate_search_params(query: str | None, page: int, page_size: int) -> str:
    """Check search parameters against the configured limits.

    Every violated rule is reported, joined with "; ".

    Returns:
        The trimmed query.

    Raises:
        BadRequestException: If any parameter is out of range.
    """
    limits = get_settings().recipe_search
    errors: list[str] = []

    trimmed = (query or "").strip()
    if not trimmed:
        errors.append("Search query is required. Please provide a search term.")
    elif len(trimmed) > limits.max_query_length:
        errors.append(
            f"Search query must be between 1 and {limits.max_query_length} characters"
        )

    if page < 1:
        errors.append("Page number must be 1 or greater")
    elif page > limits.max_page:
        errors.append(f"Page number must not exceed {limits.max_page}")

    if page_size < 1:
        errors.append("Page size must be at least 1")
    elif page_size > limits.max_page_size:
        errors.append(f"Page size must not exceed {limits.max_page_size}")

    if errors:
        raise BadRequestException("; ".join(errors))
    return trimmed


@router.get(
    "/search",
    response_model=RecipeSearchResponse,
    summary="Search recipes by title",
    responses=_ERROR_RESPONSES,
)
async def search_recipes(
    service: Annotated[RecipeSearchService, Depends(get_search_service)],
    query: Annotated[str | None, Query(description="Title search text")] = None,
    page: Annotated[int, Query(description="1-based page number")] = 1,
    page_size: Annotated[
        int | None, Query(alias="pageSize", description="Results per page")
    ] = None,
) -> RecipeSearchResponse:
    """Search recipes whose title matches the query."""
    if page_size is None:
        page_size = get_settings().recipe_search.default_page_size

    trimmed = validate_search_params(query, page, page_size)
    logger.info(
        "Recipe search requested",
        query=sanitize_for_logging(trimmed),
        page=page,
        page_size=page_size,
    )
    return await service.search(trimmed, page, page_size)


@router.get(
    "/{recipe_id}",
    response_model=RecipeDetailResponse,
    summary="Get recipe details",
    responses={404: {"model": ErrorResponse, "description": "Recipe not found"}}
    | _ERROR_RESPONSES,
)
async def get_recipe(
    recipe_id: Annotated[int, Path(ge=1, description="Recipe ID")],
    service: Annotated[RecipeDetailService, Depends(get_detail_service)],
) -> RecipeDetailResponse:
    """Return a recipe with its ingredients, nutrition and instructions."""
    logger.info("Recipe details requested", recipe_id=recipe_id)
    return await service.get_recipe(recipe_id)


@router.post(
    "/{recipe_id}/exclude-ingredients",
    response_model=RecipeDetailResponse,
    summary="Recalculate a recipe without some ingredients",
    description=(
        "Removes the given ingredients and recalculates nutrition. Itemized "
        "per-ingredient nutrients are subtracted when available; otherwise the "
        "removed share is estimated from ingredient weights."
    ),
    responses={404: {"model": ErrorResponse, "description": "Recipe not found"}}
    | _ERROR_RESPONSES,
)
async def exclude_ingredients(
    recipe_id: Annotated[int, Path(ge=1, description="Recipe ID")],
    request_body: ExcludeIngredientsRequest,
    service: Annotated[RecipeDetailService, Depends(get_detail_service)],
) -> RecipeDetailResponse:
    """Return the recipe recalculated without the requested ingredients."""
    logger.info(
        "Ingredient exclusion requested",
        recipe_id=recipe_id,
        count=len(request_body.ingredient_ids),
    )
    return await service.exclude_ingredients(recipe_id, request_body.ingredient_ids)
