"""FastAPI dependencies for service access.

Services are created during application startup and stored in
``app.state``; a missing service means startup could not reach the recipe
source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status


if TYPE_CHECKING:
    from recipe_service.services.recipes import RecipeDetailService, RecipeSearchService


async def get_search_service(request: Request) -> RecipeSearchService:
    """Get the recipe search service from app state.

    Raises:
        HTTPException: 503 if the service is not initialized.
    """
    service: RecipeSearchService | None = getattr(
        request.app.state, "search_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe search service not available",
        )
    return service


async def get_detail_service(request: Request) -> RecipeDetailService:
    """Get the recipe detail service from app state.

    Raises:
        HTTPException: 503 if the service is not initialized.
    """
    service: RecipeDetailService | None = getattr(
        request.app.state, "detail_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe detail service not available",
        )
    return service
