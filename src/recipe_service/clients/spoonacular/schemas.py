"""Spoonacular search response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator

from recipe_service.observability.logging import get_logger
from recipe_service.schemas.base import DownstreamResponse


logger = get_logger(__name__)


class SpoonacularRecipeSummary(DownstreamResponse):
    """A single hit from ``/recipes/complexSearch``."""

    id: int = Field(..., description="Provider recipe ID")
    title: str = Field(default="", description="Recipe title")
    image: str | None = Field(default=None, description="Recipe image URL")
    image_type: str | None = Field(default=None, description="Image file type")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: str | None) -> str:
        """Treat a missing title as empty."""
        return v or ""


class SpoonacularSearchResponse(DownstreamResponse):
    """Response from ``/recipes/complexSearch``.

    Null ``results`` and ``totalResults`` are defaulted so callers can rely
    on both being present.
    """

    results: list[SpoonacularRecipeSummary] = Field(default_factory=list)
    offset: int = 0
    number: int = 0
    total_results: int = 0

    @field_validator("results", mode="before")
    @classmethod
    def validate_results(cls, v: list[Any] | None) -> list[SpoonacularRecipeSummary]:
        """Drop malformed hits instead of failing the whole search."""
        if v is None:
            logger.warning("Search response has null results, treating as empty")
            return []

        results: list[SpoonacularRecipeSummary] = []
        for item in v:
            try:
                results.append(SpoonacularRecipeSummary.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed search result", error=str(e))
        return results

    @field_validator("offset", "number", mode="before")
    @classmethod
    def validate_counters(cls, v: int | None) -> int:
        """Treat missing paging counters as zero."""
        return 0 if v is None else v

    @field_validator("total_results", mode="before")
    @classmethod
    def validate_total_results(cls, v: int | None) -> int:
        """Default a missing total to zero."""
        if v is None:
            logger.warning("Search response has null totalResults, defaulting to 0")
            return 0
        return v
