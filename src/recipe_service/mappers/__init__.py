"""Data mappers from provider and domain data to API responses."""

from recipe_service.mappers.recipe import (
    build_nutrition_response,
    build_recipe_detail_response,
    build_search_response,
    extract_instructions,
)


__all__ = [
    "build_nutrition_response",
    "build_recipe_detail_response",
    "build_search_response",
    "extract_instructions",
]
