"""In-process caching for provider lookups."""

from recipe_service.cache.decorators import cache_key, cached
from recipe_service.cache.memory import RecipeCache


__all__ = ["RecipeCache", "cache_key", "cached"]
