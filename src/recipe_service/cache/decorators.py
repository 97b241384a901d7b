"""Caching decorators for async repository methods.

The cache instance is looked up on the bound object at call time, so a
repository built without a cache simply calls through.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from recipe_service.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from recipe_service.cache.memory import RecipeCache


logger = get_logger(__name__)

R = TypeVar("R")


def cache_key(*key_parts: object) -> str:
    """Build a cache key from parts.

    Example:
        key = cache_key("recipes", 715497)
        # Returns: "recipes:715497"
    """
    return ":".join(str(part) for part in key_parts)


def cached(
    prefix: str,
    *,
    cache_attr: str = "_cache",
) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Decorator for caching async method results in a :class:`RecipeCache`.

    ``None`` results are never cached, so a lookup that found nothing is
    retried on the next call.

    Args:
        prefix: Cache key prefix for namespacing.
        cache_attr: Name of the instance attribute holding the cache.

    Example:
        @cached("recipes")
        async def get_by_id(self, recipe_id: int) -> Recipe | None:
            ...
    """

    def decorator(func: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> R:
            cache: RecipeCache | None = getattr(self, cache_attr, None)
            if cache is None:
                return await func(self, *args, **kwargs)

            key = cache_key(
                prefix,
                *args,
                *(f"{k}={v}" for k, v in sorted(kwargs.items())),
            )
            hit = cache.get(key)
            if hit is not None:
                logger.debug("Cache hit", key=key)
                return hit  # type: ignore[no-any-return]

            logger.debug("Cache miss", key=key)
            result = await func(self, *args, **kwargs)
            if result is not None:
                cache.set(key, result)
                logger.debug("Cached result", key=key, ttl=cache.ttl_seconds)
            return result

        return wrapper

    return decorator
