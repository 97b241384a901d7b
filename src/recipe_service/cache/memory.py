"""In-memory TTL cache backend."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from cachetools import TTLCache

from recipe_service.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Callable


logger = get_logger(__name__)


class RecipeCache:
    """Size-bounded cache whose entries expire after a fixed time.

    Entries are evicted least-recently-used first once ``max_size`` is
    reached. Values are stored as-is, so only immutable objects should be
    cached.
    """

    def __init__(
        self,
        max_size: int = 500,
        ttl_seconds: float = 3600,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_size: Maximum number of entries kept.
            ttl_seconds: Lifetime of each entry in seconds.
            timer: Clock used to expire entries.
        """
        self._entries: TTLCache[str, Any] = TTLCache(
            maxsize=max_size, ttl=ttl_seconds, timer=timer
        )
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds

    def get(self, key: str, default: Any = None) -> Any:
        """Return a cached value, or ``default`` when absent or expired."""
        return self._entries.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a value under ``key``."""
        self._entries[key] = value

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if it was present."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every entry."""
        count = len(self._entries)
        self._entries.clear()
        logger.info("Cache cleared", entries=count)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
