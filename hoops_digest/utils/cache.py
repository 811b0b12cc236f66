"""In-memory TTL cache for transformed responses.

The transformation core never touches this cache; callers (the summary
service and the CLI) receive an instance and decide what to store. Two
concurrent misses on the same key both compute the value; there is no request
coalescing.
"""

import time
from collections.abc import Callable
from typing import Any

import structlog

from hoops_digest.utils.config import get_settings

logger = structlog.get_logger(__name__)


class ResponseCache:
    """Key -> value store with a per-entry time-to-live."""

    def __init__(
        self,
        default_ttl: float | None = None,
        enabled: bool | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize cache.

        Args:
            default_ttl: TTL in seconds for entries stored without one. If None,
                uses ``cache_ttl_final_seconds`` from settings.
            enabled: Whether caching is active. If None, uses settings.
            clock: Monotonic time source, injectable for tests.
        """
        settings = get_settings()
        self.default_ttl = float(
            settings.cache_ttl_final_seconds if default_ttl is None else default_ttl
        )
        self.enabled = settings.cache_enabled if enabled is None else enabled
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        """
        Get a cached value if present and not expired.

        Args:
            key: Cache key.

        Returns:
            Cached value if found and valid, None otherwise.
        """
        if not self.enabled:
            return None

        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            logger.debug("Cache entry expired", key=key)
            return None

        logger.debug("Cache hit", key=key)
        return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """
        Store a value.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Seconds until the entry expires (default_ttl when None).
        """
        if not self.enabled:
            return

        ttl = self.default_ttl if ttl is None else ttl
        self._entries[key] = (self._clock() + ttl, value)
        logger.debug("Cached response", key=key, ttl=ttl)

    def has(self, key: str) -> bool:
        """Return True if ``key`` holds an unexpired value."""
        return self.get(key) is not None

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Clear all cached data."""
        self._entries.clear()
        logger.info("Cache cleared")

    def cleanup(self) -> int:
        """Drop expired entries and return how many were removed."""
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def stats(self) -> dict[str, int]:
        """
        Get cache statistics.

        Returns:
            Dictionary with live and expired entry counts.
        """
        now = self._clock()
        live = sum(1 for expires_at, _ in self._entries.values() if now < expires_at)
        return {"entries": live, "expired": len(self._entries) - live}
