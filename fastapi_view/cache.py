"""Bounded in-memory LRU cache for templates, partials and resolved paths."""

import threading
from collections import OrderedDict
from collections.abc import Iterator
from typing import Any

from fastapi_view.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class TemplateCache:
    """Least-recently-used cache with a fixed capacity.

    Values are template sources, compiled template handles or mappings of
    partial contents. Thread-safe, since synchronous engines render in a
    worker thread.
    """

    def __init__(self, max_size: int = 100):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._cache: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Get a cached value and mark it as most recently used.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        with self._lock:
            if key not in self._cache:
                return None
            self._cache.move_to_end(key)
            value = self._cache[key]

        log_with_context(
            logger,
            "debug",
            "Cache hit",
            cache_key=key,
            event_type="cache_hit",
        )
        return value

    def set(self, key: str, value: Any) -> None:
        """Insert or replace a value, evicting the oldest entry when full.

        Args:
            key: Cache key
            value: Value to cache
        """
        evicted: str | None = None
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            self._cache[key] = value
            if len(self._cache) > self.max_size:
                evicted, _ = self._cache.popitem(last=False)

        log_with_context(
            logger,
            "debug",
            "Cache set",
            cache_key=key,
            event_type="cache_set",
        )
        if evicted is not None:
            log_with_context(
                logger,
                "debug",
                "Cache entry evicted",
                cache_key=evicted,
                max_size=self.max_size,
                event_type="cache_evict",
            )

    def clear(self) -> int:
        """Drop every entry.

        Returns:
            Number of entries cleared
        """
        with self._lock:
            count = len(self._cache)
            self._cache.clear()

        log_with_context(
            logger,
            "info",
            "Cache cleared",
            count=count,
            event_type="cache_clear_all",
        )
        return count

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
