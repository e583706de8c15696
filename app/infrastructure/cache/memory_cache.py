"""Process-local cache backend with per-entry TTL.

Default backend (single process). Backed by cachetools.TLRUCache so each
read view keeps its own TTL (dashboard: a day, categories: an hour).
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any, NamedTuple

from cachetools import TLRUCache

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    value: Any
    ttl: int


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class InMemoryCacheStore:
    """Thread-safe in-memory cache (implements ICacheStore).

    Values are stored as given (no serialization). delete() never fails:
    removing an absent key is a no-op.
    """

    def __init__(
        self,
        max_entries: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the store.

        Args:
            max_entries: Capacity; least recently used entries are dropped beyond it.
            timer: Clock used for expiry (injectable for tests).
        """
        self._cache: TLRUCache = TLRUCache(maxsize=max_entries, ttu=_time_to_use, timer=timer)
        self._lock = threading.Lock()

    def is_available(self) -> bool:
        return True

    async def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._cache.get(key)
        if entry is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return entry.value

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        if ttl <= 0:
            raise ValueError("ttl must be a positive number of seconds")
        with self._lock:
            self._cache[key] = _Entry(value, ttl)
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    async def delete(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)
        logger.debug("Cache DELETE: %s", key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
