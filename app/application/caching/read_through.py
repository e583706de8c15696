"""Read-through population of cached views.

Read views resolve their key through app.application.caching.keys, the same
builders the invalidation service evicts with. Cache faults never fail a
read: a failed get is a miss, a failed set leaves the entry unpopulated.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from app.application.interfaces.services import ICacheStore
from app.domain.exceptions import InfrastructureException

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def read_through(
    cache: ICacheStore,
    key: str,
    ttl: int,
    load: Callable[[], Awaitable[T]],
    to_cache: Callable[[T], dict[str, Any]],
    from_cache: Callable[[dict[str, Any]], T],
) -> T:
    """Return the cached view under key, or load it and cache it for ttl seconds.

    Args:
        cache: Cache store.
        key: Key from the shared key registry.
        ttl: Time to live of a populated entry, in seconds.
        load: Builds the view from the repositories on a miss.
        to_cache: Converts the view to a JSON-safe dict.
        from_cache: Rebuilds the view from a cached dict.
    """
    try:
        cached = await cache.get(key)
    except InfrastructureException as e:
        logger.warning("Cache get failed for %s, reading through: %s", key, e.message)
        cached = None
    if cached is not None:
        try:
            return from_cache(cached)
        except (KeyError, TypeError, ValueError):
            logger.warning("Discarding malformed cache entry %s", key, exc_info=True)

    result = await load()
    try:
        await cache.set(key, to_cache(result), ttl)
    except InfrastructureException as e:
        logger.warning("Cache set failed for %s: %s", key, e.message)
    return result
