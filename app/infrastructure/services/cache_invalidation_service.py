"""Cache invalidation service: evicts cached read views by key.

Remove-only: it never reads or populates the cache. Keys come from
app.application.caching.keys, the builders the read path populates with.
Failures of the store propagate (CacheStoreException); they are never
swallowed here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.caching.keys import (
    category_key,
    category_list_key,
    dashboard_key,
)

if TYPE_CHECKING:
    from app.application.interfaces.services import ICacheStore
    from app.domain.value_objects.core import CategoryId

logger = logging.getLogger(__name__)


class CacheInvalidationService:
    """Implements ICacheInvalidationService on top of an ICacheStore.

    Every operation is idempotent: evicting an absent key is a no-op, and
    when a call returns the key is gone from the store.
    """

    def __init__(self, cache: ICacheStore) -> None:
        self.cache = cache

    async def invalidate_dashboard(self) -> None:
        await self._evict(dashboard_key())

    async def invalidate_category_list(self) -> None:
        await self._evict(category_list_key())

    async def invalidate_category(self, category_id: CategoryId) -> None:
        await self._evict(category_key(category_id))

    async def invalidate_category_and_list(self, category_id: CategoryId) -> None:
        """Evict one category's detail view and the category list."""
        await self.invalidate_category(category_id)
        await self.invalidate_category_list()

    async def _evict(self, key: str) -> None:
        await self.cache.delete(key)
        logger.debug("Evicted cache key %s", key)
