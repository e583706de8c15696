"""Service interfaces (ports) for the application layer.

Protocols define contracts for the cache store and the cache invalidation
service (DIP). Implementations live in app.infrastructure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.value_objects.core import CategoryId


# Cache store interface
class ICacheStore(Protocol):
    """Protocol for key-value cache backends (in-memory, Redis).

    get/set are best effort: a backend that cannot serve them reports a miss
    or skips the write. delete is not: it either removes the key (or finds it
    absent) or raises CacheStoreException.
    """

    def is_available(self) -> bool:
        """Return True if the cache is connected and usable."""

    async def get(self, key: str) -> Any | None:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        """Store a JSON-safe value with a TTL in seconds. Returns True if stored."""

    async def delete(self, key: str) -> None:
        """Remove key. No-op if absent; raises CacheStoreException on failure."""


# Cache invalidation service interface
class ICacheInvalidationService(Protocol):
    """Protocol for evicting cached read views after a persisted mutation.

    Every operation is idempotent and remove-only; when it returns, the
    target key is absent from the cache.
    """

    async def invalidate_dashboard(self) -> None:
        """Evict the admin dashboard statistics."""

    async def invalidate_category_list(self) -> None:
        """Evict the category list."""

    async def invalidate_category(self, category_id: CategoryId) -> None:
        """Evict one category's detail view."""

    async def invalidate_category_and_list(self, category_id: CategoryId) -> None:
        """Evict one category's detail view and the category list."""
