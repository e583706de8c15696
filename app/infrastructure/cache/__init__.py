"""Cache stores: in-memory (default) and Redis.

Both implement app.application.interfaces.services.ICacheStore. Key format
lives in app.application.caching.keys so readers and invalidation agree.
"""

from app.infrastructure.cache.memory_cache import InMemoryCacheStore
from app.infrastructure.cache.redis_cache import RedisCacheStore

__all__ = [
    "InMemoryCacheStore",
    "RedisCacheStore",
]
