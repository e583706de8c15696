"""Redis-based cache store for multi-process deployments.

Values are JSON-serialized and written with SETEX so each read view keeps its
own TTL. Reads and writes are best effort; deletes are not, because a key
that could not be evicted keeps serving stale data until its TTL expires.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import redis.asyncio as redis

from app.domain.exceptions import CacheStoreException

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Async Redis cache store with TTL support (implements ICacheStore).

    Call connect() at startup and disconnect() at shutdown. Socket timeouts
    come from cache_operation_timeout_seconds, so an unreachable server
    surfaces as an error instead of hanging the request.
    """

    def __init__(
        self,
        settings: Settings,
        redis_client: redis.Redis | None = None,
    ) -> None:
        """Initialize cache store.

        Args:
            settings: Application settings (connection and timeout).
            redis_client: Optional Redis client for testing or DI.
        """
        self.settings = settings
        self.redis = redis_client
        self._connected = False

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is None:
            password = self.settings.redis_password
            timeout = self.settings.cache_operation_timeout_seconds
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=password.get_secret_value() if password else None,
                decode_responses=True,
                socket_connect_timeout=timeout,
                socket_timeout=timeout,
                socket_keepalive=True,
            )
        try:
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache reads disabled.", e)
            self._connected = False

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Ping through the client's pool again. Returns True if reachable."""
        if self.redis is None:
            return False
        try:
            await self.redis.ping()
            self._connected = True
        except redis.RedisError:
            self._connected = False
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable."""
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = await self.redis.get(key)
        except (redis.ConnectionError, redis.TimeoutError):
            if not await self._reconnect():
                logger.warning("Cache get unavailable for key %s (Redis disconnected)", key)
                return None
            try:
                value = await self.redis.get(key)
            except redis.RedisError:
                logger.warning("Cache get error for key %s after reconnect", key, exc_info=True)
                return None
        except redis.RedisError:
            logger.warning("Cache get error for key %s", key, exc_info=True)
            return None
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        """Store value with TTL. Returns True on success.

        Args:
            key: Cache key (use app.application.caching.keys builders).
            value: JSON-serializable value.
            ttl: Time-to-live in seconds.
        """
        if ttl <= 0:
            raise ValueError("ttl must be a positive number of seconds")
        if not self.is_available() or self.redis is None:
            return False
        serialized = json.dumps(value)
        try:
            await self.redis.setex(key, ttl, serialized)
        except (redis.ConnectionError, redis.TimeoutError):
            if not await self._reconnect():
                logger.warning("Cache set unavailable for key %s (Redis disconnected)", key)
                return False
            try:
                await self.redis.setex(key, ttl, serialized)
            except redis.RedisError:
                logger.warning("Cache set error for key %s after reconnect", key, exc_info=True)
                return False
        except redis.RedisError:
            logger.warning("Cache set error for key %s", key, exc_info=True)
            return False
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return True

    async def delete(self, key: str) -> None:
        """Remove key from cache. Deleting an absent key is a no-op.

        Raises:
            CacheStoreException: If Redis is unavailable or the delete fails
                after one reconnect attempt.
        """
        if self.redis is None:
            raise CacheStoreException("delete", key, "Redis client not connected")
        if not self.is_available() and not await self._reconnect():
            raise CacheStoreException("delete", key, "Redis unavailable")
        try:
            await self.redis.delete(key)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            if not await self._reconnect():
                raise CacheStoreException("delete", key, str(e)) from e
            try:
                await self.redis.delete(key)
            except redis.RedisError as retry_error:
                raise CacheStoreException("delete", key, str(retry_error)) from retry_error
        except redis.RedisError as e:
            raise CacheStoreException("delete", key, str(e)) from e
        logger.debug("Cache DELETE: %s", key)
