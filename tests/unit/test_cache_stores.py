"""Tests for the cache store backends (in-memory TTL cache and Redis)."""

from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from app.core.config import Settings
from app.domain.exceptions import CacheStoreException
from app.infrastructure.cache import InMemoryCacheStore, RedisCacheStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCacheStore:
    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock()

    @pytest.fixture
    def store(self, clock: FakeClock) -> InMemoryCacheStore:
        return InMemoryCacheStore(max_entries=16, timer=clock)

    async def test_get_returns_stored_value(self, store: InMemoryCacheStore) -> None:
        assert await store.set("CategoryList", {"items": []}, 60) is True
        assert await store.get("CategoryList") == {"items": []}

    async def test_miss_returns_none(self, store: InMemoryCacheStore) -> None:
        assert await store.get("AdminDashboard") is None

    async def test_entry_expires_after_its_ttl(
        self, store: InMemoryCacheStore, clock: FakeClock
    ) -> None:
        await store.set("k", 1, 10)
        clock.now = 9.5
        assert await store.get("k") == 1
        clock.now = 10.0
        assert await store.get("k") is None
        assert "k" not in store

    async def test_ttl_is_per_entry(
        self, store: InMemoryCacheStore, clock: FakeClock
    ) -> None:
        await store.set("short", 1, 5)
        await store.set("long", 2, 500)
        clock.now = 6.0
        assert await store.get("short") is None
        assert await store.get("long") == 2
        assert len(store) == 1

    async def test_overwrite_resets_ttl(
        self, store: InMemoryCacheStore, clock: FakeClock
    ) -> None:
        await store.set("k", 1, 10)
        clock.now = 8.0
        await store.set("k", 2, 10)
        clock.now = 15.0
        assert await store.get("k") == 2

    async def test_delete_is_idempotent(self, store: InMemoryCacheStore) -> None:
        await store.set("k", 1, 10)
        await store.delete("k")
        await store.delete("k")
        assert await store.get("k") is None

    async def test_non_positive_ttl_rejected(self, store: InMemoryCacheStore) -> None:
        with pytest.raises(ValueError, match="ttl"):
            await store.set("k", 1, 0)

    async def test_capacity_is_bounded(self) -> None:
        store = InMemoryCacheStore(max_entries=2)
        for key in ("a", "b", "c"):
            await store.set(key, key, 60)
        assert len(store) == 2
        assert await store.get("c") == "c"

    def test_always_available(self, store: InMemoryCacheStore) -> None:
        assert store.is_available() is True


class TestRedisCacheStore:
    @pytest.fixture
    def redis_client(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    async def store(self, redis_client: AsyncMock) -> RedisCacheStore:
        store = RedisCacheStore(Settings(_env_file=None), redis_client=redis_client)
        await store.connect()
        return store

    async def test_connect_pings(self, store: RedisCacheStore, redis_client: AsyncMock) -> None:
        redis_client.ping.assert_awaited()
        assert store.is_available() is True

    async def test_connect_failure_leaves_store_unavailable(self) -> None:
        client = AsyncMock()
        client.ping.side_effect = RedisConnectionError("refused")
        store = RedisCacheStore(Settings(_env_file=None), redis_client=client)
        await store.connect()
        assert store.is_available() is False
        assert await store.get("k") is None
        assert await store.set("k", 1, 60) is False

    async def test_get_deserializes_json(
        self, store: RedisCacheStore, redis_client: AsyncMock
    ) -> None:
        redis_client.get.return_value = '{"total": 3}'
        assert await store.get("AdminDashboard") == {"total": 3}
        redis_client.get.assert_awaited_with("AdminDashboard")

    async def test_get_miss(self, store: RedisCacheStore, redis_client: AsyncMock) -> None:
        redis_client.get.return_value = None
        assert await store.get("CategoryList") is None

    async def test_get_retries_once_after_connection_error(
        self, store: RedisCacheStore, redis_client: AsyncMock
    ) -> None:
        redis_client.get.side_effect = [RedisConnectionError("reset"), '"v"']
        assert await store.get("k") == "v"
        assert redis_client.get.await_count == 2

    async def test_set_uses_setex_with_ttl(
        self, store: RedisCacheStore, redis_client: AsyncMock
    ) -> None:
        assert await store.set("CategoryList", {"items": []}, 3600) is True
        redis_client.setex.assert_awaited_once_with("CategoryList", 3600, '{"items": []}')

    async def test_set_rejects_non_positive_ttl(self, store: RedisCacheStore) -> None:
        with pytest.raises(ValueError):
            await store.set("k", 1, -1)

    async def test_delete(self, store: RedisCacheStore, redis_client: AsyncMock) -> None:
        await store.delete("AdminDashboard")
        redis_client.delete.assert_awaited_once_with("AdminDashboard")

    async def test_delete_without_client_raises(self) -> None:
        store = RedisCacheStore(Settings(_env_file=None))
        with pytest.raises(CacheStoreException, match="AdminDashboard"):
            await store.delete("AdminDashboard")

    async def test_delete_raises_when_reconnect_fails(
        self, store: RedisCacheStore, redis_client: AsyncMock
    ) -> None:
        redis_client.delete.side_effect = RedisConnectionError("reset")
        redis_client.ping.side_effect = RedisConnectionError("refused")
        with pytest.raises(CacheStoreException) as exc_info:
            await store.delete("CategoryList")
        assert exc_info.value.details["key"] == "CategoryList"
        assert store.is_available() is False

    async def test_delete_raises_on_redis_error(
        self, store: RedisCacheStore, redis_client: AsyncMock
    ) -> None:
        redis_client.delete.side_effect = ResponseError("READONLY")
        with pytest.raises(CacheStoreException):
            await store.delete("CategoryList")

    async def test_disconnect_closes_client(
        self, store: RedisCacheStore, redis_client: AsyncMock
    ) -> None:
        await store.disconnect()
        redis_client.aclose.assert_awaited_once()
        assert store.is_available() is False
