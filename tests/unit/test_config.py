"""Tests for Settings validation and backend composition."""

import pytest
from pydantic import ValidationError

from app.api.v1.dependencies import build_backends
from app.core.config import Settings, get_settings
from app.infrastructure.cache import InMemoryCacheStore, RedisCacheStore
from app.infrastructure.memory import InMemoryCategoryRepository


def test_defaults_run_in_memory() -> None:
    settings = Settings(_env_file=None)
    assert settings.database_backend == "memory"
    assert settings.cache_backend == "memory"
    assert settings.cache_ttl_dashboard == 86400
    assert settings.cache_ttl_category_list == 3600


def test_unknown_backend_rejected() -> None:
    with pytest.raises(ValidationError, match="database_backend"):
        Settings(_env_file=None, database_backend="postgres")
    with pytest.raises(ValidationError, match="cache_backend"):
        Settings(_env_file=None, cache_backend="memcached")


def test_firestore_requires_credentials() -> None:
    with pytest.raises(ValidationError, match="FIREBASE_SERVICE_ACCOUNT"):
        Settings(_env_file=None, database_backend="firestore")


def test_non_positive_ttl_rejected() -> None:
    with pytest.raises(ValidationError, match="cache_ttl_category"):
        Settings(_env_file=None, cache_ttl_category=0)


def test_cors_origins_split() -> None:
    settings = Settings(_env_file=None, allowed_origins="http://a.test, http://b.test,")
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CACHE_TTL_DASHBOARD", "120")
    monkeypatch.setenv("CACHE_BACKEND", "redis")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.cache_ttl_dashboard == 120
        assert settings.cache_backend == "redis"
    finally:
        get_settings.cache_clear()


def test_build_backends_memory() -> None:
    backends = build_backends(Settings(_env_file=None, cache_max_entries=8))
    assert isinstance(backends.cache, InMemoryCacheStore)
    assert isinstance(backends.category_repo, InMemoryCategoryRepository)
    assert backends.firestore_client is None


def test_build_backends_redis_is_not_connected_yet() -> None:
    backends = build_backends(Settings(_env_file=None, cache_backend="redis"))
    assert isinstance(backends.cache, RedisCacheStore)
    assert backends.cache.is_available() is False
