"""Pytest configuration and fixtures for lifehacking.

HTTP tests run against a fresh create_app() per test (in-memory repositories
and cache), so no test sees another test's data or cache entries.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.caching import CacheInvalidationDispatcher
from app.application.dtos.tip import TipCommand, TipStepInput
from app.core.config import Settings
from app.infrastructure.cache import InMemoryCacheStore
from app.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryDataStore,
    InMemoryTipRepository,
    InMemoryUserRepository,
)
from app.infrastructure.services import CacheInvalidationService
from app.main import create_app


def _make_tip_command(category_id: str, /, **overrides) -> TipCommand:
    fields = {
        "title": "Batch your errands",
        "description": "Group errands by location to save a trip across town.",
        "category_id": category_id,
        "steps": [
            TipStepInput(1, "List every errand for the week."),
            TipStepInput(2, "Sort the list by neighbourhood."),
        ],
        "tags": ["errands", "planning"],
        "video_url": None,
    }
    fields.update(overrides)
    return TipCommand(**fields)


@pytest.fixture
def tip_command():
    """Factory for a valid TipCommand: tip_command(category_id, **overrides)."""
    return _make_tip_command


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment and .env (memory backends)."""
    return Settings(_env_file=None, database_backend="memory", cache_backend="memory")


@pytest.fixture
def application(settings: Settings):
    """FastAPI app with its own backends."""
    return create_app(settings)


@pytest.fixture
async def client(application) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def app_cache(application) -> InMemoryCacheStore:
    """The cache store the app's routes read from and evict from."""
    return application.state.backends.cache


@pytest.fixture
def data_store() -> InMemoryDataStore:
    return InMemoryDataStore()


@pytest.fixture
def category_repo(data_store: InMemoryDataStore) -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository(data_store)


@pytest.fixture
def tip_repo(data_store: InMemoryDataStore) -> InMemoryTipRepository:
    return InMemoryTipRepository(data_store)


@pytest.fixture
def user_repo(data_store: InMemoryDataStore) -> InMemoryUserRepository:
    return InMemoryUserRepository(data_store)


@pytest.fixture
def cache() -> InMemoryCacheStore:
    return InMemoryCacheStore(max_entries=128)


@pytest.fixture
def dispatcher(cache: InMemoryCacheStore) -> CacheInvalidationDispatcher:
    """Real dispatcher evicting from the `cache` fixture."""
    return CacheInvalidationDispatcher(CacheInvalidationService(cache))


@pytest.fixture
def dispatcher_spy() -> AsyncMock:
    """Stand-in dispatcher recording dispatch() calls."""
    spy = AsyncMock(spec=CacheInvalidationDispatcher)
    spy.dispatch = AsyncMock(return_value=[])
    return spy
