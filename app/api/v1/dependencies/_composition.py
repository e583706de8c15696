"""Backend composition: repositories and cache store for the configured backends.

create_app() builds one Backends per application and stores it on
app.state.backends; the lifespan connects and closes it. Route dependencies
only read from app.state, so each app (and each test) owns its own stores.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.interfaces import (
    ICacheStore,
    ICategoryRepository,
    ITipRepository,
    IUserRepository,
)
from app.core.config import Settings
from app.infrastructure.cache import InMemoryCacheStore, RedisCacheStore
from app.infrastructure.firebase import FirestoreRESTClient, create_firestore_client
from app.infrastructure.firebase.repositories import (
    FirestoreCategoryRepository,
    FirestoreTipRepository,
    FirestoreUserRepository,
)
from app.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryDataStore,
    InMemoryTipRepository,
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Backends:
    """Process-wide infrastructure shared by all requests of one app."""

    category_repo: ICategoryRepository
    tip_repo: ITipRepository
    user_repo: IUserRepository
    cache: ICacheStore
    firestore_client: FirestoreRESTClient | None = None

    async def connect(self) -> None:
        if isinstance(self.cache, RedisCacheStore):
            await self.cache.connect()

    async def close(self) -> None:
        if isinstance(self.cache, RedisCacheStore):
            await self.cache.disconnect()
        if self.firestore_client is not None:
            await self.firestore_client.aclose()
            logger.info("Firestore HTTP client closed")


def build_cache_store(settings: Settings) -> ICacheStore:
    """Return the cache store for settings.cache_backend (not yet connected)."""
    if settings.cache_backend == "redis":
        return RedisCacheStore(settings)
    return InMemoryCacheStore(max_entries=settings.cache_max_entries)


def build_backends(settings: Settings) -> Backends:
    """Build repositories and cache store for the configured backends.

    Raises:
        ValueError: If Firestore credentials are missing or malformed.
    """
    cache = build_cache_store(settings)
    if settings.database_backend == "firestore":
        client = create_firestore_client(settings)
        return Backends(
            category_repo=FirestoreCategoryRepository(client),
            tip_repo=FirestoreTipRepository(client),
            user_repo=FirestoreUserRepository(client),
            cache=cache,
            firestore_client=client,
        )
    store = InMemoryDataStore()
    return Backends(
        category_repo=InMemoryCategoryRepository(store),
        tip_repo=InMemoryTipRepository(store),
        user_repo=InMemoryUserRepository(store),
        cache=cache,
    )
