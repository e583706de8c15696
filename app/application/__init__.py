"""Application layer: interfaces, caching rules, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, cache stores).
"""

from app.application.caching import CacheInvalidationDispatcher
from app.application.interfaces import (
    ICacheInvalidationService,
    ICacheStore,
    ICategoryRepository,
    ITipRepository,
    IUserRepository,
)

__all__ = [
    "CacheInvalidationDispatcher",
    "ICacheInvalidationService",
    "ICacheStore",
    "ICategoryRepository",
    "ITipRepository",
    "IUserRepository",
]
