"""Process-local persistence backend."""

from app.infrastructure.memory.repositories import (
    InMemoryCategoryRepository,
    InMemoryTipRepository,
    InMemoryUserRepository,
)
from app.infrastructure.memory.store import InMemoryDataStore

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryDataStore",
    "InMemoryTipRepository",
    "InMemoryUserRepository",
]
