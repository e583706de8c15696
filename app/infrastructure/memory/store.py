"""Process-local data store shared by the in-memory repositories.

Default persistence backend for development and tests. Entities are copied
on the way in and out, so a caller holding an entity cannot change stored
state without going through a repository's update().
"""

from __future__ import annotations

import asyncio
import copy
from typing import TypeVar

from app.domain.entities import Category, Tip, User
from app.domain.exceptions import PersistenceException

T = TypeVar("T")


class InMemoryDataStore:
    """Dicts of categories, tips, and users keyed by canonical id string."""

    def __init__(self) -> None:
        self.categories: dict[str, Category] = {}
        self.tips: dict[str, Tip] = {}
        self.users: dict[str, User] = {}
        self.lock = asyncio.Lock()

    def clear(self) -> None:
        self.categories.clear()
        self.tips.clear()
        self.users.clear()


def clone(entity: T) -> T:
    return copy.deepcopy(entity)


def insert(table: dict[str, T], key: str, entity: T, operation: str) -> None:
    """Store a copy of a new entity; an existing id is a persistence error."""
    if key in table:
        raise PersistenceException(operation, f"duplicate id {key}")
    table[key] = clone(entity)


def replace(table: dict[str, T], key: str, entity: T, operation: str) -> None:
    """Overwrite a stored entity with a copy; a missing id is a persistence error."""
    if key not in table:
        raise PersistenceException(operation, f"unknown id {key}")
    table[key] = clone(entity)
