"""In-memory category repository (implements ICategoryRepository)."""

from __future__ import annotations

from app.domain.entities import Category
from app.domain.value_objects.core import CategoryId
from app.infrastructure.memory.store import InMemoryDataStore, clone, insert, replace


class InMemoryCategoryRepository:
    """Category repository over a shared InMemoryDataStore."""

    def __init__(self, store: InMemoryDataStore) -> None:
        self._store = store

    async def get_by_id(self, category_id: CategoryId) -> Category | None:
        async with self._store.lock:
            category = self._store.categories.get(str(category_id))
            if category is None or category.is_deleted:
                return None
            return clone(category)

    async def get_by_name(
        self, name: str, include_deleted: bool = False
    ) -> Category | None:
        wanted = name.strip().lower()
        async with self._store.lock:
            for category in self._store.categories.values():
                if category.is_deleted and not include_deleted:
                    continue
                if category.name.lower() == wanted:
                    return clone(category)
        return None

    async def get_all(self) -> list[Category]:
        async with self._store.lock:
            active = [c for c in self._store.categories.values() if not c.is_deleted]
            return [clone(c) for c in sorted(active, key=lambda c: c.created_at)]

    async def add(self, category: Category) -> None:
        async with self._store.lock:
            insert(self._store.categories, str(category.id), category, "categories.add")

    async def update(self, category: Category) -> None:
        async with self._store.lock:
            replace(self._store.categories, str(category.id), category, "categories.update")
