"""In-memory tip repository (implements ITipRepository)."""

from __future__ import annotations

from app.application.dtos.query import TipQueryCriteria
from app.domain.entities import Tip
from app.domain.value_objects.core import CategoryId, TipId
from app.infrastructure.memory.store import InMemoryDataStore, clone, insert, replace


class InMemoryTipRepository:
    """Tip repository over a shared InMemoryDataStore."""

    def __init__(self, store: InMemoryDataStore) -> None:
        self._store = store

    def _active(self) -> list[Tip]:
        return [t for t in self._store.tips.values() if not t.is_deleted]

    async def get_by_id(self, tip_id: TipId) -> Tip | None:
        async with self._store.lock:
            tip = self._store.tips.get(str(tip_id))
            if tip is None or tip.is_deleted:
                return None
            return clone(tip)

    async def get_by_category(self, category_id: CategoryId) -> list[Tip]:
        async with self._store.lock:
            return [clone(t) for t in self._active() if t.category_id == category_id]

    async def count_by_category(self, category_id: CategoryId) -> int:
        async with self._store.lock:
            return sum(1 for t in self._active() if t.category_id == category_id)

    async def get_all(self) -> list[Tip]:
        async with self._store.lock:
            return [clone(t) for t in self._active()]

    async def search(self, criteria: TipQueryCriteria) -> tuple[list[Tip], int]:
        async with self._store.lock:
            page, total = criteria.apply(self._active())
            return [clone(t) for t in page], total

    async def add(self, tip: Tip) -> None:
        async with self._store.lock:
            insert(self._store.tips, str(tip.id), tip, "tips.add")

    async def update(self, tip: Tip) -> None:
        async with self._store.lock:
            replace(self._store.tips, str(tip.id), tip, "tips.update")
