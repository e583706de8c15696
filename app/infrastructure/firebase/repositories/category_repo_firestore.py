"""Firestore-backed category repository (implements ICategoryRepository)."""

from __future__ import annotations

from app.domain.entities import Category
from app.domain.value_objects.core import CategoryId
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_CATEGORIES
from app.shared.utils.datetime import ensure_utc


def _to_entity(doc_id: str, data: dict) -> Category:
    return Category(
        id=CategoryId.parse(doc_id),
        name=data.get("name", ""),
        created_at=ensure_utc(data.get("created_at")),
        updated_at=ensure_utc(data.get("updated_at")),
        is_deleted=data.get("is_deleted", False),
        deleted_at=ensure_utc(data.get("deleted_at")),
    )


def _to_document(category: Category) -> dict:
    return {
        "name": category.name,
        "name_lower": category.name.lower(),
        "created_at": category.created_at,
        "updated_at": category.updated_at,
        "is_deleted": category.is_deleted,
        "deleted_at": category.deleted_at,
    }


class FirestoreCategoryRepository:
    """Category repository using Firestore; name_lower backs case-insensitive lookup."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_CATEGORIES)

    async def get_by_id(self, category_id: CategoryId) -> Category | None:
        doc = await self._coll.document(str(category_id)).get()
        if not doc:
            return None
        category = _to_entity(doc.id, doc.to_dict())
        return None if category.is_deleted else category

    async def get_by_name(
        self, name: str, include_deleted: bool = False
    ) -> Category | None:
        query = self._coll.where("name_lower", "==", name.strip().lower())
        if not include_deleted:
            query = query.where("is_deleted", "==", False)
        async for snapshot in query.limit(1).stream():
            return _to_entity(snapshot.id, snapshot.to_dict())
        return None

    async def get_all(self) -> list[Category]:
        query = self._coll.where("is_deleted", "==", False)
        categories = [_to_entity(s.id, s.to_dict()) async for s in query.stream()]
        return sorted(categories, key=lambda c: c.created_at)

    async def add(self, category: Category) -> None:
        await self._coll.create(str(category.id), _to_document(category))

    async def update(self, category: Category) -> None:
        await self._coll.document(str(category.id)).set(_to_document(category))
