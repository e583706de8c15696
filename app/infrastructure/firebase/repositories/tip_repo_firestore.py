"""Firestore-backed tip repository (implements ITipRepository)."""

from __future__ import annotations

from app.application.dtos.query import TipQueryCriteria
from app.domain.entities import Tip
from app.domain.value_objects.core import (
    CategoryId,
    Tag,
    TipDescription,
    TipId,
    TipStep,
    TipTitle,
    VideoUrl,
)
from app.infrastructure.firebase._rest_client import FirestoreRESTClient
from app.infrastructure.firebase.collections import COLLECTION_TIPS
from app.shared.utils.datetime import ensure_utc


def _to_entity(doc_id: str, data: dict) -> Tip:
    video_url = data.get("video_url")
    return Tip(
        id=TipId.parse(doc_id),
        title=TipTitle(data.get("title", "")),
        description=TipDescription(data.get("description", "")),
        steps=[
            TipStep(s["step_number"], s["description"]) for s in data.get("steps") or []
        ],
        category_id=CategoryId.parse(data["category_id"]),
        tags=[Tag(t) for t in data.get("tags") or []],
        video_url=VideoUrl(video_url) if video_url else None,
        created_at=ensure_utc(data.get("created_at")),
        updated_at=ensure_utc(data.get("updated_at")),
        is_deleted=data.get("is_deleted", False),
        deleted_at=ensure_utc(data.get("deleted_at")),
    )


def _to_document(tip: Tip) -> dict:
    return {
        "title": tip.title.value,
        "description": tip.description.value,
        "steps": [
            {"step_number": s.step_number, "description": s.description}
            for s in tip.steps
        ],
        "category_id": str(tip.category_id),
        "tags": [t.value for t in tip.tags],
        "video_url": tip.video_url.value if tip.video_url else None,
        "created_at": tip.created_at,
        "updated_at": tip.updated_at,
        "is_deleted": tip.is_deleted,
        "deleted_at": tip.deleted_at,
    }


class FirestoreTipRepository:
    """Tip repository using Firestore."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_TIPS)

    async def get_by_id(self, tip_id: TipId) -> Tip | None:
        doc = await self._coll.document(str(tip_id)).get()
        if not doc:
            return None
        tip = _to_entity(doc.id, doc.to_dict())
        return None if tip.is_deleted else tip

    async def get_by_category(self, category_id: CategoryId) -> list[Tip]:
        query = self._coll.where("category_id", "==", str(category_id)).where(
            "is_deleted", "==", False
        )
        return [_to_entity(s.id, s.to_dict()) async for s in query.stream()]

    async def count_by_category(self, category_id: CategoryId) -> int:
        return len(await self.get_by_category(category_id))

    async def get_all(self) -> list[Tip]:
        query = self._coll.where("is_deleted", "==", False)
        return [_to_entity(s.id, s.to_dict()) async for s in query.stream()]

    async def search(self, criteria: TipQueryCriteria) -> tuple[list[Tip], int]:
        """Fetch candidates server-side (category, is_deleted); filter and page locally."""
        if criteria.category_id is not None:
            candidates = await self.get_by_category(CategoryId.parse(criteria.category_id))
        else:
            candidates = await self.get_all()
        return criteria.apply(candidates)

    async def add(self, tip: Tip) -> None:
        await self._coll.create(str(tip.id), _to_document(tip))

    async def update(self, tip: Tip) -> None:
        await self._coll.document(str(tip.id)).set(_to_document(tip))
