"""DTOs for category use cases (no dependency on persistence).

Category views are cached, so the read models convert to and from a
JSON-safe dict (to_cache / from_cache) usable by any cache backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.domain.entities import Category


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _from_iso(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


@dataclass(frozen=True)
class CategoryResult:
    """Category read-model with the number of non-deleted tips."""

    id: str
    name: str
    tip_count: int
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, category: Category, tip_count: int = 0) -> CategoryResult:
        return cls(
            id=str(category.id),
            name=category.name,
            tip_count=tip_count,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    def to_cache(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "tip_count": self.tip_count,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> CategoryResult:
        return cls(
            id=data["id"],
            name=data["name"],
            tip_count=int(data["tip_count"]),
            created_at=_from_iso(data["created_at"]),
            updated_at=_from_iso(data.get("updated_at")),
        )


@dataclass(frozen=True)
class CategoryListResult:
    """All non-deleted categories, each with its tip count."""

    items: list[CategoryResult]

    def to_cache(self) -> dict[str, Any]:
        return {"items": [item.to_cache() for item in self.items]}

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> CategoryListResult:
        return cls(items=[CategoryResult.from_cache(item) for item in data["items"]])
