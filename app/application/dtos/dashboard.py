"""DTOs for the admin dashboard (cached; JSON-safe via to_cache/from_cache)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class EntityStatistics:
    """Counts for one entity kind: all time, current month, previous month."""

    total: int
    this_month: int
    last_month: int


@dataclass(frozen=True)
class DashboardResult:
    """Aggregated counts of users, categories, and tips."""

    users: EntityStatistics
    categories: EntityStatistics
    tips: EntityStatistics

    def to_cache(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> DashboardResult:
        return cls(
            users=EntityStatistics(**data["users"]),
            categories=EntityStatistics(**data["categories"]),
            tips=EntityStatistics(**data["tips"]),
        )
