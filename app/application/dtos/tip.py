"""DTOs for tip use cases (no dependency on persistence)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities import Tip


@dataclass(frozen=True)
class TipStepInput:
    """Raw step as received from the caller (validated by the use case)."""

    step_number: int
    description: str


@dataclass(frozen=True)
class TipCommand:
    """Input for creating or fully updating a tip."""

    title: str
    description: str
    category_id: str
    steps: list[TipStepInput]
    tags: list[str] = field(default_factory=list)
    video_url: str | None = None


@dataclass(frozen=True)
class TipStepResult:
    step_number: int
    description: str


@dataclass(frozen=True)
class TipResult:
    """Tip read-model (result of get_by_id, create, update)."""

    id: str
    title: str
    description: str
    category_id: str
    category_name: str
    steps: list[TipStepResult]
    tags: list[str]
    video_url: str | None
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, tip: Tip, category_name: str) -> TipResult:
        return cls(
            id=str(tip.id),
            title=tip.title.value,
            description=tip.description.value,
            category_id=str(tip.category_id),
            category_name=category_name,
            steps=[TipStepResult(s.step_number, s.description) for s in tip.steps],
            tags=[t.value for t in tip.tags],
            video_url=tip.video_url.value if tip.video_url else None,
            created_at=tip.created_at,
            updated_at=tip.updated_at,
        )


@dataclass(frozen=True)
class TipSummaryResult:
    """Tip as shown in paged listings (no steps)."""

    id: str
    title: str
    description: str
    category_id: str
    category_name: str
    tags: list[str]
    video_url: str | None
    created_at: datetime

    @classmethod
    def from_entity(cls, tip: Tip, category_name: str) -> TipSummaryResult:
        return cls(
            id=str(tip.id),
            title=tip.title.value,
            description=tip.description.value,
            category_id=str(tip.category_id),
            category_name=category_name,
            tags=[t.value for t in tip.tags],
            video_url=tip.video_url.value if tip.video_url else None,
            created_at=tip.created_at,
        )
