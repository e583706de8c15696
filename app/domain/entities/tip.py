"""Tip domain entity.

Represents a single tip (title, description, ordered steps) that belongs to
exactly one category, independent of persistence.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import (
    CategoryId,
    Tag,
    TipDescription,
    TipId,
    TipStep,
    TipTitle,
    VideoUrl,
)
from app.shared.utils.datetime import utc_now

MAX_TAGS = 10


def _validate_steps(steps: list[TipStep]) -> None:
    if not steps:
        raise ValidationException("Tip must have at least one step", field="steps")


def _validate_tags(tags: list[Tag]) -> None:
    if len(tags) > MAX_TAGS:
        raise ValidationException(
            f"Tip cannot have more than {MAX_TAGS} tags", field="tags"
        )


@dataclass
class Tip:
    """Domain entity for a tip.

    category_id is the only link between a tip and the category views that
    display its count; changing it moves the tip between two categories.
    """

    id: TipId
    title: TipTitle
    description: TipDescription
    steps: list[TipStep]
    category_id: CategoryId
    tags: list[Tag] = field(default_factory=list)
    video_url: VideoUrl | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        self.steps = list(self.steps)
        self.tags = list(self.tags)
        _validate_steps(self.steps)
        _validate_tags(self.tags)

    @classmethod
    def create(
        cls,
        title: TipTitle,
        description: TipDescription,
        steps: list[TipStep],
        category_id: CategoryId,
        tags: list[Tag] | None = None,
        video_url: VideoUrl | None = None,
    ) -> "Tip":
        """Return a new tip with a fresh id.

        Raises:
            ValidationException: If there are no steps or too many tags.
        """
        return cls(
            id=TipId.new(),
            title=title,
            description=description,
            steps=steps,
            category_id=category_id,
            tags=tags or [],
            video_url=video_url,
        )

    def update(
        self,
        title: TipTitle,
        description: TipDescription,
        steps: list[TipStep],
        category_id: CategoryId,
        tags: list[Tag],
        video_url: VideoUrl | None,
    ) -> None:
        """Replace all editable fields (full update).

        Raises:
            ValidationException: If there are no steps or too many tags.
        """
        steps = list(steps)
        tags = list(tags)
        _validate_steps(steps)
        _validate_tags(tags)
        self.title = title
        self.description = description
        self.steps = steps
        self.category_id = category_id
        self.tags = tags
        self.video_url = video_url
        self.updated_at = utc_now()

    def mark_deleted(self) -> None:
        """Soft-delete the tip. Idempotent."""
        if self.is_deleted:
            return
        self.is_deleted = True
        self.deleted_at = utc_now()
