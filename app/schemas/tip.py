"""Tip API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.application.dtos.tip import TipCommand, TipStepInput
from app.schemas.pagination import PaginationSchema


class TipStepSchema(BaseModel):
    """One numbered step of a tip."""

    model_config = ConfigDict(from_attributes=True)

    step_number: int
    description: str


class TipRequest(BaseModel):
    """Request body for creating or fully updating a tip.

    Lengths and counts are validated by the domain (400 on violation).
    """

    title: str
    description: str
    category_id: str
    steps: list[TipStepSchema] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    video_url: str | None = None

    def to_command(self) -> TipCommand:
        return TipCommand(
            title=self.title,
            description=self.description,
            category_id=self.category_id,
            steps=[TipStepInput(s.step_number, s.description) for s in self.steps],
            tags=list(self.tags),
            video_url=self.video_url,
        )


class TipResponse(BaseModel):
    """Tip with its category name."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    category_id: str
    category_name: str
    steps: list[TipStepSchema]
    tags: list[str]
    video_url: str | None = None
    created_at: datetime
    updated_at: datetime | None = None


class TipSummaryResponse(BaseModel):
    """Tip as listed in paged results (no steps)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    category_id: str
    category_name: str
    tags: list[str]
    video_url: str | None = None
    created_at: datetime


class PagedTipsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[TipSummaryResponse]
    pagination: PaginationSchema
