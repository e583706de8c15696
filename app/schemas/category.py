"""Category API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreateRequest(BaseModel):
    """Request body for creating a category (length enforced by the domain)."""

    name: str = Field(..., max_length=500)


class CategoryUpdateRequest(BaseModel):
    """Request body for renaming a category."""

    name: str = Field(..., max_length=500)


class CategoryResponse(BaseModel):
    """Category with the number of non-deleted tips."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    tip_count: int
    created_at: datetime
    updated_at: datetime | None = None


class CategoryListResponse(BaseModel):
    """Response for GET /categories."""

    model_config = ConfigDict(from_attributes=True)

    items: list[CategoryResponse]
