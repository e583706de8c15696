"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.pagination import PaginationSchema


class UserCreateRequest(BaseModel):
    """Request body for registering a user."""

    email: str = Field(..., max_length=254)
    name: str
    external_auth_id: str
    is_admin: bool = False


class UserNameUpdateRequest(BaseModel):
    """Request body for PUT /admin/users/{id}/name."""

    name: str


class UserResponse(BaseModel):
    """User response (no external auth id)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    is_admin: bool
    created_at: datetime
    updated_at: datetime | None = None
    is_deleted: bool = False


class PagedUsersResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[UserResponse]
    pagination: PaginationSchema
