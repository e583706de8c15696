"""Pydantic request/response schemas for the API."""

from app.schemas.category import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdateRequest,
)
from app.schemas.dashboard import DashboardResponse, EntityStatisticsResponse
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.pagination import PaginationSchema
from app.schemas.tip import (
    PagedTipsResponse,
    TipRequest,
    TipResponse,
    TipStepSchema,
    TipSummaryResponse,
)
from app.schemas.user import (
    PagedUsersResponse,
    UserCreateRequest,
    UserNameUpdateRequest,
    UserResponse,
)

__all__ = [
    "CategoryCreateRequest",
    "CategoryListResponse",
    "CategoryResponse",
    "CategoryUpdateRequest",
    "DashboardResponse",
    "EntityStatisticsResponse",
    "HealthResponse",
    "PagedTipsResponse",
    "PagedUsersResponse",
    "PaginationSchema",
    "ReadinessResponse",
    "TipRequest",
    "TipResponse",
    "TipStepSchema",
    "TipSummaryResponse",
    "UserCreateRequest",
    "UserNameUpdateRequest",
    "UserResponse",
]
