"""Application DTOs (no persistence dependency)."""

from app.application.dtos.category import CategoryListResult, CategoryResult
from app.application.dtos.dashboard import DashboardResult, EntityStatistics
from app.application.dtos.query import (
    PagedResult,
    PaginationMetadata,
    TipQueryCriteria,
    UserQueryCriteria,
)
from app.application.dtos.tip import (
    TipCommand,
    TipResult,
    TipStepInput,
    TipStepResult,
    TipSummaryResult,
)
from app.application.dtos.user import UserResult

__all__ = [
    "CategoryListResult",
    "CategoryResult",
    "DashboardResult",
    "EntityStatistics",
    "PagedResult",
    "PaginationMetadata",
    "TipCommand",
    "TipQueryCriteria",
    "TipResult",
    "TipStepInput",
    "TipStepResult",
    "TipSummaryResult",
    "UserQueryCriteria",
    "UserResult",
]
