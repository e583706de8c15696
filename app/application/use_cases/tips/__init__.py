"""Tip use cases: mutations and the uncached read views."""

from app.application.use_cases.tips.tip_operations import (
    CreateTipUseCase,
    DeleteTipUseCase,
    UpdateTipUseCase,
)
from app.application.use_cases.tips.tip_queries import (
    GetTipByIdUseCase,
    GetTipsByCategoryUseCase,
    SearchTipsUseCase,
)

__all__ = [
    "CreateTipUseCase",
    "DeleteTipUseCase",
    "GetTipByIdUseCase",
    "GetTipsByCategoryUseCase",
    "SearchTipsUseCase",
    "UpdateTipUseCase",
]
