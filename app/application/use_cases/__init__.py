"""Application use cases: one entry point per workflow."""

from app.application.use_cases.analytics import GetDashboardUseCase
from app.application.use_cases.categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoriesUseCase,
    GetCategoryByIdUseCase,
    UpdateCategoryUseCase,
)
from app.application.use_cases.tips import (
    CreateTipUseCase,
    DeleteTipUseCase,
    GetTipByIdUseCase,
    GetTipsByCategoryUseCase,
    SearchTipsUseCase,
    UpdateTipUseCase,
)
from app.application.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUsersUseCase,
    UpdateUserNameUseCase,
)

__all__ = [
    "CreateCategoryUseCase",
    "CreateTipUseCase",
    "CreateUserUseCase",
    "DeleteCategoryUseCase",
    "DeleteTipUseCase",
    "DeleteUserUseCase",
    "GetCategoriesUseCase",
    "GetCategoryByIdUseCase",
    "GetDashboardUseCase",
    "GetTipByIdUseCase",
    "GetTipsByCategoryUseCase",
    "GetUserByEmailUseCase",
    "GetUserByIdUseCase",
    "GetUsersUseCase",
    "SearchTipsUseCase",
    "UpdateCategoryUseCase",
    "UpdateTipUseCase",
    "UpdateUserNameUseCase",
]
