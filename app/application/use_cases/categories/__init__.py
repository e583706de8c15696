"""Category use cases: mutations and cached read views."""

from app.application.use_cases.categories.category_operations import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    UpdateCategoryUseCase,
)
from app.application.use_cases.categories.category_queries import (
    GetCategoriesUseCase,
    GetCategoryByIdUseCase,
)

__all__ = [
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoriesUseCase",
    "GetCategoryByIdUseCase",
    "UpdateCategoryUseCase",
]
