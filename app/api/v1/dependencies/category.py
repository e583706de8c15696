"""Category dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.caching import CacheInvalidationDispatcher
from app.application.use_cases.categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoriesUseCase,
    GetCategoryByIdUseCase,
    UpdateCategoryUseCase,
)
from app.core.config import Settings

from ._composition import Backends
from .common import get_app_settings, get_backends, get_invalidation_dispatcher


async def get_categories_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> GetCategoriesUseCase:
    return GetCategoriesUseCase(
        backends.category_repo,
        backends.tip_repo,
        backends.cache,
        settings.cache_ttl_category_list,
    )


async def get_category_by_id_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> GetCategoryByIdUseCase:
    return GetCategoryByIdUseCase(
        backends.category_repo,
        backends.tip_repo,
        backends.cache,
        settings.cache_ttl_category,
    )


async def get_create_category_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> CreateCategoryUseCase:
    return CreateCategoryUseCase(backends.category_repo, dispatcher)


async def get_update_category_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> UpdateCategoryUseCase:
    return UpdateCategoryUseCase(backends.category_repo, backends.tip_repo, dispatcher)


async def get_delete_category_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> DeleteCategoryUseCase:
    """Delete cascades to the category's tips."""
    return DeleteCategoryUseCase(backends.category_repo, backends.tip_repo, dispatcher)
