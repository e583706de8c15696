"""Tip dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.caching import CacheInvalidationDispatcher
from app.application.use_cases.tips import (
    CreateTipUseCase,
    DeleteTipUseCase,
    GetTipByIdUseCase,
    GetTipsByCategoryUseCase,
    SearchTipsUseCase,
    UpdateTipUseCase,
)

from ._composition import Backends
from .common import get_backends, get_invalidation_dispatcher


async def get_tip_by_id_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
) -> GetTipByIdUseCase:
    return GetTipByIdUseCase(backends.tip_repo, backends.category_repo)


async def get_tips_by_category_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
) -> GetTipsByCategoryUseCase:
    return GetTipsByCategoryUseCase(backends.category_repo, backends.tip_repo)


async def get_search_tips_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
) -> SearchTipsUseCase:
    return SearchTipsUseCase(backends.tip_repo, backends.category_repo)


async def get_create_tip_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> CreateTipUseCase:
    return CreateTipUseCase(backends.tip_repo, backends.category_repo, dispatcher)


async def get_update_tip_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> UpdateTipUseCase:
    return UpdateTipUseCase(backends.tip_repo, backends.category_repo, dispatcher)


async def get_delete_tip_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> DeleteTipUseCase:
    return DeleteTipUseCase(backends.tip_repo, dispatcher)
