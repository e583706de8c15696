"""User and admin dashboard dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.caching import CacheInvalidationDispatcher
from app.application.use_cases.analytics import GetDashboardUseCase
from app.application.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUsersUseCase,
    UpdateUserNameUseCase,
)
from app.core.config import Settings

from ._composition import Backends
from .common import get_app_settings, get_backends, get_invalidation_dispatcher


async def get_create_user_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> CreateUserUseCase:
    return CreateUserUseCase(backends.user_repo, dispatcher)


async def get_update_user_name_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> UpdateUserNameUseCase:
    return UpdateUserNameUseCase(backends.user_repo, dispatcher)


async def get_delete_user_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    dispatcher: Annotated[CacheInvalidationDispatcher, Depends(get_invalidation_dispatcher)],
) -> DeleteUserUseCase:
    return DeleteUserUseCase(backends.user_repo, dispatcher)


async def get_users_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
) -> GetUsersUseCase:
    return GetUsersUseCase(backends.user_repo)


async def get_user_by_id_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
) -> GetUserByIdUseCase:
    return GetUserByIdUseCase(backends.user_repo)


async def get_user_by_email_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
) -> GetUserByEmailUseCase:
    return GetUserByEmailUseCase(backends.user_repo)


async def get_dashboard_use_case(
    backends: Annotated[Backends, Depends(get_backends)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> GetDashboardUseCase:
    return GetDashboardUseCase(
        backends.user_repo,
        backends.category_repo,
        backends.tip_repo,
        backends.cache,
        settings.cache_ttl_dashboard,
    )
