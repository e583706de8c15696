"""Shared dependencies: app-scoped settings, backends, invalidation dispatcher."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.caching import CacheInvalidationDispatcher
from app.application.interfaces import ICacheStore
from app.core.config import Settings
from app.infrastructure.services import CacheInvalidationService

from ._composition import Backends


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_backends(request: Request) -> Backends:
    return request.app.state.backends


def get_cache_store(
    backends: Annotated[Backends, Depends(get_backends)],
) -> ICacheStore:
    return backends.cache


def get_invalidation_dispatcher(
    cache: Annotated[ICacheStore, Depends(get_cache_store)],
) -> CacheInvalidationDispatcher:
    """Dispatcher evicting from the app's cache store after each mutation."""
    return CacheInvalidationDispatcher(CacheInvalidationService(cache))
