"""Health check endpoints, used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_app_settings, get_cache_store
from app.application.interfaces import ICacheStore
from app.core.config import Settings
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Cache store unavailable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
    cache: Annotated[ICacheStore, Depends(get_cache_store)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 if ready; 503 if the cache store is unavailable.

    Mutations cannot evict stale entries without the cache store, so the
    service is not ready while it is down.
    """
    if cache.is_available():
        return ReadinessResponse(
            cache_backend=settings.cache_backend,
            database_backend=settings.database_backend,
        )
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(
            message=f"{settings.cache_backend} cache store unavailable",
        ).model_dump(),
    )
