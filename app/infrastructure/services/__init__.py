"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.cache_invalidation_service import (
    CacheInvalidationService,
)

__all__ = [
    "CacheInvalidationService",
]
