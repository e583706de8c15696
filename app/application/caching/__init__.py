"""Cache keys and invalidation rules shared by the read and write paths."""

from app.application.caching.invalidation import (
    INVALIDATION_MATRIX,
    CacheInvalidationDispatcher,
    resources_for,
)
from app.application.caching.keys import (
    CacheResource,
    CacheResourceKind,
    category_key,
    category_list_key,
    dashboard_key,
    key_for,
)
from app.application.caching.read_through import read_through

__all__ = [
    "INVALIDATION_MATRIX",
    "CacheInvalidationDispatcher",
    "CacheResource",
    "CacheResourceKind",
    "category_key",
    "category_list_key",
    "dashboard_key",
    "key_for",
    "read_through",
    "resources_for",
]
