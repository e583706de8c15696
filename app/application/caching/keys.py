"""Cache key builders. Single place for key format (DRY).

Every cached read view is a CacheResource; key_for() is the only way to
turn one into a key string. The read path that populates the cache and the
invalidation service that evicts from it both go through this module, so
the two can never disagree on key identity.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum

from app.domain.value_objects.core import CategoryId

ADMIN_DASHBOARD_KEY = "AdminDashboard"
CATEGORY_LIST_KEY = "CategoryList"
CATEGORY_KEY_PREFIX = "Category_"


class CacheResourceKind(str, Enum):
    """Independently cacheable read views."""

    DASHBOARD = "dashboard"
    CATEGORY_LIST = "category_list"
    CATEGORY = "category"


@dataclass(frozen=True)
class CacheResource:
    """A concrete cached view: a global one, or one category's detail view.

    category_id is required for CATEGORY and must be None otherwise.
    """

    kind: CacheResourceKind
    category_id: CategoryId | None = None

    def __post_init__(self) -> None:
        if self.kind is CacheResourceKind.CATEGORY and self.category_id is None:
            raise ValueError("Category cache resource requires a category_id")
        if self.kind is not CacheResourceKind.CATEGORY and self.category_id is not None:
            raise ValueError(f"{self.kind.value} cache resource takes no category_id")

    @classmethod
    def dashboard(cls) -> CacheResource:
        return cls(CacheResourceKind.DASHBOARD)

    @classmethod
    def category_list(cls) -> CacheResource:
        return cls(CacheResourceKind.CATEGORY_LIST)

    @classmethod
    def category(cls, category_id: CategoryId | uuid.UUID | str) -> CacheResource:
        return cls(CacheResourceKind.CATEGORY, CategoryId.parse(category_id))


def dashboard_key() -> str:
    """Cache key for the admin dashboard statistics."""
    return ADMIN_DASHBOARD_KEY


def category_list_key() -> str:
    """Cache key for the list of all categories with tip counts."""
    return CATEGORY_LIST_KEY


def category_key(category_id: CategoryId | uuid.UUID | str) -> str:
    """Cache key for one category's detail view.

    The id is normalized to its canonical form (lowercase, hyphenated), so
    'ABC…', '{abc…}' and UUID('abc…') all map to the same key.

    Raises:
        ValueError: If category_id is not a valid identifier.
    """
    return f"{CATEGORY_KEY_PREFIX}{CategoryId.parse(category_id)}"


def key_for(resource: CacheResource) -> str:
    """Return the cache key of a cached read view."""
    if resource.kind is CacheResourceKind.DASHBOARD:
        return dashboard_key()
    if resource.kind is CacheResourceKind.CATEGORY_LIST:
        return category_list_key()
    return category_key(resource.category_id)
