"""Domain enumerations for the Lifehacking application.

Entity and mutation kinds together identify a row of the cache invalidation
matrix. Sort enums describe the orderings offered by paged listings.
"""

from enum import Enum


class EntityKind(str, Enum):
    """Entity kinds managed through the admin API."""

    CATEGORY = "category"
    TIP = "tip"
    USER = "user"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid entity kinds as strings."""
        return [kind.value for kind in cls]


class MutationKind(str, Enum):
    """Kinds of persisted entity change."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid mutation kinds as strings."""
        return [kind.value for kind in cls]


class SortDirection(str, Enum):
    """Ordering of paged listings."""

    ASC = "asc"
    DESC = "desc"


class TipSortField(str, Enum):
    """Fields tips can be ordered by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TITLE = "title"


class UserSortField(str, Enum):
    """Fields users can be ordered by."""

    CREATED_AT = "created_at"
    EMAIL = "email"
    NAME = "name"
