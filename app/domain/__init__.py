"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import Category, Tip, User
from app.domain.enums import (
    EntityKind,
    MutationKind,
    SortDirection,
    TipSortField,
    UserSortField,
)
from app.domain.exceptions import (
    CacheInvalidationException,
    CacheStoreException,
    ConflictException,
    InfrastructureException,
    LifehackingException,
    PersistenceException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import CategoryId, TipId, UserId

__all__ = [
    # Entities
    "Category",
    "Tip",
    "User",
    # Enums
    "EntityKind",
    "MutationKind",
    "SortDirection",
    "TipSortField",
    "UserSortField",
    # Exceptions
    "CacheInvalidationException",
    "CacheStoreException",
    "ConflictException",
    "InfrastructureException",
    "LifehackingException",
    "PersistenceException",
    "ResourceNotFoundException",
    "ValidationException",
    # Value objects
    "CategoryId",
    "TipId",
    "UserId",
]
