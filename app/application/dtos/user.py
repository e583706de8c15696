"""DTOs for user use cases (no dependency on persistence)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.entities import User


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of create, rename, lookups and listings)."""

    id: str
    email: str
    name: str
    is_admin: bool
    created_at: datetime
    updated_at: datetime | None = None
    is_deleted: bool = False

    @classmethod
    def from_entity(cls, user: User) -> UserResult:
        return cls(
            id=str(user.id),
            email=user.email.value,
            name=user.name.value,
            is_admin=user.is_admin,
            created_at=user.created_at,
            updated_at=user.updated_at,
            is_deleted=user.is_deleted,
        )
