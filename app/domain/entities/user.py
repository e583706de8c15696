"""User domain entity.

Represents an account known to the backend, independent of persistence.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.value_objects.core import Email, ExternalAuthId, UserId, UserName
from app.shared.utils.datetime import utc_now


@dataclass
class User:
    """Domain entity for a user (soft-deleted, counted by the admin dashboard)."""

    id: UserId
    email: Email
    name: UserName
    external_auth_id: ExternalAuthId
    is_admin: bool = False
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None

    @classmethod
    def create(
        cls,
        email: Email,
        name: UserName,
        external_auth_id: ExternalAuthId,
        is_admin: bool = False,
    ) -> "User":
        """Return a new user with a fresh id."""
        return cls(
            id=UserId.new(),
            email=email,
            name=name,
            external_auth_id=external_auth_id,
            is_admin=is_admin,
        )

    def rename(self, name: UserName) -> None:
        self.name = name
        self.updated_at = utc_now()

    def mark_deleted(self) -> None:
        """Soft-delete the user. Idempotent."""
        if self.is_deleted:
            return
        self.is_deleted = True
        self.deleted_at = utc_now()
