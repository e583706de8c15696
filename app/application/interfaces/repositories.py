"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Types reference domain entities, value objects and query criteria; no
infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.query import TipQueryCriteria, UserQueryCriteria
    from app.domain.entities import Category, Tip, User
    from app.domain.value_objects.core import (
        CategoryId,
        Email,
        ExternalAuthId,
        TipId,
        UserId,
    )


# Category repository interface
class ICategoryRepository(Protocol):
    """Protocol for category repository (DIP)."""

    async def get_by_id(self, category_id: CategoryId) -> Category | None:
        """Return category by ID; None when missing or soft-deleted."""

    async def get_by_name(
        self, name: str, include_deleted: bool = False
    ) -> Category | None:
        """Return category by name (case-insensitive, trimmed)."""

    async def get_all(self) -> list[Category]:
        """Return all non-deleted categories (oldest first)."""

    async def add(self, category: Category) -> None:
        """Persist a new category."""

    async def update(self, category: Category) -> None:
        """Persist changes to an existing category (including soft delete)."""


# Tip repository interface
class ITipRepository(Protocol):
    """Protocol for tip repository (DIP)."""

    async def get_by_id(self, tip_id: TipId) -> Tip | None:
        """Return tip by ID; None when missing or soft-deleted."""

    async def get_by_category(self, category_id: CategoryId) -> list[Tip]:
        """Return non-deleted tips of a category."""

    async def count_by_category(self, category_id: CategoryId) -> int:
        """Return the number of non-deleted tips of a category."""

    async def get_all(self) -> list[Tip]:
        """Return all non-deleted tips."""

    async def search(self, criteria: TipQueryCriteria) -> tuple[list[Tip], int]:
        """Return (page of non-deleted tips matching criteria, total matches)."""

    async def add(self, tip: Tip) -> None:
        """Persist a new tip."""

    async def update(self, tip: Tip) -> None:
        """Persist changes to an existing tip (including soft delete)."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Return user by ID; None when missing or soft-deleted."""

    async def get_by_email(self, email: Email) -> User | None:
        """Return non-deleted user by email."""

    async def get_by_external_auth_id(
        self, external_auth_id: ExternalAuthId
    ) -> User | None:
        """Return non-deleted user by identity-provider id."""

    async def get_all_active(self) -> list[User]:
        """Return all non-deleted users."""

    async def get_paged(self, criteria: UserQueryCriteria) -> tuple[list[User], int]:
        """Return (page of users matching criteria, total matches)."""

    async def add(self, user: User) -> None:
        """Persist a new user."""

    async def update(self, user: User) -> None:
        """Persist changes to an existing user."""

    async def delete(self, user_id: UserId) -> None:
        """Soft-delete a user."""
