"""User operations: create, rename, soft delete.

Every user mutation evicts the admin dashboard, renames included.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.user import UserResult
from app.application.use_cases._values import parse_value
from app.domain.entities import User
from app.domain.enums import EntityKind, MutationKind
from app.domain.exceptions import ConflictException, ResourceNotFoundException
from app.domain.value_objects.core import Email, ExternalAuthId, UserId, UserName

if TYPE_CHECKING:
    from app.application.caching.invalidation import CacheInvalidationDispatcher
    from app.application.interfaces.repositories import IUserRepository

logger = logging.getLogger(__name__)


async def _load_user(user_repo: "IUserRepository", user_id: str) -> User:
    uid = parse_value(UserId.parse, user_id, field="id")
    user = await user_repo.get_by_id(uid)
    if user is None:
        raise ResourceNotFoundException("user", str(uid))
    return user


class CreateUserUseCase:
    """Register a user; email and external auth id must be unique."""

    def __init__(
        self,
        user_repo: "IUserRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.user_repo = user_repo
        self.dispatcher = dispatcher

    async def execute(
        self,
        email: str,
        name: str,
        external_auth_id: str,
        is_admin: bool = False,
    ) -> UserResult:
        """Create the user and evict the dashboard.

        Raises:
            ValidationException: If email, name or external id is invalid.
            ConflictException: If email or external id is already registered.
        """
        user_email = parse_value(Email, email, field="email")
        user_name = parse_value(UserName, name, field="name")
        auth_id = parse_value(ExternalAuthId, external_auth_id, field="external_auth_id")

        if await self.user_repo.get_by_email(user_email) is not None:
            raise ConflictException(
                f"User with email '{user_email.value}' already exists", field="email"
            )
        if await self.user_repo.get_by_external_auth_id(auth_id) is not None:
            raise ConflictException(
                "User with this external auth id already exists", field="external_auth_id"
            )

        user = User.create(
            email=user_email, name=user_name, external_auth_id=auth_id, is_admin=is_admin
        )
        await self.user_repo.add(user)
        logger.info("Created user %s", user.id)
        await self.dispatcher.dispatch(EntityKind.USER, MutationKind.CREATED)
        return UserResult.from_entity(user)


class UpdateUserNameUseCase:
    """Change a user's display name."""

    def __init__(
        self,
        user_repo: "IUserRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.user_repo = user_repo
        self.dispatcher = dispatcher

    async def execute(self, user_id: str, name: str) -> UserResult:
        """Rename the user and evict the dashboard.

        Raises:
            ValidationException: If the id or name is invalid.
            ResourceNotFoundException: If the user is missing or deleted.
        """
        user_name = parse_value(UserName, name, field="name")
        user = await _load_user(self.user_repo, user_id)
        user.rename(user_name)
        await self.user_repo.update(user)
        await self.dispatcher.dispatch(EntityKind.USER, MutationKind.UPDATED)
        return UserResult.from_entity(user)


class DeleteUserUseCase:
    """Soft-delete a user."""

    def __init__(
        self,
        user_repo: "IUserRepository",
        dispatcher: "CacheInvalidationDispatcher",
    ) -> None:
        self.user_repo = user_repo
        self.dispatcher = dispatcher

    async def execute(self, user_id: str) -> None:
        user = await _load_user(self.user_repo, user_id)
        await self.user_repo.delete(user.id)
        logger.info("Deleted user %s", user.id)
        await self.dispatcher.dispatch(EntityKind.USER, MutationKind.DELETED)
