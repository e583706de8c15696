"""Admin user lookups and paged listing (not cached)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.query import PagedResult, PaginationMetadata, UserQueryCriteria
from app.application.dtos.user import UserResult
from app.application.use_cases._values import parse_value
from app.domain.enums import SortDirection, UserSortField
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.core import Email, UserId

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IUserRepository

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class GetUsersUseCase:
    """Page through users, with search over id, email and name.

    Out-of-range paging is clamped rather than rejected: page numbers below 1
    become 1, page sizes are kept within 1..100.
    """

    def __init__(self, user_repo: "IUserRepository") -> None:
        self.user_repo = user_repo

    async def execute(
        self,
        search: str | None = None,
        order_by: UserSortField | None = None,
        sort_direction: SortDirection | None = None,
        page_number: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        is_deleted: bool | None = None,
    ) -> PagedResult[UserResult]:
        page_number = max(page_number, 1)
        page_size = min(max(page_size, 1), MAX_PAGE_SIZE)
        criteria = UserQueryCriteria(
            search_term=search.strip() if search and search.strip() else None,
            sort_field=order_by or UserSortField.CREATED_AT,
            sort_direction=sort_direction or SortDirection.DESC,
            page_number=page_number,
            page_size=page_size,
            is_deleted=is_deleted,
        )
        users, total = await self.user_repo.get_paged(criteria)
        return PagedResult(
            items=[UserResult.from_entity(u) for u in users],
            pagination=PaginationMetadata.build(total, page_number, page_size),
        )


class GetUserByIdUseCase:
    def __init__(self, user_repo: "IUserRepository") -> None:
        self.user_repo = user_repo

    async def execute(self, user_id: str) -> UserResult:
        uid = parse_value(UserId.parse, user_id, field="id")
        user = await self.user_repo.get_by_id(uid)
        if user is None:
            raise ResourceNotFoundException("user", str(uid))
        return UserResult.from_entity(user)


class GetUserByEmailUseCase:
    def __init__(self, user_repo: "IUserRepository") -> None:
        self.user_repo = user_repo

    async def execute(self, email: str) -> UserResult:
        """Return the non-deleted user registered under email.

        Raises:
            ValidationException: If email is malformed.
            ResourceNotFoundException: If no active user has that email.
        """
        user_email = parse_value(Email, email, field="email")
        user = await self.user_repo.get_by_email(user_email)
        if user is None:
            raise ResourceNotFoundException("user", user_email.value)
        return UserResult.from_entity(user)
