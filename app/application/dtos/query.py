"""Query criteria and paged results for the uncached listings.

Criteria are plain values built by the query use cases. Repositories fetch
candidate entities and call apply(), so filtering, ordering and paging behave
the same on every persistence backend.
"""

from __future__ import annotations

import math
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from app.domain.entities import Tip, User
from app.domain.enums import SortDirection, TipSortField, UserSortField

T = TypeVar("T")


def _page(items: list[T], page_number: int, page_size: int) -> list[T]:
    start = (page_number - 1) * page_size
    return items[start : start + page_size]


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.casefold()


@dataclass(frozen=True)
class TipQueryCriteria:
    """Filter, order and page for non-deleted tips."""

    search_term: str | None = None
    category_id: str | None = None
    tags: tuple[str, ...] = ()
    sort_field: TipSortField = TipSortField.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC
    page_number: int = 1
    page_size: int = 10

    def matches(self, tip: Tip) -> bool:
        if tip.is_deleted:
            return False
        if self.category_id is not None and str(tip.category_id) != self.category_id:
            return False
        if self.search_term:
            term = self.search_term.strip().casefold()
            if not (
                _contains(tip.title.value, term)
                or _contains(tip.description.value, term)
                or any(_contains(s.description, term) for s in tip.steps)
                or any(_contains(t.value, term) for t in tip.tags)
            ):
                return False
        if self.tags:
            own = {t.value.casefold() for t in tip.tags}
            if not all(tag.casefold() in own for tag in self.tags):
                return False
        return True

    def _sort_key(self, tip: Tip) -> tuple:
        if self.sort_field is TipSortField.TITLE:
            return (tip.title.value, str(tip.id))
        if self.sort_field is TipSortField.UPDATED_AT:
            return (tip.updated_at or tip.created_at, str(tip.id))
        return (tip.created_at, str(tip.id))

    def apply(self, tips: Sequence[Tip]) -> tuple[list[Tip], int]:
        """Return (page of matching tips, total number of matches)."""
        matched = sorted(
            (t for t in tips if self.matches(t)),
            key=self._sort_key,
            reverse=self.sort_direction is SortDirection.DESC,
        )
        return _page(matched, self.page_number, self.page_size), len(matched)


@dataclass(frozen=True)
class UserQueryCriteria:
    """Filter, order and page for users, soft-deleted ones included unless filtered."""

    search_term: str | None = None
    sort_field: UserSortField = UserSortField.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC
    page_number: int = 1
    page_size: int = 20
    is_deleted: bool | None = None

    def matches(self, user: User) -> bool:
        if self.is_deleted is not None and user.is_deleted != self.is_deleted:
            return False
        if self.search_term and self.search_term.strip():
            term = self.search_term.strip()
            try:
                by_id = uuid.UUID(term) == user.id.value
            except ValueError:
                by_id = False
            folded = term.casefold()
            if not (
                by_id
                or _contains(user.email.value, folded)
                or _contains(user.name.value, folded)
            ):
                return False
        return True

    def _sort_key(self, user: User) -> tuple:
        if self.sort_field is UserSortField.EMAIL:
            return (user.email.value, str(user.id))
        if self.sort_field is UserSortField.NAME:
            return (user.name.value, str(user.id))
        return (user.created_at, str(user.id))

    def apply(self, users: Sequence[User]) -> tuple[list[User], int]:
        """Return (page of matching users, total number of matches)."""
        matched = sorted(
            (u for u in users if self.matches(u)),
            key=self._sort_key,
            reverse=self.sort_direction is SortDirection.DESC,
        )
        return _page(matched, self.page_number, self.page_size), len(matched)


@dataclass(frozen=True)
class PaginationMetadata:
    total_items: int
    page_number: int
    page_size: int
    total_pages: int

    @classmethod
    def build(cls, total_items: int, page_number: int, page_size: int) -> PaginationMetadata:
        return cls(
            total_items=total_items,
            page_number=page_number,
            page_size=page_size,
            total_pages=math.ceil(total_items / page_size),
        )


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of a listing plus its pagination metadata."""

    items: list[T]
    pagination: PaginationMetadata
