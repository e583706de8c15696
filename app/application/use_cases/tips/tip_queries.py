"""Tip read views: detail, per-category listing, search (none are cached)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.query import PagedResult, PaginationMetadata, TipQueryCriteria
from app.application.dtos.tip import TipResult, TipSummaryResult
from app.application.use_cases._values import parse_value
from app.domain.enums import SortDirection, TipSortField
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects.core import CategoryId, TipId

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        ICategoryRepository,
        ITipRepository,
    )
    from app.domain.entities import Tip

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
UNKNOWN_CATEGORY = "Unknown Category"


def _check_paging(page_number: int, page_size: int) -> None:
    if page_number < 1:
        raise ValidationException(
            "Page number must be greater than or equal to 1", field="page_number"
        )
    if not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValidationException(
            f"Page size must be between 1 and {MAX_PAGE_SIZE}", field="page_size"
        )


async def _summaries(
    category_repo: "ICategoryRepository", tips: list["Tip"]
) -> list[TipSummaryResult]:
    names: dict[CategoryId, str] = {}
    for category_id in {t.category_id for t in tips}:
        category = await category_repo.get_by_id(category_id)
        if category is not None:
            names[category_id] = category.name
    return [
        TipSummaryResult.from_entity(t, names.get(t.category_id, UNKNOWN_CATEGORY))
        for t in tips
    ]


class GetTipByIdUseCase:
    """Return a non-deleted tip with its category name."""

    def __init__(
        self,
        tip_repo: "ITipRepository",
        category_repo: "ICategoryRepository",
    ) -> None:
        self.tip_repo = tip_repo
        self.category_repo = category_repo

    async def execute(self, tip_id: str) -> TipResult:
        tid = parse_value(TipId.parse, tip_id, field="id")
        tip = await self.tip_repo.get_by_id(tid)
        if tip is None:
            raise ResourceNotFoundException("tip", str(tid))
        category = await self.category_repo.get_by_id(tip.category_id)
        return TipResult.from_entity(tip, category.name if category else "")


class GetTipsByCategoryUseCase:
    """Page through the non-deleted tips of one category."""

    def __init__(
        self,
        category_repo: "ICategoryRepository",
        tip_repo: "ITipRepository",
    ) -> None:
        self.category_repo = category_repo
        self.tip_repo = tip_repo

    async def execute(
        self,
        category_id: str,
        page_number: int | None = None,
        page_size: int | None = None,
        order_by: TipSortField | None = None,
        sort_direction: SortDirection | None = None,
    ) -> PagedResult[TipSummaryResult]:
        """Return one page of the category's tips, newest first by default.

        Raises:
            ValidationException: If the id or paging parameters are invalid.
            ResourceNotFoundException: If the category is missing or deleted.
        """
        cid = parse_value(CategoryId.parse, category_id, field="id")
        category = await self.category_repo.get_by_id(cid)
        if category is None:
            raise ResourceNotFoundException("category", str(cid))

        page_number = 1 if page_number is None else page_number
        page_size = DEFAULT_PAGE_SIZE if page_size is None else page_size
        _check_paging(page_number, page_size)

        criteria = TipQueryCriteria(
            category_id=str(cid),
            sort_field=order_by or TipSortField.CREATED_AT,
            sort_direction=sort_direction or SortDirection.DESC,
            page_number=page_number,
            page_size=page_size,
        )
        tips, total = await self.tip_repo.search(criteria)
        return PagedResult(
            items=[TipSummaryResult.from_entity(t, category.name) for t in tips],
            pagination=PaginationMetadata.build(total, page_number, page_size),
        )


class SearchTipsUseCase:
    """Free-text, category and tag search over non-deleted tips.

    The term matches title, description, step text and tags, case-insensitively.
    Every requested tag must be present on a tip for it to match.
    """

    def __init__(
        self,
        tip_repo: "ITipRepository",
        category_repo: "ICategoryRepository",
    ) -> None:
        self.tip_repo = tip_repo
        self.category_repo = category_repo

    async def execute(
        self,
        search_term: str | None = None,
        category_id: str | None = None,
        tags: list[str] | None = None,
        order_by: TipSortField | None = None,
        sort_direction: SortDirection | None = None,
        page_number: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PagedResult[TipSummaryResult]:
        _check_paging(page_number, page_size)
        cid = (
            parse_value(CategoryId.parse, category_id, field="category_id")
            if category_id
            else None
        )
        criteria = TipQueryCriteria(
            search_term=search_term.strip() if search_term else None,
            category_id=str(cid) if cid else None,
            tags=tuple(t.strip() for t in tags or [] if t.strip()),
            sort_field=order_by or TipSortField.CREATED_AT,
            sort_direction=sort_direction or SortDirection.DESC,
            page_number=page_number,
            page_size=page_size,
        )
        tips, total = await self.tip_repo.search(criteria)
        return PagedResult(
            items=await _summaries(self.category_repo, tips),
            pagination=PaginationMetadata.build(total, page_number, page_size),
        )
