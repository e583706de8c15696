"""Public tip API: search and detail (uncached)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_search_tips_use_case, get_tip_by_id_use_case
from app.application.use_cases.tips import GetTipByIdUseCase, SearchTipsUseCase
from app.domain.enums import SortDirection, TipSortField
from app.schemas.tip import PagedTipsResponse, TipResponse

router = APIRouter()


@router.get("", response_model=PagedTipsResponse)
async def search_tips(
    use_case: Annotated[SearchTipsUseCase, Depends(get_search_tips_use_case)],
    q: str | None = None,
    category_id: str | None = None,
    tags: Annotated[list[str] | None, Query()] = None,
    order_by: TipSortField | None = None,
    sort_direction: SortDirection | None = None,
    page_number: int = 1,
    page_size: int = 10,
):
    """Search tips by text, category and tags (every tag must match)."""
    result = await use_case.execute(
        search_term=q,
        category_id=category_id,
        tags=tags,
        order_by=order_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )
    return PagedTipsResponse.model_validate(result)


@router.get("/{tip_id}", response_model=TipResponse)
async def get_tip(
    tip_id: str,
    use_case: Annotated[GetTipByIdUseCase, Depends(get_tip_by_id_use_case)],
):
    """Get one tip (404 if missing or deleted)."""
    result = await use_case.execute(tip_id)
    return TipResponse.model_validate(result)
