"""Public category API: cached list and detail views, uncached tip listing."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import (
    get_categories_use_case,
    get_category_by_id_use_case,
    get_tips_by_category_use_case,
)
from app.application.use_cases.categories import (
    GetCategoriesUseCase,
    GetCategoryByIdUseCase,
)
from app.application.use_cases.tips import GetTipsByCategoryUseCase
from app.domain.enums import SortDirection, TipSortField
from app.schemas.category import CategoryListResponse, CategoryResponse
from app.schemas.tip import PagedTipsResponse

router = APIRouter()


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    use_case: Annotated[GetCategoriesUseCase, Depends(get_categories_use_case)],
):
    """List categories with their tip counts."""
    result = await use_case.execute()
    return CategoryListResponse.model_validate(result)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    use_case: Annotated[GetCategoryByIdUseCase, Depends(get_category_by_id_use_case)],
):
    """Get one category with its tip count (404 if missing or deleted)."""
    result = await use_case.execute(category_id)
    return CategoryResponse.model_validate(result)


@router.get("/{category_id}/tips", response_model=PagedTipsResponse)
async def list_category_tips(
    category_id: str,
    use_case: Annotated[GetTipsByCategoryUseCase, Depends(get_tips_by_category_use_case)],
    page_number: int | None = None,
    page_size: int | None = None,
    order_by: TipSortField | None = None,
    sort_direction: SortDirection | None = None,
):
    """Page through a category's tips (not cached)."""
    result = await use_case.execute(
        category_id,
        page_number=page_number,
        page_size=page_size,
        order_by=order_by,
        sort_direction=sort_direction,
    )
    return PagedTipsResponse.model_validate(result)
