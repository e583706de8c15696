"""Admin category API: thin routes delegating to category use cases.

A 500 with error CACHE_INVALIDATION_FAILED means the change was saved but
cached views may still be stale.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import (
    get_create_category_use_case,
    get_delete_category_use_case,
    get_update_category_use_case,
)
from app.application.use_cases.categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    UpdateCategoryUseCase,
)
from app.schemas.category import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    body: CategoryCreateRequest,
    use_case: Annotated[CreateCategoryUseCase, Depends(get_create_category_use_case)],
):
    """Create a category (409 if the name is taken)."""
    created = await use_case.execute(body.name)
    return CategoryResponse.model_validate(created)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    body: CategoryUpdateRequest,
    use_case: Annotated[UpdateCategoryUseCase, Depends(get_update_category_use_case)],
):
    """Rename a category."""
    updated = await use_case.execute(category_id, body.name)
    return CategoryResponse.model_validate(updated)


@router.delete("/{category_id}", status_code=204, response_class=Response)
async def delete_category(
    category_id: str,
    use_case: Annotated[DeleteCategoryUseCase, Depends(get_delete_category_use_case)],
) -> Response:
    """Soft-delete a category and its tips."""
    await use_case.execute(category_id)
    return Response(status_code=204)
