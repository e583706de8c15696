"""Admin user API: thin routes delegating to user use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_update_user_name_use_case,
    get_user_by_email_use_case,
    get_user_by_id_use_case,
    get_users_use_case,
)
from app.application.use_cases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUsersUseCase,
    UpdateUserNameUseCase,
)
from app.domain.enums import SortDirection, UserSortField
from app.schemas.user import (
    PagedUsersResponse,
    UserCreateRequest,
    UserNameUpdateRequest,
    UserResponse,
)

router = APIRouter()


@router.get("", response_model=PagedUsersResponse)
async def list_users(
    use_case: Annotated[GetUsersUseCase, Depends(get_users_use_case)],
    search: str | None = None,
    order_by: UserSortField | None = None,
    sort_direction: SortDirection | None = None,
    page_number: int = 1,
    page_size: int = 20,
    is_deleted: bool | None = None,
):
    """List users; search matches id, email or name. Paging is clamped."""
    result = await use_case.execute(
        search=search,
        order_by=order_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
        is_deleted=is_deleted,
    )
    return PagedUsersResponse.model_validate(result)


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    use_case: Annotated[GetUserByEmailUseCase, Depends(get_user_by_email_use_case)],
):
    result = await use_case.execute(email)
    return UserResponse.model_validate(result)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    use_case: Annotated[GetUserByIdUseCase, Depends(get_user_by_id_use_case)],
):
    """Get one active user (404 if missing or deleted)."""
    result = await use_case.execute(user_id)
    return UserResponse.model_validate(result)


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    body: UserCreateRequest,
    use_case: Annotated[CreateUserUseCase, Depends(get_create_user_use_case)],
):
    """Register a user (409 if email or external auth id is taken)."""
    created = await use_case.execute(
        email=body.email,
        name=body.name,
        external_auth_id=body.external_auth_id,
        is_admin=body.is_admin,
    )
    return UserResponse.model_validate(created)


@router.put("/{user_id}/name", response_model=UserResponse)
async def update_user_name(
    user_id: str,
    body: UserNameUpdateRequest,
    use_case: Annotated[UpdateUserNameUseCase, Depends(get_update_user_name_use_case)],
):
    updated = await use_case.execute(user_id, body.name)
    return UserResponse.model_validate(updated)


@router.delete("/{user_id}", status_code=204, response_class=Response)
async def delete_user(
    user_id: str,
    use_case: Annotated[DeleteUserUseCase, Depends(get_delete_user_use_case)],
) -> Response:
    """Soft-delete a user."""
    await use_case.execute(user_id)
    return Response(status_code=204)
