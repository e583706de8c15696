"""Admin tip API: thin routes delegating to tip use cases."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import (
    get_create_tip_use_case,
    get_delete_tip_use_case,
    get_update_tip_use_case,
)
from app.application.use_cases.tips import (
    CreateTipUseCase,
    DeleteTipUseCase,
    UpdateTipUseCase,
)
from app.schemas.tip import TipRequest, TipResponse

router = APIRouter()


@router.post("", response_model=TipResponse, status_code=201)
async def create_tip(
    body: TipRequest,
    use_case: Annotated[CreateTipUseCase, Depends(get_create_tip_use_case)],
):
    """Create a tip in an existing category."""
    created = await use_case.execute(body.to_command())
    return TipResponse.model_validate(created)


@router.put("/{tip_id}", response_model=TipResponse)
async def update_tip(
    tip_id: str,
    body: TipRequest,
    use_case: Annotated[UpdateTipUseCase, Depends(get_update_tip_use_case)],
):
    """Replace a tip (full update; may move it to another category)."""
    updated = await use_case.execute(tip_id, body.to_command())
    return TipResponse.model_validate(updated)


@router.delete("/{tip_id}", status_code=204, response_class=Response)
async def delete_tip(
    tip_id: str,
    use_case: Annotated[DeleteTipUseCase, Depends(get_delete_tip_use_case)],
) -> Response:
    await use_case.execute(tip_id)
    return Response(status_code=204)
