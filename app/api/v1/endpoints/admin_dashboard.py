"""Admin dashboard API (cached statistics)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_dashboard_use_case
from app.application.use_cases.analytics import GetDashboardUseCase
from app.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    use_case: Annotated[GetDashboardUseCase, Depends(get_dashboard_use_case)],
):
    """Return user, category, and tip counts (total, this month, last month)."""
    result = await use_case.execute()
    return DashboardResponse.model_validate(result)
