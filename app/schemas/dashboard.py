"""Admin dashboard API schemas."""

from pydantic import BaseModel, ConfigDict


class EntityStatisticsResponse(BaseModel):
    """Counts for one entity kind (UTC calendar months)."""

    model_config = ConfigDict(from_attributes=True)

    total: int
    this_month: int
    last_month: int


class DashboardResponse(BaseModel):
    """Response for GET /admin/dashboard."""

    model_config = ConfigDict(from_attributes=True)

    users: EntityStatisticsResponse
    categories: EntityStatisticsResponse
    tips: EntityStatisticsResponse
