"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    admin_categories,
    admin_dashboard,
    admin_tips,
    admin_users,
    categories,
    health,
    tips,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(tips.router, prefix="/tips", tags=["tips"])
api_router.include_router(
    admin_categories.router, prefix="/admin/categories", tags=["admin-categories"]
)
api_router.include_router(admin_tips.router, prefix="/admin/tips", tags=["admin-tips"])
api_router.include_router(admin_users.router, prefix="/admin/users", tags=["admin-users"])
api_router.include_router(
    admin_dashboard.router, prefix="/admin/dashboard", tags=["admin-dashboard"]
)
