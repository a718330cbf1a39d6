"""
Dashboard Routes

GET /admin/dashboard - Platform counts, charts, recent activity (admin only)
GET /admin/analytics - Counts for a time window (admin, manager)

Anything under an ``estimated`` key is a placeholder, flagged with
``is_estimate: true``.
"""

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import STAFF, require_roles
from nexus_admin.services.dashboard_service import DashboardService

router = APIRouter(prefix="/admin", tags=["Dashboard"])


@router.get("/dashboard")
async def dashboard(user: dict = Depends(require_roles("admin"))):
    return ok(DashboardService().dashboard())


@router.get("/analytics")
async def analytics(
    time_range: str = Query("7d", description="24h, 7d, 30d or 90d"),
    user: dict = Depends(require_roles(*STAFF))
):
    return ok(DashboardService().analytics(time_range))
