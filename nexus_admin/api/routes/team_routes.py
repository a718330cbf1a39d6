"""
Team Routes

GET /team - List team members (display order)
GET /team/departments - Distinct departments
GET /team/{member_id} - Get team member
POST /team - Create team member (admin only)
PUT /team/{member_id} - Update team member (admin only)
DELETE /team/{member_id} - Delete team member (admin only)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import require_roles
from nexus_admin.schemas.schemas import TeamMemberCreate, TeamMemberUpdate
from nexus_admin.services.team_service import TeamService

router = APIRouter(prefix="/team", tags=["Team"])

admin_only = require_roles("admin")


@router.get("")
async def list_members(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    search: Optional[str] = Query(None),
    status: Optional[str] = Query("active", description="'all' for every status"),
    featured: Optional[bool] = Query(None),
    department: Optional[str] = Query(None)
):
    return ok(TeamService().list_members(page, limit, search, status, featured, department))


@router.get("/departments")
async def list_departments():
    return ok(TeamService().departments())


@router.get("/{member_id}")
async def get_member(member_id: str):
    return ok(TeamService().get(member_id))


@router.post("", status_code=201)
async def create_member(data: TeamMemberCreate, user: dict = Depends(admin_only)):
    member = TeamService().create(data.model_dump(), created_by=user["id"])
    return ok(member, message="Team member created successfully")


@router.put("/{member_id}")
async def update_member(member_id: str, data: TeamMemberUpdate, user: dict = Depends(admin_only)):
    service = TeamService()
    updated = service.update(member_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return ok(service.to_response(updated), message="Team member updated successfully")


@router.delete("/{member_id}")
async def delete_member(member_id: str, user: dict = Depends(admin_only)):
    TeamService().delete(member_id)
    return ok(message="Team member deleted successfully")
