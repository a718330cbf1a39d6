"""
User Routes (admin users table)

GET /users - List users (?summary=true for counts)
GET /users/{user_id} - Get user
POST /users - Create user
PUT /users/{user_id} - Update user
PATCH /users/{user_id} - Update a single field (active, role, name, email)

Admin accounts and the admin role are managed by admins only.
DELETE /users/{user_id} - Delete user (admin, manager)
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import HIRING, STAFF, require_roles
from nexus_admin.schemas.schemas import UserCreate, UserFieldPatch, UserUpdate
from nexus_admin.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("")
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in name and email"),
    role: Optional[str] = Query(None),
    active: Optional[bool] = Query(None),
    summary: bool = Query(False, description="Return aggregate counts only"),
    user: dict = Depends(require_roles(*HIRING))
):
    service = UserService()
    if summary:
        if user["role"] not in STAFF:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return ok(service.user_summary())

    filters = {}
    if role:
        filters["role"] = role
    if active is True:
        filters["active"] = {"$ne": False}
    elif active is False:
        filters["active"] = False
    return ok(service.list(search=search, filters=filters, page=page, limit=limit))


@router.get("/{user_id}")
async def get_user(user_id: str, user: dict = Depends(require_roles(*HIRING))):
    return ok(UserService().get(user_id))


@router.post("", status_code=201)
async def create_user(data: UserCreate, user: dict = Depends(require_roles(*HIRING))):
    service = UserService()
    created = service.create(
        data.name, data.email, data.password, role=data.role, active=data.active, actor=user
    )
    return ok(service.to_response(created), message="User created successfully")


@router.put("/{user_id}")
async def update_user(user_id: str, data: UserUpdate, user: dict = Depends(require_roles(*HIRING))):
    service = UserService()
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    updated = service.update_user(user_id, changes, actor=user)
    return ok(service.to_response(updated), message="User updated successfully")


@router.patch("/{user_id}")
async def patch_user(user_id: str, data: UserFieldPatch, user: dict = Depends(require_roles(*HIRING))):
    service = UserService()
    updated = service.patch_field(user_id, data.field, data.value, actor=user)
    return ok(service.to_response(updated), message=f"User {data.field} updated")


@router.delete("/{user_id}")
async def delete_user(user_id: str, user: dict = Depends(require_roles(*STAFF))):
    UserService().delete_user(user_id, actor=user)
    return ok(message="User deleted successfully")
