"""
Enrollment Routes

GET /training/enrollment - List enrollments (admin, manager; ?summary=true for counts)
GET /training/enrollment/mine - Current user's enrollments
GET /training/enrollment/{enrollment_id} - Get enrollment (owner, admin, manager)
POST /training/enrollment - Enroll the current user in a training
PUT /training/enrollment/{enrollment_id} - Update enrollment (admin, manager)
PATCH /training/enrollment/{enrollment_id}/progress - Record module progress (admin, manager)
DELETE /training/enrollment/{enrollment_id} - Remove enrollment (admin, manager)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import STAFF, get_current_user, require_roles
from nexus_admin.schemas.schemas import EnrollmentCreate, EnrollmentUpdate, ProgressUpdate
from nexus_admin.services.base import to_object_id
from nexus_admin.services.enrollment_service import EnrollmentService

router = APIRouter(prefix="/training/enrollment", tags=["Enrollments"])


@router.get("")
async def list_enrollments(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in user name and email"),
    status: Optional[str] = Query(None),
    training_id: Optional[str] = Query(None),
    summary: bool = Query(False, description="Return aggregate counts only"),
    user: dict = Depends(require_roles(*STAFF))
):
    service = EnrollmentService()
    if summary:
        return ok(service.summary(extra={
            "active": {"status": {"$in": ["confirmed", "in-progress"]}},
            "completed": {"status": "completed"},
        }))
    return ok(service.list_enrollments(page, limit, search, status, training_id))


@router.get("/mine")
async def my_enrollments(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    user: dict = Depends(get_current_user)
):
    service = EnrollmentService()
    return ok(service.paginate({"user": to_object_id(user["id"], "user id")}, page, limit))


@router.get("/{enrollment_id}")
async def get_enrollment(enrollment_id: str, user: dict = Depends(get_current_user)):
    return ok(EnrollmentService().get_for(enrollment_id, user))


@router.post("", status_code=201)
async def create_enrollment(data: EnrollmentCreate, user: dict = Depends(get_current_user)):
    """
    Enroll the current user.

    - 404 when the training does not exist
    - 400 when it is inactive or full
    - 409 when already enrolled
    """
    enrollment = EnrollmentService().enroll(
        user["id"],
        data.training_id,
        notes=data.notes,
        payment_info=data.payment_info.model_dump() if data.payment_info else None,
    )
    return ok(enrollment, message="Enrolled successfully")


@router.put("/{enrollment_id}")
async def update_enrollment(
    enrollment_id: str,
    data: EnrollmentUpdate,
    user: dict = Depends(require_roles(*STAFF))
):
    service = EnrollmentService()
    updated = service.update(enrollment_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return ok(service.to_response(updated), message="Enrollment updated successfully")


@router.patch("/{enrollment_id}/progress")
async def update_progress(
    enrollment_id: str,
    data: ProgressUpdate,
    user: dict = Depends(require_roles(*STAFF))
):
    enrollment = EnrollmentService().update_progress(enrollment_id, data.completed_modules, data.total_modules)
    return ok(enrollment, message="Progress updated")


@router.delete("/{enrollment_id}")
async def delete_enrollment(enrollment_id: str, user: dict = Depends(require_roles(*STAFF))):
    EnrollmentService().unenroll(enrollment_id)
    return ok(message="Enrollment removed successfully")
