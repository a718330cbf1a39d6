"""
Internship Routes

GET /internships - List internships with filters (?summary=true for counts)
GET /internships/applications - List applications (admin, manager, hr)
GET /internships/applications/{application_id} - Get application (admin, manager, hr)
PUT /internships/applications/{application_id} - Update status / add note (admin, manager, hr)
POST /internships/applications/{application_id}/notes - Add admin note (admin, manager, hr)
POST /internships/applications/{application_id}/interview - Schedule interview (admin, manager, hr)
DELETE /internships/applications/{application_id} - Delete application (admin, manager)
GET /internships/{internship_id} - Get internship (counts a view)
POST /internships - Create internship (admin, manager, hr)
PUT /internships/{internship_id} - Update internship (admin, manager, hr)
DELETE /internships/{internship_id} - Delete internship (admin, manager)
POST /internships/{internship_id}/apply - Apply (public)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import HIRING, STAFF, require_roles
from nexus_admin.schemas.schemas import (
    AdminNoteCreate, InternshipApplicationCreate, InternshipApplicationUpdate,
    InternshipCreate, InternshipInterviewSchedule, InternshipUpdate
)
from nexus_admin.services.base import serialize_doc
from nexus_admin.services.internship_service import InternshipApplicationService, InternshipService

router = APIRouter(prefix="/internships", tags=["Internships"])


# ============================================================
# APPLICATIONS
# ============================================================

@router.get("/applications")
async def list_applications(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in applicant name and email"),
    status: Optional[str] = Query(None),
    internship_id: Optional[str] = Query(None),
    user: dict = Depends(require_roles(*HIRING))
):
    return ok(InternshipApplicationService().list_applications(page, limit, search, status, internship_id))


@router.get("/applications/{application_id}")
async def get_application(application_id: str, user: dict = Depends(require_roles(*HIRING))):
    return ok(InternshipApplicationService().get(application_id))


@router.put("/applications/{application_id}")
async def update_application(
    application_id: str,
    data: InternshipApplicationUpdate,
    user: dict = Depends(require_roles(*HIRING))
):
    application = InternshipApplicationService().update_application(
        application_id, data.model_dump(exclude_unset=True, exclude_none=True), author_id=user["id"]
    )
    return ok(application, message="Application updated successfully")


@router.post("/applications/{application_id}/notes", status_code=201)
async def add_admin_note(
    application_id: str,
    data: AdminNoteCreate,
    user: dict = Depends(require_roles(*HIRING))
):
    note = InternshipApplicationService().add_admin_note(application_id, data.note, author_id=user["id"])
    return ok(serialize_doc(note), message="Note added")


@router.post("/applications/{application_id}/interview")
async def schedule_interview(
    application_id: str,
    data: InternshipInterviewSchedule,
    user: dict = Depends(require_roles(*HIRING))
):
    application = InternshipApplicationService().schedule_interview(application_id, data.model_dump())
    return ok(application, message="Interview scheduled")


@router.delete("/applications/{application_id}")
async def delete_application(application_id: str, user: dict = Depends(require_roles(*STAFF))):
    InternshipApplicationService().withdraw(application_id)
    return ok(message="Application deleted successfully")


# ============================================================
# INTERNSHIPS
# ============================================================

@router.get("")
async def list_internships(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in title, description, company and category"),
    category: Optional[str] = Query(None),
    status: Optional[str] = Query("Active", description="'all' for every status"),
    level: Optional[str] = Query(None),
    location_type: Optional[str] = Query(None),
    featured: Optional[bool] = Query(None),
    summary: bool = Query(False, description="Return aggregate counts only")
):
    service = InternshipService()
    if summary:
        return ok(service.posting_summary())
    return ok(service.list_internships(page, limit, search, category, status, level, location_type, featured))


@router.get("/{internship_id}")
async def get_internship(internship_id: str):
    return ok(InternshipService().view(internship_id))


@router.post("", status_code=201)
async def create_internship(data: InternshipCreate, user: dict = Depends(require_roles(*HIRING))):
    internship = InternshipService().create(data.model_dump(), created_by=user["id"])
    return ok(internship, message="Internship created successfully")


@router.put("/{internship_id}")
async def update_internship(
    internship_id: str,
    data: InternshipUpdate,
    user: dict = Depends(require_roles(*HIRING))
):
    service = InternshipService()
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    updated = service.update(internship_id, changes, updated_by=user["id"])
    return ok(service.to_response(updated), message="Internship updated successfully")


@router.delete("/{internship_id}")
async def delete_internship(internship_id: str, user: dict = Depends(require_roles(*STAFF))):
    InternshipService().delete(internship_id)
    return ok(message="Internship deleted successfully")


@router.post("/{internship_id}/apply", status_code=201)
async def apply_to_internship(internship_id: str, data: InternshipApplicationCreate, request: Request):
    """Apply to an internship. The caller's address and user agent are kept with the application."""
    application = InternshipApplicationService().submit(internship_id, {
        **data.model_dump(),
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    })
    return ok(application, message="Application submitted successfully")
