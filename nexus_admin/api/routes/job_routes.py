"""
Job Routes

GET /jobs - List jobs with filters (status defaults to Active; ?summary=true for counts)
GET /jobs/applications - List job applications (admin, manager, hr)
GET /jobs/applications/{application_id} - Get application (admin, manager, hr)
PUT /jobs/applications/{application_id} - Update status, priority, tags, offer, note (admin, manager, hr)
POST /jobs/applications/{application_id}/notes - Add reviewer note (admin, manager, hr)
POST /jobs/applications/{application_id}/interview - Schedule interview (admin, manager, hr)
DELETE /jobs/applications/{application_id} - Delete application (admin, manager)
GET /jobs/{job_id} - Get job details (counts a view)
POST /jobs - Create job posting (admin, manager, hr)
PUT /jobs/{job_id} - Update job (admin, manager, hr)
DELETE /jobs/{job_id} - Delete job (admin, manager)
POST /jobs/{job_id}/apply - Apply to job (public)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import HIRING, STAFF, require_roles
from nexus_admin.schemas.schemas import (
    InterviewSchedule, JobApplicationCreate, JobApplicationUpdate, JobCreate, JobUpdate, NoteCreate
)
from nexus_admin.services.base import serialize_doc
from nexus_admin.services.job_service import JobApplicationService, JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


# ============================================================
# APPLICATIONS (declared first so /applications is not read as a job id)
# ============================================================

@router.get("/applications")
async def list_applications(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in applicant name, email, job title and company"),
    status: Optional[str] = Query(None),
    job_id: Optional[str] = Query(None),
    user: dict = Depends(require_roles(*HIRING))
):
    """List applications with per-status statistics."""
    return ok(JobApplicationService().list_applications(page, limit, search, status, job_id))


@router.get("/applications/{application_id}")
async def get_application(application_id: str, user: dict = Depends(require_roles(*HIRING))):
    return ok(JobApplicationService().get(application_id))


@router.put("/applications/{application_id}")
async def update_application(
    application_id: str,
    data: JobApplicationUpdate,
    user: dict = Depends(require_roles(*HIRING))
):
    application = JobApplicationService().update_application(
        application_id, data.model_dump(exclude_unset=True, exclude_none=True), reviewer_id=user["id"]
    )
    return ok(application, message="Application updated successfully")


@router.post("/applications/{application_id}/notes", status_code=201)
async def add_note(application_id: str, data: NoteCreate, user: dict = Depends(require_roles(*HIRING))):
    note = JobApplicationService().add_note(application_id, data.content, author_id=user["id"])
    return ok(serialize_doc(note), message="Note added")


@router.post("/applications/{application_id}/interview")
async def schedule_interview(
    application_id: str,
    data: InterviewSchedule,
    user: dict = Depends(require_roles(*HIRING))
):
    application = JobApplicationService().schedule_interview(
        application_id, data.model_dump(), reviewer_id=user["id"]
    )
    return ok(application, message="Interview scheduled")


@router.delete("/applications/{application_id}")
async def delete_application(application_id: str, user: dict = Depends(require_roles(*STAFF))):
    JobApplicationService().withdraw(application_id)
    return ok(message="Application deleted successfully")


# ============================================================
# JOBS
# ============================================================

@router.get("")
async def list_jobs(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in title, description, company and category"),
    category: Optional[str] = Query(None),
    status: Optional[str] = Query("Active", description="'all' for every status"),
    location_type: Optional[str] = Query(None),
    employment_type: Optional[str] = Query(None),
    experience_level: Optional[str] = Query(None),
    featured: Optional[bool] = Query(None),
    summary: bool = Query(False, description="Return aggregate counts only")
):
    """
    List job postings.

    ``status=Active`` matches postings that are still open right now:
    stored Active and the deadline not yet passed.
    """
    service = JobService()
    if summary:
        return ok(service.posting_summary())
    return ok(service.list_jobs(
        page, limit, search, category, status, location_type, employment_type, experience_level, featured
    ))


@router.get("/{job_id}")
async def get_job(job_id: str):
    return ok(JobService().view(job_id))


@router.post("", status_code=201)
async def create_job(data: JobCreate, user: dict = Depends(require_roles(*HIRING))):
    """Create a new job posting. The application deadline must be in the future."""
    job = JobService().create(data.model_dump(), created_by=user["id"])
    return ok(job, message="Job created successfully")


@router.put("/{job_id}")
async def update_job(job_id: str, data: JobUpdate, user: dict = Depends(require_roles(*HIRING))):
    service = JobService()
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    updated = service.update(job_id, changes, updated_by=user["id"])
    return ok(service.to_response(updated), message="Job updated successfully")


@router.delete("/{job_id}")
async def delete_job(job_id: str, user: dict = Depends(require_roles(*STAFF))):
    JobService().delete(job_id)
    return ok(message="Job deleted successfully")


@router.post("/{job_id}/apply", status_code=201)
async def apply_to_job(job_id: str, data: JobApplicationCreate):
    """
    Apply to a job.

    - 404 when the job does not exist
    - 400 when it no longer accepts applications
    - 409 when this email already applied
    """
    application = JobApplicationService().submit(job_id, data.model_dump())
    return ok(application, message="Application submitted successfully")
