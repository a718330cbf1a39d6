"""
Job Service - job postings and the applications sent to them.
"""

from typing import Optional

from nexus_admin.models import job as job_model
from nexus_admin.services.base import to_object_id
from nexus_admin.services.posting_service import ApplicationService, PostingService


class JobService(PostingService):
    collection_key = "jobs"
    entity_name = "Job"
    model = job_model
    view_field = "view_count"

    def list_jobs(self, page: int = 1, limit: int = 12, search: Optional[str] = None,
                  category: Optional[str] = None, status: Optional[str] = "Active",
                  location_type: Optional[str] = None, employment_type: Optional[str] = None,
                  experience_level: Optional[str] = None, featured: Optional[bool] = None) -> dict:
        filters = {}
        if category:
            filters["category"] = category
        if location_type:
            filters["location_type"] = location_type
        if employment_type:
            filters["employment_type"] = employment_type
        if experience_level:
            filters["experience_level"] = experience_level
        if featured is not None:
            filters["featured"] = featured
        return self.list_postings(page, limit, search, status, filters)


class JobApplicationService(ApplicationService):
    collection_key = "job_applications"
    entity_name = "Job application"
    search_fields = ("applicant_info.full_name", "applicant_info.email", "job_title", "company")
    model = job_model
    postings_class = JobService
    parent_field = "job_id"
    email_field = "applicant_info.email"

    def update_application(self, application_id: str, changes: dict, reviewer_id: str) -> dict:
        doc = self.find_or_404(application_id)
        reviewer = to_object_id(reviewer_id, "user id")
        note = changes.pop("note", None)
        status = changes.pop("status", None)
        if status:
            job_model.set_status(doc, status, reviewer)
            changes.update(status=doc["status"], reviewed_at=doc["reviewed_at"], reviewed_by=doc["reviewed_by"])
        if note:
            changes["notes"] = doc.get("notes", []) + [job_model.new_note(note, reviewer)]
        return self.to_response(self.update(doc["_id"], changes))

    def add_note(self, application_id: str, content: str, author_id: str) -> dict:
        doc = self.find_or_404(application_id)
        note = job_model.new_note(content, to_object_id(author_id, "user id"))
        self.collection.update_one({"_id": doc["_id"]}, {"$push": {"notes": note}})
        return note

    def schedule_interview(self, application_id: str, details: dict, reviewer_id: str) -> dict:
        doc = self.find_or_404(application_id)
        job_model.schedule_interview(doc, details, to_object_id(reviewer_id, "user id"))
        return self.to_response(self.update(doc["_id"], {
            "interview_details": doc["interview_details"],
            "status": doc["status"],
            "reviewed_at": doc["reviewed_at"],
            "reviewed_by": doc["reviewed_by"],
        }))
