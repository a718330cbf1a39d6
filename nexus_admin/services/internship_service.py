"""
Internship Service - internship postings and applications.
"""

from typing import Optional

from nexus_admin.models import internship as internship_model
from nexus_admin.services.base import to_object_id
from nexus_admin.services.posting_service import ApplicationService, PostingService


class InternshipService(PostingService):
    collection_key = "internships"
    entity_name = "Internship"
    model = internship_model
    view_field = "views"

    def list_internships(self, page: int = 1, limit: int = 12, search: Optional[str] = None,
                         category: Optional[str] = None, status: Optional[str] = "Active",
                         level: Optional[str] = None, location_type: Optional[str] = None,
                         featured: Optional[bool] = None) -> dict:
        filters = {}
        if category:
            filters["category"] = category
        if level:
            filters["level"] = level
        if location_type:
            filters["location_type"] = location_type
        if featured is not None:
            filters["featured"] = featured
        return self.list_postings(page, limit, search, status, filters)


class InternshipApplicationService(ApplicationService):
    collection_key = "internship_applications"
    entity_name = "Internship application"
    search_fields = ("first_name", "last_name", "email")
    model = internship_model
    postings_class = InternshipService
    parent_field = "internship_id"
    email_field = "email"

    def present(self, doc: dict) -> dict:
        doc["full_name"] = internship_model.full_name(doc)
        return doc

    def update_application(self, application_id: str, changes: dict, author_id: str) -> dict:
        doc = self.find_or_404(application_id)
        note = changes.pop("note", None)
        if note:
            changes["admin_notes"] = doc.get("admin_notes", []) + [
                internship_model.new_admin_note(note, to_object_id(author_id, "user id"))
            ]
        return self.to_response(self.update(doc["_id"], changes))

    def add_admin_note(self, application_id: str, note: str, author_id: str) -> dict:
        doc = self.find_or_404(application_id)
        entry = internship_model.new_admin_note(note, to_object_id(author_id, "user id"))
        self.collection.update_one({"_id": doc["_id"]}, {"$push": {"admin_notes": entry}})
        return entry

    def schedule_interview(self, application_id: str, details: dict) -> dict:
        doc = self.find_or_404(application_id)
        internship_model.schedule_interview(
            doc,
            details["date"],
            time=details.get("time"),
            interview_type=details.get("type", "Video"),
            meeting_link=details.get("meeting_link"),
            notes=details.get("notes"),
        )
        return self.to_response(self.update(doc["_id"], {
            "interview": doc["interview"],
            "status": doc["status"],
        }))
