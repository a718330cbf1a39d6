"""
Posting Service - shared behaviour of job and internship postings and
their applications.

Submitting an application is two writes on two collections:
    1. insert the application (unique index on posting + email stops duplicates)
    2. $inc application_count on the posting, then re-run the status hook
If step 2 fails, the application from step 1 is deleted again.

Whether a posting still accepts applications is decided from its
*effective* status (deadline and capacity checked now), never from the
stored status alone.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from nexus_admin.models import posting
from nexus_admin.services.base import BaseService, combine, to_object_id

logger = logging.getLogger(__name__)


class PostingService(BaseService):
    search_fields = ("title", "description", "company", "category")
    track_updated_by = True
    model = None
    view_field = "view_count"

    def before_save(self, doc: dict, previous: Optional[dict] = None) -> dict:
        return self.model.before_save(doc)

    def present(self, doc: dict) -> dict:
        return self.model.with_virtuals(doc)

    def status_filter(self, status: Optional[str]) -> Optional[dict]:
        if not status or status == "all":
            return None
        if status == "Active":
            return posting.effective_active_filter(datetime.utcnow())
        return {"status": status}

    def list_postings(self, page: int = 1, limit: int = 12, search: Optional[str] = None,
                      status: Optional[str] = "Active", filters: Optional[dict] = None) -> dict:
        query = combine(filters, self.status_filter(status))
        return self.list(search=search, filters=query, page=page, limit=limit)

    def posting_summary(self) -> dict:
        result = self.summary(extra={
            "closed": {"status": "Closed"},
            "filled": {"status": "Filled"},
            "featured": {"featured": True},
        })
        result["active"] = self.collection.count_documents(self.status_filter("Active"))
        return result

    def create(self, data: dict, created_by: str) -> dict:
        return self.to_response(self.insert(self.model.new_posting(data), created_by=created_by))

    def view(self, posting_id: str) -> dict:
        doc = self.find_or_404(posting_id)
        return self.to_response(self.increment(doc, self.view_field))

    def accepting_or_400(self, posting_id: str) -> dict:
        doc = self.find_or_404(posting_id)
        if not posting.can_apply(doc):
            raise HTTPException(
                status_code=400,
                detail=f"This {self.entity_name.lower()} is no longer accepting applications"
            )
        return doc

    def register_application(self, posting_id, amount: int = 1) -> dict:
        """Bump application_count and persist any Closed/Filled transition it causes."""
        query = {"_id": posting_id}
        if amount < 0:
            query["application_count"] = {"$gt": 0}
        doc = self.collection.find_one_and_update(
            query,
            {"$inc": {"application_count": amount}},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            return None
        status = posting.effective_status(doc)
        if status != doc.get("status"):
            self.collection.update_one({"_id": posting_id, "status": doc["status"]}, {"$set": {"status": status}})
            logger.info("%s %s moved to %s", self.entity_name, posting_id, status)
            doc["status"] = status
        return doc


class ApplicationService(BaseService):
    model = None
    postings_class = None
    parent_field = ""
    email_field = ""
    populate_fields = ()

    def __init__(self):
        super().__init__()
        self.postings: PostingService = self.postings_class()

    def submit(self, posting_id: str, data: dict) -> dict:
        parent = self.postings.accepting_or_400(posting_id)
        doc = self.model.new_application(parent, data)

        duplicate = {self.parent_field: parent["_id"], self.email_field: _dig(doc, self.email_field)}
        if self.collection.find_one(duplicate, {"_id": 1}):
            raise HTTPException(status_code=409, detail="You have already applied for this position")

        try:
            self.insert(doc)
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="You have already applied for this position")

        try:
            self.postings.register_application(parent["_id"])
        except PyMongoError:
            logger.exception("application_count update failed; removing application %s", doc["_id"])
            self.collection.delete_one({"_id": doc["_id"]})
            raise
        return self.to_response(doc)

    def withdraw(self, application_id: str) -> dict:
        doc = self.delete(application_id)
        self.postings.register_application(doc[self.parent_field], amount=-1)
        return doc

    def statistics(self, query: Optional[dict] = None) -> dict:
        pipeline = [
            {"$match": query or {}},
            {"$group": {"_id": "$status", "count": {"$sum": 1}}},
        ]
        counts = {row["_id"]: row["count"] for row in self.collection.aggregate(pipeline)}
        return {"total": sum(counts.values()), "by_status": counts}

    def list_applications(self, page: int = 1, limit: int = 10, search: Optional[str] = None,
                          status: Optional[str] = None, posting_id: Optional[str] = None) -> dict:
        filters = {}
        if status:
            filters["status"] = status
        if posting_id:
            filters[self.parent_field] = to_object_id(posting_id, f"{self.parent_field}")
        result = self.list(search=search, filters=filters, page=page, limit=limit)
        result["statistics"] = self.statistics(
            {self.parent_field: filters[self.parent_field]} if posting_id else None
        )
        return result


def _dig(doc: dict, dotted: str):
    for part in dotted.split("."):
        doc = doc.get(part) if isinstance(doc, dict) else None
    return doc
