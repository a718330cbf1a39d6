"""
Enrollment Service - user <-> training registrations.

Creating or deleting an enrollment also moves ``enrollment_count`` on the
training. The two writes are ordered child first, counter second:
- the compound unique index on (user, training) rejects duplicates before
  the counter is touched
- if the counter update fails, the new enrollment is removed again
- the decrement never takes the counter below zero
"""

import logging
from typing import Optional

from fastapi import HTTPException
from pymongo.errors import DuplicateKeyError, PyMongoError

from nexus_admin.core.auth import STAFF
from nexus_admin.db.mongodb import COLLECTIONS, get_collection
from nexus_admin.models import enrollment as enrollment_model
from nexus_admin.models import training as training_model
from nexus_admin.services.base import BaseService, USER_REF, combine, search_filter, to_object_id

logger = logging.getLogger(__name__)

TRAINING_REF = {"title": 1, "category": 1, "price": 1, "duration": 1, "instructor.name": 1}


class EnrollmentService(BaseService):
    collection_key = "enrollments"
    entity_name = "Enrollment"
    populate_fields = (
        ("user", "users", USER_REF),
        ("training", "trainings", TRAINING_REF),
    )

    def __init__(self):
        super().__init__()
        self.trainings = get_collection(COLLECTIONS["trainings"])
        self.users = get_collection(COLLECTIONS["users"])

    def present(self, doc: dict) -> dict:
        doc["is_complete"] = enrollment_model.is_complete(doc)
        return doc

    def list_enrollments(self, page: int = 1, limit: int = 10, search: Optional[str] = None,
                         status: Optional[str] = None, training_id: Optional[str] = None) -> dict:
        filters = {}
        if status:
            filters["status"] = status
        if training_id:
            filters["training"] = to_object_id(training_id, "training id")

        user_match = search_filter(search, ("name", "email"))
        if user_match:
            user_ids = [u["_id"] for u in self.users.find(user_match, {"_id": 1})]
            filters = combine(filters, {"user": {"$in": user_ids}})
        return self.paginate(filters, page, limit)

    def get_for(self, enrollment_id: str, session: dict) -> dict:
        """Staff see any enrollment; everybody else only their own."""
        doc = self.find_or_404(enrollment_id)
        if session["role"] not in STAFF and str(doc.get("user")) != session["id"]:
            raise HTTPException(status_code=403, detail="Not allowed to view this enrollment")
        return self.to_response(doc)

    def enroll(self, user_id: str, training_id: str, notes: Optional[str] = None,
               payment_info: Optional[dict] = None) -> dict:
        training = self.trainings.find_one({"_id": to_object_id(training_id, "training id")})
        if not training:
            raise HTTPException(status_code=404, detail="Training not found")
        if not training.get("active", True):
            raise HTTPException(status_code=400, detail="Training is not available for enrollment")
        if not training_model.has_capacity(training):
            raise HTTPException(status_code=400, detail="Training is full")

        user_oid = to_object_id(user_id, "user id")
        if self.collection.find_one({"user": user_oid, "training": training["_id"]}, {"_id": 1}):
            raise HTTPException(status_code=409, detail="Already enrolled in this training")

        doc = enrollment_model.new_enrollment(user_oid, training["_id"], notes, payment_info)
        try:
            self.insert(doc)
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="Already enrolled in this training")

        try:
            self.trainings.update_one({"_id": training["_id"]}, {"$inc": {"enrollment_count": 1}})
        except PyMongoError:
            logger.exception("enrollment_count update failed; removing enrollment %s", doc["_id"])
            self.collection.delete_one({"_id": doc["_id"]})
            raise
        return self.to_response(doc)

    def update_progress(self, enrollment_id: str, completed_modules: int, total_modules: int) -> dict:
        doc = self.find_or_404(enrollment_id)
        enrollment_model.update_progress(doc, completed_modules, total_modules)
        return self.to_response(self.update(doc["_id"], {
            "progress_percentage": doc["progress_percentage"],
            "status": doc["status"],
        }))

    def unenroll(self, enrollment_id: str) -> dict:
        doc = self.delete(enrollment_id)
        self.trainings.update_one(
            {"_id": doc["training"], "enrollment_count": {"$gt": 0}},
            {"$inc": {"enrollment_count": -1}}
        )
        return doc
