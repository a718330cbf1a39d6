"""
Training Service - course catalogue.

``enrollment_count`` is owned by EnrollmentService; nothing here writes it.
"""

from typing import Optional

from nexus_admin.models import training as training_model
from nexus_admin.services.base import BaseService


class TrainingService(BaseService):
    collection_key = "trainings"
    entity_name = "Training"
    search_fields = ("title", "description", "instructor.name")

    def list_trainings(self, page: int = 1, limit: int = 10, search: Optional[str] = None,
                       category: Optional[str] = None, level: Optional[str] = None,
                       featured: Optional[bool] = None, popular: Optional[bool] = None,
                       active: Optional[bool] = True) -> dict:
        filters = {}
        if category:
            filters["category"] = category
        if level:
            filters["level"] = level
        if featured is not None:
            filters["is_featured"] = featured
        if popular is not None:
            filters["is_popular"] = popular
        if active is not None:
            filters["active"] = active
        return self.list(search=search, filters=filters, page=page, limit=limit)

    def training_summary(self) -> dict:
        return self.summary(
            base_query={"active": True},
            extra={"featured": {"is_featured": True}, "popular": {"is_popular": True}},
        )

    def create(self, data: dict, created_by: str) -> dict:
        return self.to_response(self.insert(training_model.new_training(data), created_by=created_by))

    def present(self, doc: dict) -> dict:
        doc["has_capacity"] = training_model.has_capacity(doc)
        return doc
