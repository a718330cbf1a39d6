"""
Team Service - members shown on the about page.
"""

from typing import Optional

from pymongo import ASCENDING, DESCENDING

from nexus_admin.models import team as team_model
from nexus_admin.services.base import BaseService


class TeamService(BaseService):
    collection_key = "team_members"
    entity_name = "Team member"
    search_fields = ("name", "position", "department")

    def list_members(self, page: int = 1, limit: int = 50, search: Optional[str] = None,
                     status: Optional[str] = "active", featured: Optional[bool] = None,
                     department: Optional[str] = None) -> dict:
        filters = {}
        if status and status != "all":
            filters["status"] = status
        if featured is not None:
            filters["is_featured"] = featured
        if department:
            filters["department"] = department
        return self.list(search=search, filters=filters, page=page, limit=limit,
                         sort=[("display_order", ASCENDING), ("created_at", DESCENDING)])

    def create(self, data: dict, created_by: str) -> dict:
        return self.to_response(self.insert(team_model.new_member(data), created_by=created_by))

    def departments(self) -> list:
        return sorted(d for d in self.collection.distinct("department") if d)
