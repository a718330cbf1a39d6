"""
Announcement Service - site banners and their engagement analytics.

Analytics updates are single conditional writes, so repeated calls from
the same user cannot double count:
- view:    push a view record only if the user has none, +1 views
- dismiss: flip the user's record to dismissed only if it is not yet, +1 dismissals
- click:   always +1 clicks
"""

from datetime import datetime
from typing import Optional

from bson import ObjectId
from fastapi import HTTPException

from nexus_admin.models import announcement as announcement_model
from nexus_admin.services.base import BaseService, to_object_id

ROLE_AUDIENCE = {
    "admin": "admins",
    "manager": "admins",
    "instructor": "instructors",
    "user": "students",
}


def audience_for_role(role: Optional[str]) -> Optional[str]:
    return ROLE_AUDIENCE.get(role) if role else None


class AnnouncementService(BaseService):
    collection_key = "announcements"
    entity_name = "Announcement"
    search_fields = ("title", "content")
    track_updated_by = True

    def before_save(self, doc: dict, previous: Optional[dict] = None) -> dict:
        start, end = doc.get("start_date"), doc.get("end_date")
        if start and end and end < start:
            raise HTTPException(status_code=400, detail="end_date must be after start_date")
        return doc

    def present(self, doc: dict) -> dict:
        doc["is_currently_active"] = announcement_model.is_currently_active(doc)
        # Per-user records stay server-side
        analytics = doc.get("analytics")
        if analytics and "unique_views" in analytics:
            analytics["unique_viewers"] = len(analytics.pop("unique_views"))
        return doc

    def list_announcements(self, page: int = 1, limit: int = 10, search: Optional[str] = None,
                           type: Optional[str] = None, priority: Optional[str] = None,
                           target_audience: Optional[str] = None, location: Optional[str] = None,
                           active: Optional[bool] = None) -> dict:
        filters = {}
        if type:
            filters["type"] = type
        if priority:
            filters["priority"] = priority
        if target_audience:
            filters["target_audience"] = target_audience
        if location:
            filters["display_location"] = location
        if active is not None:
            filters["is_active"] = active
        return self.list(search=search, filters=filters, page=page, limit=limit)

    def active_for(self, audience: Optional[str] = None, location: Optional[str] = None) -> list:
        """Currently showing announcements, highest priority first, then newest."""
        query = announcement_model.active_filter(datetime.utcnow(), audience, location)
        docs = list(self.collection.find(query))
        return self.to_responses(announcement_model.sort_for_display(docs))

    def announcement_summary(self) -> dict:
        now = datetime.utcnow()
        result = self.summary(extra={"urgent": {"priority": "urgent"}})
        result["active"] = self.collection.count_documents(announcement_model.active_filter(now))
        return result

    def create(self, data: dict, created_by: str) -> dict:
        return self.to_response(self.insert(announcement_model.new_announcement(data), created_by=created_by))

    # --- analytics -------------------------------------------

    def _analytics(self, announcement_id: ObjectId) -> dict:
        doc = self.collection.find_one({"_id": announcement_id}, {"analytics": 1})
        analytics = dict(doc.get("analytics") or {})
        views = analytics.pop("unique_views", [])
        analytics["unique_viewers"] = len(views)
        return analytics

    def mark_as_viewed(self, announcement_id: str, user_id: Optional[str] = None) -> dict:
        doc = self.find_or_404(announcement_id)
        if user_id is None:
            self.collection.update_one({"_id": doc["_id"]}, {"$inc": {"analytics.views": 1}})
            return self._analytics(doc["_id"])

        user_oid = to_object_id(user_id, "user id")
        self.collection.update_one(
            {"_id": doc["_id"], "analytics.unique_views.user_id": {"$ne": user_oid}},
            {
                "$push": {"analytics.unique_views": {
                    "user_id": user_oid,
                    "viewed_at": datetime.utcnow(),
                    "dismissed": False,
                    "dismissed_at": None,
                }},
                "$inc": {"analytics.views": 1},
            }
        )
        return self._analytics(doc["_id"])

    def mark_as_dismissed(self, announcement_id: str, user_id: Optional[str] = None) -> dict:
        doc = self.find_or_404(announcement_id)
        if user_id is None:
            self.collection.update_one({"_id": doc["_id"]}, {"$inc": {"analytics.dismissals": 1}})
            return self._analytics(doc["_id"])

        # View records are append-only, so the index found here stays valid
        user_oid = to_object_id(user_id, "user id")
        views = (doc.get("analytics") or {}).get("unique_views") or []
        index = next((i for i, v in enumerate(views) if v.get("user_id") == user_oid), None)
        if index is not None:
            record = f"analytics.unique_views.{index}"
            self.collection.update_one(
                {"_id": doc["_id"], f"{record}.user_id": user_oid, f"{record}.dismissed": False},
                {
                    "$set": {f"{record}.dismissed": True, f"{record}.dismissed_at": datetime.utcnow()},
                    "$inc": {"analytics.dismissals": 1},
                }
            )
        return self._analytics(doc["_id"])

    def track_click(self, announcement_id: str) -> dict:
        doc = self.find_or_404(announcement_id)
        self.collection.update_one({"_id": doc["_id"]}, {"$inc": {"analytics.clicks": 1}})
        return self._analytics(doc["_id"])
