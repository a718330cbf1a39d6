"""
Announcement documents.

An announcement is shown while it is active and inside its
``[start_date, end_date]`` window (an open end means no expiry).
Per-user view records live in ``analytics.unique_views``; there is at
most one record per user.
"""

import copy
from datetime import datetime
from typing import Optional

TYPES = ("info", "warning", "success", "error", "promotion", "maintenance", "update")
PRIORITIES = ("low", "medium", "high", "urgent")
AUDIENCES = ("all", "students", "instructors", "admins", "premium")
LOCATIONS = ("homepage", "dashboard", "courses", "global", "popup")

# Higher sorts first
PRIORITY_RANK = {"urgent": 4, "high": 3, "medium": 2, "low": 1}

DEFAULTS = {
    "type": "info",
    "priority": "medium",
    "target_audience": "all",
    "display_location": ["global"],
    "end_date": None,
    "is_active": True,
    "is_permanent": False,
    "dismissible": True,
    "auto_hide": False,
    "auto_hide_delay": 5000,
    "background_color": None,
    "text_color": None,
    "action_button": None,
    "media": None,
    "tags": [],
    "metadata": {},
    "updated_by": None,
}


def new_analytics() -> dict:
    return {"views": 0, "clicks": 0, "dismissals": 0, "unique_views": []}


def new_announcement(data: dict) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update({k: v for k, v in data.items() if v is not None})
    if not doc.get("start_date"):
        doc["start_date"] = datetime.utcnow()
    if not doc.get("display_location"):
        doc["display_location"] = ["global"]
    doc["analytics"] = new_analytics()
    return doc


def is_currently_active(announcement: dict, now: Optional[datetime] = None) -> bool:
    now = now or datetime.utcnow()
    if not announcement.get("is_active"):
        return False
    start = announcement.get("start_date")
    if start and start > now:
        return False
    end = announcement.get("end_date")
    return end is None or now <= end


def active_filter(now: datetime, audience: Optional[str] = None, location: Optional[str] = None) -> dict:
    """Store query matching what ``is_currently_active`` accepts, narrowed by audience and location."""
    conditions = [
        {"is_active": True},
        {"start_date": {"$lte": now}},
        {"$or": [{"end_date": None}, {"end_date": {"$gte": now}}]},
    ]
    if audience:
        conditions.append({"target_audience": {"$in": ["all", audience]}})
    if location:
        conditions.append({"display_location": {"$in": [location, "global"]}})
    return {"$and": conditions}


def sort_for_display(announcements: list) -> list:
    """Priority first (urgent > high > medium > low), then most recent."""
    by_recency = sorted(
        announcements,
        key=lambda a: a.get("created_at") or datetime.min,
        reverse=True,
    )
    return sorted(by_recency, key=lambda a: PRIORITY_RANK.get(a.get("priority"), 0), reverse=True)
