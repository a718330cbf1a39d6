"""
Dashboard Service - read-only aggregates for the admin home and analytics pages.

Two kinds of numbers leave this module and they are never mixed:
- authoritative figures, counted from the collections
- ``estimated`` blocks (``is_estimate: true``): fixed-ratio placeholders for
  metrics the platform does not record (traffic, revenue projections)
  until a real analytics source is wired in
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import HTTPException
from pymongo import DESCENDING

from nexus_admin.db.mongodb import COLLECTIONS, get_collection
from nexus_admin.models import posting
from nexus_admin.services.base import (
    USER_REF, growth_percentage, month_start, populate, previous_month_start, serialize_docs
)

logger = logging.getLogger(__name__)

TIME_RANGES = {
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
    "90d": timedelta(days=90),
}

# Placeholder ratios for the estimated blocks
REVENUE_PER_ENROLLMENT = 180
REVENUE_PER_NEW_ENROLLMENT = 85
REVENUE_PER_ACTIVE_PRODUCT = 150
SALES_PER_ACTIVE_PRODUCT = 12
PAGE_VIEWS_PER_USER = 40
CONVERSION_RATE = 3.2
TRAFFIC_SOURCES = (("Direct", 45), ("Organic Search", 35), ("Social Media", 15), ("Referral", 5))
DEVICES = (("Desktop", 55), ("Mobile", 35), ("Tablet", 10))


def _months_back(now: datetime, count: int) -> list:
    """Start of each of the last ``count`` months, oldest first."""
    starts = [month_start(now)]
    for _ in range(count - 1):
        starts.append(previous_month_start(starts[-1]))
    return list(reversed(starts))


def format_time_ago(when: datetime, now: Optional[datetime] = None) -> str:
    seconds = int(((now or datetime.utcnow()) - when).total_seconds())
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    if seconds < 86400:
        return f"{seconds // 3600} hours ago"
    if seconds < 604800:
        return f"{seconds // 86400} days ago"
    return when.strftime("%Y-%m-%d")


class DashboardService:

    def __init__(self):
        self.users = get_collection(COLLECTIONS["users"])
        self.trainings = get_collection(COLLECTIONS["trainings"])
        self.enrollments = get_collection(COLLECTIONS["enrollments"])
        self.products = get_collection(COLLECTIONS["products"])
        self.blog_posts = get_collection(COLLECTIONS["blog_posts"])
        self.jobs = get_collection(COLLECTIONS["jobs"])
        self.job_applications = get_collection(COLLECTIONS["job_applications"])
        self.internships = get_collection(COLLECTIONS["internships"])
        self.internship_applications = get_collection(COLLECTIONS["internship_applications"])
        self.team_members = get_collection(COLLECTIONS["team_members"])

    # ------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------

    def dashboard(self) -> dict:
        now = datetime.utcnow()
        this_month, last_month = month_start(now), previous_month_start(now)
        active_postings = posting.effective_active_filter(now)

        def monthly(collection, start, end=None):
            window = {"$gte": start}
            if end is not None:
                window["$lt"] = end
            return collection.count_documents({"created_at": window})

        new_users = monthly(self.users, this_month)
        new_users_before = monthly(self.users, last_month, this_month)
        new_enrollments = monthly(self.enrollments, this_month)
        new_enrollments_before = monthly(self.enrollments, last_month, this_month)

        stats = {
            "users": {
                "total": self.users.count_documents({}),
                "new": new_users,
                "last_month": new_users_before,
                "active": self.users.count_documents({"active": {"$ne": False}}),
                "growth": growth_percentage(new_users, new_users_before),
            },
            "trainings": {
                "total": self.trainings.count_documents({}),
                "active": self.trainings.count_documents({"active": True}),
                "enrolled": self.enrollments.count_documents({}),
                "new_enrollments": new_enrollments,
                "growth": growth_percentage(new_enrollments, new_enrollments_before),
            },
            "products": {
                "total": self.products.count_documents({}),
                "active": self.products.count_documents({"status": "active"}),
            },
            "blog": {
                "total": self.blog_posts.count_documents({}),
                "published": self.blog_posts.count_documents({"status": "published"}),
            },
            "jobs": {
                "total": self.jobs.count_documents({}),
                "active": self.jobs.count_documents(active_postings),
                "applications": self.job_applications.count_documents({}),
            },
            "internships": {
                "total": self.internships.count_documents({}),
                "active": self.internships.count_documents(active_postings),
                "closed": self.internships.count_documents({"status": {"$in": ["Closed", "Filled"]}}),
                "applications": self.internship_applications.count_documents({}),
                "accepted": self.internship_applications.count_documents({"status": "Accepted"}),
            },
            "team": {
                "total": self.team_members.count_documents({}),
                "active": self.team_members.count_documents({"status": "active"}),
                "departments": len([d for d in self.team_members.distinct("department") if d]),
            },
            "revenue": {"collected": self.collected_revenue()},
        }

        return {
            "stats": stats,
            "charts": self.chart_data(now),
            "recent_activities": self.recent_activities(now),
            "top_performers": {"trainings": self.top_trainings()},
            "estimated": {
                "is_estimate": True,
                "revenue": {
                    "monthly": new_enrollments * REVENUE_PER_NEW_ENROLLMENT
                    + stats["products"]["active"] * REVENUE_PER_ACTIVE_PRODUCT,
                    "total": stats["trainings"]["enrolled"] * REVENUE_PER_ENROLLMENT
                    + stats["products"]["active"] * REVENUE_PER_ACTIVE_PRODUCT,
                },
                "product_sales": stats["products"]["active"] * SALES_PER_ACTIVE_PRODUCT,
            },
        }

    def collected_revenue(self) -> float:
        """Sum of completed enrollment payments."""
        pipeline = [
            {"$match": {"payment_info.status": "completed"}},
            {"$group": {"_id": None, "total": {"$sum": "$payment_info.amount"}}},
        ]
        rows = list(self.enrollments.aggregate(pipeline))
        return rows[0]["total"] if rows else 0

    def chart_data(self, now: datetime, months: int = 6) -> dict:
        starts = _months_back(now, months)
        ends = starts[1:] + [None]
        labels, users, enrollments = [], [], []
        for start, end in zip(starts, ends):
            window = {"$gte": start}
            if end is not None:
                window["$lt"] = end
            labels.append(start.strftime("%b %Y"))
            users.append(self.users.count_documents({"created_at": window}))
            enrollments.append(self.enrollments.count_documents({"created_at": window}))
        return {"labels": labels, "users": users, "enrollments": enrollments}

    def recent_activities(self, now: datetime, limit: int = 8) -> list:
        activities = []

        for user in self.users.find({}, {"name": 1, "created_at": 1}).sort("created_at", DESCENDING).limit(3):
            activities.append(("user", f"{user.get('name')} joined the platform", user["created_at"]))

        recent = list(self.enrollments.find({}, {"user": 1, "training": 1, "created_at": 1})
                      .sort("created_at", DESCENDING).limit(3))
        populate(recent, "user", "users", USER_REF)
        populate(recent, "training", "trainings", {"title": 1})
        for enrollment in recent:
            if enrollment.get("user") and enrollment.get("training"):
                activities.append((
                    "enrollment",
                    f"{enrollment['user'].get('name')} enrolled in {enrollment['training'].get('title')}",
                    enrollment["created_at"],
                ))

        sources = (
            (self.blog_posts, "blog", "New blog post: {}"),
            (self.jobs, "job", "New job posted: {}"),
            (self.internships, "internship", "New internship posted: {}"),
        )
        for collection, kind, template in sources:
            for doc in collection.find({}, {"title": 1, "created_at": 1}).sort("created_at", DESCENDING).limit(2):
                activities.append((kind, template.format(doc.get("title")), doc["created_at"]))

        activities.sort(key=lambda a: a[2], reverse=True)
        return [
            {"type": kind, "title": title, "timestamp": when, "time": format_time_ago(when, now)}
            for kind, title, when in activities[:limit]
        ]

    def top_trainings(self, limit: int = 5) -> list:
        pipeline = [
            {"$group": {"_id": "$training", "enrollments": {"$sum": 1}}},
            {"$sort": {"enrollments": -1}},
            {"$limit": limit},
        ]
        rows = list(self.enrollments.aggregate(pipeline))
        populate(rows, "_id", "trainings", {"title": 1})
        return serialize_docs(
            {"training": row["_id"], "enrollments": row["enrollments"]}
            for row in rows if row["_id"]
        )

    # ------------------------------------------------------------
    # Analytics
    # ------------------------------------------------------------

    def analytics(self, time_range: str = "7d") -> dict:
        if time_range not in TIME_RANGES:
            raise HTTPException(
                status_code=400,
                detail=f"time_range must be one of: {', '.join(TIME_RANGES)}"
            )
        now = datetime.utcnow()
        since = now - TIME_RANGES[time_range]
        window = {"created_at": {"$gte": since}}

        total_users = self.users.count_documents({})
        new_users = self.users.count_documents(window)
        recent_users = self.users.find({}, {"name": 1, "email": 1, "created_at": 1}).sort(
            "created_at", DESCENDING).limit(10)
        page_views = total_users * PAGE_VIEWS_PER_USER

        return {
            "time_range": time_range,
            "since": since,
            "overview": {
                "total_users": total_users,
                "active_users": self.users.count_documents({"active": {"$ne": False}}),
                "new_users": new_users,
                "registration_growth_rate": round(new_users / total_users * 100, 1) if total_users else 0.0,
                "total_trainings": self.trainings.count_documents({}),
                "active_trainings": self.trainings.count_documents({"active": True}),
                "total_products": self.products.count_documents({}),
                "new_enrollments": self.enrollments.count_documents(window),
                "new_applications": (
                    self.job_applications.count_documents(window)
                    + self.internship_applications.count_documents(window)
                ),
            },
            "recent_users": serialize_docs(recent_users),
            "estimated": {
                "is_estimate": True,
                "page_views": page_views,
                "bounce_rate": 32.5,
                "conversion_rate": CONVERSION_RATE,
                "avg_session_duration": "4m 30s",
                "traffic_sources": [
                    {"name": name, "share": share, "visitors": total_users * share // 100}
                    for name, share in TRAFFIC_SOURCES
                ],
                "devices": [
                    {"type": name, "share": share, "users": total_users * share // 100}
                    for name, share in DEVICES
                ],
            },
        }
