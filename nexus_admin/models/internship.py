"""
Internship postings and internship applications.

Postings share the Job lifecycle (see ``models.posting``).
"""

import copy
from datetime import datetime
from typing import Optional

from bson import ObjectId

from nexus_admin.models import posting

CATEGORIES = (
    "Web Development",
    "Mobile Development",
    "AI & Machine Learning",
    "Data Science",
    "Digital Marketing",
    "UI/UX Design",
    "Cloud Computing",
    "Cybersecurity",
    "Business Development",
    "Content Creation",
    "Other",
)

LEVELS = ("Entry Level", "Intermediate", "Advanced")
LOCATION_TYPES = ("Remote", "On-site", "Hybrid")
STIPEND_PERIODS = ("Monthly", "Weekly", "Total", "Unpaid")
EXPERIENCE_REQUIRED = ("None", "0-1 years", "1-2 years", "2+ years")

APPLICATION_STATUSES = (
    "Pending",
    "Under Review",
    "Interview Scheduled",
    "Accepted",
    "Rejected",
    "Withdrawn",
)
APPLICANT_EXPERIENCE = ("No Experience", "Less than 1 year", "1-2 years", "2-3 years", "3+ years")
INTERVIEW_TYPES = ("Phone", "Video", "In-Person", "Online")

DEFAULTS = {
    "level": "Entry Level",
    "location_type": "On-site",
    "stipend": {"amount": 0, "currency": "USD", "period": "Unpaid"},
    "start_date": None,
    "requirements": [],
    "responsibilities": [],
    "skills_required": [],
    "experience_required": "None",
    "benefits": [],
    "company_info": None,
    "contact_info": None,
    "featured": False,
    "urgent": False,
    "status": "Active",
    "application_count": 0,
    "max_applications": None,
    "views": 0,
    "tags": [],
}

COUNTERS = ("application_count", "views")


def new_posting(data: dict) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update(data)
    return posting.apply_auto_status(doc)


def before_save(internship: dict) -> dict:
    return posting.apply_auto_status(internship)


def with_virtuals(internship: dict, now: Optional[datetime] = None) -> dict:
    posting.with_virtuals(internship, now)
    internship["days_to_apply"] = internship.pop("days_remaining")
    return internship


# ------------------------------------------------------------
# Applications
# ------------------------------------------------------------

def new_application(internship: dict, data: dict) -> dict:
    doc = {
        "internship_id": internship["_id"],
        "phone": None,
        "current_position": None,
        "company": None,
        "experience": "No Experience",
        "education": None,
        "skills": [],
        "cover_letter": None,
        "motivation": None,
        "availability": None,
        "resume": None,
        "portfolio": None,
        "linkedin": None,
        "github": None,
        "references": [],
        "status": "Pending",
        "admin_notes": [],
        "interview": {"scheduled": False},
        "source": "Website",
        "applied_at": datetime.utcnow(),
    }
    doc.update(data)
    doc["email"] = doc["email"].strip().lower()
    return doc


def full_name(application: dict) -> str:
    return f"{application.get('first_name', '')} {application.get('last_name', '')}".strip()


def new_admin_note(note: str, author_id: ObjectId) -> dict:
    return {"note": note, "added_by": author_id, "added_at": datetime.utcnow()}


def schedule_interview(application: dict, date: datetime, time: Optional[str] = None,
                       interview_type: str = "Video", meeting_link: Optional[str] = None,
                       notes: Optional[str] = None) -> dict:
    application["interview"] = {
        "scheduled": True,
        "date": date,
        "time": time,
        "type": interview_type,
        "meeting_link": meeting_link,
        "notes": notes,
    }
    application["status"] = "Interview Scheduled"
    return application
