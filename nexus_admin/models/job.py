"""
Job postings and job applications.
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
    "Project Management",
    "Sales & Marketing",
    "Human Resources",
    "Finance & Accounting",
    "Operations",
    "Quality Assurance",
    "DevOps",
    "Product Management",
)

LOCATION_TYPES = ("Remote", "On-site", "Hybrid")
EMPLOYMENT_TYPES = ("Full-time", "Part-time", "Contract", "Freelance", "Temporary")
EXPERIENCE_LEVELS = ("Entry Level", "Mid Level", "Senior Level", "Lead/Manager", "Executive")
SALARY_TYPES = ("Range", "Fixed", "Negotiable")
SALARY_PERIODS = ("Hour", "Day", "Week", "Month", "Year")

APPLICATION_STATUSES = (
    "Submitted",
    "Under Review",
    "Shortlisted",
    "Interview Scheduled",
    "Interview Completed",
    "Offer Extended",
    "Hired",
    "Rejected",
    "Withdrawn",
)
CONTACT_METHODS = ("email", "whatsapp", "phone")
INTERVIEW_TYPES = ("Phone", "Video", "In-Person", "Panel", "Technical")
APPLICATION_PRIORITIES = ("Low", "Medium", "High")
APPLICATION_SOURCES = ("Website", "LinkedIn", "Indeed", "Referral", "Job Board", "Other")

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "INR": "₹"}

DEFAULTS = {
    "location_type": "On-site",
    "employment_type": "Full-time",
    "experience_level": "Entry Level",
    "salary": {"type": "Negotiable", "currency": "USD", "period": "Year"},
    "start_date": None,
    "requirements": [],
    "responsibilities": [],
    "qualifications": [],
    "skills": [],
    "benefits": [],
    "company_info": None,
    "application_process": None,
    "featured": False,
    "urgent": False,
    "status": "Active",
    "application_count": 0,
    "view_count": 0,
    "max_applications": None,
    "tags": [],
    "updated_by": None,
}

COUNTERS = ("application_count", "view_count")


def new_posting(data: dict) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update(data)
    return posting.apply_auto_status(doc)


def before_save(job: dict) -> dict:
    return posting.apply_auto_status(job)


def _money(amount, currency: str) -> str:
    symbol = CURRENCY_SYMBOLS.get(currency)
    value = f"{amount:,.0f}" if isinstance(amount, (int, float)) else str(amount)
    return f"{symbol}{value}" if symbol else f"{value} {currency}"


def formatted_salary(job: dict) -> str:
    salary = job.get("salary") or {}
    kind = salary.get("type", "Negotiable")
    currency = salary.get("currency") or "USD"
    period = salary.get("period") or "Year"
    if kind == "Range" and salary.get("min") is not None and salary.get("max") is not None:
        return f"{_money(salary['min'], currency)} - {_money(salary['max'], currency)} / {period}"
    if kind == "Fixed" and salary.get("amount") is not None:
        return f"{_money(salary['amount'], currency)} / {period}"
    return "Negotiable"


def with_virtuals(job: dict, now: Optional[datetime] = None) -> dict:
    posting.with_virtuals(job, now)
    job["formatted_salary"] = formatted_salary(job)
    return job


# ------------------------------------------------------------
# Applications
# ------------------------------------------------------------

def new_application(job: dict, data: dict) -> dict:
    applicant = dict(data.pop("applicant_info"))
    applicant["email"] = applicant["email"].strip().lower()
    doc = {
        "job_id": job["_id"],
        "job_title": job.get("title"),
        "company": job.get("company"),
        "applicant_info": applicant,
        "cover_letter": None,
        "contact_method": "email",
        "status": "Submitted",
        "submitted_at": datetime.utcnow(),
        "reviewed_at": None,
        "reviewed_by": None,
        "notes": [],
        "interview_details": None,
        "offer_details": None,
        "tags": [],
        "priority": "Medium",
        "source": "Website",
    }
    doc.update(data)
    return doc


def set_status(application: dict, status: str, reviewer_id: Optional[ObjectId] = None) -> dict:
    """Move to ``status``; the first move away from Submitted stamps the review."""
    if application.get("status") == "Submitted" and status != "Submitted" and not application.get("reviewed_at"):
        application["reviewed_at"] = datetime.utcnow()
        application["reviewed_by"] = reviewer_id
    application["status"] = status
    return application


def new_note(content: str, author_id: ObjectId) -> dict:
    return {"content": content, "added_by": author_id, "added_at": datetime.utcnow()}


def schedule_interview(application: dict, details: dict, reviewer_id: Optional[ObjectId] = None) -> dict:
    application["interview_details"] = details
    return set_status(application, "Interview Scheduled", reviewer_id)
