"""
Enrollment documents.

An enrollment links one user to one training. The pair is unique
(compound index in ``init_mongo_indexes``).

Status flow:
    pending -> confirmed -> in-progress -> completed
    any state -> cancelled
"""

from datetime import datetime
from typing import Optional

from bson import ObjectId

STATUSES = ("pending", "confirmed", "in-progress", "completed", "cancelled")
PAYMENT_STATUSES = ("pending", "completed", "failed", "refunded")


def new_enrollment(user_id: ObjectId, training_id: ObjectId, notes: Optional[str] = None,
                   payment_info: Optional[dict] = None) -> dict:
    return {
        "user": user_id,
        "training": training_id,
        "enrollment_date": datetime.utcnow(),
        "status": "confirmed",
        "progress_percentage": 0,
        "completed_modules": [],
        "certificate": {
            "is_issued": False,
            "issued_at": None,
            "certificate_id": None,
            "certificate_url": None,
        },
        "notes": notes,
        "payment_info": payment_info,
        "feedback": None,
    }


def is_complete(enrollment: dict) -> bool:
    return (
        enrollment.get("progress_percentage") == 100
        and enrollment.get("status") == "completed"
    )


def update_progress(enrollment: dict, completed_modules: int, total_modules: int) -> dict:
    """
    Recompute progress from module counts.

    Reaching 100% only completes an enrollment that is in progress;
    a cancelled or confirmed enrollment keeps its status.
    """
    if total_modules > 0:
        percentage = int(round(completed_modules / total_modules * 100))
        enrollment["progress_percentage"] = max(0, min(100, percentage))
        if enrollment["progress_percentage"] == 100 and enrollment.get("status") == "in-progress":
            enrollment["status"] = "completed"
    return enrollment
