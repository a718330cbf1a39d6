"""
Shared lifecycle of job and internship postings.

    Draft -> Active <-> Paused
    Active -> Closed   (deadline passed)
    Active -> Filled   (application_count reached max_applications)

Closed and Filled are terminal for the automatic rules: only an explicit
update moves a posting back to Active.
"""

import math
from datetime import datetime
from typing import Optional

STATUSES = ("Draft", "Active", "Paused", "Closed", "Filled")


def _auto_status(posting: dict, now: datetime) -> str:
    status = posting.get("status")
    if status != "Active":
        return status
    deadline = posting.get("application_deadline")
    if deadline and deadline < now:
        return "Closed"
    limit = posting.get("max_applications")
    if limit and posting.get("application_count", 0) >= limit:
        return "Filled"
    return status


def apply_auto_status(posting: dict, now: Optional[datetime] = None) -> dict:
    """Write-time hook: persist the Closed/Filled transitions."""
    posting["status"] = _auto_status(posting, now or datetime.utcnow())
    return posting


def effective_status(posting: dict, now: Optional[datetime] = None) -> str:
    """Read-time status; never trusts a stale stored Active."""
    return _auto_status(posting, now or datetime.utcnow())


def is_expired(posting: dict, now: Optional[datetime] = None) -> bool:
    deadline = posting.get("application_deadline")
    return bool(deadline) and deadline < (now or datetime.utcnow())


def days_remaining(posting: dict, now: Optional[datetime] = None) -> Optional[int]:
    deadline = posting.get("application_deadline")
    if not deadline:
        return None
    seconds = (deadline - (now or datetime.utcnow())).total_seconds()
    return max(0, math.ceil(seconds / 86400))


def can_apply(posting: dict, now: Optional[datetime] = None) -> bool:
    return effective_status(posting, now) == "Active"


def with_virtuals(posting: dict, now: Optional[datetime] = None) -> dict:
    now = now or datetime.utcnow()
    posting["effective_status"] = effective_status(posting, now)
    posting["is_expired"] = is_expired(posting, now)
    posting["days_remaining"] = days_remaining(posting, now)
    posting["can_apply"] = posting["effective_status"] == "Active"
    return posting


def effective_active_filter(now: datetime) -> dict:
    """
    Store query for postings whose effective status is Active.

    Only the deadline can go stale without a write: application_count
    changes through the application services, which re-run the hook.
    """
    return {
        "status": "Active",
        "$or": [{"application_deadline": None}, {"application_deadline": {"$gte": now}}],
    }
