"""Team member documents (about page)."""

import copy

STATUSES = ("active", "inactive")

DEFAULTS = {
    "bio": None,
    "image": None,
    "email": None,
    "phone": None,
    "expertise": [],
    "experience": None,
    "education": None,
    "achievements": [],
    "is_ceo": False,
    "is_founder": False,
    "is_featured": False,
    "join_date": None,
    "status": "active",
    "display_order": 0,
    "social_links": {},
}


def new_member(data: dict) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update(data)
    return doc
