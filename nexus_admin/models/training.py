"""Training documents."""

import copy

CATEGORIES = (
    "Web Development",
    "Mobile Development",
    "AI & Machine Learning",
    "Data Science",
    "Digital Marketing",
    "UI/UX Design",
    "Cloud Computing",
    "Cybersecurity",
)

LEVELS = ("Beginner", "Intermediate", "Advanced")

DEFAULTS = {
    "level": "Beginner",
    "original_price": None,
    "curriculum": [],
    "prerequisites": [],
    "what_you_will_learn": [],
    "features": [],
    "tags": [],
    "image": None,
    "thumbnail": None,
    "enrollment_count": 0,
    "rating": 0,
    "review_count": 0,
    "is_popular": False,
    "is_featured": False,
    "active": True,
    "start_date": None,
    "end_date": None,
    "schedule": "Self-paced",
    "certificate": True,
    "max_capacity": None,
}

# Maintained by the enrollment service only
COUNTERS = ("enrollment_count", "rating", "review_count")


def new_training(data: dict) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update(data)
    return doc


def has_capacity(training: dict) -> bool:
    capacity = training.get("max_capacity")
    if not capacity:
        return True
    return training.get("enrollment_count", 0) < capacity
