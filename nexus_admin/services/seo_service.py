"""
SEO Service - the single site-wide SEO settings document.
"""

import copy
from datetime import datetime

from nexus_admin.db.mongodb import COLLECTIONS, get_collection
from nexus_admin.services.base import serialize_doc, to_object_id

SETTINGS_KEY = "site"

DEFAULT_SEO = {
    "meta": {
        "title": "Arsa Nexus LLC - Professional Training & Career Development",
        "description": "Industry-focused training programs, internships and career opportunities.",
        "keywords": ["training", "internships", "jobs", "career development"],
        "author": "Arsa Nexus LLC",
        "og_image": None,
        "twitter_handle": None,
    },
    "analytics": {
        "google_analytics_id": None,
        "google_tag_manager_id": None,
        "facebook_pixel_id": None,
    },
    "sitemap": {"enabled": True, "change_frequency": "weekly", "priority": 0.8},
    "robots": {"index": True, "follow": True, "disallow": ["/admin", "/api"]},
    "structured_data": {
        "organization_name": "Arsa Nexus LLC",
        "organization_type": "EducationalOrganization",
        "logo": None,
        "same_as": [],
    },
}


def _merge(base: dict, updates: dict) -> dict:
    """Recursive merge; nested dicts are merged, everything else replaced."""
    merged = copy.deepcopy(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SeoService:

    def __init__(self):
        self.collection = get_collection(COLLECTIONS["seo_settings"])

    def get(self) -> dict:
        """Return the settings, creating the defaults on first read."""
        doc = self.collection.find_one({"key": SETTINGS_KEY})
        if doc is None:
            doc = copy.deepcopy(DEFAULT_SEO)
            doc.update(key=SETTINGS_KEY, updated_at=datetime.utcnow(), updated_by=None)
            self.collection.insert_one(doc)
        return serialize_doc(doc)

    def save(self, updates: dict, updated_by: str) -> dict:
        current = self.get()
        current.pop("_id", None)
        merged = _merge(current, updates)
        merged["updated_at"] = datetime.utcnow()
        merged["updated_by"] = to_object_id(updated_by, "user id")
        self.collection.update_one({"key": SETTINGS_KEY}, {"$set": merged}, upsert=True)
        return serialize_doc(self.collection.find_one({"key": SETTINGS_KEY}))
