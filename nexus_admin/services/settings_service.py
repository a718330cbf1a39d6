"""
Settings Service - site-wide settings kept in one JSON file.

GET creates the file with defaults on first read.
Updates are a shallow merge followed by validation of the merged result:
site_name, site_description and contact_email must be present, and
contact_email must look like an email address.
"""

import json
import logging
import os
import re
import tempfile
from datetime import datetime
from typing import Optional

from fastapi import HTTPException

from nexus_admin.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
REQUIRED_FIELDS = ("site_name", "site_description", "contact_email")

DEFAULT_SETTINGS = {
    "site_name": "Arsa Nexus LLC",
    "site_description": "Professional AI Education & Training Platform",
    "contact_email": "info@arsanexus.com",
    "phone": "+1 (555) 123-4567",
    "address": "123 Tech Street, Innovation City, IC 12345",
    "social_media": {
        "facebook": "https://facebook.com/arsanexus",
        "twitter": "https://twitter.com/arsanexus",
        "linkedin": "https://linkedin.com/company/arsanexus",
        "instagram": "https://instagram.com/arsanexus",
        "youtube": "https://youtube.com/arsanexus",
    },
    "seo": {
        "meta_title": "Arsa Nexus - AI Education & Professional Training",
        "meta_description": "Transform your career with cutting-edge AI education and professional training programs.",
        "meta_keywords": "AI education, machine learning, professional training, career development",
        "og_image": "/images/og-image.jpg",
    },
    "features": {
        "user_registration": True,
        "email_notifications": True,
        "maintenance": False,
        "analytics": True,
        "chat_support": True,
    },
    "updated_at": None,
    "updated_by": None,
}


def _write(path: str, data: dict):
    """Write through a temp file so readers never see half a file."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)
    except OSError:
        os.unlink(tmp_path)
        raise


def load_settings() -> dict:
    path = settings.settings_file
    if not os.path.exists(path):
        data = dict(DEFAULT_SETTINGS, updated_at=datetime.utcnow().isoformat())
        _write(path, data)
        logger.info("Created default site settings at %s", path)
        return data

    with open(path, encoding="utf-8") as f:
        return json.load(f)


def validate_settings(data: dict):
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise HTTPException(status_code=400, detail=f"{field} is required")
    if not EMAIL_RE.match(data["contact_email"]):
        raise HTTPException(status_code=400, detail="Please provide a valid email address")


def update_settings(changes: dict, updated_by: Optional[str]) -> dict:
    current = load_settings()
    merged = {**current, **changes}
    merged["updated_at"] = datetime.utcnow().isoformat()
    merged["updated_by"] = updated_by
    validate_settings(merged)
    _write(settings.settings_file, merged)
    logger.info("Site settings updated by %s", updated_by)
    return merged
