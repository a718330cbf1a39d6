"""
Shared fixtures.

Every test gets a fresh in-memory MongoDB (mongomock) swapped into
``nexus_admin.db.mongodb`` and its own tmp settings file / upload dir.
"""

import os
from datetime import datetime, timedelta

import mongomock
import pytest
from fastapi.testclient import TestClient

from nexus_admin.core.auth import create_session_token, hash_password
from nexus_admin.core.config import get_settings
from nexus_admin.db import mongodb
from nexus_admin.models import user as user_model


@pytest.fixture
def db(tmp_path, monkeypatch):
    client = mongomock.MongoClient()
    monkeypatch.setattr(mongodb, "_client", client)
    monkeypatch.setattr(mongodb, "_db", client["nexus_admin_test"])

    settings = get_settings()
    monkeypatch.setattr(settings, "settings_file", str(tmp_path / "data" / "settings.json"))
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))

    mongodb.init_mongo_indexes()
    return mongodb._db


@pytest.fixture
def client(db, monkeypatch):
    from nexus_admin.main import app

    # /uploads is mounted once at import; serve this test's upload dir instead
    upload_dir = get_settings().upload_dir
    os.makedirs(upload_dir, exist_ok=True)
    uploads = next(route for route in app.routes if getattr(route, "name", None) == "uploads")
    monkeypatch.setattr(uploads.app, "directory", upload_dir)
    monkeypatch.setattr(uploads.app, "all_directories", [upload_dir])
    return TestClient(app)


@pytest.fixture
def make_user(db):
    """
    Insert a user straight into the store (any role, including token-only
    roles such as "hr" and "editor") and return ``(doc, headers)``.
    """
    counter = {"n": 0}

    def _make(role="user", email=None, password=None, **fields):
        counter["n"] += 1
        doc = user_model.new_user(
            fields.pop("name", f"{role.title()} {counter['n']}"),
            email or f"{role}{counter['n']}@example.com",
            hash_password(password) if password else None,
            role=role,
        )
        doc.update(fields)
        now = datetime.utcnow()
        doc.setdefault("created_at", now)
        doc.setdefault("updated_at", now)
        doc["_id"] = db["users"].insert_one(doc).inserted_id
        return doc, {"Authorization": f"Bearer {create_session_token(doc)}"}

    return _make


@pytest.fixture
def auth(make_user):
    """Headers for a fresh user of the given role."""
    def _auth(role="user"):
        return make_user(role)[1]
    return _auth


@pytest.fixture
def future():
    return (datetime.utcnow() + timedelta(days=30)).isoformat()


@pytest.fixture
def training_payload():
    return {
        "title": "Full Stack Web Development",
        "description": "From HTML to deployment.",
        "category": "Web Development",
        "level": "Beginner",
        "duration": "12 weeks",
        "price": 499,
        "instructor": {"name": "Dana Lee"},
    }


@pytest.fixture
def job_payload(future):
    return {
        "title": "Backend Engineer",
        "company": "Arsa Nexus",
        "description": "Build and run our APIs.",
        "category": "Web Development",
        "location": "Remote",
        "application_deadline": future,
        "contact_info": {"email": "jobs@arsanexus.com"},
    }


@pytest.fixture
def internship_payload(future):
    return {
        "title": "Data Analyst Intern",
        "company": "Arsa Nexus",
        "description": "Help the analytics team.",
        "category": "Data Science",
        "location": "Remote",
        "duration": "3 months",
        "application_deadline": future,
    }
