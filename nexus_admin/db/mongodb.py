"""
MongoDB Connection Utility

Every entity of the admin panel lives in its own collection:
- users, trainings, enrollments, products
- blog_posts, announcements
- jobs, job_applications, internships, internship_applications
- team_members, website_content, seo_settings

References between documents are plain ObjectIds. The store does not
enforce them, so a reference may dangle after its target is deleted.
"""
import logging

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from nexus_admin.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the application database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection by name (see COLLECTIONS)."""
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "trainings": "trainings",
    "enrollments": "enrollments",
    "products": "products",
    "blog_posts": "blog_posts",
    "announcements": "announcements",
    "jobs": "jobs",
    "job_applications": "job_applications",
    "internships": "internships",
    "internship_applications": "internship_applications",
    "team_members": "team_members",
    "website_content": "website_content",
    "seo_settings": "seo_settings",
}


def init_mongo_indexes():
    """
    Create indexes, including the unique ones that back 409 conflicts.
    Call this once during app startup.
    """
    db = get_mongo_db()

    db[COLLECTIONS["users"]].create_index("email", unique=True)
    db[COLLECTIONS["users"]].create_index("role")

    db[COLLECTIONS["trainings"]].create_index("category")
    db[COLLECTIONS["trainings"]].create_index("active")

    # One enrollment per user per training
    db[COLLECTIONS["enrollments"]].create_index([
        ("user", ASCENDING),
        ("training", ASCENDING)
    ], unique=True)

    db[COLLECTIONS["products"]].create_index("category")
    db[COLLECTIONS["products"]].create_index("status")

    db[COLLECTIONS["blog_posts"]].create_index("slug", unique=True)
    db[COLLECTIONS["blog_posts"]].create_index([("status", ASCENDING), ("published_at", DESCENDING)])

    db[COLLECTIONS["announcements"]].create_index([
        ("is_active", ASCENDING),
        ("start_date", ASCENDING),
        ("end_date", ASCENDING)
    ])

    db[COLLECTIONS["jobs"]].create_index([("status", ASCENDING), ("created_at", DESCENDING)])
    # One application per applicant email per job
    db[COLLECTIONS["job_applications"]].create_index([
        ("job_id", ASCENDING),
        ("applicant_info.email", ASCENDING)
    ], unique=True)

    db[COLLECTIONS["internships"]].create_index([("status", ASCENDING), ("application_deadline", ASCENDING)])
    db[COLLECTIONS["internship_applications"]].create_index([
        ("internship_id", ASCENDING),
        ("email", ASCENDING)
    ], unique=True)

    db[COLLECTIONS["team_members"]].create_index([("status", ASCENDING), ("display_order", ASCENDING)])
    db[COLLECTIONS["website_content"]].create_index("section", unique=True)

    logger.info("MongoDB indexes created successfully")
