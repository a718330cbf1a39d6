"""
Blog post documents.

Derived fields:
- ``slug`` comes from the title (uniqueness is checked by the service)
- ``excerpt`` defaults to the first 200 characters of the HTML-stripped content
- ``published_at`` is stamped the first time the post is published
"""

import copy
from datetime import datetime
from typing import Optional

from bson import ObjectId

from nexus_admin.utils.text import make_excerpt, slugify

STATUSES = ("draft", "published", "archived")

DEFAULTS = {
    "excerpt": None,
    "featured_image": None,
    "category": None,
    "tags": [],
    "status": "draft",
    "published_at": None,
    "is_featured": False,
    "views": 0,
    "likes": 0,
    "comments": [],
    "seo": None,
}

COUNTERS = ("views", "likes")


def new_post(data: dict, author_id: ObjectId) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update(data)
    doc["author"] = author_id
    doc["slug"] = slugify(doc["title"])
    if not doc.get("seo"):
        doc["seo"] = {
            "meta_title": doc["title"],
            "meta_description": None,
            "keywords": list(doc.get("tags") or []),
        }
    return doc


def before_save(post: dict) -> dict:
    if post.get("status") == "published" and not post.get("published_at"):
        post["published_at"] = datetime.utcnow()
    if not post.get("excerpt") and post.get("content"):
        post["excerpt"] = make_excerpt(post["content"])
    return post


def new_comment(user_id: ObjectId, content: str) -> dict:
    return {
        "_id": ObjectId(),
        "user": user_id,
        "content": content,
        "created_at": datetime.utcnow(),
        "is_approved": False,
        "replies": [],
    }


def new_reply(user_id: ObjectId, content: str) -> dict:
    return {
        "_id": ObjectId(),
        "user": user_id,
        "content": content,
        "created_at": datetime.utcnow(),
    }


def is_published(post: Optional[dict]) -> bool:
    return bool(post) and post.get("status") == "published"
