"""
Base Service - shared CRUD plumbing for every collection.

Each entity service subclasses ``BaseService`` and declares:
- ``collection_key``: key into ``COLLECTIONS``
- ``search_fields``: fields the free-text ``search`` matches (case-insensitive)
- ``populate_fields``: references resolved on the way out
- ``before_save`` / ``present``: the entity's write hook and read virtuals

List responses share one shape:
    {"items": [...], "pagination": {"current", "total_pages", "total", "has_next", "has_prev"}}
"""

import copy
import logging
import math
import re
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException
from pymongo import DESCENDING
from pymongo.collection import Collection

from nexus_admin.db.mongodb import COLLECTIONS, get_collection

logger = logging.getLogger(__name__)

# Projection used whenever a user reference is populated
USER_REF = {"name": 1, "email": 1}

DEFAULT_SORT = [("created_at", DESCENDING), ("_id", DESCENDING)]

_MISSING = object()


# ============================================================
# HELPERS
# ============================================================

def _serialize(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict (ObjectIds become strings, at any depth)."""
    if doc is None:
        return None
    return _serialize(doc)


def serialize_docs(docs: Iterable[dict]) -> list:
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value, label: str = "id") -> ObjectId:
    """Parse an id from a path/body; a malformed id is a 400, not a 500."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail=f"Invalid {label}")


def search_filter(search: Optional[str], fields: Iterable[str]) -> Optional[dict]:
    """OR of case-insensitive substring matches. The term is escaped, so it is never a regex."""
    if not search or not search.strip():
        return None
    pattern = re.escape(search.strip())
    return {"$or": [{field: {"$regex": pattern, "$options": "i"}} for field in fields]}


def combine(*conditions: Optional[dict]) -> dict:
    """AND together the non-empty conditions."""
    parts = [c for c in conditions if c]
    if not parts:
        return {}
    if len(parts) == 1:
        return parts[0]
    return {"$and": parts}


def pagination_meta(page: int, limit: int, total: int) -> dict:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "current": page,
        "total_pages": total_pages,
        "total": total,
        "has_next": page < total_pages,
        "has_prev": page > 1,
    }


def month_start(now: Optional[datetime] = None) -> datetime:
    now = now or datetime.utcnow()
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def previous_month_start(now: Optional[datetime] = None) -> datetime:
    start = month_start(now)
    if start.month == 1:
        return start.replace(year=start.year - 1, month=12)
    return start.replace(month=start.month - 1)


def growth_percentage(current: int, previous: int) -> float:
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / previous * 100, 1)


def populate(docs: List[dict], field: str, collection_key: str, projection: Optional[dict] = None) -> List[dict]:
    """
    Replace the ObjectId in ``field`` with the referenced document.
    A dangling reference becomes None.
    """
    ids = {doc.get(field) for doc in docs if isinstance(doc.get(field), ObjectId)}
    refs = {}
    if ids:
        cursor = get_collection(COLLECTIONS[collection_key]).find({"_id": {"$in": list(ids)}}, projection)
        refs = {ref["_id"]: ref for ref in cursor}
    for doc in docs:
        if field in doc:
            doc[field] = refs.get(doc[field])
    return docs


# ============================================================
# BASE SERVICE
# ============================================================

class BaseService:
    collection_key: str = ""
    entity_name: str = "Document"
    search_fields: Tuple[str, ...] = ()
    populate_fields: Tuple[Tuple[str, str, Optional[dict]], ...] = (("created_by", "users", USER_REF),)
    track_updated_by: bool = False

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS[self.collection_key])

    # --- hooks -------------------------------------------------

    def before_save(self, doc: dict, previous: Optional[dict] = None) -> dict:
        """Runs on every insert and update, before the write."""
        return doc

    def present(self, doc: dict) -> dict:
        """Adds read-time virtuals before a document leaves the service."""
        return doc

    # --- reads -------------------------------------------------

    def find_or_404(self, doc_id) -> dict:
        doc = self.collection.find_one({"_id": to_object_id(doc_id)})
        if not doc:
            raise HTTPException(status_code=404, detail=f"{self.entity_name} not found")
        return doc

    def to_responses(self, docs: List[dict]) -> list:
        for field, collection_key, projection in self.populate_fields:
            populate(docs, field, collection_key, projection)
        return [serialize_doc(self.present(doc)) for doc in docs]

    def to_response(self, doc: dict) -> dict:
        return self.to_responses([doc])[0]

    def get(self, doc_id) -> dict:
        return self.to_response(self.find_or_404(doc_id))

    def paginate(self, query: dict, page: int = 1, limit: int = 10,
                 sort: Optional[list] = None, projection: Optional[dict] = None) -> dict:
        total = self.collection.count_documents(query)
        cursor = (
            self.collection.find(query, projection)
            .sort(sort or DEFAULT_SORT)
            .skip((page - 1) * limit)
            .limit(limit)
        )
        return {
            "items": self.to_responses(list(cursor)),
            "pagination": pagination_meta(page, limit, total),
        }

    def list(self, search: Optional[str] = None, filters: Optional[dict] = None,
             page: int = 1, limit: int = 10, sort: Optional[list] = None) -> dict:
        query = combine(filters, search_filter(search, self.search_fields))
        return self.paginate(query, page, limit, sort)

    def summary(self, base_query: Optional[dict] = None, extra: Optional[dict] = None) -> dict:
        """Aggregate counts for dashboard widgets."""
        now = datetime.utcnow()
        start, prev = month_start(now), previous_month_start(now)
        this_month = self.collection.count_documents(combine(base_query, {"created_at": {"$gte": start}}))
        last_month = self.collection.count_documents(
            combine(base_query, {"created_at": {"$gte": prev, "$lt": start}})
        )
        result = {
            "total": self.collection.count_documents(base_query or {}),
            "this_month": this_month,
            "last_month": last_month,
            "growth": growth_percentage(this_month, last_month),
        }
        for name, condition in (extra or {}).items():
            result[name] = self.collection.count_documents(combine(base_query, condition))
        return result

    # --- writes ------------------------------------------------

    def insert(self, doc: dict, created_by=None) -> dict:
        now = datetime.utcnow()
        doc["created_at"] = now
        doc["updated_at"] = now
        if created_by is not None:
            doc["created_by"] = to_object_id(created_by)
        doc = self.before_save(doc)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("Created %s %s", self.entity_name, doc["_id"])
        return doc

    def update(self, doc_id, changes: dict, updated_by=None) -> dict:
        """
        Partial merge of ``changes`` onto the stored document.

        Only fields that actually differ are written, so counters bumped
        concurrently with ``$inc`` are never overwritten.
        """
        existing = self.find_or_404(doc_id)
        merged = copy.deepcopy(existing)
        merged.update(changes)
        merged["updated_at"] = datetime.utcnow()
        if self.track_updated_by and updated_by is not None:
            merged["updated_by"] = to_object_id(updated_by)
        merged = self.before_save(merged, previous=existing)

        diff = {
            k: v for k, v in merged.items()
            if k != "_id" and existing.get(k, _MISSING) != v
        }
        if diff:
            self.collection.update_one({"_id": existing["_id"]}, {"$set": diff})
        return merged

    def delete(self, doc_id) -> dict:
        doc = self.find_or_404(doc_id)
        self.collection.delete_one({"_id": doc["_id"]})
        logger.info("Deleted %s %s", self.entity_name, doc["_id"])
        return doc

    def increment(self, doc: dict, field: str, amount: int = 1) -> dict:
        """Atomic ``$inc`` on the stored document, mirrored on ``doc``."""
        self.collection.update_one({"_id": doc["_id"]}, {"$inc": {field: amount}})
        doc[field] = doc.get(field, 0) + amount
        return doc
