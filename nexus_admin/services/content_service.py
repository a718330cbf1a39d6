"""
Content Service - editable website content, one document per section.

Every read goes to the store, so all server instances see an edit as
soon as it is written.
"""

import copy
import logging
from datetime import datetime
from typing import Optional

from fastapi import HTTPException
from pymongo import ASCENDING

from nexus_admin.db.mongodb import COLLECTIONS, get_collection
from nexus_admin.services.base import to_object_id
from nexus_admin.services.default_content import DEFAULT_CONTENT

logger = logging.getLogger(__name__)


class ContentService:

    def __init__(self):
        self.collection = get_collection(COLLECTIONS["website_content"])

    def _upsert(self, section: str, content: dict, updated_by: Optional[str]) -> dict:
        now = datetime.utcnow()
        self.collection.update_one(
            {"section": section},
            {
                "$set": {
                    "content": content,
                    "last_updated": now,
                    "updated_by": to_object_id(updated_by, "user id") if updated_by else None,
                },
                "$setOnInsert": {"created_at": now},
            },
            upsert=True
        )
        return {"section": section, "last_updated": now}

    def all_sections(self) -> dict:
        return {
            doc["section"]: doc["content"]
            for doc in self.collection.find({}, {"section": 1, "content": 1}).sort("section", ASCENDING)
        }

    def get_all(self, seed_by: Optional[str] = None) -> dict:
        """Sections as ``{section: content}``; an empty store is seeded with the defaults first."""
        content = self.all_sections()
        if content:
            return content

        for section, section_content in DEFAULT_CONTENT.items():
            self._upsert(section, copy.deepcopy(section_content), seed_by)
        logger.info("Seeded %d default content sections", len(DEFAULT_CONTENT))
        return self.all_sections()

    def get_section(self, section: str) -> dict:
        doc = self.collection.find_one({"section": section}, {"content": 1})
        if not doc:
            raise HTTPException(status_code=404, detail=f"Content section '{section}' not found")
        return doc["content"]

    def save(self, content: dict, section: Optional[str], updated_by: str) -> list:
        """Save one section, or every section of a full ``{section: content}`` map."""
        if section:
            return [self._upsert(section, content, updated_by)]
        if not content:
            raise HTTPException(status_code=400, detail="Content data is required")
        return [self._upsert(name, value, updated_by) for name, value in content.items()]

    def delete_section(self, section: str):
        result = self.collection.delete_one({"section": section})
        if result.deleted_count == 0:
            raise HTTPException(status_code=404, detail=f"Content section '{section}' not found")
        logger.info("Deleted content section %s", section)
