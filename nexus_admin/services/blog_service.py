"""
Blog Service - posts, comments and replies.

Anonymous readers and non-staff users only ever see published posts.
"""

from typing import Optional

from fastapi import HTTPException
from pymongo.errors import DuplicateKeyError

from nexus_admin.core.auth import STAFF
from nexus_admin.models import blog as blog_model
from nexus_admin.services.base import BaseService, USER_REF, to_object_id
from nexus_admin.utils.text import slugify


def _is_staff(session: Optional[dict]) -> bool:
    return bool(session) and session["role"] in STAFF


class BlogService(BaseService):
    collection_key = "blog_posts"
    entity_name = "Blog post"
    search_fields = ("title", "content", "excerpt")
    populate_fields = (("author", "users", USER_REF),)

    def before_save(self, doc: dict, previous: Optional[dict] = None) -> dict:
        return blog_model.before_save(doc)

    def _slug_for(self, title: str, exclude_id=None) -> str:
        slug = slugify(title)
        if not slug:
            raise HTTPException(status_code=400, detail="Title must contain letters or digits")
        query = {"slug": slug}
        if exclude_id is not None:
            query["_id"] = {"$ne": exclude_id}
        if self.collection.find_one(query, {"_id": 1}):
            raise HTTPException(status_code=409, detail="A post with this title already exists")
        return slug

    def list_posts(self, session: Optional[dict], page: int = 1, limit: int = 10,
                   search: Optional[str] = None, category: Optional[str] = None,
                   tag: Optional[str] = None, status: Optional[str] = None,
                   featured: Optional[bool] = None) -> dict:
        filters = {}
        if _is_staff(session):
            if status and status != "all":
                filters["status"] = status
        else:
            filters["status"] = "published"
        if category:
            filters["category"] = category
        if tag:
            filters["tags"] = tag
        if featured is not None:
            filters["is_featured"] = featured
        return self.list(search=search, filters=filters, page=page, limit=limit)

    def blog_summary(self) -> dict:
        return self.summary(extra={
            "published": {"status": "published"},
            "drafts": {"status": "draft"},
        })

    def create(self, data: dict, author_id: str) -> dict:
        self._slug_for(data["title"])
        doc = blog_model.new_post(data, to_object_id(author_id, "author id"))
        try:
            self.insert(doc)
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="A post with this title already exists")
        return self.to_response(doc)

    def read(self, post_id: str, session: Optional[dict]) -> dict:
        """Fetch for display. Counts a view; drafts and archived posts are staff-only."""
        doc = self.find_or_404(post_id)
        if not blog_model.is_published(doc) and not _is_staff(session):
            raise HTTPException(status_code=403, detail="This post is not published")
        return self.to_response(self.increment(doc, "views"))

    def read_by_slug(self, slug: str, session: Optional[dict]) -> dict:
        doc = self.collection.find_one({"slug": slug.lower()}, {"_id": 1})
        if not doc:
            raise HTTPException(status_code=404, detail=f"{self.entity_name} not found")
        return self.read(doc["_id"], session)

    def update_post(self, post_id: str, changes: dict) -> dict:
        existing = self.find_or_404(post_id)
        if changes.get("title") and changes["title"] != existing.get("title"):
            changes["slug"] = self._slug_for(changes["title"], exclude_id=existing["_id"])
        try:
            return self.to_response(self.update(existing["_id"], changes))
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="A post with this title already exists")

    def add_comment(self, post_id: str, user_id: str, content: str) -> dict:
        doc = self.find_or_404(post_id)
        if not blog_model.is_published(doc):
            raise HTTPException(status_code=400, detail="Comments are only allowed on published posts")
        comment = blog_model.new_comment(to_object_id(user_id, "user id"), content)
        self.collection.update_one({"_id": doc["_id"]}, {"$push": {"comments": comment}})
        return comment

    def _comment_path(self, post_id: str, comment_id: str) -> tuple:
        """
        Locate a comment; returns (post _id, comment _id, "comments.<index>").
        Comments are append-only, so the index stays valid for the write.
        """
        doc = self.find_or_404(post_id)
        cid = to_object_id(comment_id, "comment id")
        for index, comment in enumerate(doc.get("comments") or []):
            if comment.get("_id") == cid:
                return doc["_id"], cid, f"comments.{index}"
        raise HTTPException(status_code=404, detail="Comment not found")

    def add_reply(self, post_id: str, comment_id: str, user_id: str, content: str) -> dict:
        post_oid, cid, path = self._comment_path(post_id, comment_id)
        reply = blog_model.new_reply(to_object_id(user_id, "user id"), content)
        result = self.collection.update_one(
            {"_id": post_oid, f"{path}._id": cid},
            {"$push": {f"{path}.replies": reply}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Comment not found")
        return reply

    def like(self, post_id: str) -> dict:
        doc = self.find_or_404(post_id)
        if not blog_model.is_published(doc):
            raise HTTPException(status_code=404, detail=f"{self.entity_name} not found")
        self.increment(doc, "likes")
        return {"likes": doc["likes"]}

    def approve_comment(self, post_id: str, comment_id: str, approved: bool = True) -> dict:
        post_oid, cid, path = self._comment_path(post_id, comment_id)
        result = self.collection.update_one(
            {"_id": post_oid, f"{path}._id": cid},
            {"$set": {f"{path}.is_approved": approved}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=404, detail="Comment not found")
        return {"comment_id": comment_id, "is_approved": approved}
