"""
Blog Routes

GET /blog - List posts (published only unless staff; ?summary=true for counts)
GET /blog/slug/{slug} - Get post by slug
GET /blog/{post_id} - Get post (counts a view)
POST /blog - Create post (admin, manager, editor)
PUT /blog/{post_id} - Update post (admin, manager, editor)
DELETE /blog/{post_id} - Delete post (admin, manager)
POST /blog/{post_id}/comments - Comment on a published post (authenticated)
POST /blog/{post_id}/comments/{comment_id}/replies - Reply to a comment (authenticated)
PATCH /blog/{post_id}/comments/{comment_id}/approval - Approve or hide a comment (admin, manager, editor)
POST /blog/{post_id}/like - Like a published post
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import EDITORIAL, STAFF, get_current_user, require_roles, resolve_session
from nexus_admin.schemas.schemas import BlogPostCreate, BlogPostUpdate, CommentCreate
from nexus_admin.services.base import serialize_doc
from nexus_admin.services.blog_service import BlogService

router = APIRouter(prefix="/blog", tags=["Blog"])


@router.get("")
async def list_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in title, content and excerpt"),
    category: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    status: Optional[str] = Query(None, description="Staff only; non-staff always get published posts"),
    featured: Optional[bool] = Query(None),
    summary: bool = Query(False, description="Return aggregate counts only (staff)"),
    session: Optional[dict] = Depends(resolve_session)
):
    service = BlogService()
    if summary:
        if not session or session["role"] not in STAFF:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return ok(service.blog_summary())
    return ok(service.list_posts(session, page, limit, search, category, tag, status, featured))


@router.get("/slug/{slug}")
async def get_post_by_slug(slug: str, session: Optional[dict] = Depends(resolve_session)):
    return ok(BlogService().read_by_slug(slug, session))


@router.get("/{post_id}")
async def get_post(post_id: str, session: Optional[dict] = Depends(resolve_session)):
    return ok(BlogService().read(post_id, session))


@router.post("", status_code=201)
async def create_post(data: BlogPostCreate, user: dict = Depends(require_roles(*EDITORIAL))):
    """Create a post; the slug is derived from the title and must be unique."""
    post = BlogService().create(data.model_dump(), author_id=user["id"])
    return ok(post, message="Blog post created successfully")


@router.put("/{post_id}")
async def update_post(post_id: str, data: BlogPostUpdate, user: dict = Depends(require_roles(*EDITORIAL))):
    post = BlogService().update_post(post_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return ok(post, message="Blog post updated successfully")


@router.delete("/{post_id}")
async def delete_post(post_id: str, user: dict = Depends(require_roles(*STAFF))):
    BlogService().delete(post_id)
    return ok(message="Blog post deleted successfully")


@router.post("/{post_id}/comments", status_code=201)
async def add_comment(post_id: str, data: CommentCreate, user: dict = Depends(get_current_user)):
    comment = BlogService().add_comment(post_id, user["id"], data.content)
    return ok(serialize_doc(comment), message="Comment added")


@router.post("/{post_id}/comments/{comment_id}/replies", status_code=201)
async def add_reply(post_id: str, comment_id: str, data: CommentCreate, user: dict = Depends(get_current_user)):
    reply = BlogService().add_reply(post_id, comment_id, user["id"], data.content)
    return ok(serialize_doc(reply), message="Reply added")


@router.patch("/{post_id}/comments/{comment_id}/approval")
async def approve_comment(
    post_id: str,
    comment_id: str,
    approved: bool = Query(True),
    user: dict = Depends(require_roles(*EDITORIAL))
):
    return ok(BlogService().approve_comment(post_id, comment_id, approved))


@router.post("/{post_id}/like")
async def like_post(post_id: str):
    return ok(BlogService().like(post_id))
