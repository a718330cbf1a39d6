"""
Announcement Routes

GET /announcements - List announcements (?summary=true for counts)
GET /announcements/active - Announcements showing now, for an audience and location
GET /announcements/{announcement_id} - Get announcement
POST /announcements - Create announcement (admin, manager, editor)
PUT /announcements/{announcement_id} - Update announcement (admin, manager, editor)
DELETE /announcements/{announcement_id} - Delete announcement (admin, manager)
POST /announcements/{announcement_id}/view - Record a view
POST /announcements/{announcement_id}/dismiss - Record a dismissal
POST /announcements/{announcement_id}/click - Record an action button click

View and dismiss count once per signed-in user; anonymous calls only
bump the counters.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import EDITORIAL, STAFF, require_roles, resolve_session
from nexus_admin.schemas.schemas import AnnouncementCreate, AnnouncementUpdate
from nexus_admin.services.announcement_service import AnnouncementService, audience_for_role

router = APIRouter(prefix="/announcements", tags=["Announcements"])


def _session_user(session: Optional[dict]) -> Optional[str]:
    return session["id"] if session else None


@router.get("")
async def list_announcements(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in title and content"),
    type: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    target_audience: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    active: Optional[bool] = Query(None),
    summary: bool = Query(False, description="Return aggregate counts only")
):
    service = AnnouncementService()
    if summary:
        return ok(service.announcement_summary())
    return ok(service.list_announcements(page, limit, search, type, priority, target_audience, location, active))


@router.get("/active")
async def active_announcements(
    audience: Optional[str] = Query(None, description="Defaults to the audience of the caller's role"),
    location: Optional[str] = Query(None),
    session: Optional[dict] = Depends(resolve_session)
):
    """Currently showing announcements, highest priority first."""
    audience = audience or audience_for_role(session["role"] if session else None)
    return ok(AnnouncementService().active_for(audience, location))


@router.get("/{announcement_id}")
async def get_announcement(announcement_id: str):
    return ok(AnnouncementService().get(announcement_id))


@router.post("", status_code=201)
async def create_announcement(data: AnnouncementCreate, user: dict = Depends(require_roles(*EDITORIAL))):
    announcement = AnnouncementService().create(data.model_dump(), created_by=user["id"])
    return ok(announcement, message="Announcement created successfully")


@router.put("/{announcement_id}")
async def update_announcement(
    announcement_id: str,
    data: AnnouncementUpdate,
    user: dict = Depends(require_roles(*EDITORIAL))
):
    service = AnnouncementService()
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    updated = service.update(announcement_id, changes, updated_by=user["id"])
    return ok(service.to_response(updated), message="Announcement updated successfully")


@router.delete("/{announcement_id}")
async def delete_announcement(announcement_id: str, user: dict = Depends(require_roles(*STAFF))):
    AnnouncementService().delete(announcement_id)
    return ok(message="Announcement deleted successfully")


@router.post("/{announcement_id}/view")
async def view_announcement(announcement_id: str, session: Optional[dict] = Depends(resolve_session)):
    return ok(AnnouncementService().mark_as_viewed(announcement_id, _session_user(session)))


@router.post("/{announcement_id}/dismiss")
async def dismiss_announcement(announcement_id: str, session: Optional[dict] = Depends(resolve_session)):
    return ok(AnnouncementService().mark_as_dismissed(announcement_id, _session_user(session)))


@router.post("/{announcement_id}/click")
async def click_announcement(announcement_id: str):
    return ok(AnnouncementService().track_click(announcement_id))
