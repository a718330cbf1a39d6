"""
Website Content Routes

Admin (admin, manager, editor):
GET /admin/content - All sections as {section: content} (seeds defaults when empty)
GET /admin/content/{section} - One section
POST /admin/content - Save {section, content} or a full {content: {section: ...}} map
DELETE /admin/content/{section} - Remove a section

Public:
GET /content - All sections, read from the store on every request
GET /content/{section} - One section
"""

from fastapi import APIRouter, Depends

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import EDITORIAL, require_roles
from nexus_admin.schemas.schemas import ContentSave
from nexus_admin.services.content_service import ContentService

admin_router = APIRouter(prefix="/admin/content", tags=["Content"])
router = APIRouter(prefix="/content", tags=["Content"])


@admin_router.get("")
async def get_all_content(user: dict = Depends(require_roles(*EDITORIAL))):
    return ok(ContentService().get_all(seed_by=user["id"]))


@admin_router.get("/{section}")
async def get_content_section(section: str, user: dict = Depends(require_roles(*EDITORIAL))):
    return ok(ContentService().get_section(section))


@admin_router.post("")
async def save_content(data: ContentSave, user: dict = Depends(require_roles(*EDITORIAL))):
    saved = ContentService().save(data.content, data.section, updated_by=user["id"])
    return ok({"sections": saved}, message="Content saved successfully")


@admin_router.delete("/{section}")
async def delete_content_section(section: str, user: dict = Depends(require_roles(*EDITORIAL))):
    ContentService().delete_section(section)
    return ok(message=f"Content section '{section}' deleted")


@router.get("")
async def public_content():
    return ok(ContentService().get_all())


@router.get("/{section}")
async def public_content_section(section: str):
    return ok(ContentService().get_section(section))
