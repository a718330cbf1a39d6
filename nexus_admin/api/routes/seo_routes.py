"""
SEO Routes

GET /admin/seo - Site SEO settings (admin, manager)
POST /admin/seo - Merge supplied blocks into the settings (admin, manager)
"""

from fastapi import APIRouter, Depends

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import STAFF, require_roles
from nexus_admin.schemas.schemas import SeoSettingsUpdate
from nexus_admin.services.seo_service import SeoService

router = APIRouter(prefix="/admin/seo", tags=["SEO"])


@router.get("")
async def get_seo_settings(user: dict = Depends(require_roles(*STAFF))):
    return ok(SeoService().get())


@router.post("")
async def save_seo_settings(data: SeoSettingsUpdate, user: dict = Depends(require_roles(*STAFF))):
    saved = SeoService().save(data.model_dump(exclude_none=True), updated_by=user["id"])
    return ok(saved, message="SEO settings saved successfully")
