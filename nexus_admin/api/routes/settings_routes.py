"""
Settings Routes

GET /settings - Site settings (public; created with defaults on first read)
PUT /settings - Update site settings (admin, manager)
POST /settings - Same as PUT
"""

from fastapi import APIRouter, Depends

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import STAFF, require_roles
from nexus_admin.schemas.schemas import SiteSettingsUpdate
from nexus_admin.services.settings_service import load_settings, update_settings

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("")
async def get_site_settings():
    return ok(load_settings())


@router.put("")
@router.post("")
async def save_site_settings(data: SiteSettingsUpdate, user: dict = Depends(require_roles(*STAFF))):
    """
    Shallow merge of the supplied keys.

    site_name, site_description and contact_email must stay non-blank,
    and contact_email must be a valid address.
    """
    saved = update_settings(data.model_dump(exclude_unset=True), updated_by=user["id"])
    return ok(saved, message="Settings updated successfully")
