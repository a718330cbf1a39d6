"""
Upload Routes

POST /upload - Upload one or more images (multipart: ``file`` parts + ``category``)
GET /upload/formats - Accepted types, categories and size limit
"""

from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import get_current_user
from nexus_admin.utils.file_upload import get_supported_formats, save_images, validate_category

router = APIRouter(prefix="/upload", tags=["Uploads"])


@router.post("")
async def upload_files(
    file: List[UploadFile] = File(..., description="Image files (JPEG, PNG, GIF, WebP, SVG)"),
    category: str = Form("general"),
    user: dict = Depends(get_current_user)
):
    """
    Store images under ``<upload_dir>/<category>/``.

    Each file is validated on its own: a rejected file shows up in the
    result list with its error and the others are still stored.
    """
    validate_category(category)
    results = await save_images(file, category)
    uploaded = sum(1 for r in results if r["success"])
    return ok(
        {"files": results, "uploaded": uploaded, "failed": len(results) - uploaded},
        message=f"{uploaded} of {len(results)} file(s) uploaded",
    )


@router.get("/formats")
async def upload_formats():
    return ok(get_supported_formats())
