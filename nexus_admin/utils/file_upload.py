"""
File Upload Utility - store uploaded images on local disk.

Supported formats:
- JPEG (.jpg, .jpeg)
- PNG (.png)
- GIF (.gif)
- WebP (.webp)
- SVG (.svg)

Max file size: settings.max_upload_size_mb (5MB by default)

Files land in ``<upload_dir>/<category>/`` and are served back as
``/uploads/<category>/<filename>``.
"""

import logging
import os
import secrets
import time
from typing import List

from fastapi import HTTPException, UploadFile

from nexus_admin.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

ALLOWED_CATEGORIES = ("users", "training", "products", "announcements", "content", "blog", "temp", "general")

ALLOWED_TYPES = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
}
ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"}


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if not filename or '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def generate_filename(category: str, original_name: str, content_type: str) -> str:
    """``<category>_<epoch-ms>_<random hex><ext>``; an unknown extension is replaced by the MIME type's."""
    ext = get_file_extension(original_name)
    if ext not in ALLOWED_EXTENSIONS:
        ext = ALLOWED_TYPES[content_type]
    return f"{category}_{int(time.time() * 1000)}_{secrets.token_hex(8)}{ext}"


def validate_category(category: str) -> str:
    if category not in ALLOWED_CATEGORIES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid category '{category}'. Allowed: {', '.join(ALLOWED_CATEGORIES)}"
        )
    return category


async def save_image(file: UploadFile, category: str) -> dict:
    """
    Validate and store one uploaded image.

    Raises:
        HTTPException 400 for a missing name or unsupported type, 413 when too large
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    if file.content_type not in ALLOWED_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '{file.content_type}'. Allowed: JPEG, PNG, GIF, WebP, SVG"
        )

    # Never read more than one byte past the limit
    content = await file.read(settings.max_upload_size_bytes + 1)
    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {settings.max_upload_size_mb}MB"
        )

    directory = os.path.join(settings.upload_dir, category)
    os.makedirs(directory, exist_ok=True)
    filename = generate_filename(category, file.filename, file.content_type)
    with open(os.path.join(directory, filename), "wb") as f:
        f.write(content)

    logger.info("Stored upload %s/%s (%d bytes)", category, filename, len(content))
    return {
        "filename": filename,
        "original_name": file.filename,
        "url": f"/uploads/{category}/{filename}",
        "size": len(content),
        "type": file.content_type,
    }


async def save_images(files: List[UploadFile], category: str) -> List[dict]:
    """Store every file; a failing file is reported in place without stopping the rest."""
    results = []
    for file in files:
        try:
            results.append({"success": True, **await save_image(file, category)})
        except HTTPException as e:
            results.append({"success": False, "original_name": file.filename, "error": e.detail})
    return results


def get_supported_formats() -> dict:
    """Get info about supported upload formats."""
    return {
        "supported_types": sorted(ALLOWED_TYPES),
        "categories": list(ALLOWED_CATEGORIES),
        "max_size_mb": settings.max_upload_size_mb,
    }
