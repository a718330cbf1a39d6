"""Product documents."""

import copy

CATEGORIES = (
    "Software",
    "Course",
    "Service",
    "Consultation",
    "Template",
    "Tool",
    "eBook",
    "Other",
)

STATUSES = ("draft", "active", "inactive", "discontinued")

DEFAULTS = {
    "short_description": None,
    "original_price": None,
    "discount": 0,
    "images": [],
    "features": [],
    "specifications": [],
    "tags": [],
    "inventory": {"quantity": 0, "track_inventory": False, "low_stock_threshold": 5},
    "seo": {"meta_title": None, "meta_description": None, "keywords": []},
    "status": "draft",
    "is_featured": False,
    "is_digital": True,
    "download_url": None,
    "rating": 0,
    "review_count": 0,
    "sales_count": 0,
    "view_count": 0,
}

COUNTERS = ("rating", "review_count", "sales_count", "view_count")


def new_product(data: dict) -> dict:
    doc = copy.deepcopy(DEFAULTS)
    doc.update({k: v for k, v in data.items() if v is not None or k not in ("seo", "inventory")})
    return doc


def before_save(product: dict) -> dict:
    """Exactly one image is primary whenever there are images."""
    images = product.get("images") or []
    seen_primary = False
    for image in images:
        if image.get("is_primary") and not seen_primary:
            seen_primary = True
        else:
            image["is_primary"] = False
    if images and not seen_primary:
        images[0]["is_primary"] = True
    return product


def is_low_stock(product: dict) -> bool:
    inventory = product.get("inventory") or {}
    if not inventory.get("track_inventory"):
        return False
    return inventory.get("quantity", 0) <= inventory.get("low_stock_threshold", 5)
