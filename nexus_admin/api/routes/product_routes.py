"""
Product Routes

GET /products - List products (public sees active ones only)
GET /products/{product_id} - Get product details (counts a view)
POST /products - Create product (admin, manager)
PUT /products/{product_id} - Update product (admin, manager)
DELETE /products/{product_id} - Delete product (admin, manager)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from nexus_admin.api.responses import ok
from nexus_admin.core.auth import STAFF, require_roles, resolve_session
from nexus_admin.schemas.schemas import ProductCreate, ProductUpdate
from nexus_admin.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("")
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Search in name and descriptions"),
    category: Optional[str] = Query(None),
    status: Optional[str] = Query("active", description="Staff only; 'all' for every status"),
    featured: Optional[bool] = Query(None),
    sort_by: str = Query("created_at"),
    sort_order: str = Query("desc", pattern="^(asc|desc)$"),
    summary: bool = Query(False, description="Return aggregate counts only (staff)"),
    session: Optional[dict] = Depends(resolve_session)
):
    service = ProductService()
    is_staff = bool(session) and session["role"] in STAFF
    if summary and is_staff:
        return ok(service.product_summary())
    if not is_staff:
        status = "active"
    return ok(service.list_products(page, limit, search, category, status, featured, sort_by, sort_order))


@router.get("/{product_id}")
async def get_product(product_id: str):
    return ok(ProductService().view(product_id))


@router.post("", status_code=201)
async def create_product(data: ProductCreate, user: dict = Depends(require_roles(*STAFF))):
    product = ProductService().create(data.model_dump(), created_by=user["id"])
    return ok(product, message="Product created successfully")


@router.put("/{product_id}")
async def update_product(product_id: str, data: ProductUpdate, user: dict = Depends(require_roles(*STAFF))):
    service = ProductService()
    updated = service.update(product_id, data.model_dump(exclude_unset=True, exclude_none=True))
    return ok(service.to_response(updated), message="Product updated successfully")


@router.delete("/{product_id}")
async def delete_product(product_id: str, user: dict = Depends(require_roles(*STAFF))):
    ProductService().delete(product_id)
    return ok(message="Product deleted successfully")
