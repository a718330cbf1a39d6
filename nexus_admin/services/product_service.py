"""
Product Service - digital products and services for sale.
"""

from typing import Optional

from pymongo import ASCENDING, DESCENDING

from nexus_admin.models import product as product_model
from nexus_admin.services.base import BaseService

SORTABLE = ("created_at", "price", "name", "rating", "sales_count", "view_count")


class ProductService(BaseService):
    collection_key = "products"
    entity_name = "Product"
    search_fields = ("name", "description", "short_description")

    def before_save(self, doc: dict, previous: Optional[dict] = None) -> dict:
        return product_model.before_save(doc)

    def present(self, doc: dict) -> dict:
        doc["is_low_stock"] = product_model.is_low_stock(doc)
        return doc

    def list_products(self, page: int = 1, limit: int = 10, search: Optional[str] = None,
                      category: Optional[str] = None, status: Optional[str] = "active",
                      featured: Optional[bool] = None, sort_by: str = "created_at",
                      sort_order: str = "desc") -> dict:
        filters = {}
        if status and status != "all":
            filters["status"] = status
        if category:
            filters["category"] = category
        if featured is not None:
            filters["is_featured"] = featured

        field = sort_by if sort_by in SORTABLE else "created_at"
        direction = ASCENDING if sort_order == "asc" else DESCENDING
        return self.list(search=search, filters=filters, page=page, limit=limit,
                         sort=[(field, direction), ("_id", direction)])

    def product_summary(self) -> dict:
        return self.summary(extra={
            "active": {"status": "active"},
            "featured": {"is_featured": True},
        })

    def create(self, data: dict, created_by: str) -> dict:
        return self.to_response(self.insert(product_model.new_product(data), created_by=created_by))

    def view(self, product_id: str) -> dict:
        doc = self.find_or_404(product_id)
        return self.to_response(self.increment(doc, "view_count"))
