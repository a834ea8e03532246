"""Resource services - business logic behind the REST routes."""

from inventory_api.services.category_service import CategoryService
from inventory_api.services.product_service import ProductService
from inventory_api.services.tag_reconciler import (
    ProductTagReconciler,
    TagDiff,
    diff_product_tags,
)
from inventory_api.services.tag_service import TagService

__all__ = [
    "CategoryService",
    "ProductService",
    "TagService",
    "ProductTagReconciler",
    "TagDiff",
    "diff_product_tags",
]
