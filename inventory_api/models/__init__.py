"""SQLAlchemy models for the inventory database."""

from inventory_api.models.base import Base
from inventory_api.models.category import Category
from inventory_api.models.product import Product
from inventory_api.models.product_tag import ProductTag
from inventory_api.models.tag import Tag

__all__ = [
    "Base",
    "Category",
    "Product",
    "ProductTag",
    "Tag",
]
