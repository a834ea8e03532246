"""Pydantic schemas for request/response validation."""

from inventory_api.schemas.category import (
    CategoryCreate,
    CategoryRead,
    CategoryRecord,
    CategoryUpdate,
)
from inventory_api.schemas.common import HealthResponse, MessageResponse
from inventory_api.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductRecord,
    ProductUpdate,
)
from inventory_api.schemas.tag import TagCreate, TagRead, TagRecord, TagUpdate

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "CategoryCreate",
    "CategoryRead",
    "CategoryRecord",
    "CategoryUpdate",
    "ProductCreate",
    "ProductRead",
    "ProductRecord",
    "ProductUpdate",
    "TagCreate",
    "TagRead",
    "TagRecord",
    "TagUpdate",
]
