"""API routes module."""

from fastapi import APIRouter

from inventory_api.api.routes.categories import router as categories_router
from inventory_api.api.routes.health import router as health_router
from inventory_api.api.routes.products import router as products_router
from inventory_api.api.routes.tags import router as tags_router

# Resource routes, mounted under the API prefix
api_router = APIRouter()
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(products_router, prefix="/products", tags=["Products"])
api_router.include_router(tags_router, prefix="/tags", tags=["Tags"])

__all__ = ["api_router", "health_router"]
