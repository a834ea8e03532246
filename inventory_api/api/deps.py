"""FastAPI dependencies for dependency injection.

Provides:
- Database session per request
- Resource services bound to that session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.infra.database import get_db_session
from inventory_api.services.category_service import CategoryService
from inventory_api.services.product_service import ProductService
from inventory_api.services.tag_service import TagService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session scoped to the request.

    Yields:
        AsyncSession
    """
    async with get_db_session() as session:
        yield session


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_category_service(db: DbSession) -> CategoryService:
    return CategoryService(db)


async def get_tag_service(db: DbSession) -> TagService:
    return TagService(db)


async def get_product_service(db: DbSession) -> ProductService:
    return ProductService(db)


Categories = Annotated[CategoryService, Depends(get_category_service)]
Tags = Annotated[TagService, Depends(get_tag_service)]
Products = Annotated[ProductService, Depends(get_product_service)]
