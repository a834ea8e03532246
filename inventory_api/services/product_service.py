"""Product Service - CRUD over products and their tag associations.

Product writes and the matching `product_tag` changes run in a single
transaction: if any step fails, nothing is kept.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory_api.core.exceptions import (
    InvalidPayloadError,
    NotFoundError,
    PersistenceError,
)
from inventory_api.infra.logging import get_logger
from inventory_api.infra.repository import Repository
from inventory_api.models.product import Product
from inventory_api.models.product_tag import ProductTag
from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.services.base_service import BaseResourceService
from inventory_api.services.tag_reconciler import ProductTagReconciler

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "No product found with this id!"

# Relations returned with every product read
PRODUCT_INCLUDES = (
    selectinload(Product.category),
    selectinload(Product.tags),
)


class ProductService(BaseResourceService):
    """Products, read with their category and tags."""

    entity = "product"

    def __init__(
        self,
        db_session: AsyncSession,
        products: Repository[Product] | None = None,
        reconciler: ProductTagReconciler | None = None,
    ) -> None:
        """Initialize the product service.

        Args:
            db_session: Async SQLAlchemy session for this request
            products: Product repository (defaults to one on ``db_session``)
            reconciler: Tag reconciler (defaults to one on ``db_session``)
        """
        super().__init__(db_session)
        self.products = products or Repository(db_session, Product)
        self.reconciler = reconciler or ProductTagReconciler(
            Repository(db_session, ProductTag)
        )

    async def list_products(self) -> list[Product]:
        try:
            return await self.products.find_all(*PRODUCT_INCLUDES)
        except SQLAlchemyError as e:
            await self._abort(e, "list")
            raise PersistenceError("Error fetching products.") from e

    async def get_product(self, product_id: int) -> Product:
        try:
            product = await self.products.find_by_pk(product_id, *PRODUCT_INCLUDES)
        except SQLAlchemyError as e:
            await self._abort(e, "get", product_id=product_id)
            raise PersistenceError("Error fetching product.") from e

        if product is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return product

    async def create_product(self, payload: ProductCreate) -> Product:
        """Create a product and attach its tags.

        Any failure (unknown category or tag id, constraint violation)
        rolls back both the product and its join rows.
        """
        try:
            product = await self.products.create(payload.product_fields())
            if payload.tag_ids:
                await self.reconciler.attach(product.id, payload.tag_ids)
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "create", tag_ids=payload.tag_ids)
            raise InvalidPayloadError("Unable to create product.") from e

        logger.info(
            "Product created",
            product_id=product.id,
            tag_count=len(set(payload.tag_ids or ())),
        )
        return product

    async def update_product(self, product_id: int, payload: ProductUpdate) -> list[int]:
        """Update product fields and converge its tags.

        Tags are reconciled only when `tagIds` is a non-empty list; an
        absent or empty list leaves the associations untouched.

        Returns:
            Single-element list with the affected product row count
        """
        try:
            affected = await self.products.update(payload.product_fields(), product_id)
            if not affected:
                await self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)

            if payload.tag_ids:
                await self.reconciler.reconcile(product_id, payload.tag_ids)

            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "update", product_id=product_id)
            raise PersistenceError("Error updating product.") from e

        return [affected]

    async def delete_product(self, product_id: int) -> None:
        """Delete a product; its join rows cascade at the database."""
        try:
            affected = await self.products.destroy(product_id)
            if not affected:
                await self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "delete", product_id=product_id)
            raise PersistenceError("Error deleting product.") from e

        logger.info("Product deleted", product_id=product_id)
