"""Category Service - CRUD over categories with their products."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inventory_api.core.exceptions import NotFoundError, PersistenceError
from inventory_api.infra.logging import get_logger
from inventory_api.infra.repository import Repository
from inventory_api.models.category import Category
from inventory_api.schemas.category import CategoryCreate, CategoryUpdate
from inventory_api.services.base_service import BaseResourceService

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "No category found with this id!"


class CategoryService(BaseResourceService):
    """Categories, each read together with its products."""

    entity = "category"

    def __init__(
        self,
        db_session: AsyncSession,
        categories: Repository[Category] | None = None,
    ) -> None:
        super().__init__(db_session)
        self.categories = categories or Repository(db_session, Category)

    async def list_categories(self) -> list[Category]:
        try:
            return await self.categories.find_all(selectinload(Category.products))
        except SQLAlchemyError as e:
            await self._abort(e, "list")
            raise PersistenceError("Error fetching categories.") from e

    async def get_category(self, category_id: int) -> Category:
        try:
            category = await self.categories.find_by_pk(
                category_id, selectinload(Category.products)
            )
        except SQLAlchemyError as e:
            await self._abort(e, "get", category_id=category_id)
            raise PersistenceError("Error fetching category.") from e

        if category is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return category

    async def create_category(self, payload: CategoryCreate) -> Category:
        try:
            category = await self.categories.create(payload.model_dump())
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "create")
            raise PersistenceError("Error creating category.") from e

        logger.info("Category created", category_id=category.id)
        return category

    async def update_category(self, category_id: int, payload: CategoryUpdate) -> list[int]:
        """Update a category by id.

        Returns:
            Single-element list with the affected row count
        """
        try:
            affected = await self.categories.update(
                payload.model_dump(exclude_unset=True), category_id
            )
            if not affected:
                await self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "update", category_id=category_id)
            raise PersistenceError("Error updating category.") from e

        return [affected]

    async def delete_category(self, category_id: int) -> None:
        try:
            affected = await self.categories.destroy(category_id)
            if not affected:
                await self.db.rollback()
                raise NotFoundError(NOT_FOUND_MESSAGE)
            await self._commit()
        except SQLAlchemyError as e:
            await self._abort(e, "delete", category_id=category_id)
            raise PersistenceError("Error deleting category.") from e

        logger.info("Category deleted", category_id=category_id)
