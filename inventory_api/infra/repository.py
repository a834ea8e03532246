"""Generic async repository over an AsyncSession.

Thin persistence layer used by the resource services: primary-key lookup,
equality filtering, single and bulk insert, update and delete. Repositories
flush but never commit; the calling service owns the transaction.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from inventory_api.infra.logging import get_logger
from inventory_api.models.base import Base

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are INTEGER columns (int4 on PostgreSQL)
MAX_PK = 2**31 - 1


def pk_in_range(pk: int) -> bool:
    """Whether ``pk`` can name a stored row at all."""
    return 0 < pk <= MAX_PK


class Repository(Generic[ModelT]):
    """CRUD access to one mapped model.

    Example:
        products = Repository(session, Product)
        product = await products.find_by_pk(1, selectinload(Product.tags))
    """

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        self._session = session
        self._model = model
        self._pk = model.__mapper__.primary_key[0]

    async def find_all(self, *options: ORMOption, **filters: Any) -> list[ModelT]:
        """Return every row matching the equality filters, ordered by id.

        Args:
            *options: Loader options (relations to include)
            **filters: Column name -> value equality filters
        """
        stmt = select(self._model).filter_by(**filters).order_by(self._pk)
        if options:
            stmt = stmt.options(*options)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_pk(self, pk: int, *options: ORMOption) -> ModelT | None:
        if not pk_in_range(pk):
            return None
        stmt = select(self._model).where(self._pk == pk)
        if options:
            stmt = stmt.options(*options)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def exists(self, pk: int) -> bool:
        if not pk_in_range(pk):
            return False
        stmt = select(func.count()).select_from(self._model).where(self._pk == pk)
        return bool(await self._session.scalar(stmt))

    async def create(self, data: Mapping[str, Any]) -> ModelT:
        """Insert one row and flush so its id is assigned."""
        instance = self._model(**data)
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def bulk_create(self, rows: Iterable[Mapping[str, Any]]) -> list[ModelT]:
        """Insert many rows in a single flush."""
        instances = [self._model(**row) for row in rows]
        if not instances:
            return []
        self._session.add_all(instances)
        await self._session.flush()
        logger.debug("Bulk insert", table=self._model.__tablename__, rows=len(instances))
        return instances

    async def update(self, data: Mapping[str, Any], pk: int) -> int:
        """Update one row by primary key.

        Returns:
            Number of affected rows. With no fields to set, no UPDATE is
            issued and the count reflects whether the row exists.
        """
        if not pk_in_range(pk):
            return 0
        if not data:
            return 1 if await self.exists(pk) else 0

        stmt = (
            update(self._model)
            .where(self._pk == pk)
            .values(**data)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def destroy(self, pk: int) -> int:
        """Delete one row by primary key, returning the affected count."""
        if not pk_in_range(pk):
            return 0
        stmt = (
            delete(self._model)
            .where(self._pk == pk)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def destroy_many(self, pks: Iterable[int]) -> int:
        """Delete every row whose primary key is in ``pks``."""
        ids = [pk for pk in pks if pk_in_range(pk)]
        if not ids:
            return 0
        stmt = (
            delete(self._model)
            .where(self._pk.in_(ids))
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        logger.debug("Bulk delete", table=self._model.__tablename__, rows=result.rowcount)
        return result.rowcount
