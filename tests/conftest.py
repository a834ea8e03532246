"""Shared fixtures: in-memory SQLite database and an HTTP client on the app."""

from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from inventory_api.api.deps import get_db
from inventory_api.main import app
from inventory_api.models import Base, Category, Product, ProductTag, Tag

SessionFactory = async_sessionmaker[AsyncSession]


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test, with foreign keys enforced."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> SessionFactory:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_factory: SessionFactory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory: SessionFactory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests each get their own SQLite session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded(session_factory: SessionFactory) -> dict[str, list[int]]:
    """Small catalogue: 3 categories, 4 products, 4 tags.

    Product 1 is tagged {1, 2}, product 2 {3, 4}, product 3 {1}, product 4 none.
    """
    async with session_factory() as session:
        categories = [
            Category(category_name="Shirts"),
            Category(category_name="Shorts"),
            Category(category_name="Music"),
        ]
        session.add_all(categories)
        await session.flush()

        products = [
            Product(product_name="Plain T-Shirt", price=Decimal("14.99"), stock=14, category_id=categories[0].id),
            Product(product_name="Cargo Shorts", price=Decimal("29.99"), stock=22, category_id=categories[1].id),
            Product(product_name="Vinyl Record", price=Decimal("12.99"), stock=50, category_id=categories[2].id),
            Product(product_name="Gift Card", price=Decimal("25.00"), stock=0, category_id=None),
        ]
        tags = [
            Tag(tag_name="rock music"),
            Tag(tag_name="pop music"),
            Tag(tag_name="blue"),
            Tag(tag_name="red"),
        ]
        session.add_all([*products, *tags])
        await session.flush()

        links = {0: (0, 1), 1: (2, 3), 2: (0,)}
        session.add_all(
            ProductTag(product_id=products[p].id, tag_id=tags[t].id)
            for p, tag_indexes in links.items()
            for t in tag_indexes
        )
        await session.commit()

        return {
            "categories": [c.id for c in categories],
            "products": [p.id for p in products],
            "tags": [t.id for t in tags],
        }


@pytest.fixture
def product_tag_ids(session_factory: SessionFactory):
    """Look up the tag ids linked to a product, one entry per join row."""

    async def _lookup(product_id: int) -> list[int]:
        async with session_factory() as session:
            result = await session.execute(
                select(ProductTag.tag_id)
                .where(ProductTag.product_id == product_id)
                .order_by(ProductTag.tag_id)
            )
            return list(result.scalars().all())

    return _lookup
