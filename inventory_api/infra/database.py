"""Async database configuration.

Provides:
- Lazily created async SQLAlchemy engine and session factory
- Session context manager with rollback on error
- Schema creation from the ORM models
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import make_url, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inventory_api.config import settings
from inventory_api.core.exceptions import InventoryError
from inventory_api.infra.logging import get_logger
from inventory_api.models.base import Base

logger = get_logger(__name__)

# Type alias for dependency injection
DatabaseSession = AsyncSession

# Global engine (initialized on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        logger.info(
            "Creating database engine",
            url=make_url(settings.database_url).render_as_string(hide_password=True),
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
        )

        _engine = create_async_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_pool_max_overflow,
            pool_pre_ping=True,
            echo=settings.debug,
        )

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session.

    Services commit their own units of work; anything still pending when
    the block exits cleanly is committed, and any exception rolls back.

    Example:
        async with get_db_session() as session:
            result = await session.execute(select(Product))
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except InventoryError:
        # Already translated and logged by the service
        await session.rollback()
        raise

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", error=str(e), error_type=type(e).__name__)
        raise

    finally:
        await session.close()


async def create_tables(drop_existing: bool = False) -> None:
    """Create all tables declared on the ORM models.

    Args:
        drop_existing: Drop every table first (full resync)
    """
    # Register every mapper on Base.metadata
    import inventory_api.models  # noqa: F401

    async with get_engine().begin() as conn:
        if drop_existing:
            logger.warning("Dropping all tables")
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables synced", tables=sorted(Base.metadata.tables))


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
