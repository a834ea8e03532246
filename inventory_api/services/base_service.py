"""Base Resource Service - shared plumbing for the CRUD services.

Each service owns the unit of work for its operations: it commits on
success, rolls back on failure and translates database errors into the
client-facing errors from `inventory_api.core.exceptions`.
"""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.infra.logging import get_logger

logger = get_logger(__name__)


class BaseResourceService:
    """Common base for the category, tag and product services."""

    #: Entity name used in log events
    entity: str = "resource"

    def __init__(self, db_session: AsyncSession) -> None:
        """Initialize the service.

        Args:
            db_session: Async SQLAlchemy session for this request
        """
        self.db = db_session

    async def _commit(self) -> None:
        await self.db.commit()

    async def _abort(self, error: SQLAlchemyError, operation: str, **context: Any) -> None:
        """Roll back the current transaction and log the database error."""
        try:
            await self.db.rollback()
        except SQLAlchemyError as rollback_error:
            logger.warning(
                "Rollback failed",
                entity=self.entity,
                operation=operation,
                error=str(rollback_error),
            )

        logger.error(
            "Database operation failed",
            entity=self.entity,
            operation=operation,
            error_type=type(error).__name__,
            error=str(error),
            **context,
        )
