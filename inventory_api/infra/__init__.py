"""Infrastructure - Database, persistence, logging."""

from inventory_api.infra.database import (
    DatabaseSession,
    close_db_engine,
    create_tables,
    get_db_session,
    verify_db_connection,
)
from inventory_api.infra.logging import get_logger, setup_logging
from inventory_api.infra.repository import Repository

__all__ = [
    "get_db_session",
    "DatabaseSession",
    "close_db_engine",
    "create_tables",
    "verify_db_connection",
    "Repository",
    "setup_logging",
    "get_logger",
]
