"""Structured logging configuration using structlog.

JSON lines in deployed environments, coloured console output in dev.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from inventory_api.config import settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "httpx", "httpcore", "asyncpg", "aiosqlite")


def _renderer(use_json: bool) -> list[Processor]:
    if use_json:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        level: Override for ``settings.log_level``
    """
    log_level = logging.getLevelName((level or settings.log_level).upper())
    use_json = settings.log_json and settings.environment != "dev"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer(use_json),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQL echo is driven by the engine's `echo` flag in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        **initial_context: Initial context to bind to the logger

    Returns:
        Bound structlog logger
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
