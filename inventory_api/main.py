"""FastAPI application entry point.

E-commerce inventory backend: CRUD over categories, products and tags.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api import __version__
from inventory_api.api.routes import api_router, health_router
from inventory_api.config import settings
from inventory_api.core.exceptions import InventoryError
from inventory_api.infra.database import (
    close_db_engine,
    create_tables,
    verify_db_connection,
)
from inventory_api.infra.logging import get_logger, setup_logging

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Optionally create missing tables
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info("Inventory API starting", environment=settings.environment, version=__version__)

    if settings.db_create_tables:
        try:
            await create_tables()
        except Exception as e:
            logger.warning("Failed to create tables", error=str(e))

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Inventory API shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


# Create FastAPI app
app = FastAPI(
    title="E-commerce Inventory API",
    description="Categories, products and tags for an e-commerce back end",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (mainly for local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its outcome and duration."""
    start_time = time.perf_counter()
    response = await call_next(request)
    duration_ms = int((time.perf_counter() - start_time) * 1000)

    logger.info(
        "Request handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """Render handler errors as `{"message": ...}` with their status."""
    if exc.status_code >= 500:
        logger.warning(
            "Request failed",
            path=request.url.path,
            status_code=exc.status_code,
            message=exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies and path ids with 400 before any database work."""
    logger.info(
        "Request validation failed",
        method=request.method,
        path=request.url.path,
        errors=[
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
            for err in exc.errors()
        ],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request payload."},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "E-commerce Inventory API",
        "version": __version__,
        "environment": settings.environment,
    }
