"""Health check endpoints.

Provides liveness and readiness probes.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from inventory_api import __version__
from inventory_api.config import settings
from inventory_api.infra.database import verify_db_connection
from inventory_api.infra.logging import get_logger
from inventory_api.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if the process is serving requests. No database check.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get(
    "/health/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def health_ready() -> HealthResponse | JSONResponse:
    """Readiness check.

    Verifies the database answers a trivial query. Responds 503 with
    status "degraded" when it does not.
    """
    checks = {"database": await verify_db_connection()}

    if all(checks.values()):
        return HealthResponse(
            status="healthy",
            version=__version__,
            environment=settings.environment,
            checks=checks,
        )

    logger.warning("Readiness check failed", checks=checks)
    body = HealthResponse(
        status="degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )
