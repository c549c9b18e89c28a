"""
Health check routes for the Mixology backend.

These endpoints are PUBLIC and provide a simple status check for load
balancers, monitoring, and the web client's connectivity probe.
"""

from fastapi import APIRouter

from mixology.schemas.health import HealthResponse
from mixology.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")


@router.get(
    "/api/ping",
    response_model=HealthResponse,
    summary="Ping endpoint",
    description="Connectivity probe used by the web client.",
    status_code=200,
)
async def ping() -> HealthResponse:
    return HealthResponse(status="ok")
