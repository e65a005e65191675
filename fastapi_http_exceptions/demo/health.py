"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status and version.
"""

from fastapi import APIRouter

from fastapi_http_exceptions.core.config import settings
from fastapi_http_exceptions.core.responses import HTTPResponse, ok
from fastapi_http_exceptions.demo.schemas import HealthResponse
from fastapi_http_exceptions.interfaces.routing import HTTPResponseRoute

router = APIRouter(tags=["health"], route_class=HTTPResponseRoute)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HTTPResponse[HealthResponse]:
    """Return current application health status."""
    return ok(HealthResponse(status="ok", version=settings.version))
