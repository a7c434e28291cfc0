"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter, Request

from userfiles.interfaces.records.schemas import HealthResponse
from userfiles.shared.security.rate_limiting import DEFAULT_RATE_LIMIT, limiter

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
@limiter.limit(DEFAULT_RATE_LIMIT)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=request.app.version)
