"""Health Probe — liveness endpoint.

Invariants:
    - GET /health always returns 200 while the process is up
    - No inputs, no failure path, no state read or written
"""

from fastapi import APIRouter, status

from users_api.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness probe."""
    return HealthResponse(status="ok", message="server is running")
