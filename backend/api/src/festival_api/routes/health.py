"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from festival_api.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Liveness check",
    response_model=HealthResponse,
)
async def health() -> HealthResponse:
    """Always answers 200 with a static status and the current time."""
    return HealthResponse(timestamp=datetime.now(UTC).isoformat())
