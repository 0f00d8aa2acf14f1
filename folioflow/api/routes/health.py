"""Health check routes."""

from fastapi import APIRouter

from folioflow.api.schemas import HealthResponse
from folioflow.utils.timestamp import now_exact

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return the current status of the API."""
    return HealthResponse(status="ok", timestamp=now_exact())
