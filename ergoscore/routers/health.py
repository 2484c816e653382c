"""Health check endpoint."""
from datetime import datetime, timezone

from fastapi import APIRouter

from ergoscore.config import get_settings
from ergoscore.models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API.",
)
async def health_check():
    """The engine has no external dependencies; if it answers, it is healthy."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
    )
