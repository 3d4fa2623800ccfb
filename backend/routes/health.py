"""
Health check endpoint.
"""
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, status

from config import settings
from models import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    """Health check — reports environment and version."""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
