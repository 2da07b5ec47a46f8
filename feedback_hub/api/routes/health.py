"""
Health check endpoint.
"""

import time

import structlog
from fastapi import APIRouter, Depends

from feedback_hub.api.dependencies import get_database
from feedback_hub.api.models import HealthResponse
from feedback_hub.storage.database import Database

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health",
    description="Check that the feedback database is reachable.",
)
async def health(database: Database = Depends(get_database)) -> HealthResponse:
    start = time.perf_counter()
    details: dict[str, str] = {}
    try:
        healthy = await database.health_check()
    except Exception as e:
        healthy = False
        details["error"] = str(e)
        logger.warning("Health check failed", error=str(e))

    latency_ms = (time.perf_counter() - start) * 1000
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        database=healthy,
        latency_ms=round(latency_ms, 2),
        details=details,
    )
