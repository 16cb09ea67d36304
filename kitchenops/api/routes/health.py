"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from kitchenops import __version__
from kitchenops.application.dto.responses import HealthResponse
from kitchenops.config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Service health check.

    Probes SQLite with a trivial query; a failure reports "unhealthy"
    rather than an error status.
    """
    from kitchenops.infrastructure.storage.sqlite import get_connection

    database = "ok"
    try:
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
    except Exception as e:
        logger.warning("health_db_check_failed", error=str(e))
        database = "unavailable"

    return HealthResponse(
        status="healthy" if database == "ok" else "unhealthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        database=database,
    )
