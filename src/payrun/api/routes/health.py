"""Health check endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from payrun.api.dependencies import AppSettings
from payrun.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    data_source: str
    database: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
def health_check(settings: AppSettings) -> HealthResponse:
    """Check API and, when in use, database health."""
    db_status = "not_used"
    if settings.data_source == "database":
        db_status = "unhealthy"
        try:
            with get_session() as session:
                session.execute(text("SELECT 1"))
            db_status = "healthy"
        except SQLAlchemyError:
            logger.warning("Database health check failed", exc_info=True)

    return HealthResponse(
        status="degraded" if db_status == "unhealthy" else "healthy",
        timestamp=datetime.now(timezone.utc),
        data_source=settings.data_source,
        database=db_status,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
