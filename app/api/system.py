import time
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.database import get_db
from app.models.db.Worldometer import Worldometer
from app.api.worldometer_utils import cache_size

router = APIRouter()
logger = get_logger(__name__)


async def latest_snapshot_time(db: AsyncSession) -> tuple[Optional[datetime], float]:
    """Newest worldometers timestamp and how long the lookup took, in ms."""
    started = time.perf_counter()
    result = await db.execute(select(func.max(Worldometer.last_updated)))
    latest = result.scalar()
    return latest, round((time.perf_counter() - started) * 1000, 2)


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Liveness plus data freshness.

    Reports when the newest snapshot was written so a stalled ingestion feed
    is visible; answers 503 when the database cannot be queried.
    """
    report = {
        "status": "healthy",
        "timestamp": time.time(),
        "components": {"api": "up", "database": "down"},
        "cache_entries": cache_size(),
    }

    try:
        latest, latency_ms = await latest_snapshot_time(db)
    except SQLAlchemyError as e:
        logger.warning("health check failed: %s", e)
        report["status"] = "unhealthy"
        report["error"] = type(e).__name__
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=report)

    report["components"]["database"] = "up"
    report["database_latency_ms"] = latency_ms
    report["latest_snapshot"] = latest.isoformat() if latest else None
    return report
