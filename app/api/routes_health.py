"""Health check endpoints for the LearnStream API."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.session import get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE_NAME = "learnstream-api"


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_session)):
    """
    Health check endpoint including a database connectivity check.

    Returns:
        Service name, version, database state and current UTC time
    """
    try:
        await db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        database = "unavailable"

    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": get_settings().app_version,
        "database": database,
        "time": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/healthz")
async def liveness_check():
    """
    Liveness check endpoint.

    Returns:
        A simple status object indicating the process is up
    """
    return {"ok": True}
