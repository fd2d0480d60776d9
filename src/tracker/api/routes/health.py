"""Liveness and dependency health."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.tracker.api.dependencies import DBSession
from src.tracker.core.logging import get_logger
from src.tracker.core.shutdown import request_tracker

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(session: DBSession) -> JSONResponse:
    """Report ``healthy`` when the database answers, 503 while draining or degraded."""
    timestamp = datetime.now(UTC).isoformat()

    if request_tracker.is_shutting_down:
        return JSONResponse(
            status_code=503,
            content={
                "success": False,
                "message": "Server is shutting down",
                "data": {
                    "status": "draining",
                    "in_flight_requests": request_tracker.in_flight_count,
                    "timestamp": timestamp,
                },
            },
        )

    data: dict[str, Any] = {"status": "healthy", "database": "healthy", "timestamp": timestamp}
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Health check database failure", error=str(e))
        data["database"] = f"unhealthy: {e}"
        data["status"] = "unhealthy"

    healthy = data["status"] == "healthy"
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "success": healthy,
            "message": "API is running" if healthy else "Database unavailable",
            "data": data,
        },
    )
