"""Health check endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from infrastructure.database.session import get_async_session

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Liveness check",
)
async def health_check() -> HealthResponse:
    """
    Liveness check for load balancers and the frontend.

    Does not touch the database.
    """
    return HealthResponse(
        status="ok",
        version=settings.version,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Health check including database connectivity.

    Use for monitoring dashboards that need to verify the profile store.
    """
    db_status = "unknown"

    try:
        await db.execute(text("SELECT 1"))
        db_status = "ok"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    overall_status = "ok" if db_status == "ok" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=settings.version,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        database=db_status,
    )
