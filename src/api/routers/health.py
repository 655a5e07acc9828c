"""Health check endpoints."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_async_session


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class StatusResponse(BaseModel):
    """Root status response."""

    status: str
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str


@router.get("/", response_model=StatusResponse)
async def root() -> StatusResponse:
    """Report that the server is running. Public, no database access."""
    return StatusResponse(status="ok", message="Webhook server running")


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Check application and database health."""
    db_status = "healthy"
    try:
        await db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database health check failed")
        db_status = "unhealthy"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        database=db_status,
    )
