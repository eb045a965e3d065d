import asyncpg
from fastapi import APIRouter, Depends

from jobly.api.deps import get_db
from jobly.core.config import get_settings
from jobly.core.database import Database
from jobly.schemas.health import HealthResponse, StatusResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: Database = Depends(get_db),
) -> HealthResponse:
    settings = get_settings()
    try:
        await db.query("SELECT 1")
        db_status = "connected"
    except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError):
        db_status = "disconnected"

    healthy = db_status == "connected"
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        database=db_status,
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse(status="ok")
