"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from lansky.api.dependencies import get_app_settings, get_llm
from lansky.application.dto.responses import HealthResponse, ProviderHealthResponse
from lansky.config import Settings
from lansky.core.interfaces import ILLMProvider

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Service status and uptime."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/llm", response_model=HealthResponse)
async def llm_health(
    llm: ILLMProvider = Depends(get_llm),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """AI provider reachability; ``degraded`` when it is not usable."""
    start = time.time()
    result = await llm.check_health()

    llm_status = ProviderHealthResponse(
        name=result.provider,
        available=result.available,
        latency_ms=(time.time() - start) * 1000,
        error=result.error,
    )
    return HealthResponse(
        status="healthy" if llm_status.available else "degraded",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        llm=llm_status,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """SQLite connectivity."""
    import aiosqlite

    from lansky.infrastructure.storage.sqlite import get_connection

    start = time.time()
    try:
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
        db_status = ProviderHealthResponse(
            name="sqlite",
            available=True,
            latency_ms=(time.time() - start) * 1000,
        )
    except (aiosqlite.Error, OSError) as e:
        db_status = ProviderHealthResponse(name="sqlite", available=False, error=str(e))

    return HealthResponse(
        status="healthy" if db_status.available else "unhealthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
