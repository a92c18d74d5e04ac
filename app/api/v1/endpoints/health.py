"""Health check endpoints. Liveness has no dependencies; readiness reports the cache state."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_cache
from app.infrastructure.cache.gateway import CacheGateway
from app.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    cache: Annotated[CacheGateway | None, Depends(get_cache)],
) -> ReadinessResponse:
    """Return ok with the cache state; reads fall back to the database when it is down."""
    if cache is None:
        return ReadinessResponse(cache="disabled")
    return ReadinessResponse(cache="up" if await cache.ensure_available() else "down")
