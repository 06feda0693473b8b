"""Health check endpoint for service monitoring."""

import time

from fastapi import APIRouter
from pydantic import BaseModel

from remitlend import __version__

health_router = APIRouter()

_STARTED_AT = time.monotonic()


class HealthResponse(BaseModel):
    status: str = "ok"
    uptime: float
    timestamp: int
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status, uptime in seconds and server time in ms.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        uptime=round(time.monotonic() - _STARTED_AT, 3),
        timestamp=int(time.time() * 1000),
        version=__version__,
    )
