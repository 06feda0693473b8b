from fastapi import APIRouter
from slowapi import Limiter

from .routes.health import health_router
from .routes.router import build_router


def build_api_router(limiter: Limiter, strict_limit: str) -> APIRouter:
    """Assemble every public route against one application's limiter."""
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["Health"])
    api_router.include_router(build_router(limiter, strict_limit), prefix="/api")

    return api_router


__all__ = ["build_api_router"]
