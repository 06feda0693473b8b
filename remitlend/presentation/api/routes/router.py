from fastapi import APIRouter
from slowapi import Limiter

from .score import build_score_router
from .simulation import build_simulation_router


def build_router(limiter: Limiter, strict_limit: str) -> APIRouter:
    router = APIRouter()

    router.include_router(build_score_router(limiter, strict_limit), tags=["Scores"])
    router.include_router(build_simulation_router(limiter, strict_limit), tags=["Simulation"])

    return router
