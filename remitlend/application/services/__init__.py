"""Application services (use cases)."""

from .score_service import ScoreService
from .simulation_service import SimulationService

__all__ = [
    "ScoreService",
    "SimulationService",
]
