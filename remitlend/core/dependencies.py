"""Dependency injection for FastAPI."""

from fastapi import Request

from remitlend.application.services import ScoreService, SimulationService
from remitlend.core.security import ApiKeyGate


# Service dependencies
def get_score_service() -> ScoreService:
    """Get a ScoreService instance."""
    return ScoreService()


def get_simulation_service() -> SimulationService:
    """Get a SimulationService instance."""
    return SimulationService()


# Access control
def get_api_key_gate(request: Request) -> ApiKeyGate:
    """Get the API key gate built for this application at startup."""
    return request.app.state.api_key_gate
