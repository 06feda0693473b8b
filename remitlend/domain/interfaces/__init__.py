"""
Domain Interfaces (Ports)
"""

from .repositories import RemittanceRepository, ScoreRepository

__all__ = [
    "RemittanceRepository",
    "ScoreRepository",
]
