"""Repository implementations."""

from .remittance_repository import PostgresRemittanceRepository
from .score_repository import PostgresScoreRepository

__all__ = [
    "PostgresRemittanceRepository",
    "PostgresScoreRepository",
]
