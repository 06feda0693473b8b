"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager
from .models import Base, RemittanceHistoryModel, ScoreModel

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "RemittanceHistoryModel",
    "ScoreModel",
]
