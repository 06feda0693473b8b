"""Domain Entities - Core business objects."""

from .score import (
    DEFAULT_STORED_SCORE,
    RemittanceRecord,
    RemittanceStatus,
    ScoreRecord,
)

__all__ = [
    "DEFAULT_STORED_SCORE",
    "RemittanceRecord",
    "RemittanceStatus",
    "ScoreRecord",
]
