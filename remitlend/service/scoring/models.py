"""
Data models for credit scoring.

These models represent the values passed through the scoring pipeline,
from a repayment event to the resulting score transition. None of them are
persisted; they live for the duration of a single request.
"""

from dataclasses import dataclass
from enum import Enum


class CreditBand(str, Enum):
    """Qualitative tier derived from a numeric score."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


@dataclass(frozen=True)
class RepaymentEvent:
    """
    A single repayment reported by an internal service.

    Attributes:
        user_id: Opaque user identifier (1-100 characters)
        repayment_amount: Amount repaid, in (0, 1_000_000]
        on_time: Whether the repayment arrived on schedule
    """
    user_id: str
    repayment_amount: float
    on_time: bool


@dataclass(frozen=True)
class ScoreSnapshot:
    """The score currently reported for a user."""
    user_id: str
    score: int
    band: CreditBand


@dataclass(frozen=True)
class ScoreTransition:
    """
    The effect of one repayment event on a user's score.

    Attributes:
        old_score: Base score before the event
        delta: Signed adjustment applied (+on-time / -late)
        new_score: old_score + delta, clamped to the score window
        band: Band of new_score
    """
    old_score: int
    delta: int
    new_score: int
    band: CreditBand
