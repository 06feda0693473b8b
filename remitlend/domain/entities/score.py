"""Stored score and remittance records."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

DEFAULT_STORED_SCORE = 500


class RemittanceStatus(str, Enum):
    COMPLETED = "Completed"
    LATE = "Late"
    MISSED = "Missed"


@dataclass
class ScoreRecord:
    """A user's stored credit score row."""

    user_id: str
    current_score: int = DEFAULT_STORED_SCORE
    id: Optional[int] = None
    updated_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class RemittanceRecord:
    """
    One month of remittance activity for a user.

    At most one record exists per (user_id, month).
    """

    user_id: str
    amount: Decimal
    month: str
    status: RemittanceStatus
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
