"""Data transfer objects for the remittance simulation endpoints."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RemittanceEntryDTO:
    """One month of remittance activity."""
    month: str
    amount: float
    status: str


@dataclass(frozen=True)
class RemittanceHistoryResponse:
    """Response containing a user's remittance history."""

    user_id: str
    score: int
    streak: int
    history: List[RemittanceEntryDTO]


@dataclass(frozen=True)
class SimulatePaymentRequest:
    """Input data for a simulated remittance payment."""
    user_id: str
    amount: float


@dataclass(frozen=True)
class SimulatePaymentResponse:
    """Outcome of a simulated remittance payment."""
    message: str
    new_score: int
