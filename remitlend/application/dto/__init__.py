"""Data Transfer Objects for application layer."""

from .score import ScoreResponse, ScoreUpdateRequest, ScoreUpdateResponse
from .simulation import (
    RemittanceEntryDTO,
    RemittanceHistoryResponse,
    SimulatePaymentRequest,
    SimulatePaymentResponse,
)

__all__ = [
    "ScoreResponse",
    "ScoreUpdateRequest",
    "ScoreUpdateResponse",
    "RemittanceEntryDTO",
    "RemittanceHistoryResponse",
    "SimulatePaymentRequest",
    "SimulatePaymentResponse",
]
