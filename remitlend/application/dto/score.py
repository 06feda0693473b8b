"""Data transfer objects for credit score operations."""

from dataclasses import dataclass
from typing import Dict

from remitlend.service.scoring import RepaymentEvent


@dataclass(frozen=True)
class ScoreUpdateRequest:
    """Input data for a repayment-driven score update."""
    user_id: str
    repayment_amount: float
    on_time: bool

    def to_event(self) -> RepaymentEvent:
        return RepaymentEvent(
            user_id=self.user_id,
            repayment_amount=self.repayment_amount,
            on_time=self.on_time,
        )


@dataclass(frozen=True)
class ScoreResponse:
    """Response data for a score lookup."""

    user_id: str
    score: int
    band: str
    factors: Dict[str, str]

    @classmethod
    def from_snapshot(cls, snapshot, factors: Dict[str, str]) -> "ScoreResponse":
        return cls(
            user_id=snapshot.user_id,
            score=snapshot.score,
            band=snapshot.band.value,
            factors=dict(factors),
        )


@dataclass(frozen=True)
class ScoreUpdateResponse:
    """Response data for a score update."""

    user_id: str
    repayment_amount: float
    on_time: bool
    old_score: int
    delta: int
    new_score: int
    band: str

    @classmethod
    def from_transition(
        cls,
        request: ScoreUpdateRequest,
        transition,
    ) -> "ScoreUpdateResponse":
        return cls(
            user_id=request.user_id,
            repayment_amount=request.repayment_amount,
            on_time=request.on_time,
            old_score=transition.old_score,
            delta=transition.delta,
            new_score=transition.new_score,
            band=transition.band.value,
        )
