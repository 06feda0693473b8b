"""
Score Transition for the RemitLend credit score engine.

Applies a single repayment event to a user's base score. The delta is a flat
reward or penalty (the repayment amount does not scale it) and the result is
clamped to the score window. Nothing is persisted: the same user always
starts from the same base score.
"""

from typing import Tuple

from .band import classify_band
from .base_score import base_score
from .models import RepaymentEvent, ScoreTransition
from .settings import ScoringSettings, scoring_settings


def clamp(value: int, low: int, high: int) -> int:
    """Constrain ``value`` to the closed interval [low, high]."""
    return min(high, max(low, value))


def score_delta(
    on_time: bool,
    settings: ScoringSettings = scoring_settings,
) -> int:
    """Signed score adjustment for a repayment."""
    return settings.on_time_delta if on_time else settings.late_delta


def next_score(
    old_score: int,
    on_time: bool,
    settings: ScoringSettings = scoring_settings,
) -> Tuple[int, int]:
    """
    Apply the transition rule to an arbitrary starting score.

    Args:
        old_score: Score before the event
        on_time: Whether the repayment was on time
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        (delta, new_score) with new_score clamped to [floor, ceiling]
    """
    delta = score_delta(on_time, settings)
    new_score = clamp(old_score + delta, settings.score_floor, settings.score_ceiling)
    return delta, new_score


def apply_repayment(
    user_id: str,
    repayment_amount: float,
    on_time: bool,
    settings: ScoringSettings = scoring_settings,
) -> ScoreTransition:
    """
    Compute the score transition caused by one repayment.

    Args:
        user_id: Identifier whose base score is adjusted
        repayment_amount: Amount repaid (validated upstream, does not affect delta)
        on_time: Whether the repayment was on time
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        ScoreTransition with old/new score, delta and the new band
    """
    old_score = base_score(user_id)
    delta, new_score = next_score(old_score, on_time, settings)

    return ScoreTransition(
        old_score=old_score,
        delta=delta,
        new_score=new_score,
        band=classify_band(new_score, settings),
    )


def apply_event(
    event: RepaymentEvent,
    settings: ScoringSettings = scoring_settings,
) -> ScoreTransition:
    """Convenience wrapper around ``apply_repayment`` for a RepaymentEvent."""
    return apply_repayment(
        event.user_id,
        event.repayment_amount,
        event.on_time,
        settings,
    )
