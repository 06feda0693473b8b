"""
Credit Scoring Module for the RemitLend score service
"""

from .models import CreditBand, RepaymentEvent, ScoreSnapshot, ScoreTransition
from .settings import ScoringSettings, scoring_settings
from .base_score import base_score, identifier_hash
from .band import classify_band
from .transition import apply_event, apply_repayment, clamp, next_score, score_delta
from .factors import score_factors

__all__ = [
    # Settings
    "ScoringSettings",
    "scoring_settings",
    # Models
    "CreditBand",
    "RepaymentEvent",
    "ScoreSnapshot",
    "ScoreTransition",
    # Derivation
    "base_score",
    "identifier_hash",
    # Band
    "classify_band",
    # Transition
    "apply_event",
    "apply_repayment",
    "clamp",
    "next_score",
    "score_delta",
    # Factors
    "score_factors",
]
