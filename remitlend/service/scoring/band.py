"""
Credit Band Classification for the RemitLend credit score engine.

Maps a numeric score to the lending tier shown to users and consumed by the
loan manager. Thresholds are inclusive lower bounds, checked from the top.
"""

from .models import CreditBand
from .settings import ScoringSettings, scoring_settings


def classify_band(
    score: int,
    settings: ScoringSettings = scoring_settings,
) -> CreditBand:
    """
    Classify a score into a credit band.

    Args:
        score: Numeric credit score
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        Exactly one CreditBand; every integer maps to a band
    """
    if score >= settings.excellent_threshold:
        return CreditBand.EXCELLENT
    elif score >= settings.good_threshold:
        return CreditBand.GOOD
    elif score >= settings.fair_threshold:
        return CreditBand.FAIR
    else:
        return CreditBand.POOR
