"""Human-readable explanation of what moves a score."""

from .base_score import BASE_SCORE_MAX, BASE_SCORE_MIN
from .band import classify_band
from .settings import ScoringSettings, scoring_settings


def score_factors(settings: ScoringSettings = scoring_settings) -> dict[str, str]:
    """
    Describe the factors behind a score, for display next to it.

    Keys are part of the public API response.
    """
    low_band = classify_band(BASE_SCORE_MIN, settings).value
    high_band = classify_band(BASE_SCORE_MAX, settings).value

    return {
        "repaymentHistory": (
            f"On-time payments increase score by {settings.on_time_delta} pts each"
        ),
        "latePaymentPenalty": (
            f"Late payments decrease score by {abs(settings.late_delta)} pts each"
        ),
        "range": f"{BASE_SCORE_MIN} ({low_band}) - {BASE_SCORE_MAX} ({high_band})",
    }
