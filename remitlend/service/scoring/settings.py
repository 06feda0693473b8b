"""
Scoring Settings for the RemitLend credit score engine.

This module contains the tunable parameters of the score transition and
band classification rules. They can be adjusted via environment variables
for experiments with different reward/penalty sizes or band cut-offs.

Environment variables use the SCORING_ prefix:
    SCORING_ON_TIME_DELTA=15
    SCORING_LATE_DELTA=-30
    SCORING_EXCELLENT_THRESHOLD=750

The base-score hash (multiplier and window) is deliberately not here: changing
it would change every derived score, see ``base_score.py``.

Usage:
    from remitlend.service.scoring.settings import scoring_settings

    # Use default settings (loaded from env)
    delta = scoring_settings.on_time_delta

    # Or create custom settings for testing
    custom = ScoringSettings(late_delta=-50)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for the score transition and band rules.

    All settings can be overridden via environment variables with SCORING_ prefix.
    All scores are on the 300-850 credit score scale.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Score Window ===
    score_floor: int = Field(
        default=300,
        description="Lowest score a transition can produce",
    )
    score_ceiling: int = Field(
        default=850,
        description="Highest score a transition can produce",
    )

    # === Transition Deltas ===
    on_time_delta: int = Field(
        default=15,
        gt=0,
        description="Points awarded for an on-time repayment",
    )
    late_delta: int = Field(
        default=-30,
        lt=0,
        description="Points deducted for a late or missed repayment",
    )

    # === Band Thresholds (inclusive lower bounds) ===
    excellent_threshold: int = Field(
        default=750,
        description="Scores at or above this are Excellent",
    )
    good_threshold: int = Field(
        default=670,
        description="Scores at or above this are Good",
    )
    fair_threshold: int = Field(
        default=580,
        description="Scores at or above this are Fair; anything lower is Poor",
    )

    @model_validator(mode="after")
    def validate_ordering(self) -> "ScoringSettings":
        """Thresholds must partition [floor, ceiling] into four non-empty bands."""
        ordered = [
            self.score_floor,
            self.fair_threshold,
            self.good_threshold,
            self.excellent_threshold,
        ]
        if any(low >= high for low, high in zip(ordered, ordered[1:])):
            raise ValueError(
                "expected score_floor < fair_threshold < good_threshold "
                f"< excellent_threshold, got {ordered}"
            )
        if self.excellent_threshold > self.score_ceiling:
            raise ValueError(
                f"excellent_threshold ({self.excellent_threshold}) "
                f"> score_ceiling ({self.score_ceiling})"
            )
        return self


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
