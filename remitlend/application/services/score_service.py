"""Score service - orchestrates the credit score use cases."""

import structlog

from remitlend.application.dto import (
    ScoreResponse,
    ScoreUpdateRequest,
    ScoreUpdateResponse,
)
from remitlend.service.scoring import (
    ScoreSnapshot,
    ScoringSettings,
    apply_event,
    base_score,
    classify_band,
    score_factors,
    scoring_settings,
)

logger = structlog.get_logger(__name__)


class ScoreService:
    """
    Application service for credit score use cases.

    Scores are derived from the user identifier on every call; updates
    report the effect of a repayment but are not stored, so a later lookup
    returns the same base score again.
    """

    def __init__(self, settings: ScoringSettings = scoring_settings):
        self._settings = settings

    def get_score(self, user_id: str) -> ScoreResponse:
        """
        Look up the current score for a user.

        Args:
            user_id: Validated user identifier

        Returns:
            ScoreResponse with score, band and explanatory factors
        """
        score = base_score(user_id)
        snapshot = ScoreSnapshot(
            user_id=user_id,
            score=score,
            band=classify_band(score, self._settings),
        )

        logger.info(
            "score_lookup",
            user_id=user_id,
            score=snapshot.score,
            band=snapshot.band.value,
        )

        return ScoreResponse.from_snapshot(snapshot, score_factors(self._settings))

    def update_score(self, request: ScoreUpdateRequest) -> ScoreUpdateResponse:
        """
        Apply a single repayment event to a user's score.

        Args:
            request: Validated update request

        Returns:
            ScoreUpdateResponse with old/new score, delta and band
        """
        transition = apply_event(request.to_event(), self._settings)

        logger.info(
            "score_updated",
            user_id=request.user_id,
            on_time=request.on_time,
            old_score=transition.old_score,
            new_score=transition.new_score,
            delta=transition.delta,
            band=transition.band.value,
        )

        return ScoreUpdateResponse.from_transition(request, transition)
