"""Simulation service - canned remittance data for demos and the dashboard."""

import structlog

from remitlend.application.dto import (
    RemittanceEntryDTO,
    RemittanceHistoryResponse,
    SimulatePaymentRequest,
    SimulatePaymentResponse,
)

logger = structlog.get_logger(__name__)

MOCK_HISTORY = (
    RemittanceEntryDTO(month="January", amount=500, status="Completed"),
    RemittanceEntryDTO(month="February", amount=500, status="Completed"),
    RemittanceEntryDTO(month="March", amount=500, status="Completed"),
)
MOCK_SCORE = 750
MOCK_SIMULATED_SCORE = 760


def _format_amount(amount: float) -> str:
    """Render whole amounts without a trailing ``.0``."""
    if float(amount).is_integer():
        return str(int(amount))
    return str(amount)


class SimulationService:
    """
    Application service for the remittance simulation endpoints.

    Returns fixed mock data; nothing here reads storage or changes scores.
    """

    def get_remittance_history(self, user_id: str) -> RemittanceHistoryResponse:
        logger.info("remittance_history_requested", user_id=user_id)

        return RemittanceHistoryResponse(
            user_id=user_id,
            score=MOCK_SCORE,
            streak=sum(1 for entry in MOCK_HISTORY if entry.status == "Completed"),
            history=list(MOCK_HISTORY),
        )

    def simulate_payment(self, request: SimulatePaymentRequest) -> SimulatePaymentResponse:
        logger.info(
            "payment_simulated",
            user_id=request.user_id,
            amount=request.amount,
        )

        return SimulatePaymentResponse(
            message=(
                f"Payment of {_format_amount(request.amount)} "
                f"for user {request.user_id} simulated."
            ),
            new_score=MOCK_SIMULATED_SCORE,
        )
