"""Remittance history and payment simulation endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter

from remitlend.application.dto import SimulatePaymentRequest
from remitlend.application.services import SimulationService
from remitlend.core.dependencies import get_simulation_service
from remitlend.presentation.middleware import validate_body, validate_params
from remitlend.presentation.schemas import (
    ErrorResponseSchema,
    RemittanceEntrySchema,
    RemittanceHistoryParamsSchema,
    RemittanceHistoryResponseSchema,
    SimulatePaymentRequestSchema,
    SimulatePaymentResponseSchema,
)


async def get_remittance_history(
    params: Annotated[
        RemittanceHistoryParamsSchema,
        Depends(validate_params(RemittanceHistoryParamsSchema)),
    ],
    simulation_service: Annotated[SimulationService, Depends(get_simulation_service)],
) -> RemittanceHistoryResponseSchema:
    response = simulation_service.get_remittance_history(params.user_id)

    return RemittanceHistoryResponseSchema(
        user_id=response.user_id,
        score=response.score,
        streak=response.streak,
        history=[
            RemittanceEntrySchema(
                month=entry.month,
                amount=entry.amount,
                status=entry.status,
            )
            for entry in response.history
        ],
    )


async def simulate_payment(
    request: Request,
    payload: Annotated[
        SimulatePaymentRequestSchema,
        Depends(validate_body(SimulatePaymentRequestSchema)),
    ],
    simulation_service: Annotated[SimulationService, Depends(get_simulation_service)],
) -> SimulatePaymentResponseSchema:
    response = simulation_service.simulate_payment(
        SimulatePaymentRequest(user_id=payload.user_id, amount=payload.amount)
    )

    return SimulatePaymentResponseSchema(
        message=response.message,
        new_score=response.new_score,
    )


def build_simulation_router(limiter: Limiter, strict_limit: str) -> APIRouter:
    simulation_router = APIRouter(
        responses={
            400: {"model": ErrorResponseSchema, "description": "Validation failed"},
        },
    )

    simulation_router.add_api_route(
        "/history/{userId}",
        get_remittance_history,
        methods=["GET"],
        response_model=RemittanceHistoryResponseSchema,
        summary="Get Remittance History",
        description="Return a user's recent remittance activity and completion streak.",
    )
    simulation_router.add_api_route(
        "/simulate",
        limiter.limit(strict_limit)(simulate_payment),
        methods=["POST"],
        response_model=SimulatePaymentResponseSchema,
        summary="Simulate Remittance Payment",
        description="Pretend to process a remittance payment. Nothing is stored.",
        responses={
            429: {"model": ErrorResponseSchema, "description": "Too many requests"},
        },
    )

    return simulation_router
