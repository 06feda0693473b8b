"""Credit score API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter

from remitlend.application.dto import ScoreUpdateRequest
from remitlend.application.services import ScoreService
from remitlend.core.dependencies import get_score_service
from remitlend.core.metrics import record_score_lookup, record_score_update
from remitlend.presentation.middleware import (
    require_api_key,
    validate_body,
    validate_params,
)
from remitlend.presentation.schemas import (
    ErrorResponseSchema,
    GetScoreParamsSchema,
    ScoreFactorsSchema,
    ScoreResponseSchema,
    ScoreUpdateResponseSchema,
    UpdateScoreRequestSchema,
)


async def update_score(
    request: Request,
    payload: Annotated[
        UpdateScoreRequestSchema,
        Depends(validate_body(UpdateScoreRequestSchema)),
    ],
    score_service: Annotated[ScoreService, Depends(get_score_service)],
) -> ScoreUpdateResponseSchema:
    dto = ScoreUpdateRequest(
        user_id=payload.user_id,
        repayment_amount=payload.repayment_amount,
        on_time=payload.on_time,
    )

    response = score_service.update_score(dto)

    record_score_update(
        dto.on_time,
        response.band,
        response.new_score - response.old_score,
    )

    return ScoreUpdateResponseSchema(
        user_id=response.user_id,
        repayment_amount=response.repayment_amount,
        on_time=response.on_time,
        old_score=response.old_score,
        delta=response.delta,
        new_score=response.new_score,
        band=response.band,
    )


async def get_score(
    params: Annotated[
        GetScoreParamsSchema,
        Depends(validate_params(GetScoreParamsSchema)),
    ],
    score_service: Annotated[ScoreService, Depends(get_score_service)],
) -> ScoreResponseSchema:
    response = score_service.get_score(params.user_id)

    record_score_lookup(response.band)

    return ScoreResponseSchema(
        user_id=response.user_id,
        score=response.score,
        band=response.band,
        factors=ScoreFactorsSchema(
            repayment_history=response.factors["repaymentHistory"],
            late_payment_penalty=response.factors["latePaymentPenalty"],
            range=response.factors["range"],
        ),
    )


def build_score_router(limiter: Limiter, strict_limit: str) -> APIRouter:
    """Score routes, with updates held to the strict per-client limit."""
    score_router = APIRouter(
        prefix="/score",
        responses={
            400: {"model": ErrorResponseSchema, "description": "Validation failed"},
        },
    )

    score_router.add_api_route(
        "/update",
        limiter.limit(strict_limit)(update_score),
        methods=["POST"],
        response_model=ScoreUpdateResponseSchema,
        summary="Update Score From Repayment",
        description="""
        Adjust a user's credit score for a single repayment event: +15 for an
        on-time repayment, -30 for a late one, clamped to 300-850.

        Requires the `x-api-key` header to match the server's INTERNAL_API_KEY.
        """,
        dependencies=[Depends(require_api_key)],
        responses={
            200: {"description": "Score updated successfully"},
            401: {"model": ErrorResponseSchema, "description": "Missing or invalid API key"},
            429: {"model": ErrorResponseSchema, "description": "Too many requests"},
            500: {"model": ErrorResponseSchema, "description": "API key not configured"},
        },
    )

    score_router.add_api_route(
        "/{userId}",
        get_score,
        methods=["GET"],
        response_model=ScoreResponseSchema,
        summary="Get Credit Score",
        description="""
        Retrieve a user's current credit score, its band and the factors that
        move it. Used by the loan manager to make lending decisions.
        """,
        responses={
            200: {"description": "Score retrieved successfully"},
        },
    )

    return score_router
