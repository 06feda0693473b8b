"""Pydantic schemas for API request/response validation."""

from .score import (
    GetScoreParamsSchema,
    RequestSchema,
    ResponseSchema,
    ScoreFactorsSchema,
    ScoreResponseSchema,
    ScoreUpdateResponseSchema,
    UpdateScoreRequestSchema,
)
from .simulation import (
    RemittanceEntrySchema,
    RemittanceHistoryParamsSchema,
    RemittanceHistoryResponseSchema,
    SimulatePaymentRequestSchema,
    SimulatePaymentResponseSchema,
)
from .error import ErrorResponseSchema, FieldErrorSchema

__all__ = [
    "GetScoreParamsSchema",
    "RequestSchema",
    "ResponseSchema",
    "ScoreFactorsSchema",
    "ScoreResponseSchema",
    "ScoreUpdateResponseSchema",
    "UpdateScoreRequestSchema",
    "RemittanceEntrySchema",
    "RemittanceHistoryParamsSchema",
    "RemittanceHistoryResponseSchema",
    "SimulatePaymentRequestSchema",
    "SimulatePaymentResponseSchema",
    "ErrorResponseSchema",
    "FieldErrorSchema",
]
