"""Schemas for the remittance simulation endpoints."""

from typing import ClassVar

from pydantic import Field

from .score import USER_ID_MESSAGES, JsonAmount, RequestSchema, ResponseSchema


class RemittanceHistoryParamsSchema(RequestSchema):
    """Path parameters for GET /api/history/{userId}."""

    user_id: str = Field(..., alias="userId", min_length=1, max_length=100, strict=True)

    error_messages: ClassVar[dict[tuple[str, str], str]] = dict(USER_ID_MESSAGES)


class SimulatePaymentRequestSchema(RequestSchema):
    """Schema for POST /api/simulate request body."""

    user_id: str = Field(..., alias="userId", min_length=1, max_length=100, strict=True)
    amount: float = Field(..., gt=0, le=1_000_000, strict=True, examples=[500])

    error_messages: ClassVar[dict[tuple[str, str], str]] = {
        **USER_ID_MESSAGES,
        ("amount", "greater_than"): "Amount must be positive",
        ("amount", "less_than_equal"): "Amount exceeds maximum limit",
    }


class RemittanceEntrySchema(ResponseSchema):
    month: str = Field(..., examples=["January"])
    amount: JsonAmount = Field(..., examples=[500])
    status: str = Field(..., examples=["Completed"])


class RemittanceHistoryResponseSchema(ResponseSchema):
    """Schema for GET /api/history/{userId} response body."""

    success: bool = True
    user_id: str
    score: int
    streak: int = Field(..., ge=0, description="Consecutive completed remittances")
    history: list[RemittanceEntrySchema]


class SimulatePaymentResponseSchema(ResponseSchema):
    """Schema for POST /api/simulate response body."""

    success: bool = True
    message: str = Field(..., examples=["Payment of 500 for user user123 simulated."])
    new_score: int
