"""Score-related Pydantic schemas."""

from typing import Annotated, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


USER_ID_MESSAGES = {
    ("userId", "string_too_short"): "User ID is required",
    ("userId", "string_too_long"): "User ID is too long",
}


def _json_number(value: float) -> Union[int, float]:
    return int(value) if float(value).is_integer() else value


# Whole amounts serialize without a fraction: 500 stays 500, 120.5 stays 120.5.
JsonAmount = Annotated[float, PlainSerializer(_json_number, return_type=Union[int, float])]


class RequestSchema(BaseModel):
    """
    Base for request-part schemas checked by the validation pipeline.

    ``error_messages`` maps (field alias, pydantic error type) to the message
    reported to the caller; unmapped failures keep pydantic's message.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    error_messages: ClassVar[dict[tuple[str, str], str]] = {}


class ResponseSchema(BaseModel):
    """Base for response bodies, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GetScoreParamsSchema(RequestSchema):
    """Path parameters for GET /api/score/{userId}."""

    user_id: str = Field(
        ...,
        alias="userId",
        min_length=1,
        max_length=100,
        strict=True,
        description="Opaque user identifier",
        examples=["user123"],
    )

    error_messages: ClassVar[dict[tuple[str, str], str]] = dict(USER_ID_MESSAGES)


class UpdateScoreRequestSchema(RequestSchema):
    """Schema for POST /api/score/update request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "userId": "user123",
                    "repaymentAmount": 500,
                    "onTime": True,
                }
            ]
        }
    )

    user_id: str = Field(
        ...,
        alias="userId",
        min_length=1,
        max_length=100,
        strict=True,
        description="Opaque user identifier",
    )
    repayment_amount: float = Field(
        ...,
        alias="repaymentAmount",
        gt=0,
        le=1_000_000,
        strict=True,
        description="Amount repaid",
        examples=[500],
    )
    on_time: bool = Field(
        ...,
        alias="onTime",
        strict=True,
        description="Whether the repayment arrived on schedule",
        examples=[True],
    )

    error_messages: ClassVar[dict[tuple[str, str], str]] = {
        **USER_ID_MESSAGES,
        ("repaymentAmount", "greater_than"): "Repayment amount must be positive",
        ("repaymentAmount", "less_than_equal"): "Repayment amount exceeds maximum limit",
        ("onTime", "missing"): "onTime must be a boolean",
        ("onTime", "bool_type"): "onTime must be a boolean",
    }


class ScoreFactorsSchema(ResponseSchema):
    """Explanatory factors returned with a score."""

    repayment_history: str = Field(..., examples=["On-time payments increase score by 15 pts each"])
    late_payment_penalty: str = Field(..., examples=["Late payments decrease score by 30 pts each"])
    range: str = Field(..., examples=["500 (Poor) - 850 (Excellent)"])


class ScoreResponseSchema(ResponseSchema):
    """Schema for GET /api/score/{userId} response body."""

    success: bool = True
    user_id: str = Field(..., description="The user's identifier")
    score: int = Field(..., ge=300, le=850, description="Current credit score")
    band: str = Field(..., description="Credit band", examples=["Good"])
    factors: ScoreFactorsSchema


class ScoreUpdateResponseSchema(ResponseSchema):
    """Schema for POST /api/score/update response body."""

    success: bool = True
    user_id: str
    repayment_amount: JsonAmount
    on_time: bool
    old_score: int = Field(..., description="Score before the repayment")
    delta: int = Field(..., description="Signed adjustment for the repayment")
    new_score: int = Field(..., ge=300, le=850, description="Score after clamping")
    band: str = Field(..., description="Band of the new score")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "userId": "user123",
                    "repaymentAmount": 500,
                    "onTime": True,
                    "oldScore": 700,
                    "delta": 15,
                    "newScore": 715,
                    "band": "Good",
                }
            ]
        }
    )
