"""Pydantic schema for API error responses."""

from typing import Optional

from pydantic import BaseModel, Field


class FieldErrorSchema(BaseModel):
    """One failing field in a validation error response."""

    path: str = Field(..., description="Dotted field locator", examples=["body.repaymentAmount"])
    message: str = Field(..., examples=["Repayment amount must be positive"])


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    success: bool = Field(
        False,
        description="Always false for errors",
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Validation failed"],
    )
    errors: Optional[list[FieldErrorSchema]] = Field(
        None,
        description="Per-field problems, present only for validation failures",
    )
    stack: Optional[str] = Field(
        None,
        description="Stack trace, present only outside production",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "message": "Validation failed",
                    "errors": [
                        {
                            "path": "body.repaymentAmount",
                            "message": "Repayment amount must be positive",
                        }
                    ],
                }
            ]
        }
    }
