"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["LOAN_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Loan not found: 42"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "LOAN_NOT_FOUND",
                    "message": "Loan not found: 42",
                    "request_id": "abc123",
                }
            ]
        }
    }


class InsufficientLimitErrorSchema(ErrorResponseSchema):
    """Error response for a principal above the remaining limit."""
    remaining_cents: int = Field(
        ...,
        description="Remaining limit of the credit line in cents",
        examples=[25000],
    )
