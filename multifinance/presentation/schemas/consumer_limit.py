"""Consumer limit Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ConsumerLimitRequestSchema(BaseModel):
    """Schema for POST /v1/consumer-limits request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"consumer_id": 1, "tenure": 3, "limit_cents": 500_000_00},
            ]
        }
    )
    consumer_id: int = Field(..., gt=0)
    tenure: int = Field(..., gt=0, description="Tenure in months: 1, 2, 3 or 6")
    limit_cents: int = Field(..., ge=0, description="Credit line amount in cents")


class ConsumerLimitResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    consumer_limit_id: int
    consumer_id: int
    tenure: int
    limit_cents: int


class RemainingLimitResponseSchema(ConsumerLimitResponseSchema):
    """A credit line with the amount still available on it."""

    remaining_cents: int = Field(
        ...,
        description="Limit minus outstanding principal of unfinished loans",
    )
