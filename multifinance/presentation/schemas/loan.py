"""Loan Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoanRequestSchema(BaseModel):
    """Schema for POST /v1/loans request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "consumer_id": 1,
                    "merchant_id": 1,
                    "tenure": 3,
                    "principal_cents": 150_000_00,
                    "interest_rate": 2.5,
                    "asset_name": "Laptop",
                }
            ]
        }
    )
    consumer_id: int = Field(..., gt=0)
    merchant_id: int = Field(..., gt=0)
    tenure: int = Field(..., gt=0, description="Tenure in months: 1, 2, 3 or 6")
    principal_cents: int = Field(..., gt=0, description="Principal in cents")
    interest_rate: float = Field(..., ge=0, description="Flat interest rate in percent")
    asset_name: str = Field(..., min_length=1, max_length=255)

    @field_validator("asset_name")
    @classmethod
    def validate_asset_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("asset_name cannot be empty or whitespace")
        return v.strip()


class LoanResponseSchema(BaseModel):
    """Schema for a loan in API responses."""

    model_config = ConfigDict(from_attributes=True)

    loan_id: int
    consumer_id: int
    merchant_id: int
    consumer_limit_id: int
    contract_number: str = Field(..., examples=["1-a8Kd02LmZq-1"])
    asset_name: str
    principal_cents: int
    principal_paid_cents: int
    interest_rate: float
    interest_cents: int
    interest_paid_cents: int
    status: str = Field(..., description="on_going, late or finish")
    installment: int = Field(..., description="Installments paid so far")
    due_date: str
    created_at: str
