"""Payment and ledger Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PaymentRequestSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"consumer_id": 1, "loan_id": 1, "payment_type": "installment"},
            ]
        }
    )
    consumer_id: int = Field(..., gt=0)
    loan_id: int = Field(..., gt=0)
    payment_type: str = Field(..., description="installment or full")


class PaymentQuoteResponseSchema(BaseModel):
    """Schema for GET /v1/transactions/remaining-payment response."""

    model_config = ConfigDict(from_attributes=True)

    loan_id: int
    consumer_id: int
    contract_number: str
    payment_type: str
    tenure: int
    installment: int = Field(..., description="Installment this payment represents")
    due_date: str
    principal_paid_cents: int
    interest_paid_cents: int
    remaining_principal_cents: int = Field(..., description="Principal due now")
    remaining_interest_cents: int = Field(..., description="Interest due now")
    total_cents: int


class TransactionResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    transaction_id: int
    consumer_id: int
    loan_id: int
    amount_cents: int
    description: str = Field(..., examples=["Payment for loan 1-a8Kd02LmZq-1"])
    created_at: str
