"""Merchant Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MerchantRequestSchema(BaseModel):
    """Schema for POST/PUT /v1/merchants request body."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Toko Elektronik"])
    merchant_type: str = Field(..., min_length=1, max_length=100, examples=["electronics"])

    @field_validator("name", "merchant_type")
    @classmethod
    def strip_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v.strip()


class MerchantResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    merchant_id: int
    name: str
    merchant_type: str
    created_at: str
    updated_at: Optional[str] = None
