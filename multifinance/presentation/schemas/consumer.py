"""Consumer Pydantic schemas."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConsumerRequestSchema(BaseModel):
    """Schema for POST/PUT /v1/consumers request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "full_name": "Budi Santoso",
                    "legal_name": "Budi Santoso",
                    "place_of_birth": "Jakarta",
                    "date_of_birth": "1990-05-17",
                    "salary_cents": 1_000_000_00,
                    "nik": "3171234567890001",
                    "ktp_image_url": "https://cdn.example.com/ktp/1.jpg",
                    "selfie_url": "https://cdn.example.com/selfie/1.jpg",
                }
            ]
        }
    )
    full_name: str = Field(..., min_length=1, max_length=255)
    legal_name: str = Field(..., min_length=1, max_length=255)
    place_of_birth: str = Field(..., min_length=1, max_length=255)
    date_of_birth: date
    salary_cents: int = Field(..., ge=0, description="Monthly salary in cents")
    nik: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="National identity number",
    )
    ktp_image_url: str = Field("", description="URL of the identity card photo")
    selfie_url: str = Field("", description="URL of the selfie photo")

    @field_validator("full_name", "legal_name", "place_of_birth", "nik")
    @classmethod
    def strip_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty or whitespace")
        return v.strip()


class ConsumerResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    consumer_id: int
    full_name: str
    legal_name: str
    place_of_birth: str
    date_of_birth: str
    salary_cents: int
    nik: str
    ktp_image_url: str
    selfie_url: str
    created_at: str
    updated_at: Optional[str] = None
