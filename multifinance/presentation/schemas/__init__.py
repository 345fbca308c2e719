"""Pydantic schemas for API request/response validation."""

from .consumer import ConsumerRequestSchema, ConsumerResponseSchema
from .merchant import MerchantRequestSchema, MerchantResponseSchema
from .consumer_limit import (
    ConsumerLimitRequestSchema,
    ConsumerLimitResponseSchema,
    RemainingLimitResponseSchema,
)
from .loan import LoanRequestSchema, LoanResponseSchema
from .transaction import (
    PaymentRequestSchema,
    PaymentQuoteResponseSchema,
    TransactionResponseSchema,
)
from .error import ErrorResponseSchema, InsufficientLimitErrorSchema

__all__ = [
    "ConsumerRequestSchema",
    "ConsumerResponseSchema",
    "MerchantRequestSchema",
    "MerchantResponseSchema",
    "ConsumerLimitRequestSchema",
    "ConsumerLimitResponseSchema",
    "RemainingLimitResponseSchema",
    "LoanRequestSchema",
    "LoanResponseSchema",
    "PaymentRequestSchema",
    "PaymentQuoteResponseSchema",
    "TransactionResponseSchema",
    "ErrorResponseSchema",
    "InsufficientLimitErrorSchema",
]
