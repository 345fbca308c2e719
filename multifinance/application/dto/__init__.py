"""Data Transfer Objects for application layer."""

from .consumer import ConsumerRequest, ConsumerResponse
from .merchant import MerchantRequest, MerchantResponse
from .consumer_limit import (
    ConsumerLimitRequest,
    ConsumerLimitResponse,
    RemainingLimitResponse,
)
from .loan import LoanRequest, LoanResponse
from .transaction import PaymentRequest, PaymentQuoteResponse, TransactionResponse

__all__ = [
    "ConsumerRequest",
    "ConsumerResponse",
    "MerchantRequest",
    "MerchantResponse",
    "ConsumerLimitRequest",
    "ConsumerLimitResponse",
    "RemainingLimitResponse",
    "LoanRequest",
    "LoanResponse",
    "PaymentRequest",
    "PaymentQuoteResponse",
    "TransactionResponse",
]
