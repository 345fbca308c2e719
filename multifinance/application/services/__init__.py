"""Application services (use cases)."""

from .consumer_service import ConsumerService
from .merchant_service import MerchantService
from .consumer_limit_service import ConsumerLimitService, load_remaining_limit
from .loan_service import LoanService
from .transaction_service import TransactionService

__all__ = [
    "ConsumerService",
    "MerchantService",
    "ConsumerLimitService",
    "load_remaining_limit",
    "LoanService",
    "TransactionService",
]
