"""Domain Entities - Core business objects."""

from .consumer import Consumer
from .merchant import Merchant
from .consumer_limit import ConsumerLimit, VALID_TENURES, is_valid_tenure
from .loan import Loan, LoanStatus
from .transaction import Transaction, PaymentType

__all__ = [
    "Consumer",
    "Merchant",
    "ConsumerLimit",
    "VALID_TENURES",
    "is_valid_tenure",
    "Loan",
    "LoanStatus",
    "Transaction",
    "PaymentType",
]
