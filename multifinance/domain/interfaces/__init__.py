"""
Domain Interfaces (Ports)
"""

from .repositories import (
    UnitOfWork,
    ConsumerRepository,
    MerchantRepository,
    ConsumerLimitRepository,
    LoanRepository,
    TransactionRepository,
)

__all__ = [
    "UnitOfWork",
    "ConsumerRepository",
    "MerchantRepository",
    "ConsumerLimitRepository",
    "LoanRepository",
    "TransactionRepository",
]
