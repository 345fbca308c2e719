"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import (
    Base,
    ConsumerModel,
    MerchantModel,
    ConsumerLimitModel,
    LoanModel,
    TransactionModel,
)

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "ConsumerModel",
    "MerchantModel",
    "ConsumerLimitModel",
    "LoanModel",
    "TransactionModel",
]
