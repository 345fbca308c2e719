"""Repository implementations."""

from .consumer_repository import PostgresConsumerRepository
from .merchant_repository import PostgresMerchantRepository
from .consumer_limit_repository import PostgresConsumerLimitRepository
from .loan_repository import PostgresLoanRepository
from .transaction_repository import PostgresTransactionRepository
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "PostgresConsumerRepository",
    "PostgresMerchantRepository",
    "PostgresConsumerLimitRepository",
    "PostgresLoanRepository",
    "PostgresTransactionRepository",
    "SqlAlchemyUnitOfWork",
]
