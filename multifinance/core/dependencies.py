"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from multifinance.infrastructure.database import get_db_session
from multifinance.infrastructure.repositories import (
    PostgresConsumerRepository,
    PostgresMerchantRepository,
    PostgresConsumerLimitRepository,
    PostgresLoanRepository,
    PostgresTransactionRepository,
)
from multifinance.application.services import (
    ConsumerService,
    MerchantService,
    ConsumerLimitService,
    LoanService,
    TransactionService,
)


# Repository dependencies
async def get_consumer_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresConsumerRepository:
    """Get a ConsumerRepository instance."""
    return PostgresConsumerRepository(session)


async def get_merchant_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresMerchantRepository:
    """Get a MerchantRepository instance."""
    return PostgresMerchantRepository(session)


async def get_consumer_limit_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresConsumerLimitRepository:
    """Get a ConsumerLimitRepository instance."""
    return PostgresConsumerLimitRepository(session)


async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresLoanRepository:
    """Get a LoanRepository instance."""
    return PostgresLoanRepository(session)


async def get_transaction_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresTransactionRepository:
    """Get a TransactionRepository instance."""
    return PostgresTransactionRepository(session)


# Service dependencies
async def get_consumer_service(
    consumer_repo: Annotated[PostgresConsumerRepository, Depends(get_consumer_repository)],
) -> ConsumerService:
    return ConsumerService(consumer_repository=consumer_repo)


async def get_merchant_service(
    merchant_repo: Annotated[PostgresMerchantRepository, Depends(get_merchant_repository)],
) -> MerchantService:
    return MerchantService(merchant_repository=merchant_repo)


async def get_consumer_limit_service(
    limit_repo: Annotated[PostgresConsumerLimitRepository, Depends(get_consumer_limit_repository)],
    consumer_repo: Annotated[PostgresConsumerRepository, Depends(get_consumer_repository)],
    loan_repo: Annotated[PostgresLoanRepository, Depends(get_loan_repository)],
) -> ConsumerLimitService:
    """Get a ConsumerLimitService instance with all dependencies."""
    return ConsumerLimitService(
        consumer_limit_repository=limit_repo,
        consumer_repository=consumer_repo,
        loan_repository=loan_repo,
    )


async def get_loan_service(
    loan_repo: Annotated[PostgresLoanRepository, Depends(get_loan_repository)],
    consumer_repo: Annotated[PostgresConsumerRepository, Depends(get_consumer_repository)],
    merchant_repo: Annotated[PostgresMerchantRepository, Depends(get_merchant_repository)],
    limit_repo: Annotated[PostgresConsumerLimitRepository, Depends(get_consumer_limit_repository)],
) -> LoanService:
    """Get a LoanService instance with all dependencies."""
    return LoanService(
        loan_repository=loan_repo,
        consumer_repository=consumer_repo,
        merchant_repository=merchant_repo,
        consumer_limit_repository=limit_repo,
    )


async def get_transaction_service(
    transaction_repo: Annotated[PostgresTransactionRepository, Depends(get_transaction_repository)],
    loan_repo: Annotated[PostgresLoanRepository, Depends(get_loan_repository)],
    consumer_repo: Annotated[PostgresConsumerRepository, Depends(get_consumer_repository)],
    limit_repo: Annotated[PostgresConsumerLimitRepository, Depends(get_consumer_limit_repository)],
) -> TransactionService:
    """Get a TransactionService instance with all dependencies."""
    return TransactionService(
        transaction_repository=transaction_repo,
        loan_repository=loan_repo,
        consumer_repository=consumer_repo,
        consumer_limit_repository=limit_repo,
    )
