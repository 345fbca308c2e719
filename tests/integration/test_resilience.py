"""
Integration tests for failure handling.

These tests verify:
1. A storage failure mid-payment rolls back the ledger entry and the loan
2. A use case past its deadline returns 504
3. Request ids are echoed and reported in error bodies
4. The health probe checks the database
"""

import asyncio
from typing import Optional

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from multifinance.application.services import TransactionService
from multifinance.core.dependencies import get_loan_repository, get_transaction_service
from multifinance.domain.entities import Loan
from multifinance.domain.interfaces import UnitOfWork
from multifinance.infrastructure.repositories import (
    PostgresConsumerLimitRepository,
    PostgresConsumerRepository,
    PostgresLoanRepository,
    PostgresTransactionRepository,
)
from multifinance.main import app


class BrokenLoanRepository(PostgresLoanRepository):
    """Fails the loan write after the ledger row has been flushed."""

    async def update_payment_state(self, loan: Loan, uow: Optional[UnitOfWork] = None) -> None:
        raise OperationalError("UPDATE loans", {}, Exception("disk I/O error"))


class StalledLoanRepository(PostgresLoanRepository):
    async def get_by_id(self, loan_id: int, lock: bool = False) -> Optional[Loan]:
        await asyncio.sleep(5)
        return await super().get_by_id(loan_id, lock)


# =============================================================================
# Storage Failure Tests
# =============================================================================

class TestPaymentRollback:
    """A failed payment leaves no partial state."""

    @pytest.mark.asyncio
    async def test_storage_failure_returns_500_and_writes_nothing(
        self,
        client: AsyncClient,
        test_session,
        seeded: dict,
        loan: dict,
    ):
        async def override_get_loan_repository():
            return BrokenLoanRepository(test_session)

        app.dependency_overrides[get_loan_repository] = override_get_loan_repository

        response = await client.post(
            "/v1/transactions",
            json={
                "consumer_id": seeded["consumer_id"],
                "loan_id": loan["loan_id"],
                "payment_type": "installment",
            },
        )

        assert response.status_code == 500
        assert response.json()["error"] == "STORAGE_ERROR"

        del app.dependency_overrides[get_loan_repository]

        ledger = await client.get(f"/v1/transactions/loan/{loan['loan_id']}")
        assert ledger.json() == []

        stored = (await client.get(f"/v1/loans/{loan['loan_id']}")).json()
        assert stored["installment"] == 0
        assert stored["principal_paid_cents"] == 0
        assert stored["status"] == "on_going"


# =============================================================================
# Deadline Tests
# =============================================================================

class TestDeadline:
    """Use cases are bounded by their timeout."""

    @pytest.mark.asyncio
    async def test_slow_payment_returns_504(
        self,
        client: AsyncClient,
        test_session,
        seeded: dict,
        loan: dict,
    ):
        async def override_get_transaction_service():
            return TransactionService(
                transaction_repository=PostgresTransactionRepository(test_session),
                loan_repository=StalledLoanRepository(test_session),
                consumer_repository=PostgresConsumerRepository(test_session),
                consumer_limit_repository=PostgresConsumerLimitRepository(test_session),
                timeout=0.05,
            )

        app.dependency_overrides[get_transaction_service] = override_get_transaction_service

        response = await client.post(
            "/v1/transactions",
            json={
                "consumer_id": seeded["consumer_id"],
                "loan_id": loan["loan_id"],
                "payment_type": "full",
            },
        )

        assert response.status_code == 504
        assert response.json()["error"] == "OPERATION_TIMEOUT"


# =============================================================================
# Request Context Tests
# =============================================================================

class TestRequestContext:
    """Request ids flow through responses."""

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/v1/health", headers={"X-Request-ID": "req-123"})

        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, client: AsyncClient):
        response = await client.get("/v1/loans/999", headers={"X-Request-ID": "req-404"})

        assert response.status_code == 404
        assert response.json()["request_id"] == "req-404"


# =============================================================================
# Health Tests
# =============================================================================

class TestHealth:
    """Tests for GET /v1/health."""

    @pytest.mark.asyncio
    async def test_health_reports_database(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "ok"
        assert data["version"]
