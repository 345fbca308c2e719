"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Test client for FastAPI app bound to that database
- Seeded consumer, merchant and credit line created through the API
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from multifinance.main import app
from multifinance.infrastructure.database import Base, get_db_session


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

def override_session(session: AsyncSession):
    """
    Build a get_db_session override bound to ``session``.

    Commits when the request succeeds and rolls back when it raises,
    like the production dependency.
    """

    async def _get_db_session() -> AsyncGenerator[AsyncSession, None]:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

    return _get_db_session


@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database.

    Every request shares ``test_session``.
    """
    app.dependency_overrides[get_db_session] = override_session(test_session)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def consumer_payload() -> dict:
    """Request body for a new consumer."""
    return {
        "full_name": "Budi Santoso",
        "legal_name": "Budi Santoso",
        "place_of_birth": "Jakarta",
        "date_of_birth": "1990-05-17",
        "salary_cents": 10_000_000,
        "nik": "3171234567890001",
        "ktp_image_url": "https://cdn.example.com/ktp/1.jpg",
        "selfie_url": "https://cdn.example.com/selfie/1.jpg",
    }


@pytest_asyncio.fixture
async def seeded(client: AsyncClient, consumer_payload: dict) -> dict:
    """
    A consumer, a merchant, and a 3-month credit line of 1,000,000 cents.

    Returns the ids as a dict.
    """
    consumer = await client.post("/v1/consumers", json=consumer_payload)
    assert consumer.status_code == 201

    merchant = await client.post(
        "/v1/merchants",
        json={"name": "Toko Elektronik", "merchant_type": "electronics"},
    )
    assert merchant.status_code == 201

    consumer_id = consumer.json()["consumer_id"]
    limit = await client.post(
        "/v1/consumer-limits",
        json={"consumer_id": consumer_id, "tenure": 3, "limit_cents": 1_000_000},
    )
    assert limit.status_code == 200

    return {
        "consumer_id": consumer_id,
        "merchant_id": merchant.json()["merchant_id"],
        "consumer_limit_id": limit.json()["consumer_limit_id"],
    }


@pytest_asyncio.fixture
async def loan(client: AsyncClient, seeded: dict) -> dict:
    """A 300,000-cent, 10% loan on the seeded 3-month credit line."""
    response = await client.post(
        "/v1/loans",
        json={
            "consumer_id": seeded["consumer_id"],
            "merchant_id": seeded["merchant_id"],
            "tenure": 3,
            "principal_cents": 300_000,
            "interest_rate": 10.0,
            "asset_name": "Laptop",
        },
    )
    assert response.status_code == 201
    return response.json()
