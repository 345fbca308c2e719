"""
Integration tests for consumer and merchant reference data.

These tests verify:
1. Consumer registration, listing, update and soft delete
2. Merchant registration, listing, update and soft delete
3. Validation and conflict responses
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# Consumers
# =============================================================================

class TestConsumersAPI:
    """Tests for /v1/consumers."""

    @pytest.mark.asyncio
    async def test_create_and_get_consumer(self, client: AsyncClient, consumer_payload: dict):
        created = await client.post("/v1/consumers", json=consumer_payload)

        assert created.status_code == 201
        consumer_id = created.json()["consumer_id"]

        response = await client.get(f"/v1/consumers/{consumer_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["nik"] == consumer_payload["nik"]
        assert data["date_of_birth"] == "1990-05-17"
        assert data["salary_cents"] == 10_000_000

    @pytest.mark.asyncio
    async def test_duplicate_nik_returns_409(self, client: AsyncClient, consumer_payload: dict):
        await client.post("/v1/consumers", json=consumer_payload)

        response = await client.post("/v1/consumers", json=consumer_payload)

        assert response.status_code == 409
        assert response.json()["error"] == "DUPLICATE_CONSUMER"

    @pytest.mark.asyncio
    async def test_blank_name_returns_400(self, client: AsyncClient, consumer_payload: dict):
        response = await client.post("/v1/consumers", json={**consumer_payload, "full_name": "   "})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_list_is_paginated(self, client: AsyncClient, consumer_payload: dict):
        for i in range(3):
            await client.post("/v1/consumers", json={**consumer_payload, "nik": f"nik-{i}"})

        first = await client.get("/v1/consumers", params={"page": 1, "limit": 2})
        second = await client.get("/v1/consumers", params={"page": 2, "limit": 2})

        assert [c["nik"] for c in first.json()] == ["nik-0", "nik-1"]
        assert [c["nik"] for c in second.json()] == ["nik-2"]

    @pytest.mark.asyncio
    async def test_page_size_is_capped(self, client: AsyncClient):
        response = await client.get("/v1/consumers", params={"limit": 500})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_consumer(self, client: AsyncClient, consumer_payload: dict):
        created = (await client.post("/v1/consumers", json=consumer_payload)).json()

        response = await client.put(
            f"/v1/consumers/{created['consumer_id']}",
            json={**consumer_payload, "salary_cents": 12_000_000},
        )

        assert response.status_code == 200
        assert response.json()["salary_cents"] == 12_000_000
        assert response.json()["updated_at"] is not None

    @pytest.mark.asyncio
    async def test_update_to_taken_nik_returns_409(self, client: AsyncClient, consumer_payload: dict):
        await client.post("/v1/consumers", json={**consumer_payload, "nik": "taken"})
        created = (await client.post("/v1/consumers", json=consumer_payload)).json()

        response = await client.put(
            f"/v1/consumers/{created['consumer_id']}",
            json={**consumer_payload, "nik": "taken"},
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_deleted_consumer_is_hidden(self, client: AsyncClient, consumer_payload: dict):
        created = (await client.post("/v1/consumers", json=consumer_payload)).json()

        deleted = await client.delete(f"/v1/consumers/{created['consumer_id']}")

        assert deleted.status_code == 204
        assert (await client.get(f"/v1/consumers/{created['consumer_id']}")).status_code == 404
        assert (await client.get("/v1/consumers")).json() == []

    @pytest.mark.asyncio
    async def test_deleted_consumer_cannot_borrow(self, client: AsyncClient, seeded: dict):
        await client.delete(f"/v1/consumers/{seeded['consumer_id']}")

        response = await client.post(
            "/v1/loans",
            json={
                "consumer_id": seeded["consumer_id"],
                "merchant_id": seeded["merchant_id"],
                "tenure": 3,
                "principal_cents": 1_000,
                "interest_rate": 1.0,
                "asset_name": "Phone",
            },
        )

        assert response.status_code == 404
        assert response.json()["error"] == "CONSUMER_NOT_FOUND"


# =============================================================================
# Merchants
# =============================================================================

class TestMerchantsAPI:
    """Tests for /v1/merchants."""

    @pytest.mark.asyncio
    async def test_create_update_delete_merchant(self, client: AsyncClient):
        created = await client.post(
            "/v1/merchants",
            json={"name": "Toko Buku", "merchant_type": "books"},
        )
        assert created.status_code == 201
        merchant_id = created.json()["merchant_id"]

        updated = await client.put(
            f"/v1/merchants/{merchant_id}",
            json={"name": "Toko Buku Baru", "merchant_type": "books"},
        )
        assert updated.status_code == 200
        assert updated.json()["name"] == "Toko Buku Baru"

        assert (await client.delete(f"/v1/merchants/{merchant_id}")).status_code == 204
        missing = await client.get(f"/v1/merchants/{merchant_id}")
        assert missing.status_code == 404
        assert missing.json()["error"] == "MERCHANT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_merchants(self, client: AsyncClient):
        for name in ("A", "B"):
            await client.post("/v1/merchants", json={"name": name, "merchant_type": "retail"})

        response = await client.get("/v1/merchants")

        assert response.status_code == 200
        assert [m["name"] for m in response.json()] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_missing_type_returns_400(self, client: AsyncClient):
        response = await client.post("/v1/merchants", json={"name": "Toko"})

        assert response.status_code == 400
        assert "merchant_type" in response.json()["message"]
