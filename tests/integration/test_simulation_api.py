"""
Integration tests for the remittance simulation endpoints.

These tests verify:
1. GET /api/history/{userId} - Mock history and streak
2. POST /api/simulate - Mock payment message
3. Both share the validation and error plumbing of the score endpoints
"""

import pytest
from httpx import AsyncClient


class TestRemittanceHistory:
    """Tests for GET /api/history/{userId}."""

    @pytest.mark.asyncio
    async def test_history_returns_mock_entries(self, client: AsyncClient):
        response = await client.get("/api/history/user123")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "userId": "user123",
            "score": 750,
            "streak": 3,
            "history": [
                {"month": "January", "amount": 500, "status": "Completed"},
                {"month": "February", "amount": 500, "status": "Completed"},
                {"month": "March", "amount": 500, "status": "Completed"},
            ],
        }

    @pytest.mark.asyncio
    async def test_history_amounts_are_whole_numbers(self, client: AsyncClient):
        response = await client.get("/api/history/user123")

        amounts = [entry["amount"] for entry in response.json()["history"]]
        assert all(isinstance(amount, int) for amount in amounts)

    @pytest.mark.asyncio
    async def test_history_validates_user_id(self, client: AsyncClient):
        response = await client.get(f"/api/history/{'y' * 101}")

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"path": "params.userId", "message": "User ID is too long"}
        ]


class TestSimulatePayment:
    """Tests for POST /api/simulate."""

    @pytest.mark.asyncio
    async def test_simulate_payment(self, client: AsyncClient):
        response = await client.post(
            "/api/simulate",
            json={"userId": "user123", "amount": 500},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Payment of 500 for user user123 simulated.",
            "newScore": 760,
        }

    @pytest.mark.asyncio
    async def test_simulate_fractional_amount(self, client: AsyncClient):
        response = await client.post(
            "/api/simulate",
            json={"userId": "user123", "amount": 12.5},
        )

        assert response.json()["message"] == "Payment of 12.5 for user user123 simulated."

    @pytest.mark.asyncio
    async def test_simulate_requires_no_api_key(self, unconfigured_client: AsyncClient):
        response = await unconfigured_client.post(
            "/api/simulate",
            json={"userId": "user123", "amount": 500},
        )

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_simulate_validation(self, client: AsyncClient):
        response = await client.post(
            "/api/simulate",
            json={"userId": "", "amount": -10},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Validation failed",
            "errors": [
                {"path": "body.userId", "message": "User ID is required"},
                {"path": "body.amount", "message": "Amount must be positive"},
            ],
        }

    @pytest.mark.asyncio
    async def test_simulate_empty_body(self, client: AsyncClient):
        response = await client.post("/api/simulate")

        assert response.status_code == 400
        assert [error["path"] for error in response.json()["errors"]] == [
            "body.userId",
            "body.amount",
        ]
