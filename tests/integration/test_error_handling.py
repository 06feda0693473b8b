"""
Integration tests for the error-response pipeline.

These tests verify:
1. Unmatched routes return the canonical not-found body
2. Diagnostic routes exercise each error kind end to end
3. Internals never reach callers in production mode
4. Unexpected failures keep request id and CORS headers
5. Rate limits come from each app's own settings and return the canonical 429 body
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# Not Found Tests
# =============================================================================

class TestNotFound:

    @pytest.mark.asyncio
    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Cannot GET /api/does-not-exist",
        }

    @pytest.mark.asyncio
    async def test_wrong_method_is_not_found(self, client: AsyncClient):
        response = await client.delete("/api/simulate")

        assert response.status_code == 404
        assert response.json()["message"] == "Cannot DELETE /api/simulate"


# =============================================================================
# Diagnostic Route Tests
# =============================================================================

class TestDiagnosticRoutes:

    @pytest.mark.asyncio
    async def test_operational_error(self, client: AsyncClient):
        response = await client.get("/test/error/operational")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "This is an operational error",
        }

    @pytest.mark.asyncio
    async def test_internal_error_exposes_details_in_test(self, client: AsyncClient):
        response = await client.get("/test/error/internal")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "This is an internal error"
        assert "stack" in body

    @pytest.mark.asyncio
    @pytest.mark.parametrize("route", ["/test/error/unexpected", "/test/error/async"])
    async def test_unexpected_errors(self, client: AsyncClient, route: str):
        response = await client.get(route)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Internal server error"
        assert "RuntimeError" in body["stack"]

    @pytest.mark.asyncio
    async def test_diagnostic_routes_absent_in_production(self, production_client: AsyncClient):
        response = await production_client.get("/test/error/unexpected")

        assert response.status_code == 404


# =============================================================================
# Request Context Tests
# =============================================================================

class TestRequestId:

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient):
        response = await client.get("/api/score/ab")

        assert response.headers.get("x-request-id")

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient):
        response = await client.get(
            "/api/score/ab",
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["x-request-id"] == "req-123"

    @pytest.mark.asyncio
    async def test_request_id_on_error_responses(self, client: AsyncClient):
        response = await client.get("/api/nowhere", headers={"X-Request-ID": "req-404"})

        assert response.status_code == 404
        assert response.headers["x-request-id"] == "req-404"

    @pytest.mark.asyncio
    async def test_request_id_on_unexpected_failure(self, client: AsyncClient):
        response = await client.get(
            "/test/error/unexpected",
            headers={"X-Request-ID": "req-500"},
        )

        assert response.status_code == 500
        assert response.headers["x-request-id"] == "req-500"
        assert response.json()["message"] == "Internal server error"

    @pytest.mark.asyncio
    async def test_cors_headers_on_unexpected_failure(self, cors_client: AsyncClient):
        response = await cors_client.get(
            "/test/error/unexpected",
            headers={"Origin": "https://app.remitlend.io"},
        )

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == "https://app.remitlend.io"
        assert response.headers.get("x-request-id")
        assert response.json()["success"] is False


# =============================================================================
# Rate Limit Tests
# =============================================================================

class TestRateLimit:

    @pytest.mark.asyncio
    async def test_strict_limit_on_simulate(self, rate_limited_client: AsyncClient):
        body = {"userId": "user123", "amount": 100}

        for _ in range(10):
            response = await rate_limited_client.post("/api/simulate", json=body)
            assert response.status_code == 200

        response = await rate_limited_client.post("/api/simulate", json=body)

        assert response.status_code == 429
        assert response.json() == {
            "success": False,
            "message": "Too many requests, please try again later.",
        }

    @pytest.mark.asyncio
    async def test_default_limit_from_settings(self, client_for):
        async with client_for(rate_limit_enabled=True, rate_limit_default="2/minute") as ac:
            responses = [await ac.get("/health") for _ in range(3)]

        assert [r.status_code for r in responses] == [200, 200, 429]
        response = responses[-1]
        assert response.json() == {
            "success": False,
            "message": "Too many requests, please try again later.",
        }

    @pytest.mark.asyncio
    async def test_limits_belong_to_each_app(self, client_for):
        body = {"userId": "user123", "amount": 100}
        limited = client_for(rate_limit_enabled=True, rate_limit_strict="1/minute")
        unlimited = client_for(rate_limit_enabled=False)

        async with limited, unlimited:
            limited_statuses = [
                (await limited.post("/api/simulate", json=body)).status_code
                for _ in range(2)
            ]
            unlimited_statuses = [
                (await unlimited.post("/api/simulate", json=body)).status_code
                for _ in range(3)
            ]

        assert limited_statuses == [200, 429]
        assert unlimited_statuses == [200, 200, 200]
