"""Integration tests for the service-level endpoints."""

import pytest
from httpx import AsyncClient

from remitlend import __version__


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_check(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == __version__
        assert data["uptime"] >= 0
        assert isinstance(data["timestamp"], int)

    @pytest.mark.asyncio
    async def test_root_banner(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.text == "RemitLend Backend is running"

    @pytest.mark.asyncio
    async def test_openapi_under_api_prefix(self, client: AsyncClient):
        response = await client.get("/api/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/score/{userId}" in paths
        assert "/api/score/update" in paths
        assert "/test/error/unexpected" not in paths


class TestCors:

    @pytest.mark.asyncio
    async def test_listed_origin_allowed(self, cors_client: AsyncClient):
        response = await cors_client.options(
            "/api/score/update",
            headers={
                "Origin": "https://app.remitlend.io",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "x-api-key",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://app.remitlend.io"
        assert response.headers["access-control-allow-credentials"] == "true"

    @pytest.mark.asyncio
    async def test_unlisted_origin_rejected(self, cors_client: AsyncClient):
        response = await cors_client.get(
            "/api/score/ab",
            headers={"Origin": "https://evil.example"},
        )

        assert "access-control-allow-origin" not in response.headers
