"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient

from api.routes.health import VERSION
from tests.conftest import TEST_WALLET_ID, ProfileSeeder


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        """Test that health endpoint returns expected structure."""
        data = (await client.get("/health")).json()

        assert data["status"] == "healthy"
        assert data["version"] == VERSION
        assert "timestamp" in data
        assert "environment" in data


class TestDetailedHealthEndpoint:
    @pytest.mark.asyncio
    async def test_reports_cached_profiles(
        self, api_client: AsyncClient, seed_profile: ProfileSeeder
    ) -> None:
        """Detailed health reports the number of live cache entries."""
        await seed_profile()
        await api_client.get(f"/api/v1/profiles/{TEST_WALLET_ID}")

        data = (await api_client.get("/health/detailed")).json()

        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
        assert data["cached_profiles"] == 1
