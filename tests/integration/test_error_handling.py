"""
Integration tests for error responses.

These tests verify:
1. Unknown routes and wrong methods get the error envelope
2. Calculation failures surface as 500 with detail outside production
3. Unexpected exceptions hide their message in production
4. Clients over their quota get 429
"""

import pytest
from httpx import AsyncClient

from src.core import config


# =============================================================================
# Routing Error Tests
# =============================================================================

class TestRoutingErrors:
    """Tests for requests that match no route."""

    @pytest.mark.asyncio
    async def test_unknown_route_returns_404(self, client: AsyncClient):
        response = await client.get("/api/eosb/unknown")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Not found",
            "message": "Route GET /api/eosb/unknown not found",
        }

    @pytest.mark.asyncio
    async def test_404_message_includes_method(self, client: AsyncClient):
        response = await client.post("/nowhere", json={})

        assert response.status_code == 404
        assert response.json()["message"] == "Route POST /nowhere not found"

    @pytest.mark.asyncio
    async def test_wrong_method_returns_405(self, client: AsyncClient):
        response = await client.get("/api/eosb/calculate")

        assert response.status_code == 405

        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Method Not Allowed"
        assert "POST" in response.headers["allow"]


# =============================================================================
# Calculation Failure Tests
# =============================================================================

class TestCalculationFailure:
    """Tests for exceptions raised while computing a benefit."""

    @pytest.mark.asyncio
    async def test_failure_includes_detail_in_development(
        self,
        client_with_broken_rules: AsyncClient,
        termination_5_years_request: dict,
        monkeypatch,
    ):
        monkeypatch.setattr(config.settings, "environment", "development")

        response = await client_with_broken_rules.post(
            "/api/eosb/calculate", json=termination_5_years_request
        )

        assert response.status_code == 500

        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Internal server error"
        assert body["message"].startswith("Failed to calculate EOSB: ")
        assert "division by zero" in body["message"]

    @pytest.mark.asyncio
    async def test_failure_hides_detail_in_production(
        self,
        client_with_broken_rules: AsyncClient,
        termination_5_years_request: dict,
        monkeypatch,
    ):
        monkeypatch.setattr(config.settings, "environment", "production")

        response = await client_with_broken_rules.post(
            "/api/eosb/calculate", json=termination_5_years_request
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "message": "Failed to calculate EOSB",
        }

    @pytest.mark.asyncio
    async def test_ineligible_record_does_not_reach_broken_rules(
        self,
        client_with_broken_rules: AsyncClient,
        short_service_request: dict,
    ):
        """The daily wage is only computed for eligible employees."""
        response = await client_with_broken_rules.post(
            "/api/eosb/calculate", json=short_service_request
        )

        assert response.status_code == 200
        assert response.json()["data"]["isEligible"] is False


# =============================================================================
# Unhandled Exception Tests
# =============================================================================

class TestUnhandledExceptions:
    """Tests for exceptions no other handler claims."""

    @pytest.mark.asyncio
    async def test_message_shown_in_development(
        self,
        client_with_exploding_service: AsyncClient,
        monkeypatch,
    ):
        monkeypatch.setattr(config.settings, "environment", "development")

        response = await client_with_exploding_service.get("/api/eosb/config")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "message": "configuration exploded",
        }

    @pytest.mark.asyncio
    async def test_message_hidden_in_production(
        self,
        client_with_exploding_service: AsyncClient,
        monkeypatch,
    ):
        monkeypatch.setattr(config.settings, "environment", "production")

        response = await client_with_exploding_service.get("/api/eosb/config")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "message": "Something went wrong",
        }

    @pytest.mark.asyncio
    async def test_service_exception_outside_calculator_is_unhandled(
        self,
        client_with_exploding_service: AsyncClient,
        termination_5_years_request: dict,
        monkeypatch,
    ):
        monkeypatch.setattr(config.settings, "environment", "production")

        response = await client_with_exploding_service.post(
            "/api/eosb/calculate", json=termination_5_years_request
        )

        assert response.status_code == 500
        assert response.json()["message"] == "Something went wrong"


# =============================================================================
# Rate Limit Tests
# =============================================================================

class TestRateLimit:
    """Tests for the per-client request quota."""

    @pytest.mark.asyncio
    async def test_requests_over_quota_get_429(
        self,
        client: AsyncClient,
        monkeypatch,
    ):
        monkeypatch.setattr(config.settings, "rate_limit", "2/minute")

        for _ in range(2):
            response = await client.get("/api/eosb/health")
            assert response.status_code == 200

        response = await client.get("/api/eosb/health")

        assert response.status_code == 429
        assert response.json() == {
            "success": False,
            "error": "Too many requests",
            "message": "Rate limit exceeded. Please try again later.",
        }

    @pytest.mark.asyncio
    async def test_unlimited_routes_are_not_counted(
        self,
        client: AsyncClient,
        monkeypatch,
    ):
        """The banner and metrics sit outside /api/eosb and are never limited."""
        monkeypatch.setattr(config.settings, "rate_limit", "1/minute")

        for _ in range(3):
            response = await client.get("/")
            assert response.status_code == 200
