"""
Integration tests for the read-only endpoints.

These tests verify:
1. GET /api/eosb/health - liveness with version and timestamp
2. GET /api/eosb/config - dropdown options and the rate table
3. GET / - service banner
4. Cross-cutting headers (CORS, X-Request-ID)
"""

from datetime import datetime

import pytest
from httpx import AsyncClient

from src import __version__
from src.core import config


# =============================================================================
# GET /api/eosb/health Tests
# =============================================================================

class TestHealth:
    """Tests for GET /api/eosb/health endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_ok(self, client: AsyncClient):
        response = await client.get("/api/eosb/health")

        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Service is healthy"
        assert body["data"]["status"] == "OK"
        assert body["data"]["version"] == __version__

    @pytest.mark.asyncio
    async def test_health_timestamp_is_utc_iso8601(self, client: AsyncClient):
        response = await client.get("/api/eosb/health")

        timestamp = response.json()["data"]["timestamp"]
        assert timestamp.endswith("Z")
        # Parses once the Z suffix is spelled as an offset
        datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


# =============================================================================
# GET /api/eosb/config Tests
# =============================================================================

class TestConfiguration:
    """Tests for GET /api/eosb/config endpoint."""

    @pytest.mark.asyncio
    async def test_config_returns_envelope(self, client: AsyncClient):
        response = await client.get("/api/eosb/config")

        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Configuration data retrieved successfully"

    @pytest.mark.asyncio
    async def test_config_lists_termination_types(self, client: AsyncClient):
        response = await client.get("/api/eosb/config")

        termination_types = response.json()["data"]["terminationTypes"]
        values = [option["value"] for option in termination_types]
        assert values == ["resignation", "termination", "retirement", "death", "disability"]

        for option in termination_types:
            assert option["label"]
            assert option["labelAr"]

    @pytest.mark.asyncio
    async def test_config_lists_contract_types(self, client: AsyncClient):
        response = await client.get("/api/eosb/config")

        contract_types = response.json()["data"]["contractTypes"]
        assert [option["value"] for option in contract_types] == [True, False]
        assert contract_types[0]["label"] == "Unlimited Contract"
        assert contract_types[1]["label"] == "Limited Contract"

    @pytest.mark.asyncio
    async def test_config_echoes_calculation_rules(self, client: AsyncClient):
        response = await client.get("/api/eosb/config")

        rules = response.json()["data"]["calculationRules"]
        assert rules["minimumServiceDays"] == 365
        assert rules["firstFiveYearsRate"] == pytest.approx(21 / 365)
        assert rules["additionalYearsRate"] == pytest.approx(30 / 365)
        assert rules["resignationPenalty"] == {
            "lessThanOneYear": 0,
            "lessThanThreeYears": pytest.approx(1 / 3),
            "lessThanFiveYears": pytest.approx(2 / 3),
            "fiveYearsOrMore": 1,
        }


# =============================================================================
# GET / Tests
# =============================================================================

class TestRoot:
    """Tests for the service banner."""

    @pytest.mark.asyncio
    async def test_root_lists_endpoints(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["message"] == "UAE EOSB Calculator API"
        assert body["version"] == __version__
        assert body["endpoints"] == {
            "health": "/api/eosb/health",
            "config": "/api/eosb/config",
            "calculate": "/api/eosb/calculate",
        }
        assert "data" not in body

    @pytest.mark.asyncio
    async def test_root_lists_features(self, client: AsyncClient):
        features = (await client.get("/")).json()["features"]

        assert len(features) == 5
        assert any("unlimited contracts" in feature for feature in features)

    @pytest.mark.asyncio
    async def test_documentation_is_served(self, client: AsyncClient):
        banner = (await client.get("/")).json()["documentation"]

        openapi = await client.get(banner["openapi"])
        assert openapi.status_code == 200
        assert "/api/eosb/calculate" in openapi.json()["paths"]

        swagger = await client.get(banner["swagger"])
        assert swagger.status_code == 200


# =============================================================================
# Header Tests
# =============================================================================

class TestHeaders:
    """Tests for headers added by middleware."""

    @pytest.mark.asyncio
    async def test_cors_allows_configured_origin(self, client: AsyncClient):
        response = await client.get(
            "/api/eosb/health",
            headers={"Origin": "http://localhost:3000"},
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert response.headers["access-control-allow-credentials"] == "true"

    @pytest.mark.asyncio
    async def test_cors_preflight(self, client: AsyncClient):
        response = await client.options(
            "/api/eosb/calculate",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert "POST" in response.headers["access-control-allow-methods"]

    @pytest.mark.asyncio
    async def test_cors_ignores_unknown_origin(self, client: AsyncClient):
        response = await client.get(
            "/api/eosb/health",
            headers={"Origin": "http://evil.example"},
        )

        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/api/eosb/health")

        assert response.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get(
            "/api/eosb/health",
            headers={"X-Request-ID": "req-1234"},
        )

        assert response.headers["x-request-id"] == "req-1234"

    @pytest.mark.asyncio
    async def test_security_headers_are_set(self, client: AsyncClient):
        response = await client.get("/api/eosb/health")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "SAMEORIGIN"
        assert response.headers["referrer-policy"] == "no-referrer"

    @pytest.mark.asyncio
    async def test_hsts_only_in_production(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(config.settings, "environment", "development")
        response = await client.get("/api/eosb/health")
        assert "strict-transport-security" not in response.headers

        monkeypatch.setattr(config.settings, "environment", "production")
        response = await client.get("/api/eosb/health")
        assert response.headers["strict-transport-security"].startswith("max-age=")

    @pytest.mark.asyncio
    async def test_error_responses_carry_security_headers(self, client: AsyncClient):
        response = await client.get("/api/eosb/unknown")

        assert response.status_code == 404
        assert response.headers["x-content-type-options"] == "nosniff"
