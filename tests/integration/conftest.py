"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Clients whose calculation or configuration raises
- Request bodies for common employee scenarios
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_eosb_service, get_gratuity_rules
from src.core.rate_limit import limiter
from src.service.eosb import GratuityRules


# =============================================================================
# Stub Services
# =============================================================================

class ExplodingEOSBService:
    """Service stub whose every method raises outside the domain exceptions."""

    def calculate(self, record):
        raise RuntimeError("calculator exploded")

    def get_configuration(self) -> dict:
        raise RuntimeError("configuration exploded")


# =============================================================================
# Rate Limiter
# =============================================================================

@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Start every test with an empty rate-limit window."""
    limiter.reset()
    yield
    limiter.reset()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_broken_rules() -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose rate table divides by zero.

    model_construct skips validation, so the calculator itself raises
    ZeroDivisionError while computing the daily wage.
    """
    broken_rules = GratuityRules.model_construct(wage_divisor_days=0)

    def override_get_gratuity_rules():
        return broken_rules

    app.dependency_overrides[get_gratuity_rules] = override_get_gratuity_rules

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_exploding_service() -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose service raises unexpected exceptions.

    Server errors are re-raised by Starlette after the handler responds,
    so the transport is told not to propagate them.
    """
    def override_get_eosb_service():
        return ExplodingEOSBService()

    app.dependency_overrides[get_eosb_service] = override_get_eosb_service

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def termination_5_years_request() -> dict:
    """Termination by employer after exactly 5 years."""
    return {
        "basicSalary": 10000,
        "allowances": 0,
        "terminationType": "termination",
        "isUnlimitedContract": True,
        "joiningDate": "2020-01-01",
        "lastWorkingDay": "2025-01-01",
    }


@pytest.fixture
def termination_7_years_request() -> dict:
    """Termination by employer after 7 years."""
    return {
        "basicSalary": 15000,
        "allowances": 3000,
        "terminationType": "termination",
        "isUnlimitedContract": True,
        "joiningDate": "2018-01-01",
        "lastWorkingDay": "2025-01-01",
    }


@pytest.fixture
def resignation_4_years_request() -> dict:
    """Resignation from an unlimited contract after 4 years (2/3 penalty)."""
    return {
        "basicSalary": 9000,
        "terminationType": "resignation",
        "isUnlimitedContract": True,
        "joiningDate": "2021-01-01",
        "lastWorkingDay": "2025-01-01",
    }


@pytest.fixture
def limited_resignation_request() -> dict:
    """Resignation from a limited contract after 2 years (no penalty)."""
    return {
        "basicSalary": 10000,
        "terminationType": "resignation",
        "isUnlimitedContract": False,
        "joiningDate": "2023-01-01",
        "lastWorkingDay": "2025-01-01",
    }


@pytest.fixture
def short_service_request() -> dict:
    """Six months of service, below the minimum."""
    return {
        "basicSalary": 10000,
        "terminationType": "termination",
        "isUnlimitedContract": True,
        "joiningDate": "2024-06-01",
        "lastWorkingDay": "2024-12-01",
    }
