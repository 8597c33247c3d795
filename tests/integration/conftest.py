"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app with a fixed-clock DecisionEngine
- A client whose decision service fails, for error handler tests
- Request bodies for each credit segment
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from loan_gateway.application.services import DecisionService
from loan_gateway.core.dependencies import get_decision_engine, get_decision_service
from loan_gateway.domain.exceptions import NoValidLoanException
from loan_gateway.main import app
from loan_gateway.service.scoring import DecisionEngine


# =============================================================================
# Failing Services
# =============================================================================

class ExplodingDecisionService(DecisionService):
    """Decision service that raises instead of deciding."""

    def __init__(self, error: Exception):
        self.error = error

    def make_decision(self, request):
        raise self.error


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(engine: DecisionEngine) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the fixed-clock engine.

    Ages of the known identity codes are computed as of 2025-03-27.
    """
    app.dependency_overrides[get_decision_engine] = lambda: engine

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _client_with_service(service: DecisionService) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_decision_service] = lambda: service

    # Let unhandled errors surface as 500 responses instead of test failures
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_crashing_service() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose decision service raises a RuntimeError."""
    async for ac in _client_with_service(ExplodingDecisionService(RuntimeError("boom"))):
        yield ac


@pytest_asyncio.fixture
async def client_with_raising_service() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose decision service raises a domain exception."""
    async for ac in _client_with_service(ExplodingDecisionService(NoValidLoanException())):
        yield ac


# =============================================================================
# Request Fixtures
# =============================================================================

@pytest.fixture
def debtor_request(debtor_code: str) -> dict:
    return {"personal_code": debtor_code, "loan_amount": 4000, "loan_period": 12}


@pytest.fixture
def segment_1_request(segment_1_code: str) -> dict:
    return {"personal_code": segment_1_code, "loan_amount": 4000, "loan_period": 12}


@pytest.fixture
def segment_2_request(segment_2_code: str) -> dict:
    return {"personal_code": segment_2_code, "loan_amount": 4000, "loan_period": 12}


@pytest.fixture
def segment_3_request(segment_3_code: str) -> dict:
    return {"personal_code": segment_3_code, "loan_amount": 8000, "loan_period": 12}
