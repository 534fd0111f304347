"""
Pytest configuration and fixtures for SpamGuard tests.

Provides:
- Test client for API testing with an offline scorer
- Mock blocklist resolvers
- Mock aiohttp sessions for the remote blocklist
"""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from spamguard.config import HeuristicsConfig
from spamguard.main import app
from spamguard.services.email_risk import NullBlocklistResolver, RiskScorer, get_risk_scorer


@pytest.fixture
def heuristics() -> HeuristicsConfig:
    """Default heuristic thresholds, independent of any local config.yml."""
    return HeuristicsConfig({})


@pytest.fixture
def offline_scorer(heuristics) -> RiskScorer:
    """Scorer whose remote blocklist is always unavailable."""
    return RiskScorer(NullBlocklistResolver(), config=heuristics)


@pytest_asyncio.fixture
async def client(offline_scorer: RiskScorer) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with the scorer overridden."""
    app.dependency_overrides[get_risk_scorer] = lambda: offline_scorer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_resolver():
    """Factory for creating mock blocklist resolvers."""

    def _create_mock(domains: frozenset[str] | None = None) -> AsyncMock:
        mock = AsyncMock()
        mock.source_name = "mock"
        mock.fetch.return_value = domains
        return mock

    return _create_mock


@pytest.fixture
def mock_aiohttp_session():
    """
    Factory for creating mock aiohttp ClientSession objects.

    The returned session is meant to be plugged into a patched
    aiohttp.ClientSession via __aenter__.
    """

    def _create_mock(
        response_text: str = "",
        status: int = 200,
        raise_error: Exception | None = None,
    ) -> MagicMock:
        mock_session = MagicMock()
        mock_response = AsyncMock()
        mock_response.status = status
        mock_response.text = AsyncMock(return_value=response_text)

        if raise_error:
            mock_session.get.side_effect = raise_error
        else:
            mock_session.get.return_value.__aenter__.return_value = mock_response

        return mock_session

    return _create_mock
