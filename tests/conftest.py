# ABOUTME: Pytest fixtures and configuration for Railway MCP Server tests
# ABOUTME: Provides settings, a mocked GraphQL client, and mock MCP contexts

import os
from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import SecretStr

from railway_mcp.config import ServerSettings
from railway_mcp.tools import AppContext
from railway_mcp.utils.client import RailwayClient
from railway_mcp.utils.logging import AuditLogger
from railway_mcp.utils.safety import SafetyGuard

TEST_API_URL = "https://railway.example.com/graphql/v2"


@pytest.fixture
def mock_server_settings() -> ServerSettings:
    """Create server settings with a test token."""
    return ServerSettings(
        railway_api_token=SecretStr("test-token"),
        railway_api_url=TEST_API_URL,
        port=3000,
        read_only=False,
    )


@pytest.fixture
def no_token_settings() -> ServerSettings:
    """Create server settings without an API token."""
    return ServerSettings(
        railway_api_token=SecretStr(""),
        railway_api_url=TEST_API_URL,
    )


@pytest.fixture
def read_only_settings() -> ServerSettings:
    """Create read-only server settings."""
    return ServerSettings(
        railway_api_token=SecretStr("test-token"),
        railway_api_url=TEST_API_URL,
        read_only=True,
    )


@pytest.fixture
def mock_railway_client() -> AsyncMock:
    """Create a mock Railway client; set execute.return_value per test."""
    client = AsyncMock(spec=RailwayClient)
    client.execute.return_value = {}
    return client


def make_context(settings: ServerSettings, client: AsyncMock, read_only: bool = False) -> MagicMock:
    """Build a mock MCP context whose lifespan state holds the given client."""
    ctx = MagicMock()
    ctx.request_id = "test-request-123"
    ctx.request_context.lifespan_context = AppContext(
        settings=settings,
        client=client,
        guard=SafetyGuard(read_only=read_only),
        audit=AuditLogger(),
    )
    return ctx


@pytest.fixture
def mock_context(mock_server_settings: ServerSettings, mock_railway_client: AsyncMock) -> MagicMock:
    """Create a mock MCP context with writes allowed."""
    return make_context(mock_server_settings, mock_railway_client)


@pytest.fixture
def read_only_context(read_only_settings: ServerSettings, mock_railway_client: AsyncMock) -> MagicMock:
    """Create a mock MCP context for a read-only server."""
    return make_context(read_only_settings, mock_railway_client, read_only=True)


# Integration test fixtures


@pytest.fixture
def railway_token() -> str | None:
    """Get Railway API token from environment."""
    return os.environ.get("RAILWAY_API_TOKEN")


@pytest.fixture
async def live_railway_client(railway_token: str | None) -> AsyncIterator[RailwayClient | None]:
    """Create a live Railway client for integration tests."""
    if not railway_token:
        yield None
        return

    settings = ServerSettings(
        railway_api_token=SecretStr(railway_token),
        railway_api_url=os.environ.get("RAILWAY_API_URL", "https://backboard.railway.app/graphql/v2"),
    )
    async with RailwayClient(settings) as client:
        yield client
