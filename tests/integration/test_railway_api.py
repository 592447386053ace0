# ABOUTME: Integration tests for the Railway GraphQL client against the live API
# ABOUTME: Read-only calls; skipped unless RAILWAY_API_TOKEN is set

"""Integration tests against the real Railway API.

These tests require:
- RAILWAY_API_TOKEN set to an account or team token
- Network access to backboard.railway.app (or RAILWAY_API_URL)

Only queries are sent. Nothing is created, changed or deleted.
"""

from __future__ import annotations

import os

import pytest

from railway_mcp.tools.account import ME_QUERY
from railway_mcp.utils.client import RailwayClient, RailwayGraphQLError
from railway_mcp.utils.formatting import edges_to_list

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("RAILWAY_API_TOKEN"),
        reason="RAILWAY_API_TOKEN not set",
    ),
]


class TestLiveRailwayApi:
    """Read-only calls against the live API."""

    async def test_me(self, live_railway_client: RailwayClient):
        """Test the token resolves to a user with workspaces."""
        data = await live_railway_client.execute(ME_QUERY)

        assert data["me"]["id"]
        for workspace in data["me"]["workspaces"]:
            assert isinstance(edges_to_list(workspace["projects"]), list)

    async def test_unknown_project_is_graphql_error(self, live_railway_client: RailwayClient):
        """Test a lookup for a missing project raises the aggregated error."""
        with pytest.raises(RailwayGraphQLError) as exc_info:
            await live_railway_client.execute(
                "query($id: String!) { project(id: $id) { id } }",
                {"id": "00000000-0000-0000-0000-000000000000"},
            )

        assert str(exc_info.value)
