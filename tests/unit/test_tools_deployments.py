# ABOUTME: Unit tests for deployment tools
# ABOUTME: Tests page-size clamping, raw log passthrough, and lifecycle confirmations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from railway_mcp.tools import WriteBlockedError
from railway_mcp.tools.deployments import (
    BUILD_LOGS_QUERY,
    CANCEL_MUTATION,
    DEPLOY_LOGS_QUERY,
    GET_DEPLOYMENT_QUERY,
    LIST_DEPLOYMENTS_QUERY,
    REDEPLOY_MUTATION,
    REMOVE_MUTATION,
    RESTART_MUTATION,
    cancel_deployment,
    get_build_logs,
    get_deploy_logs,
    get_deployment,
    list_deployments,
    redeploy,
    remove_deployment,
    restart_deployment,
)


@pytest.mark.unit
class TestListDeployments:
    """Tests for railway_list_deployments."""

    async def test_default_page_size(self, mock_context: MagicMock, mock_railway_client: AsyncMock):
        """Test the default page size is 10 and nodes are flattened."""
        mock_railway_client.execute.return_value = {
            "deployments": {"edges": [{"node": {"id": "d1"}}, {"node": {"id": "d2"}}]}
        }

        result = json.loads(await list_deployments(mock_context, serviceId="s1", environmentId="e1"))

        mock_railway_client.execute.assert_awaited_once_with(
            LIST_DEPLOYMENTS_QUERY,
            {"input": {"serviceId": "s1", "environmentId": "e1"}, "first": 10},
        )
        assert result == [{"id": "d1"}, {"id": "d2"}]

    async def test_page_size_clamped(self, mock_context: MagicMock, mock_railway_client: AsyncMock):
        """Test first=1000 is sent as 50."""
        mock_railway_client.execute.return_value = {"deployments": {"edges": []}}

        result = json.loads(
            await list_deployments(mock_context, serviceId="s1", environmentId="e1", first=1000)
        )

        variables = mock_railway_client.execute.await_args.args[1]
        assert variables["first"] == 50
        assert result == []


@pytest.mark.unit
class TestDeploymentReads:
    """Tests for deployment detail and logs."""

    async def test_get_deployment(self, mock_context: MagicMock, mock_railway_client: AsyncMock):
        """Test the deployment is returned unchanged."""
        mock_railway_client.execute.return_value = {"deployment": {"id": "d1", "status": "CRASHED"}}

        result = json.loads(await get_deployment(mock_context, deploymentId="d1"))

        mock_railway_client.execute.assert_awaited_once_with(GET_DEPLOYMENT_QUERY, {"id": "d1"})
        assert result == {"id": "d1", "status": "CRASHED"}

    async def test_deploy_logs_default_limit_raw(
        self, mock_context: MagicMock, mock_railway_client: AsyncMock
    ):
        """Test deploy logs default to 100 lines and are returned as-is."""
        lines = [
            {"message": "listening", "severity": "info", "timestamp": "2024-01-01T00:00:00Z"},
            {"message": "crash", "severity": "error", "timestamp": "2024-01-01T00:00:01Z"},
        ]
        mock_railway_client.execute.return_value = {"deploymentLogs": lines}

        result = json.loads(await get_deploy_logs(mock_context, deploymentId="d1"))

        mock_railway_client.execute.assert_awaited_once_with(
            DEPLOY_LOGS_QUERY, {"deploymentId": "d1", "limit": 100}
        )
        assert result == lines

    async def test_build_logs_limit_clamped(
        self, mock_context: MagicMock, mock_railway_client: AsyncMock
    ):
        """Test build log limits above 500 are capped."""
        mock_railway_client.execute.return_value = {"buildLogs": []}

        result = json.loads(await get_build_logs(mock_context, deploymentId="d1", limit=9999))

        mock_railway_client.execute.assert_awaited_once_with(
            BUILD_LOGS_QUERY, {"deploymentId": "d1", "limit": 500}
        )
        assert result == []


@pytest.mark.unit
class TestDeploymentLifecycle:
    """Tests for redeploy, restart, cancel and remove."""

    async def test_redeploy(self, mock_context: MagicMock, mock_railway_client: AsyncMock):
        """Test redeploy reports the new deployment."""
        mock_railway_client.execute.return_value = {
            "deploymentRedeploy": {"id": "d2", "status": "QUEUED"}
        }

        result = await redeploy(mock_context, deploymentId="d1")

        mock_railway_client.execute.assert_awaited_once_with(REDEPLOY_MUTATION, {"id": "d1"})
        assert result.startswith("Redeployment triggered. New deployment: ")
        assert json.loads(result.split("New deployment: ", 1)[1]) == {"id": "d2", "status": "QUEUED"}

    @pytest.mark.parametrize(
        ("handler", "mutation", "expected"),
        [
            (restart_deployment, RESTART_MUTATION, "Deployment restarted successfully."),
            (cancel_deployment, CANCEL_MUTATION, "Deployment cancelled."),
            (remove_deployment, REMOVE_MUTATION, "Deployment removed."),
        ],
    )
    async def test_fixed_confirmations(
        self,
        mock_context: MagicMock,
        mock_railway_client: AsyncMock,
        handler,
        mutation: str,
        expected: str,
    ):
        """Test lifecycle mutations return their fixed confirmation text."""
        mock_railway_client.execute.return_value = {"ok": True}

        result = await handler(mock_context, deploymentId="d1")

        mock_railway_client.execute.assert_awaited_once_with(mutation, {"id": "d1"})
        assert result == expected

    async def test_remote_error_propagates(
        self, mock_context: MagicMock, mock_railway_client: AsyncMock
    ):
        """Test a failed restart raises instead of returning a confirmation."""
        mock_railway_client.execute.side_effect = RuntimeError("Deployment not found")

        with pytest.raises(RuntimeError, match="Deployment not found"):
            await restart_deployment(mock_context, deploymentId="missing")

    async def test_read_only_blocks_remove(
        self, read_only_context: MagicMock, mock_railway_client: AsyncMock
    ):
        """Test remove is refused without calling the API in read-only mode."""
        with pytest.raises(WriteBlockedError):
            await remove_deployment(read_only_context, deploymentId="d1")

        mock_railway_client.execute.assert_not_awaited()
