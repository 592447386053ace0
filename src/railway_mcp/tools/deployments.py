# ABOUTME: Deployment tools for Railway MCP Server
# ABOUTME: List and inspect deployments, read logs, and trigger lifecycle mutations

"""
Deployment tools.

A deployment's status (QUEUED, BUILDING, DEPLOYING, SUCCESS, CRASHED, ...)
is owned by Railway and passed through as an opaque string. The lifecycle
tools here each send one trigger mutation and report the API's answer;
they do not wait for or verify the resulting state.

Page sizes are clamped before sending, whatever the caller asks for:
deployments to 50 per call, log lines to 500.
"""

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import clamp, edges_to_list, format_result

MAX_DEPLOYMENTS = 50
DEFAULT_DEPLOYMENTS = 10
MAX_LOG_LINES = 500
DEFAULT_LOG_LINES = 100

LIST_DEPLOYMENTS_QUERY = """
query($input: DeploymentListInput!, $first: Int) {
  deployments(input: $input, first: $first) {
    edges {
      node {
        id status createdAt updatedAt url staticUrl
        environmentId serviceId
        meta
      }
    }
  }
}
"""

GET_DEPLOYMENT_QUERY = """
query($id: String!) {
  deployment(id: $id) {
    id status createdAt updatedAt url staticUrl
    environmentId serviceId projectId
    meta canRedeploy canRollback
  }
}
"""

DEPLOY_LOGS_QUERY = """
query($deploymentId: String!, $limit: Int) {
  deploymentLogs(deploymentId: $deploymentId, limit: $limit) {
    ... on Log { message severity timestamp }
  }
}
"""

BUILD_LOGS_QUERY = """
query($deploymentId: String!, $limit: Int) {
  buildLogs(deploymentId: $deploymentId, limit: $limit) {
    ... on Log { message severity timestamp }
  }
}
"""

REDEPLOY_MUTATION = """
mutation($id: String!) {
  deploymentRedeploy(id: $id) { id status }
}
"""

RESTART_MUTATION = "mutation($id: String!) { deploymentRestart(id: $id) }"

CANCEL_MUTATION = "mutation($id: String!) { deploymentCancel(id: $id) }"

REMOVE_MUTATION = "mutation($id: String!) { deploymentRemove(id: $id) }"

DeploymentId = Annotated[str, Field(description="Deployment ID")]
LogLimit = Annotated[
    int,
    Field(description=f"Max log lines (default {DEFAULT_LOG_LINES}, max {MAX_LOG_LINES})"),
]


@railway_tool("railway_list_deployments", "List deployments for a service in an environment")
async def list_deployments(
    ctx: Context,
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    first: Annotated[
        int,
        Field(
            description=f"Number of deployments to return "
            f"(default {DEFAULT_DEPLOYMENTS}, max {MAX_DEPLOYMENTS})"
        ),
    ] = DEFAULT_DEPLOYMENTS,
) -> str:
    data = await run_operation(
        ctx,
        "railway_list_deployments",
        LIST_DEPLOYMENTS_QUERY,
        {
            "input": {"serviceId": serviceId, "environmentId": environmentId},
            "first": clamp(first, MAX_DEPLOYMENTS),
        },
        target=serviceId,
    )
    return format_result(edges_to_list(data["deployments"]))


@railway_tool("railway_get_deployment", "Get full details of a specific deployment")
async def get_deployment(ctx: Context, deploymentId: DeploymentId) -> str:
    data = await run_operation(
        ctx,
        "railway_get_deployment",
        GET_DEPLOYMENT_QUERY,
        {"id": deploymentId},
        target=deploymentId,
    )
    return format_result(data["deployment"])


# Log endpoints return a plain list, not a connection; no edge flattening.


@railway_tool("railway_get_deploy_logs", "Get deploy logs for a deployment")
async def get_deploy_logs(
    ctx: Context,
    deploymentId: DeploymentId,
    limit: LogLimit = DEFAULT_LOG_LINES,
) -> str:
    data = await run_operation(
        ctx,
        "railway_get_deploy_logs",
        DEPLOY_LOGS_QUERY,
        {"deploymentId": deploymentId, "limit": clamp(limit, MAX_LOG_LINES)},
        target=deploymentId,
    )
    return format_result(data["deploymentLogs"])


@railway_tool("railway_get_build_logs", "Get build logs for a deployment")
async def get_build_logs(
    ctx: Context,
    deploymentId: DeploymentId,
    limit: LogLimit = DEFAULT_LOG_LINES,
) -> str:
    data = await run_operation(
        ctx,
        "railway_get_build_logs",
        BUILD_LOGS_QUERY,
        {"deploymentId": deploymentId, "limit": clamp(limit, MAX_LOG_LINES)},
        target=deploymentId,
    )
    return format_result(data["buildLogs"])


@railway_tool("railway_redeploy", "Trigger a redeployment of a deployment", mutating=True)
async def redeploy(
    ctx: Context,
    deploymentId: Annotated[str, Field(description="Deployment ID to redeploy")],
) -> str:
    data = await run_operation(
        ctx, "railway_redeploy", REDEPLOY_MUTATION, {"id": deploymentId}, target=deploymentId
    )
    return f"Redeployment triggered. New deployment: {format_result(data['deploymentRedeploy'])}"


@railway_tool("railway_restart_deployment", "Restart a deployment", mutating=True)
async def restart_deployment(
    ctx: Context,
    deploymentId: Annotated[str, Field(description="Deployment ID to restart")],
) -> str:
    await run_operation(
        ctx,
        "railway_restart_deployment",
        RESTART_MUTATION,
        {"id": deploymentId},
        target=deploymentId,
    )
    return "Deployment restarted successfully."


@railway_tool("railway_cancel_deployment", "Cancel a running deployment", mutating=True)
async def cancel_deployment(
    ctx: Context,
    deploymentId: Annotated[str, Field(description="Deployment ID to cancel")],
) -> str:
    await run_operation(
        ctx,
        "railway_cancel_deployment",
        CANCEL_MUTATION,
        {"id": deploymentId},
        target=deploymentId,
    )
    return "Deployment cancelled."


@railway_tool(
    "railway_remove_deployment",
    "Remove/delete a deployment",
    mutating=True,
    destructive=True,
)
async def remove_deployment(
    ctx: Context,
    deploymentId: Annotated[str, Field(description="Deployment ID to remove")],
) -> str:
    await run_operation(
        ctx,
        "railway_remove_deployment",
        REMOVE_MUTATION,
        {"id": deploymentId},
        target=deploymentId,
    )
    return "Deployment removed."
