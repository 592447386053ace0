# ABOUTME: Environment tools for Railway MCP Server
# ABOUTME: List, create, and delete environments such as staging and production

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import edges_to_list, format_result, require_entity

LIST_ENVIRONMENTS_QUERY = """
query($projectId: String!) {
  project(id: $projectId) {
    environments(first: 100) {
      edges {
        node { id name createdAt updatedAt isEphemeral }
      }
    }
  }
}
"""

CREATE_ENVIRONMENT_MUTATION = """
mutation($input: EnvironmentCreateInput!) {
  environmentCreate(input: $input) { id name }
}
"""

DELETE_ENVIRONMENT_MUTATION = "mutation($id: String!) { environmentDelete(id: $id) }"


@railway_tool("railway_list_environments", "List environments in a Railway project")
async def list_environments(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_list_environments",
        LIST_ENVIRONMENTS_QUERY,
        {"projectId": projectId},
        target=projectId,
    )
    project = require_entity(data, "project", "Project")
    return format_result(edges_to_list(project.get("environments")))


@railway_tool(
    "railway_create_environment",
    "Create a new environment in a project (e.g., staging, production)",
    mutating=True,
)
async def create_environment(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    name: Annotated[str, Field(description="Environment name")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_create_environment",
        CREATE_ENVIRONMENT_MUTATION,
        {"input": {"projectId": projectId, "name": name}},
        target=projectId,
    )
    return format_result(data["environmentCreate"])


@railway_tool(
    "railway_delete_environment",
    "Delete an environment from a project",
    mutating=True,
    destructive=True,
)
async def delete_environment(
    ctx: Context,
    environmentId: Annotated[str, Field(description="Environment ID to delete")],
) -> str:
    await run_operation(
        ctx,
        "railway_delete_environment",
        DELETE_ENVIRONMENT_MUTATION,
        {"id": environmentId},
        target=environmentId,
    )
    return "Environment deleted."
