# ABOUTME: Project tools for Railway MCP Server
# ABOUTME: List, inspect, create, update, and delete Railway projects

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import (
    build_input,
    edges_to_list,
    format_result,
    require_entity,
)

LIST_PROJECTS_QUERY = """
query {
  me {
    workspaces {
      id name
      projects(first: 100) {
        edges {
          node {
            id name description createdAt updatedAt
            services(first: 50) { edges { node { id name } } }
            environments(first: 50) { edges { node { id name } } }
          }
        }
      }
    }
  }
}
"""

GET_PROJECT_QUERY = """
query($projectId: String!) {
  project(id: $projectId) {
    id name description createdAt updatedAt isPublic subscriptionType
    services(first: 100) {
      edges { node { id name icon createdAt updatedAt projectId } }
    }
    environments(first: 100) {
      edges { node { id name createdAt updatedAt isEphemeral } }
    }
    volumes(first: 100) {
      edges { node { id name createdAt } }
    }
  }
}
"""

CREATE_PROJECT_MUTATION = """
mutation($input: ProjectCreateInput!) {
  projectCreate(input: $input) { id name }
}
"""

UPDATE_PROJECT_MUTATION = """
mutation($id: String!, $input: ProjectUpdateInput!) {
  projectUpdate(id: $id, input: $input) { id name description }
}
"""

DELETE_PROJECT_MUTATION = "mutation($id: String!) { projectDelete(id: $id) }"


@railway_tool(
    "railway_list_projects",
    "List all projects in a workspace. If no workspaceId given, lists projects "
    "across all workspaces.",
)
async def list_projects(
    ctx: Context,
    workspaceId: Annotated[str | None, Field(description="Filter by workspace ID")] = None,
) -> str:
    data = await run_operation(
        ctx, "railway_list_projects", LIST_PROJECTS_QUERY, target=workspaceId or "all"
    )

    projects = []
    user = require_entity(data, "me", "User")
    for workspace in user.get("workspaces") or []:
        if workspaceId and workspace.get("id") != workspaceId:
            continue
        for project in edges_to_list(workspace.get("projects")):
            projects.append(
                {
                    **project,
                    "workspaceId": workspace.get("id"),
                    "workspaceName": workspace.get("name"),
                    "services": edges_to_list(project.get("services")),
                    "environments": edges_to_list(project.get("environments")),
                }
            )
    return format_result(projects)


@railway_tool(
    "railway_get_project",
    "Get full details of a Railway project by ID, including services, environments, "
    "and volumes",
)
async def get_project(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_get_project",
        GET_PROJECT_QUERY,
        {"projectId": projectId},
        target=projectId,
    )
    project = require_entity(data, "project", "Project")
    result = {
        **project,
        "services": edges_to_list(project.get("services")),
        "environments": edges_to_list(project.get("environments")),
        "volumes": edges_to_list(project.get("volumes")),
    }
    return format_result(result)


@railway_tool("railway_create_project", "Create a new Railway project", mutating=True)
async def create_project(
    ctx: Context,
    name: Annotated[str, Field(description="Project name")],
    description: Annotated[str | None, Field(description="Project description")] = None,
    workspaceId: Annotated[
        str | None, Field(description="Workspace ID (uses default if not specified)")
    ] = None,
) -> str:
    # The API still calls workspaces "teams" in ProjectCreateInput
    project_input = build_input(
        {"name": name}, drop_empty=True, description=description, teamId=workspaceId
    )
    data = await run_operation(
        ctx,
        "railway_create_project",
        CREATE_PROJECT_MUTATION,
        {"input": project_input},
        target=name,
    )
    return format_result(data["projectCreate"])


@railway_tool(
    "railway_update_project",
    "Update a project's name or description",
    mutating=True,
)
async def update_project(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    name: Annotated[str | None, Field(description="New name")] = None,
    description: Annotated[str | None, Field(description="New description")] = None,
) -> str:
    project_input = build_input({}, drop_empty=True, name=name, description=description)
    data = await run_operation(
        ctx,
        "railway_update_project",
        UPDATE_PROJECT_MUTATION,
        {"id": projectId, "input": project_input},
        target=projectId,
    )
    return format_result(data["projectUpdate"])


@railway_tool(
    "railway_delete_project",
    "Permanently delete a Railway project (IRREVERSIBLE)",
    mutating=True,
    destructive=True,
)
async def delete_project(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID to delete")],
) -> str:
    await run_operation(
        ctx,
        "railway_delete_project",
        DELETE_PROJECT_MUTATION,
        {"id": projectId},
        target=projectId,
    )
    return "Project deleted."
