# ABOUTME: Account tool for Railway MCP Server
# ABOUTME: Returns the authenticated user's profile and workspaces

from mcp.server.fastmcp import Context

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import edges_to_list, format_result, require_entity

ME_QUERY = """
query {
  me {
    id name email username
    workspaces {
      id name
      projects(first: 100) {
        edges { node { id name } }
      }
    }
  }
}
"""


@railway_tool(
    "railway_me",
    "Get the authenticated Railway user profile including workspaces",
)
async def railway_me(ctx: Context) -> str:
    """Profile of the token's user with each workspace's projects."""
    data = await run_operation(ctx, "railway_me", ME_QUERY, target="me")
    user = require_entity(data, "me", "User")
    result = {
        "id": user.get("id"),
        "name": user.get("name"),
        "email": user.get("email"),
        "username": user.get("username"),
        "workspaces": [
            {
                "id": workspace.get("id"),
                "name": workspace.get("name"),
                "projects": edges_to_list(workspace.get("projects")),
            }
            for workspace in user.get("workspaces") or []
        ],
    }
    return format_result(result)
