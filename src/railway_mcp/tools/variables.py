# ABOUTME: Variable tools for Railway MCP Server
# ABOUTME: List, upsert, and delete environment variables for services

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import build_input, format_result

LIST_VARIABLES_QUERY = """
query($projectId: String!, $serviceId: String!, $environmentId: String!) {
  variables(projectId: $projectId, serviceId: $serviceId, environmentId: $environmentId)
}
"""

UPSERT_VARIABLE_MUTATION = """
mutation($input: VariableUpsertInput!) {
  variableUpsert(input: $input)
}
"""

DELETE_VARIABLE_MUTATION = """
mutation($input: VariableDeleteInput!) {
  variableDelete(input: $input)
}
"""


@railway_tool(
    "railway_list_variables",
    "List environment variables for a service in an environment",
)
async def list_variables(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_list_variables",
        LIST_VARIABLES_QUERY,
        {"projectId": projectId, "serviceId": serviceId, "environmentId": environmentId},
        target=serviceId,
    )
    # variables is a JSON scalar: a plain name -> value object
    return format_result(data["variables"])


@railway_tool(
    "railway_upsert_variable",
    "Create or update an environment variable for a service",
    mutating=True,
)
async def upsert_variable(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    name: Annotated[str, Field(description="Variable name")],
    value: Annotated[str, Field(description="Variable value")],
    serviceId: Annotated[
        str | None, Field(description="Service ID (optional, for service-specific vars)")
    ] = None,
) -> str:
    variable_input = build_input(
        {"projectId": projectId, "environmentId": environmentId, "name": name, "value": value},
        drop_empty=True,
        serviceId=serviceId,
    )
    await run_operation(
        ctx,
        "railway_upsert_variable",
        UPSERT_VARIABLE_MUTATION,
        {"input": variable_input},
        target=name,
    )
    return f'Variable "{name}" upserted successfully.'


@railway_tool("railway_delete_variable", "Delete an environment variable", mutating=True)
async def delete_variable(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    name: Annotated[str, Field(description="Variable name to delete")],
    serviceId: Annotated[str | None, Field(description="Service ID (optional)")] = None,
) -> str:
    variable_input = build_input(
        {"projectId": projectId, "environmentId": environmentId, "name": name},
        drop_empty=True,
        serviceId=serviceId,
    )
    await run_operation(
        ctx,
        "railway_delete_variable",
        DELETE_VARIABLE_MUTATION,
        {"input": variable_input},
        target=name,
    )
    return f'Variable "{name}" deleted successfully.'
