# ABOUTME: Volume tools for Railway MCP Server
# ABOUTME: Create and delete persistent volumes attached to services

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import build_input, format_result

CREATE_VOLUME_MUTATION = """
mutation($input: VolumeCreateInput!) {
  volumeCreate(input: $input) { id name }
}
"""

DELETE_VOLUME_MUTATION = "mutation($id: String!) { volumeDelete(volumeId: $id) }"


@railway_tool("railway_create_volume", "Create a persistent volume for a service", mutating=True)
async def create_volume(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    mountPath: Annotated[str, Field(description="Mount path in the container (e.g., /data)")],
    serviceId: Annotated[str | None, Field(description="Service ID")] = None,
    environmentId: Annotated[str | None, Field(description="Environment ID")] = None,
) -> str:
    volume_input = build_input(
        {"projectId": projectId, "mountPath": mountPath},
        drop_empty=True,
        serviceId=serviceId,
        environmentId=environmentId,
    )
    data = await run_operation(
        ctx,
        "railway_create_volume",
        CREATE_VOLUME_MUTATION,
        {"input": volume_input},
        target=projectId,
    )
    return format_result(data["volumeCreate"])


@railway_tool("railway_delete_volume", "Delete a volume", mutating=True, destructive=True)
async def delete_volume(
    ctx: Context,
    volumeId: Annotated[str, Field(description="Volume ID to delete")],
) -> str:
    await run_operation(
        ctx,
        "railway_delete_volume",
        DELETE_VOLUME_MUTATION,
        {"id": volumeId},
        target=volumeId,
    )
    return "Volume deleted."
