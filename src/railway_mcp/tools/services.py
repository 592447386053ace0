# ABOUTME: Service tools for Railway MCP Server
# ABOUTME: List, inspect, create, delete, and configure services within a project

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import BaseModel, Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import (
    build_input,
    edges_to_list,
    format_result,
    require_entity,
)

GET_SERVICE_QUERY = """
query($serviceId: String!) {
  service(id: $serviceId) {
    id name icon createdAt updatedAt projectId templateId
    deployments(first: 10) {
      edges {
        node {
          id status createdAt updatedAt url staticUrl
          environmentId serviceId
        }
      }
    }
  }
}
"""

LIST_SERVICES_QUERY = """
query($projectId: String!) {
  project(id: $projectId) {
    services(first: 100) {
      edges {
        node { id name icon createdAt updatedAt projectId }
      }
    }
  }
}
"""

CREATE_SERVICE_MUTATION = """
mutation($input: ServiceCreateInput!) {
  serviceCreate(input: $input) { id name projectId }
}
"""

DELETE_SERVICE_MUTATION = "mutation($id: String!) { serviceDelete(id: $id) }"

UPDATE_SERVICE_INSTANCE_MUTATION = """
mutation($input: ServiceInstanceUpdateInput!) {
  serviceInstanceUpdate(input: $input)
}
"""


class ServiceSource(BaseModel):
    """Where a new service's code comes from."""

    repo: str | None = Field(default=None, description="GitHub repo (owner/repo)")
    image: str | None = Field(default=None, description="Docker image (e.g., redis:latest)")


@railway_tool(
    "railway_get_service",
    "Get details of a Railway service including recent deployments",
)
async def get_service(
    ctx: Context,
    serviceId: Annotated[str, Field(description="Service ID")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_get_service",
        GET_SERVICE_QUERY,
        {"serviceId": serviceId},
        target=serviceId,
    )
    service = require_entity(data, "service", "Service")
    return format_result({**service, "deployments": edges_to_list(service.get("deployments"))})


@railway_tool("railway_list_services", "List services in a Railway project")
async def list_services(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_list_services",
        LIST_SERVICES_QUERY,
        {"projectId": projectId},
        target=projectId,
    )
    project = require_entity(data, "project", "Project")
    return format_result(edges_to_list(project.get("services")))


@railway_tool(
    "railway_create_service",
    "Create a new service in a project. Optionally from a GitHub repo or Docker image.",
    mutating=True,
)
async def create_service(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    name: Annotated[str | None, Field(description="Service name")] = None,
    source: Annotated[ServiceSource | None, Field(description="Service source")] = None,
) -> str:
    service_input = build_input(
        {"projectId": projectId}, drop_empty=True, name=name, source=source
    )
    data = await run_operation(
        ctx,
        "railway_create_service",
        CREATE_SERVICE_MUTATION,
        {"input": service_input},
        target=projectId,
    )
    return format_result(data["serviceCreate"])


@railway_tool(
    "railway_delete_service",
    "Delete a service from a project",
    mutating=True,
    destructive=True,
)
async def delete_service(
    ctx: Context,
    serviceId: Annotated[str, Field(description="Service ID to delete")],
) -> str:
    await run_operation(
        ctx,
        "railway_delete_service",
        DELETE_SERVICE_MUTATION,
        {"id": serviceId},
        target=serviceId,
    )
    return "Service deleted."


@railway_tool(
    "railway_update_service_instance",
    "Update service instance configuration: start/build commands, healthcheck, "
    "replicas, region, sleep, etc.",
    mutating=True,
)
async def update_service_instance(
    ctx: Context,
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    startCommand: Annotated[str | None, Field(description="Start command")] = None,
    buildCommand: Annotated[str | None, Field(description="Build command")] = None,
    rootDirectory: Annotated[str | None, Field(description="Root directory")] = None,
    healthcheckPath: Annotated[str | None, Field(description="Healthcheck endpoint path")] = None,
    healthcheckTimeout: Annotated[
        int | None, Field(description="Healthcheck timeout in seconds")
    ] = None,
    numReplicas: Annotated[int | None, Field(description="Number of replicas")] = None,
    sleepApplication: Annotated[bool | None, Field(description="Enable sleep when idle")] = None,
    region: Annotated[str | None, Field(description="Deployment region")] = None,
    cronSchedule: Annotated[str | None, Field(description="Cron schedule for cron jobs")] = None,
) -> str:
    instance_input = build_input(
        {"serviceId": serviceId, "environmentId": environmentId},
        startCommand=startCommand,
        buildCommand=buildCommand,
        rootDirectory=rootDirectory,
        healthcheckPath=healthcheckPath,
        healthcheckTimeout=healthcheckTimeout,
        numReplicas=numReplicas,
        sleepApplication=sleepApplication,
        region=region,
        cronSchedule=cronSchedule,
    )
    await run_operation(
        ctx,
        "railway_update_service_instance",
        UPDATE_SERVICE_INSTANCE_MUTATION,
        {"input": instance_input},
        target=serviceId,
    )
    return "Service instance updated successfully."
