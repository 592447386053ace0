# ABOUTME: Domain and networking tools for Railway MCP Server
# ABOUTME: Custom domains, generated service domains, domain listing, and TCP proxies

from typing import Annotated

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import build_input, format_result

CREATE_CUSTOM_DOMAIN_MUTATION = """
mutation($input: CustomDomainCreateInput!) {
  customDomainCreate(input: $input) { id domain }
}
"""

CREATE_SERVICE_DOMAIN_MUTATION = """
mutation($input: ServiceDomainCreateInput!) {
  serviceDomainCreate(input: $input) { id domain }
}
"""

LIST_DOMAINS_QUERY = """
query($projectId: String!, $serviceId: String!, $environmentId: String!) {
  domains(projectId: $projectId, serviceId: $serviceId, environmentId: $environmentId) {
    serviceDomains { id domain }
    customDomains { id domain }
  }
}
"""

CREATE_TCP_PROXY_MUTATION = """
mutation($input: TCPProxyCreateInput!) {
  tcpProxyCreate(input: $input) { id domain proxyPort }
}
"""

TargetPort = Annotated[int | None, Field(description="Target port (optional)")]


@railway_tool("railway_create_custom_domain", "Add a custom domain to a service", mutating=True)
async def create_custom_domain(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    domain: Annotated[str, Field(description="Custom domain (e.g., app.example.com)")],
    targetPort: TargetPort = None,
) -> str:
    domain_input = build_input(
        {
            "projectId": projectId,
            "serviceId": serviceId,
            "environmentId": environmentId,
            "domain": domain,
        },
        targetPort=targetPort,
    )
    data = await run_operation(
        ctx,
        "railway_create_custom_domain",
        CREATE_CUSTOM_DOMAIN_MUTATION,
        {"input": domain_input},
        target=domain,
    )
    return format_result(data["customDomainCreate"])


@railway_tool(
    "railway_create_service_domain",
    "Generate a *.railway.app domain for a service",
    mutating=True,
)
async def create_service_domain(
    ctx: Context,
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    targetPort: TargetPort = None,
) -> str:
    domain_input = build_input(
        {"serviceId": serviceId, "environmentId": environmentId},
        targetPort=targetPort,
    )
    data = await run_operation(
        ctx,
        "railway_create_service_domain",
        CREATE_SERVICE_DOMAIN_MUTATION,
        {"input": domain_input},
        target=serviceId,
    )
    return format_result(data["serviceDomainCreate"])


@railway_tool(
    "railway_list_domains",
    "List all domains (custom and service) for a service in an environment",
)
async def list_domains(
    ctx: Context,
    projectId: Annotated[str, Field(description="Project ID")],
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_list_domains",
        LIST_DOMAINS_QUERY,
        {"projectId": projectId, "serviceId": serviceId, "environmentId": environmentId},
        target=serviceId,
    )
    return format_result(data["domains"])


@railway_tool(
    "railway_create_tcp_proxy",
    "Create a TCP proxy for a service (useful for databases)",
    mutating=True,
)
async def create_tcp_proxy(
    ctx: Context,
    serviceId: Annotated[str, Field(description="Service ID")],
    environmentId: Annotated[str, Field(description="Environment ID")],
    applicationPort: Annotated[int, Field(description="Internal application port")],
) -> str:
    data = await run_operation(
        ctx,
        "railway_create_tcp_proxy",
        CREATE_TCP_PROXY_MUTATION,
        {
            "input": {
                "serviceId": serviceId,
                "environmentId": environmentId,
                "applicationPort": applicationPort,
            }
        },
        target=serviceId,
    )
    return format_result(data["tcpProxyCreate"])
