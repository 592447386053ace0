# ABOUTME: Tools package initialization for Railway MCP Server
# ABOUTME: Imports every tool module so the catalog is complete before registration

"""
Railway MCP Tools Package

Tools are grouped by the Railway resource they act on:

Read-only:
    - account.py: railway_me
    - projects.py, services.py, environments.py: list/get
    - deployments.py: list, get, deploy logs, build logs
    - variables.py, domains.py: list

Mutating (refused when RAILWAY_MCP_READ_ONLY is true):
    - projects.py, services.py, environments.py: create/update/delete
    - deployments.py: redeploy, restart, cancel, remove
    - variables.py: upsert, delete
    - domains.py: custom domain, service domain, TCP proxy
    - volumes.py: create, delete

Escape hatch:
    - graphql.py: railway_graphql (guarded only for mutation documents)
"""

from railway_mcp.tools import (  # noqa: F401 - imported for catalog registration
    account,
    deployments,
    domains,
    environments,
    graphql,
    projects,
    services,
    variables,
    volumes,
)
from railway_mcp.tools.registry import TOOLS, AppContext, WriteBlockedError, register_tools

__all__ = ["TOOLS", "AppContext", "WriteBlockedError", "register_tools"]
