# ABOUTME: Railway MCP Server package initialization
# ABOUTME: Exposes version information for the server and its tooling

"""
Railway MCP Server - the Railway control plane as Model Context Protocol tools.

=============================================================================
WHAT IS THIS PACKAGE?
=============================================================================

Railway (railway.app) is a hosting platform. Everything you can do in its
dashboard (create projects, add services, set variables, redeploy, attach
domains and volumes) is backed by a public GraphQL API.

This package puts that API behind MCP, the protocol AI assistants use to
call external tools. Each tool:

1. ACCEPTS typed arguments (validated against a JSON schema)
2. SENDS one fixed GraphQL query or mutation with a Bearer token
3. FLATTENS paginated "connection" results (edges -> node) into lists
4. RETURNS the result as indented JSON text

There is no local state: no database, no cache, no retries. The server is
a translation layer between agents and the Railway API.

=============================================================================
PACKAGE STRUCTURE OVERVIEW
=============================================================================

railway_mcp/
├── __init__.py          <- YOU ARE HERE: Package entry point
├── config.py            <- Settings from environment (token, port, transport)
├── server.py            <- FastMCP server, /health route, HTTP bootstrap
├── tools/
│   ├── registry.py      <- Tool catalog, shared runner, FastMCP registration
│   ├── account.py       <- railway_me
│   ├── projects.py      <- project list/get/create/update/delete
│   ├── services.py      <- service list/get/create/delete, instance settings
│   ├── environments.py  <- environment list/create/delete
│   ├── deployments.py   <- deployments, logs, redeploy/restart/cancel/remove
│   ├── variables.py     <- variable list/upsert/delete
│   ├── domains.py       <- custom/service domains, TCP proxies
│   ├── volumes.py       <- volume create/delete
│   └── graphql.py       <- raw GraphQL escape hatch
└── utils/
    ├── client.py        <- Async GraphQL transport for the Railway API
    ├── formatting.py    <- Connection flattening, input building, output text
    ├── logging.py       <- structlog setup, correlation IDs, audit events
    └── safety.py        <- Optional read-only guard
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
