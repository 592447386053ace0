# ABOUTME: FastMCP server initialization and main entry point
# ABOUTME: Builds the MCP server, the /health route, the HTTP app, and runs the chosen transport

"""
Railway MCP Server - the Railway control plane over stateless streamable HTTP.

=============================================================================
REQUEST LIFECYCLE
=============================================================================

    POST /mcp  (JSON-RPC body)
        -> ErrorBoundaryMiddleware         catches anything that escapes
        -> FastMCP streamable HTTP app     stateless, JSON responses
        -> lifespan                        opens one RailwayClient
        -> tool handler                    one GraphQL operation
        <- JSON response                   client closed with the request

Stateless means no session ids and no server-side state between requests:
each POST gets a fresh MCP server run and a fresh HTTP connection pool to
Railway, both torn down when the request completes or the caller goes away.

    GET /health  -> {"status": "ok", "server": <name>, "version": <version>}

=============================================================================
TRANSPORTS
=============================================================================

TRANSPORT=http (default): uvicorn serves create_http_app() on HOST:PORT.
TRANSPORT=stdio: the same tools over stdin/stdout for local MCP clients.
The lifespan then runs once for the whole process.
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
import uvicorn
from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError
from starlette.responses import JSONResponse

from railway_mcp.config import ServerSettings, load_settings
from railway_mcp.tools import AppContext, register_tools
from railway_mcp.utils.client import RailwayClient
from railway_mcp.utils.formatting import format_result
from railway_mcp.utils.logging import AuditLogger, configure_logging
from railway_mcp.utils.safety import SafetyGuard

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from starlette.applications import Starlette
    from starlette.requests import Request
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.get_logger(__name__)

MCP_PATH = "/mcp"


# =============================================================================
# MCP SERVER
# =============================================================================


def create_server(settings: ServerSettings) -> FastMCP:
    """
    Build the FastMCP server with every Railway tool registered.

    Args:
        settings: Loaded server settings. The same object reaches every
                  RailwayClient the lifespan opens.

    Returns:
        A configured FastMCP instance. Nothing is started here.
    """
    guard = SafetyGuard(read_only=settings.read_only)
    audit = AuditLogger()

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[AppContext]:
        async with RailwayClient(settings) as client:
            yield AppContext(settings=settings, client=client, guard=guard, audit=audit)

    mcp = FastMCP(
        settings.server_name,
        lifespan=lifespan,
        host=settings.host,
        port=settings.port,
        stateless_http=True,
        json_response=True,
        streamable_http_path=MCP_PATH,
    )

    register_tools(mcp)

    @mcp.custom_route("/health", methods=["GET"])
    async def health(_request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "ok",
                "server": settings.server_name,
                "version": settings.server_version,
            }
        )

    @mcp.resource("railway://server")
    async def get_server_resource() -> str:
        """Get the Railway endpoint, transport, and read-only mode of this server."""
        return format_result(
            {
                "server": settings.server_name,
                "version": settings.server_version,
                "endpoint": settings.railway_api_url,
                "transport": settings.transport,
                "readOnly": settings.read_only,
                "tokenConfigured": settings.has_token,
            }
        )

    return mcp


# =============================================================================
# HTTP ADAPTER
# =============================================================================


class ErrorBoundaryMiddleware:
    """
    Last-resort handler for exceptions escaping the MCP HTTP app.

    Tool failures never get here; FastMCP already turns them into tool
    results with isError set. This catches faults in the transport layer
    itself. If no response has started yet the caller gets
    500 {"error": "<message>"}; otherwise the exception is re-raised so
    the server closes the broken response.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            logger.error(
                "MCP error",
                path=scope.get("path"),
                error=str(e),
                error_type=type(e).__name__,
            )
            if response_started:
                raise
            response = JSONResponse({"error": str(e)}, status_code=500)
            await response(scope, receive, send)


def create_http_app(settings: ServerSettings) -> Starlette:
    """Build the Starlette app serving /mcp and /health behind the error boundary."""
    app = create_server(settings).streamable_http_app()
    app.add_middleware(ErrorBoundaryMiddleware)
    return app


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def main() -> None:
    """Run the Railway MCP server."""
    try:
        settings = load_settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid configuration", error=str(e))
        sys.exit(1)

    configure_logging(level=settings.log_level, json_output=settings.json_logs)

    if not settings.has_token:
        logger.warning("RAILWAY_API_TOKEN is not set; every tool call will fail")

    try:
        if settings.transport == "stdio":
            logger.info("Railway MCP server running on stdio", server=settings.server_name)
            create_server(settings).run(transport="stdio")
        else:
            logger.info(
                f"Railway MCP server listening on port {settings.port}",
                host=settings.host,
                port=settings.port,
                path=MCP_PATH,
            )
            uvicorn.run(
                create_http_app(settings),
                host=settings.host,
                port=settings.port,
                log_level=settings.log_level.lower(),
            )
    except KeyboardInterrupt:
        logger.info("Server interrupted")
        sys.exit(0)
    except Exception as e:
        logger.error("Server error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
