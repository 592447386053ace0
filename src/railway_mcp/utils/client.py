# ABOUTME: Railway GraphQL API client with bearer auth and error aggregation
# ABOUTME: Provides the single async transport every MCP tool goes through

"""
Railway GraphQL client with structured error handling.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

This module provides the HTTP client for Railway's GraphQL API. It handles:

1. HTTP COMMUNICATION: One POST per operation to the GraphQL endpoint
2. AUTHENTICATION: Attaching the Bearer token to every request
3. ERROR HANDLING: Folding GraphQL "errors" entries into one exception

Every tool in this server calls RailwayClient.execute() exactly once.

=============================================================================
GRAPHQL OVER HTTP IN ONE PARAGRAPH
=============================================================================

A GraphQL API has a single endpoint. The client POSTs a JSON body:

    {"query": "query($id: String!) { project(id: $id) { id name } }",
     "variables": {"id": "abc"}}

The server answers with JSON that has "data", "errors", or both:

    {"data": {"project": {"id": "abc", "name": "web"}}}
    {"data": null, "errors": [{"message": "Project not found"}]}

Note that application errors usually come back with HTTP 200. The status
code says little; the "errors" array is what matters. That is why this
client never looks at response.status_code.

=============================================================================
WHAT THIS CLIENT DOES NOT DO
=============================================================================

- NO RETRIES: a failed call fails once and the agent decides what next.
- NO TIMEOUT of its own: the httpx client is built with timeout=None so
  the call waits until the network stack resolves or rejects.
- NO PARTIAL RESULTS: a response carrying any error entry is a failure,
  even when "data" is partly filled in.
- NO WRAPPING of transport failures: httpx errors and JSON decode errors
  reach the caller exactly as httpx raised them.

=============================================================================
CONTEXT MANAGERS (async with)
=============================================================================

    async with RailwayClient(settings) as client:
        data = await client.execute("query { me { id } }")

__aenter__ creates the httpx connection pool, __aexit__ closes it. The
server opens one client per MCP request, so closing the request (or the
client dropping the connection) releases the pool.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import httpx
import structlog

if TYPE_CHECKING:
    from railway_mcp.config import ServerSettings

logger = structlog.get_logger(__name__)

TOKEN_ENV_VAR = "RAILWAY_API_TOKEN"


# =============================================================================
# ERRORS
# =============================================================================


class RailwayError(Exception):
    """Base class for errors raised by the Railway client."""


class RailwayConfigError(RailwayError):
    """
    Required configuration is missing.

    Raised by execute() before any network activity when no API token is
    configured. This fails the single tool call, never the process.
    """


class RailwayGraphQLError(RailwayError):
    """
    The GraphQL response carried one or more error entries.

    The message is every entry's message joined with "; " in the order the
    API returned them. A single error yields its message unchanged:

        {"errors": [{"message": "not found"}, {"message": "forbidden"}]}
        -> RailwayGraphQLError("not found; forbidden")

    USAGE:
    ------
    try:
        await client.execute(query, variables)
    except RailwayGraphQLError as e:
        e.messages     # ["not found", "forbidden"]
        str(e)         # "not found; forbidden"
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__("; ".join(messages))

    @classmethod
    def from_entries(cls, entries: list[Any]) -> RailwayGraphQLError:
        """
        Build the error from the raw "errors" array of a response.

        Entries without a string "message" are rendered as compact JSON so
        nothing the API said is dropped.
        """
        messages: list[str] = []
        for entry in entries:
            if isinstance(entry, dict) and isinstance(entry.get("message"), str):
                messages.append(entry["message"])
            else:
                messages.append(json.dumps(entry, separators=(",", ":"), default=str))
        return cls(messages)


class RailwayNotFoundError(RailwayError):
    """The API answered without errors but the requested entity is null."""


# =============================================================================
# RAILWAY CLIENT
# =============================================================================


class RailwayClient:
    """
    Async Railway GraphQL client.

    LIFECYCLE:
    ----------
    1. Create client: client = RailwayClient(settings)
    2. Enter context: async with client: ...
    3. Use client: await client.execute(query, variables)
    4. Exit context: HTTP connections cleaned up

    The settings object is passed in, not read from the environment here.
    The token is checked on every execute() call rather than at
    construction, so a server without a token still starts and reports
    the problem per call.
    """

    def __init__(self, settings: ServerSettings, timeout: float | None = None) -> None:
        """
        Initialize the client.

        NOTE: This only creates the client object. The HTTP connection
        pool is created later in __aenter__ (when using 'async with').

        Args:
            settings: Server settings carrying the API URL and token.
            timeout: httpx timeout in seconds. None (default) waits
                     indefinitely, leaving timeouts to the network stack.
        """
        self._settings = settings
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint URL."""
        return self._settings.railway_api_url

    async def __aenter__(self) -> RailwayClient:
        """
        Enter async context and create the HTTP client.

        The Authorization header is NOT set here. It is attached per
        request in execute(), after the token has been checked, so a
        missing token can never produce an unauthenticated request.
        """
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context and close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _auth_header(self) -> dict[str, str]:
        """
        Build the Authorization header, failing fast without a token.

        Raises:
            RailwayConfigError: If no API token is configured.
        """
        token = self._settings.railway_api_token.get_secret_value().strip()
        if not token:
            raise RailwayConfigError(f"{TOKEN_ENV_VAR} environment variable is required")
        return {"Authorization": f"Bearer {token}"}

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> Any:
        """
        Run one GraphQL operation and return its "data" payload.

        This is the CORE REQUEST METHOD. Every tool uses it.

        Args:
            query: GraphQL document (query or mutation).
            variables: Operation variables. None is sent as {}.

        Returns:
            The "data" member of the response (usually a dict, may be None).

        Raises:
            RailwayConfigError: No API token configured (no request is made).
            RailwayGraphQLError: The response carried error entries.
            httpx.HTTPError: Network failure, propagated unchanged.
            ValueError: Body was not valid JSON, propagated unchanged.
            RuntimeError: Client used outside 'async with'.
        """
        headers = self._auth_header()

        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        payload = {"query": query, "variables": variables or {}}

        log = logger.bind(endpoint=self.endpoint)
        log.debug("Sending Railway GraphQL request", variables=sorted(payload["variables"]))

        response = await self._client.post(self.endpoint, json=payload, headers=headers)
        body = response.json()

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            error = RailwayGraphQLError.from_entries(list(errors))
            log.warning(
                "Railway GraphQL error",
                status=response.status_code,
                errors=error.messages,
            )
            raise error

        return body.get("data") if isinstance(body, dict) else None
