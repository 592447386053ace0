# ABOUTME: Tool catalog and shared execution path for Railway MCP tools
# ABOUTME: Collects tool definitions, runs GraphQL operations, registers tools with FastMCP

"""
Tool catalog and the single execution path every tool shares.

Tool modules declare handlers with the ``railway_tool`` decorator. The
decorator only records a ``ToolDefinition`` in ``TOOLS``; nothing talks to
FastMCP until ``register_tools`` walks the catalog. Handlers are plain
``async def`` functions whose keyword parameters are the tool's argument
schema, so they can be called directly in tests.

Every handler goes through ``run_operation``, which owns the cross-cutting
work: correlation id, read-only guard and the GraphQL call. The decorator
wraps each handler so the success or error audit event is recorded only
once the handler has produced its result text. Errors are logged and
re-raised, never swallowed.
"""

from __future__ import annotations

import functools
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog
from mcp.types import ToolAnnotations

from railway_mcp.utils.client import RailwayError
from railway_mcp.utils.logging import AuditLogger, set_correlation_id
from railway_mcp.utils.safety import OperationBlocked, SafetyGuard

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from mcp.server.fastmcp import Context, FastMCP

    from railway_mcp.config import ServerSettings
    from railway_mcp.utils.client import RailwayClient

    ToolHandler = Callable[..., Awaitable[str]]

logger = structlog.get_logger(__name__)

# Audit target of the operation the current tool call ran
_call_target: ContextVar[str] = ContextVar("call_target", default="all")


class WriteBlockedError(RailwayError):
    """A mutating tool was called while the server runs read-only."""

    def __init__(self, blocked: OperationBlocked) -> None:
        self.blocked = blocked
        super().__init__(blocked.format_message())


@dataclass
class AppContext:
    """Per-request state yielded by the server lifespan."""

    settings: ServerSettings
    client: RailwayClient
    guard: SafetyGuard = field(default_factory=SafetyGuard)
    audit: AuditLogger = field(default_factory=AuditLogger)


@dataclass(frozen=True)
class ToolDefinition:
    """One catalog entry: name, description, handler and behaviour hints."""

    name: str
    description: str
    handler: ToolHandler
    mutating: bool = False
    destructive: bool = False

    @property
    def annotations(self) -> ToolAnnotations:
        return ToolAnnotations(
            readOnlyHint=not self.mutating,
            destructiveHint=self.destructive if self.mutating else None,
            openWorldHint=True,
        )


TOOLS: dict[str, ToolDefinition] = {}


def railway_tool(
    name: str,
    description: str,
    *,
    mutating: bool = False,
    destructive: bool = False,
) -> Callable[[ToolHandler], ToolHandler]:
    """
    Add the decorated handler to the tool catalog under ``name``.

    The catalog holds, and the decorator returns, a wrapper that audits the
    call after the handler returns. Calls refused by the read-only guard
    are audited as blocked by run_operation and not again here.

    Raises:
        ValueError: If a tool with the same name is already registered.
    """

    def decorator(func: ToolHandler) -> ToolHandler:
        if name in TOOLS:
            raise ValueError(f"Duplicate tool name '{name}'")

        @functools.wraps(func)
        async def audited(ctx: Context, *args: Any, **kwargs: Any) -> str:
            token = _call_target.set("all")
            try:
                result = await func(ctx, *args, **kwargs)
            except WriteBlockedError:
                raise
            except Exception as e:
                get_app_context(ctx).audit.log_error(name, _call_target.get(), str(e))
                raise
            else:
                get_app_context(ctx).audit.log_success(name, _call_target.get())
                return result
            finally:
                _call_target.reset(token)

        TOOLS[name] = ToolDefinition(
            name=name,
            description=description,
            handler=audited,
            mutating=mutating,
            destructive=destructive,
        )
        return audited

    return decorator


def register_tools(mcp: FastMCP) -> None:
    """Register every catalog entry with a FastMCP server."""
    for definition in TOOLS.values():
        mcp.add_tool(
            definition.handler,
            name=definition.name,
            description=definition.description,
            annotations=definition.annotations,
        )
    logger.debug("Registered Railway tools", count=len(TOOLS))


def get_app_context(ctx: Context) -> AppContext:
    """Get the per-request state the lifespan attached to this MCP request."""
    return ctx.request_context.lifespan_context


async def run_operation(
    ctx: Context,
    tool: str,
    query: str,
    variables: dict[str, Any] | None = None,
    *,
    target: str = "all",
    write: bool | None = None,
) -> Any:
    """
    Execute one GraphQL operation on behalf of a tool.

    Args:
        ctx: MCP request context.
        tool: Tool name, used for the guard and logs.
        query: GraphQL document.
        variables: Operation variables.
        target: Primary identifier recorded by the tool's audit event.
        write: Whether the operation mutates remote state. None takes the
               value from the tool's catalog entry.

    Returns:
        The ``data`` payload of the GraphQL response.

    Raises:
        WriteBlockedError: Mutating call while the server is read-only.
        RailwayError, httpx.HTTPError, ValueError: Propagated from the client.
    """
    set_correlation_id(str(ctx.request_id) if getattr(ctx, "request_id", None) else "")
    _call_target.set(target)
    app = get_app_context(ctx)

    if write is None:
        write = TOOLS[tool].mutating if tool in TOOLS else True

    if write:
        blocked = app.guard.check_write_operation(tool)
        if blocked:
            app.audit.log_blocked(tool, target, blocked.reason)
            raise WriteBlockedError(blocked)

    return await app.client.execute(query, variables)
