# ABOUTME: Structured logging with correlation IDs for Railway MCP Server
# ABOUTME: Configures structlog and records one audit event per tool call

"""
Structured logging with correlation IDs and audit events.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

1. STRUCTURED LOGGING: structlog renders every log call as key/value pairs
   (console) or one JSON object per line (production).

2. CORRELATION IDs: each tool call stores the MCP request id in a
   ContextVar, and a processor stamps it on every log line written while
   that call runs. Concurrent requests never see each other's ids because
   every asyncio task has its own context.

3. AUDIT EVENTS: one "audit" event per tool call saying which tool ran,
   against what target, and whether it succeeded, was blocked, or failed.

=============================================================================
WHERE DO LOGS GO?
=============================================================================

Always stderr. In stdio transport mode stdout carries the MCP protocol
itself, and a stray log line there would corrupt the JSON-RPC stream.
Nothing is written to local files.
"""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping


# =============================================================================
# CORRELATION ID MANAGEMENT
# =============================================================================

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """
    Get current correlation ID or generate a new one.

    Code running outside a tool call (startup, the HTTP error boundary)
    still gets an id so its log lines can be grouped.

    Returns:
        Correlation ID string (8 hex characters when generated).
    """
    cid = correlation_id.get()
    if not cid:
        cid = str(uuid.uuid4())[:8]
        correlation_id.set(cid)
    return cid


def set_correlation_id(cid: str) -> None:
    """
    Set correlation ID for the current context.

    Called at the start of every tool call with the MCP request id.
    An empty string makes the next get_correlation_id() generate one.
    """
    correlation_id.set(cid)


def add_correlation_id(
    logger: structlog.types.WrappedLogger,  # noqa: ARG001 - Required by structlog Processor API
    method_name: str,  # noqa: ARG001 - Required by structlog Processor API
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """structlog processor adding the current correlation ID to each event."""
    event_dict["correlation_id"] = get_correlation_id()
    return event_dict


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
) -> None:
    """
    Configure structured logging. Call once at startup.

    PROCESSOR PIPELINE:
    -------------------
    1. merge_contextvars: Adds values bound via bind_contextvars()
    2. add_log_level: Adds "level"
    3. TimeStamper: Adds ISO 8601 "timestamp"
    4. add_correlation_id: Adds "correlation_id"
    5. Renderer: JSON lines or colored console text

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Unknown names fall
               back to INFO.
        json_output: True for JSON lines (log aggregators), False for
                     human-readable console output.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        # stdout belongs to the MCP protocol in stdio mode
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# =============================================================================
# AUDIT LOGGER
# =============================================================================


class AuditLogger:
    """
    Audit logger recording every tool call.

    WHAT WE LOG:
    ------------
    - action: Tool name ("railway_delete_service")
    - target: Primary identifier the call touched ("svc-123") or "all"
    - result: "success", "blocked" or "error"
    - details: Optional extra context (error message, block reason)

    Events go through structlog under the "audit" logger name, so they
    share the correlation ID and renderer of every other log line.

    EXAMPLE (JSON output):
    ----------------------
    {"event": "audit", "action": "railway_redeploy", "target": "dep-1",
     "result": "success", "correlation_id": "a1b2c3d4", ...}
    """

    def __init__(self) -> None:
        self._logger = structlog.get_logger("audit")

    def log(
        self,
        action: str,
        target: str,
        result: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Log an auditable action.

        Args:
            action: Tool name.
            target: Target resource identifier.
            result: "success", "blocked" or "error".
            details: Additional context, omitted from the event when empty.
        """
        event: dict[str, Any] = {"action": action, "target": target, "result": result}
        if details:
            event["details"] = details
        self._logger.info("audit", **event)

    def log_success(self, action: str, target: str) -> None:
        """Log a completed tool call."""
        self.log(action, target, "success")

    def log_blocked(self, action: str, target: str, reason: str) -> None:
        """Log a call refused by the read-only guard."""
        self.log(action, target, "blocked", {"reason": reason})

    def log_error(self, action: str, target: str, error: str) -> None:
        """Log a failed tool call."""
        self.log(action, target, "error", {"error": error})
