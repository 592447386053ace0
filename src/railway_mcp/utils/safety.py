# ABOUTME: Safety utilities for Railway MCP Server
# ABOUTME: Implements the optional read-only guard for mutating tools

"""Read-only guard for mutating tools and raw GraphQL documents."""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from graphql import GraphQLError, OperationDefinitionNode, OperationType, parse

logger = structlog.get_logger(__name__)

_WRITE_OPERATIONS = frozenset({OperationType.MUTATION, OperationType.SUBSCRIPTION})


@dataclass
class OperationBlocked:
    """Response indicating an operation is blocked by server settings."""

    operation: str
    reason: str
    setting: str

    def format_message(self) -> str:
        """Format blocked message for agent consumption."""
        return (
            f"OPERATION BLOCKED: {self.operation}\n"
            f"Reason: {self.reason}\n"
            f"Setting: {self.setting}\n"
            f"To enable: Set {self.setting}=false in server configuration"
        )


def is_write_document(document: str) -> bool:
    """
    Return True when a GraphQL document defines a mutation or subscription.

    Anonymous shorthand queries (``{ me { id } }``) and named queries are
    reads. A document that does not parse counts as a write, so the
    read-only guard fails closed.
    """
    try:
        parsed = parse(document)
    except GraphQLError as e:
        logger.debug("Unparseable GraphQL document treated as write", error=e.message)
        return True
    return any(
        isinstance(definition, OperationDefinitionNode)
        and definition.operation in _WRITE_OPERATIONS
        for definition in parsed.definitions
    )


class SafetyGuard:
    """Guard refusing mutating tools when the server runs read-only."""

    def __init__(self, read_only: bool = False) -> None:
        """Initialize safety guard.

        Args:
            read_only: Refuse every mutating operation when True.
        """
        self._read_only = read_only

    @property
    def read_only(self) -> bool:
        return self._read_only

    def check_write_operation(self, operation: str) -> OperationBlocked | None:
        """Check if a mutating operation is allowed.

        Args:
            operation: Tool name

        Returns:
            OperationBlocked if blocked, None if allowed
        """
        if self._read_only:
            logger.info("Write operation blocked", operation=operation)
            return OperationBlocked(
                operation=operation,
                reason="Server is running in read-only mode",
                setting="RAILWAY_MCP_READ_ONLY",
            )
        return None
