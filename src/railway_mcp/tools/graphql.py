# ABOUTME: Raw GraphQL tool for Railway MCP Server
# ABOUTME: Forwards arbitrary queries and mutations for anything the catalog does not wrap

"""
Escape hatch: run any GraphQL document against the Railway API.

The catalog cannot wrap every capability Railway offers, so this tool
passes the caller's document and variables through unmodified. In
read-only mode, documents defining a mutation or subscription are refused;
queries still go through.
"""

from typing import Annotated, Any

from mcp.server.fastmcp import Context
from pydantic import Field

from railway_mcp.tools.registry import railway_tool, run_operation
from railway_mcp.utils.formatting import format_result
from railway_mcp.utils.safety import is_write_document


@railway_tool(
    "railway_graphql",
    "Execute an arbitrary GraphQL query/mutation against the Railway API. "
    "Use for any operation not covered by other tools.",
    mutating=True,
    destructive=True,
)
async def railway_graphql(
    ctx: Context,
    query: Annotated[str, Field(description="GraphQL query or mutation string")],
    variables: Annotated[
        dict[str, Any] | None, Field(description="GraphQL variables object")
    ] = None,
) -> str:
    data = await run_operation(
        ctx,
        "railway_graphql",
        query,
        variables or {},
        write=is_write_document(query),
    )
    return format_result(data)
