# ABOUTME: Response shaping helpers for Railway MCP tools
# ABOUTME: Flattens GraphQL connections, builds sparse inputs, and renders JSON text

"""Helpers shared by every tool: connection flattening, input building, output text."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from railway_mcp.utils.client import RailwayNotFoundError


def edges_to_list(connection: Any) -> list[Any]:
    """
    Flatten a GraphQL connection into a plain list of nodes.

    Railway paginates nested collections as ``{"edges": [{"node": {...}}]}``.
    Callers only ever see the nodes, in the order the API returned them.
    A missing connection or one without ``edges`` yields an empty list.
    """
    if not isinstance(connection, dict):
        return []
    edges = connection.get("edges")
    if not edges:
        return []
    return [edge.get("node") if isinstance(edge, dict) else None for edge in edges]


def require_entity(data: dict[str, Any] | None, key: str, label: str) -> dict[str, Any]:
    """
    Return data[key], raising RailwayNotFoundError when it is missing or null.

    Railway answers a lookup for an unknown or inaccessible id with
    {"project": null} and no errors entry.
    """
    entity = (data or {}).get(key)
    if entity is None:
        raise RailwayNotFoundError(f"{label} not found")
    return entity


def format_result(value: Any) -> str:
    """Render result data as indented JSON for the calling agent."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def build_input(
    required: dict[str, Any], /, *, drop_empty: bool = False, **optional: Any
) -> dict[str, Any]:
    """
    Build a mutation input object from required and optional fields.

    Optional fields are inserted only when the caller supplied them. An
    omitted argument must be absent from the payload, not sent as null,
    or Railway resets the matching setting on the remote side. With
    drop_empty=True an empty string counts as omitted too; leave it off
    for settings where "" is a meaningful value, such as clearing a
    start command.

    Nested pydantic models are dumped without their unset (None) fields.

        build_input({"projectId": "P1"}, serviceId=None, name="api")
        -> {"projectId": "P1", "name": "api"}
    """
    result = dict(required)
    for key, value in optional.items():
        if value is None or (drop_empty and value == ""):
            continue
        if isinstance(value, BaseModel):
            value = value.model_dump(exclude_none=True)
        result[key] = value
    return result


def clamp(value: int, ceiling: int) -> int:
    """Cap a caller-supplied page size at the hard ceiling."""
    return min(value, ceiling)
