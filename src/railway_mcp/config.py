# ABOUTME: Configuration management for Railway MCP Server
# ABOUTME: Reads the API token, listener settings, and logging options from the environment

"""
Configuration management using pydantic-settings.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

This module holds all configuration for the MCP server. It:

1. READS environment variables (RAILWAY_API_TOKEN, PORT, TRANSPORT, ...)
2. VALIDATES them (ports are integers, log levels are real levels, ...)
3. PROVIDES one typed settings object that is built once at startup and
   handed to everything that needs it

The settings object is passed explicitly into RailwayClient rather than
read from os.environ on every call. That keeps the "token missing" path
testable without touching the process environment:

    settings = ServerSettings(railway_api_token=SecretStr(""))
    client = RailwayClient(settings)   # execute() now fails fast

=============================================================================
ENVIRONMENT VARIABLE MAPPING
=============================================================================

Railway API:
    RAILWAY_API_TOKEN   -> Bearer token for the GraphQL API (required per call)
    RAILWAY_API_URL     -> GraphQL endpoint (default: backboard v2 endpoint)

Process:
    PORT                -> HTTP listener port (default: 3000)
    HOST                -> HTTP listener address (default: 0.0.0.0)
    TRANSPORT           -> "http" (default) or "stdio"

Server behaviour (RAILWAY_MCP_ prefix):
    RAILWAY_MCP_SERVER_NAME    -> Name reported on /health and to MCP clients
    RAILWAY_MCP_LOG_LEVEL      -> DEBUG, INFO, WARNING, ERROR, CRITICAL
    RAILWAY_MCP_JSON_LOGS      -> Emit JSON log lines instead of console output
    RAILWAY_MCP_READ_ONLY      -> Refuse mutating tools (default: false)
    RAILWAY_MCP_ENV_FILE       -> Optional .env file read by load_settings()
"""

from __future__ import annotations

import os
from typing import Annotated, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from railway_mcp import __version__

DEFAULT_API_URL = "https://backboard.railway.app/graphql/v2"


class ServerSettings(BaseSettings):
    """
    Main server configuration.

    USAGE:
    ------
        settings = load_settings()       # Reads from environment
        settings.port                    # 3000 unless PORT is set
        settings.has_token               # False when RAILWAY_API_TOKEN is unset

    A missing token is deliberately NOT a validation error. The server
    still starts, answers /health and lists its tools; each tool call then
    fails with a configuration error naming RAILWAY_API_TOKEN.
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILWAY_MCP_",
        # Fields with a validation_alias read the bare name instead
        # (RAILWAY_API_TOKEN, PORT, ...); everything else uses the prefix.
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------------------------------------------------------
    # RAILWAY API
    # -------------------------------------------------------------------------

    railway_api_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias="RAILWAY_API_TOKEN",
        description="Railway API token sent as a Bearer credential",
    )
    # Account, team or project tokens all work; create one under
    # Account Settings -> Tokens in the Railway dashboard.
    # SecretStr keeps the value out of repr() and log output.

    railway_api_url: str = Field(
        default=DEFAULT_API_URL,
        validation_alias="RAILWAY_API_URL",
        description="Railway GraphQL endpoint",
    )

    # -------------------------------------------------------------------------
    # PROCESS / LISTENER
    # -------------------------------------------------------------------------

    host: str = Field(default="0.0.0.0", validation_alias="HOST", description="Bind address")  # noqa: S104

    port: int = Field(
        default=3000,
        validation_alias="PORT",
        ge=1,
        le=65535,
        description="HTTP listener port",
    )

    transport: Literal["http", "stdio"] = Field(
        default="http",
        validation_alias="TRANSPORT",
        description="MCP transport: streamable HTTP or stdio",
    )
    # Only main() looks at this; request handling is identical either way.

    # -------------------------------------------------------------------------
    # SERVER METADATA AND BEHAVIOUR
    # -------------------------------------------------------------------------

    server_name: str = Field(default="railway-mcp-server", description="MCP server name")

    server_version: str = Field(default=__version__, description="MCP server version")

    log_level: Annotated[str, Field(pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")] = Field(
        default="INFO",
        description="Logging level",
    )

    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    read_only: bool = Field(
        default=False,
        description="Refuse every mutating tool call when true",
    )
    # Off by default: the tool catalog is a full control-plane surface.
    # Turn it on for agents that should only observe.

    # -------------------------------------------------------------------------
    # VALIDATORS
    # -------------------------------------------------------------------------

    @field_validator("railway_api_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Add https:// when no scheme is given and strip trailing slashes."""
        if not v.startswith(("http://", "https://")):
            v = f"https://{v}"
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names from the environment."""
        return v.upper() if isinstance(v, str) else v

    # -------------------------------------------------------------------------
    # COMPUTED PROPERTIES
    # -------------------------------------------------------------------------

    @property
    def has_token(self) -> bool:
        """True when a non-blank API token is configured."""
        return bool(self.railway_api_token.get_secret_value().strip())


def load_settings() -> ServerSettings:
    """
    Load settings from the environment with validation.

    If RAILWAY_MCP_ENV_FILE is set, variables are also read from that file.
    Real environment variables win over values in the file.

    Raises:
        pydantic.ValidationError: If configuration is invalid.
    """
    return ServerSettings(
        _env_file=os.environ.get("RAILWAY_MCP_ENV_FILE"),
    )
