# ABOUTME: Unit tests for configuration management
# ABOUTME: Tests environment variable mapping, defaults, and validation

import os
from unittest.mock import patch

import pytest
from pydantic import SecretStr, ValidationError

from railway_mcp import __version__
from railway_mcp.config import DEFAULT_API_URL, ServerSettings, load_settings


@pytest.mark.unit
class TestServerSettingsDefaults:
    """Tests for default values with an empty environment."""

    def test_defaults(self):
        """Test every default with no variables set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = ServerSettings()

        assert settings.railway_api_url == DEFAULT_API_URL
        assert settings.port == 3000
        assert settings.host == "0.0.0.0"
        assert settings.transport == "http"
        assert settings.server_name == "railway-mcp-server"
        assert settings.server_version == __version__
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.read_only is False

    def test_missing_token_is_not_an_error(self):
        """Test settings load without a token and report it."""
        with patch.dict(os.environ, {}, clear=True):
            settings = ServerSettings()

        assert settings.has_token is False
        assert settings.railway_api_token.get_secret_value() == ""


@pytest.mark.unit
class TestServerSettingsEnvironment:
    """Tests for reading settings from environment variables."""

    def test_bare_names(self):
        """Test RAILWAY_API_TOKEN, PORT, HOST and TRANSPORT are read without prefix."""
        env = {
            "RAILWAY_API_TOKEN": "tok-123",
            "PORT": "8080",
            "HOST": "127.0.0.1",
            "TRANSPORT": "stdio",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ServerSettings()

        assert settings.railway_api_token.get_secret_value() == "tok-123"
        assert settings.has_token is True
        assert settings.port == 8080
        assert settings.host == "127.0.0.1"
        assert settings.transport == "stdio"

    def test_prefixed_names(self):
        """Test RAILWAY_MCP_ prefixed behaviour settings."""
        env = {
            "RAILWAY_MCP_READ_ONLY": "true",
            "RAILWAY_MCP_JSON_LOGS": "true",
            "RAILWAY_MCP_LOG_LEVEL": "debug",
            "RAILWAY_MCP_SERVER_NAME": "custom-name",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = ServerSettings()

        assert settings.read_only is True
        assert settings.json_logs is True
        assert settings.log_level == "DEBUG"
        assert settings.server_name == "custom-name"

    def test_load_settings_reads_environment(self):
        """Test load_settings builds settings from the process environment."""
        with patch.dict(os.environ, {"PORT": "4000"}, clear=True):
            settings = load_settings()

        assert settings.port == 4000

    def test_load_settings_reads_env_file(self, tmp_path):
        """Test RAILWAY_MCP_ENV_FILE points load_settings at a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("RAILWAY_API_TOKEN=from-file\nPORT=5000\n")

        with patch.dict(os.environ, {"RAILWAY_MCP_ENV_FILE": str(env_file)}, clear=True):
            settings = load_settings()

        assert settings.railway_api_token.get_secret_value() == "from-file"
        assert settings.port == 5000


@pytest.mark.unit
class TestServerSettingsValidation:
    """Tests for validators."""

    def test_url_validation_adds_https(self):
        """Test that URL without scheme gets https added."""
        settings = ServerSettings(railway_api_url="railway.example.com/graphql/v2")

        assert settings.railway_api_url == "https://railway.example.com/graphql/v2"

    def test_url_validation_removes_trailing_slash(self):
        """Test that trailing slash is removed from URL."""
        settings = ServerSettings(railway_api_url="https://railway.example.com/graphql/v2/")

        assert settings.railway_api_url == "https://railway.example.com/graphql/v2"

    def test_invalid_port_rejected(self):
        """Test that out-of-range ports fail validation."""
        with pytest.raises(ValidationError):
            ServerSettings(port=70000)

    def test_invalid_log_level_rejected(self):
        """Test that unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            ServerSettings(log_level="VERBOSE")

    def test_invalid_transport_rejected(self):
        """Test that unknown transports fail validation."""
        with pytest.raises(ValidationError):
            ServerSettings(transport="websocket")

    def test_token_hidden_in_repr(self):
        """Test that the token never appears in repr output."""
        settings = ServerSettings(railway_api_token=SecretStr("super-secret"))

        assert "super-secret" not in repr(settings)
