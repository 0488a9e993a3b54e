"""Tests for Settings.from_env."""

import pytest
from pydantic import ValidationError

from zenhub_mcp.config import DEFAULT_GRAPHQL_URL, DEFAULT_TIMEOUT, Settings
from zenhub_mcp.errors import ConfigurationError


class TestFromEnv:

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="ZENHUB_API_KEY environment variable is required"):
            Settings.from_env({})

    def test_blank_api_key(self):
        with pytest.raises(ConfigurationError):
            Settings.from_env({"ZENHUB_API_KEY": "   "})

    def test_defaults(self):
        settings = Settings.from_env({"ZENHUB_API_KEY": "key"})

        assert settings.api_key.get_secret_value() == "key"
        assert settings.graphql_url == DEFAULT_GRAPHQL_URL
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.log_level == "INFO"
        assert settings.custom_instructions == ""
        assert not settings.has_github_token

    def test_overrides(self):
        settings = Settings.from_env({
            "ZENHUB_API_KEY": "key",
            "ZENHUB_GRAPHQL_URL": "https://zenhub.internal/graphql",
            "GITHUB_PAT": "ghp_x",
            "ZENHUB_MCP_TIMEOUT": "12.5",
            "ZENHUB_MCP_CUSTOM_INSTRUCTIONS": "Always use workspace Platform.",
            "ZENHUB_MCP_LOG_LEVEL": "debug",
        })

        assert settings.graphql_url == "https://zenhub.internal/graphql"
        assert settings.has_github_token
        assert settings.timeout == 12.5
        assert settings.custom_instructions == "Always use workspace Platform."
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("env", [
        {"ZENHUB_MCP_TIMEOUT": "0"},
        {"ZENHUB_MCP_TIMEOUT": "soon"},
        {"ZENHUB_MCP_LOG_LEVEL": "LOUD"},
    ])
    def test_invalid_values(self, env):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            Settings.from_env({"ZENHUB_API_KEY": "key", **env})

    def test_secrets_are_not_printed(self):
        settings = Settings.from_env({"ZENHUB_API_KEY": "super-secret", "GITHUB_PAT": "ghp_secret"})

        assert "super-secret" not in repr(settings)
        assert "ghp_secret" not in repr(settings)


class TestSettings:

    def test_frozen(self):
        settings = Settings(api_key="key")

        with pytest.raises(ValidationError):
            settings.timeout = 1
