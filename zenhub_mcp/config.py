"""
Settings for ZenHub MCP

Loaded once at startup from environment variables and passed explicitly
to the transport. Nothing reads the environment after that.

Environment variables:
- ZENHUB_API_KEY: ZenHub API token (required)
- ZENHUB_GRAPHQL_URL: GraphQL endpoint (default: https://api.zenhub.com/public/graphql)
- GITHUB_PAT: GitHub token, only used to set the issue type after zenhub_create_issue
- GITHUB_API_URL: GitHub REST base URL (default: https://api.github.com)
- ZENHUB_MCP_TIMEOUT: Timeout in seconds for each upstream call (default: 30)
- ZENHUB_MCP_CUSTOM_INSTRUCTIONS: Extra instructions appended to the server instructions
- ZENHUB_MCP_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default: INFO)
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from .errors import ConfigurationError


DEFAULT_GRAPHQL_URL = "https://api.zenhub.com/public/graphql"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    """Immutable server configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    graphql_url: str = DEFAULT_GRAPHQL_URL
    github_token: Optional[SecretStr] = None
    github_api_url: str = DEFAULT_GITHUB_API_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    custom_instructions: str = ""
    log_level: str = "INFO"

    @field_validator("api_key")
    @classmethod
    def _api_key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("ZENHUB_API_KEY must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def has_github_token(self) -> bool:
        return self.github_token is not None and bool(self.github_token.get_secret_value())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the environment.

        Raises ConfigurationError if ZENHUB_API_KEY is missing or anything
        fails validation.
        """
        env = os.environ if environ is None else environ

        api_key = env.get("ZENHUB_API_KEY")
        if not api_key:
            raise ConfigurationError("ZENHUB_API_KEY environment variable is required")

        values = {
            "api_key": api_key,
            "graphql_url": env.get("ZENHUB_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL,
            "github_token": env.get("GITHUB_PAT") or None,
            "github_api_url": env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
            "custom_instructions": env.get("ZENHUB_MCP_CUSTOM_INSTRUCTIONS", ""),
            "log_level": env.get("ZENHUB_MCP_LOG_LEVEL") or "INFO",
        }
        env_timeout = env.get("ZENHUB_MCP_TIMEOUT")
        if env_timeout:
            values["timeout"] = env_timeout

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
