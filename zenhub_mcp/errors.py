"""
ZenHub MCP Errors

Everything raised inside a tool handler ends up as an "Error: ..." text
payload (see dispatcher.py). Only ConfigurationError can stop the server,
and only at startup.
"""


class ZenHubMCPError(Exception):
    """Base class for all zenhub_mcp errors."""


class ConfigurationError(ZenHubMCPError):
    """Settings are missing or invalid."""


class DuplicateToolError(ZenHubMCPError):
    """Two tool definitions were registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate tool name: {name}")


class TransportError(ZenHubMCPError):
    """The ZenHub GraphQL API call failed (network, HTTP status or GraphQL errors)."""

    def __init__(self, message: str, status_code: int | None = None, errors: list | None = None):
        super().__init__(f"GraphQL Error: {message}")
        self.status_code = status_code
        self.errors = errors or []


class GitHubAPIError(ZenHubMCPError):
    """The companion GitHub REST call failed."""

    def __init__(self, reason: str, details: str = "", status_code: int | None = None):
        super().__init__(f"Failed to update issue: {reason}: Details: {details}")
        self.status_code = status_code


class ToolInputError(ZenHubMCPError):
    """A handler got arguments (or an upstream result) it can't work with."""
