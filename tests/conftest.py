"""
Shared fixtures for ZenHub MCP tests.

RecordingTransport stands in for ZenHubClient: it records every
(document, variables) pair and answers from a queue.
"""

import io

import pytest

from zenhub_mcp.config import Settings
from zenhub_mcp.log import configure_logging, reset_logging


class RecordingTransport:
    """Fake GraphQL transport. Queue dicts to return, or exceptions to raise."""

    def __init__(self, *responses, github=None):
        self.calls: list[tuple[str, dict]] = []
        self._responses = list(responses)
        if github is not None:
            self.github = github

    def queue(self, *responses):
        self._responses.extend(responses)

    async def execute(self, document, variables=None):
        self.calls.append((document, variables))
        if not self._responses:
            return {}
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def variables(self) -> list[dict]:
        return [variables for _, variables in self.calls]


class RecordingGitHub:
    """Fake GitHubClient."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result if result is not None else {"number": 1}
        self.error = error

    async def update_issue_type(self, owner, repo, number, issue_type):
        self.calls.append((owner, repo, number, issue_type))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def quiet_logging():
    """Send structured logs to a buffer so test output stays clean."""
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream, force=True)
    yield stream
    reset_logging()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def settings():
    return Settings(api_key="test-key", graphql_url="https://zenhub.test/graphql", timeout=5)


@pytest.fixture
def github_settings():
    return Settings(
        api_key="test-key",
        graphql_url="https://zenhub.test/graphql",
        github_token="ghp_test",
        github_api_url="https://github.test",
        timeout=5,
    )
