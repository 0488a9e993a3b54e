"""
HTTP clients for ZenHub MCP

ZenHubClient talks to the ZenHub GraphQL endpoint and is shared by every
tool handler. It holds no per-call state, so concurrent calls are fine.

GitHubClient is the companion REST client used by exactly one composite
tool (zenhub_create_issue) to set the GitHub issue type after ZenHub has
created the issue.
"""

import asyncio
from typing import Any, Optional

import httpx

from .config import Settings
from .errors import GitHubAPIError, TransportError
from .log import get_logger


logger = get_logger(__name__)

# GitHub can take a moment to see an issue ZenHub just created. There is no
# readiness endpoint, so the PATCH is retried on 404/422 with this initial
# delay, doubling each attempt.
ISSUE_PROPAGATION_DELAY = 2.0
GITHUB_MAX_ATTEMPTS = 3
GITHUB_API_VERSION = "2022-11-28"


def _format_graphql_errors(errors: list) -> str:
    messages = []
    for error in errors:
        if isinstance(error, dict):
            messages.append(str(error.get("message", error)))
        else:
            messages.append(str(error))
    return "; ".join(messages)


class ZenHubClient:
    """GraphQL-over-HTTP client for the ZenHub public API."""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
        github: Optional["GitHubClient"] = None,
    ):
        self.url = settings.graphql_url
        self.timeout = settings.timeout
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)
        self._headers = {
            "Authorization": f"Bearer {settings.api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }
        if github is None and settings.has_github_token:
            github = GitHubClient(settings)
        self.github = github

    async def execute(self, document: str, variables: Optional[dict] = None) -> dict:
        """
        Run one query or mutation and return its `data`.

        Raises TransportError on network failure, timeout, non-2xx status,
        a non-JSON body or a GraphQL `errors` array.
        """
        payload = {"query": document, "variables": variables or {}}

        try:
            response = await self._client.post(
                self.url,
                json=payload,
                headers=self._headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        if response.status_code >= 400:
            body = None
            try:
                body = response.json()
            except ValueError:
                pass
            if isinstance(body, dict) and body.get("errors"):
                message = _format_graphql_errors(body["errors"])
            else:
                message = response.text.strip() or response.reason_phrase
            raise TransportError(
                f"{response.status_code} {response.reason_phrase}: {message}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON response: {response.text[:200]}") from e

        if not isinstance(body, dict):
            raise TransportError(f"Unexpected response: {body!r}")

        errors = body.get("errors")
        if errors:
            raise TransportError(_format_graphql_errors(errors), errors=errors)

        return body.get("data") or {}

    async def aclose(self):
        """Close the HTTP clients."""
        await self._client.aclose()
        if self.github is not None:
            await self.github.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()


class GitHubClient:
    """Minimal GitHub REST client - only what zenhub_create_issue needs."""

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
        max_attempts: int = GITHUB_MAX_ATTEMPTS,
        retry_delay: float = ISSUE_PROPAGATION_DELAY,
    ):
        if not settings.has_github_token:
            raise ValueError("GitHubClient needs GITHUB_PAT to be configured")
        self.base_url = settings.github_api_url.rstrip("/")
        self.max_attempts = max(1, max_attempts)
        self.retry_delay = retry_delay
        self._client = http_client or httpx.AsyncClient(timeout=settings.timeout)
        self._headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {settings.github_token.get_secret_value()}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def update_issue_type(self, owner: str, repo: str, number: str, issue_type: str) -> Any:
        """
        PATCH the issue's `type` field.

        Retries with exponential backoff while GitHub answers 404/422 (the
        issue isn't visible yet); any other failure raises immediately.
        """
        url = f"{self.base_url}/repos/{owner}/{repo}/issues/{number}"
        delay = self.retry_delay
        last_error: Optional[GitHubAPIError] = None

        for attempt in range(self.max_attempts):
            try:
                response = await self._client.patch(url, json={"type": issue_type}, headers=self._headers)
            except httpx.HTTPError as e:
                raise GitHubAPIError(type(e).__name__, str(e)) from e

            if response.is_success:
                return response.json()

            last_error = GitHubAPIError(
                response.reason_phrase,
                response.text,
                status_code=response.status_code,
            )
            if response.status_code not in (404, 422):
                raise last_error

            if attempt < self.max_attempts - 1:
                logger.info(
                    "github_issue_not_ready",
                    url=url,
                    status=response.status_code,
                    attempt=attempt + 1,
                    retry_in=delay,
                )
                await asyncio.sleep(delay)
                delay *= 2

        raise last_error

    async def aclose(self):
        await self._client.aclose()
