"""
Dependency Management tools

Issues are addressed by (repository GitHub id, issue number), not by
ZenHub issue id.
"""

from .. import queries
from ..schema import json_response
from .base import tool


_DEPENDENCY_PROPERTIES = {
    "blocking_repository_gh_id": {
        "type": "number",
        "description": "GitHub repository numeric ID for the blocking issue",
    },
    "blocking_issue_number": {
        "type": "number",
        "description": "Issue number of the blocking issue within the repository",
    },
    "blocked_repository_gh_id": {
        "type": "number",
        "description": "GitHub repository numeric ID for the blocked issue",
    },
    "blocked_issue_number": {
        "type": "number",
        "description": "Issue number of the blocked issue within the repository",
    },
}
_DEPENDENCY_REQUIRED = list(_DEPENDENCY_PROPERTIES)


def dependency_input(args: dict) -> dict:
    return {
        "blockingIssue": {
            "repositoryGhId": args.get("blocking_repository_gh_id"),
            "issueNumber": args.get("blocking_issue_number"),
        },
        "blockedIssue": {
            "repositoryGhId": args.get("blocked_repository_gh_id"),
            "issueNumber": args.get("blocked_issue_number"),
        },
    }


@tool(
    "zenhub_create_issue_dependency",
    "Create a dependency between two issues (blocking → blocked)",
    _DEPENDENCY_PROPERTIES,
    _DEPENDENCY_REQUIRED,
)
async def create_issue_dependency(args, transport):
    result = await transport.execute(queries.CREATE_ISSUE_DEPENDENCY, {"input": dependency_input(args)})
    return json_response((result.get("createIssueDependency") or {}).get("issueDependency"))


@tool(
    "zenhub_delete_issue_dependency",
    "Delete a dependency between two issues (blocking → blocked)",
    _DEPENDENCY_PROPERTIES,
    _DEPENDENCY_REQUIRED,
)
async def delete_issue_dependency(args, transport):
    result = await transport.execute(queries.DELETE_ISSUE_DEPENDENCY, {"input": dependency_input(args)})
    return json_response((result.get("deleteIssueDependency") or {}).get("issueDependency"))


DEPENDENCY_TOOLS = (
    create_issue_dependency,
    delete_issue_dependency,
)
