"""
Issue Management tools

Most of these are a single mutation. Two are composites:
- zenhub_create_issue: create the issue, then set its GitHub issue type
- zenhub_create_issue_with_epic: create the issue, then add it to an epic

Composites are not transactional. If the second step fails the issue
still exists, and the error says so.
"""

import asyncio
import re

from .. import queries
from ..errors import ToolInputError
from ..log import get_logger
from ..schema import json_response
from .base import compact, run_graphql, string_list, tool


logger = get_logger(__name__)

ISSUE_URL_PATTERN = re.compile(r"github\.com/([^/]+)/([^/]+)/issues/(\d+)")

_ISSUE_IDS = string_list("Array of issue IDs")


def issue_type_for(labels: list[str]) -> str:
    """A "bug" label makes the issue a Bug, anything else is a Task."""
    return "Bug" if any(label.lower() == "bug" for label in labels or []) else "Task"


def parse_issue_url(url: str) -> tuple[str, str, str]:
    """Split a GitHub issue URL into (owner, repo, number)."""
    match = ISSUE_URL_PATTERN.search(url or "")
    if not match:
        raise ToolInputError(f"Unable to parse issue URL returned from createIssue: {url}")
    return match.group(1), match.group(2), match.group(3)


def _create_issue_input(args: dict) -> dict:
    return {
        "title": args.get("title"),
        "repositoryId": args.get("repository_id"),
        "body": args.get("body") or "",
        "labels": args.get("labels") or [],
        "assignees": args.get("assignees") or [],
    }


_CREATE_ISSUE_PROPERTIES = {
    "title": {"type": "string", "description": "Issue title"},
    "repository_id": {"type": "string", "description": "Repository ID"},
    "body": {"type": "string", "description": "Issue body/description"},
    "labels": string_list("Issue labels"),
    "assignees": string_list("GitHub usernames to assign"),
}


@tool(
    "zenhub_create_issue",
    "Create a new GitHub issue via ZenHub. The GitHub issue type is set to Bug "
    "when a 'bug' label is given, otherwise Task (needs GITHUB_PAT).",
    _CREATE_ISSUE_PROPERTIES,
    ["title", "repository_id"],
)
async def create_issue(args, transport):
    labels = args.get("labels") or []

    result = await transport.execute(queries.CREATE_ISSUE, {"input": _create_issue_input(args)})
    created_issue = (result.get("createIssue") or {}).get("issue")

    github = getattr(transport, "github", None)
    if github is None:
        logger.info("issue_type_skipped", reason="GITHUB_PAT not configured")
        return json_response({"createdIssue": created_issue, "updatedIssue": None})

    issue_id = (created_issue or {}).get("id")
    try:
        owner, repo, number = parse_issue_url((created_issue or {}).get("htmlUrl", ""))
        updated_issue = await github.update_issue_type(owner, repo, number, issue_type_for(labels))
    except Exception as e:
        logger.warning("partial_failure", tool="zenhub_create_issue", created=issue_id)
        raise ToolInputError(f"issue {issue_id} was created but its GitHub issue type could not be set: {e}") from e

    return json_response({"createdIssue": created_issue, "updatedIssue": updated_issue})


@tool(
    "zenhub_update_issue",
    "Update an existing issue",
    {
        "issue_id": {"type": "string", "description": "Issue ID"},
        "title": {"type": "string", "description": "Issue title"},
        "body": {"type": "string", "description": "Issue body/description"},
    },
    ["issue_id"],
)
async def update_issue(args, transport):
    variables = {
        "input": {
            "issueId": args.get("issue_id"),
            **compact(title=args.get("title"), body=args.get("body")),
        },
    }
    return await run_graphql(transport, queries.UPDATE_ISSUE, variables)


@tool("zenhub_close_issues", "Close one or more issues", {"issue_ids": _ISSUE_IDS}, ["issue_ids"])
async def close_issues(args, transport):
    return await run_graphql(transport, queries.CLOSE_ISSUES, {"input": {"issueIds": args.get("issue_ids")}})


@tool(
    "zenhub_reopen_issues",
    "Reopen one or more closed issues",
    {
        "issue_ids": _ISSUE_IDS,
        "pipeline_id": {"type": "string", "description": "Pipeline ID to move issues to"},
        "position": {"type": "string", "enum": ["START", "END"], "description": "Position in pipeline"},
    },
    ["issue_ids", "pipeline_id"],
)
async def reopen_issues(args, transport):
    variables = {
        "input": {
            "issueIds": args.get("issue_ids"),
            "pipelineId": args.get("pipeline_id"),
            "position": args.get("position") or "START",
        },
    }
    return await run_graphql(transport, queries.REOPEN_ISSUES, variables)


@tool(
    "zenhub_move_issue",
    "Move issues to a position in a pipeline",
    {
        "issue_ids": _ISSUE_IDS,
        "pipeline_id": {"type": "string", "description": "Pipeline ID to move issues to"},
        "position": {"type": "number", "description": "Position in pipeline (0-based)"},
    },
    ["issue_ids", "pipeline_id"],
)
async def move_issue(args, transport):
    # moveIssue takes one issue at a time; move them in the order given
    moved = []
    for issue_id in args.get("issue_ids") or []:
        variables = {
            "input": {
                "issueId": issue_id,
                "pipelineId": args.get("pipeline_id"),
                "position": args.get("position"),
            },
        }
        result = await transport.execute(queries.MOVE_ISSUE, variables)
        moved.append(result.get("moveIssue"))
    return json_response({"moveIssue": moved})


@tool(
    "zenhub_add_assignees_to_issues",
    "Add assignees to multiple issues",
    {"issue_ids": _ISSUE_IDS, "assignees": string_list("Array of assignee user IDs")},
    ["issue_ids", "assignees"],
)
async def add_assignees_to_issues(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "assigneeIds": args.get("assignees")}}
    return await run_graphql(transport, queries.ADD_ASSIGNEES_TO_ISSUES, variables)


@tool(
    "zenhub_remove_assignees_from_issues",
    "Remove assignees from multiple issues",
    {"issue_ids": _ISSUE_IDS, "assignees": string_list("Array of assignee user IDs")},
    ["issue_ids", "assignees"],
)
async def remove_assignees_from_issues(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "assigneeIds": args.get("assignees")}}
    return await run_graphql(transport, queries.REMOVE_ASSIGNEES_FROM_ISSUES, variables)


@tool(
    "zenhub_add_labels_to_issues",
    "Add labels to multiple issues",
    {"issue_ids": _ISSUE_IDS, "labels": string_list("Array of label IDs")},
    ["issue_ids", "labels"],
)
async def add_labels_to_issues(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "labelIds": args.get("labels")}}
    return await run_graphql(transport, queries.ADD_LABELS_TO_ISSUES, variables)


@tool(
    "zenhub_remove_labels_from_issues",
    "Remove labels from multiple issues",
    {"issue_ids": _ISSUE_IDS, "labels": string_list("Array of label IDs")},
    ["issue_ids", "labels"],
)
async def remove_labels_from_issues(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "labelIds": args.get("labels")}}
    return await run_graphql(transport, queries.REMOVE_LABELS_FROM_ISSUES, variables)


@tool(
    "zenhub_set_estimate",
    "Set an estimate for an issue",
    {
        "issue_id": {"type": "string", "description": "Issue ID"},
        "value": {"type": "number", "description": "Estimate value"},
    },
    ["issue_id", "value"],
)
async def set_estimate(args, transport):
    variables = {"input": {"issueId": args.get("issue_id"), "value": args.get("value")}}
    return await run_graphql(transport, queries.SET_ESTIMATE, variables)


@tool(
    "zenhub_set_multiple_estimates",
    "Set estimates on multiple issues",
    {
        "estimates": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "issue_id": {"type": "string", "description": "Issue ID"},
                    "value": {"type": "number", "description": "Estimate value"},
                },
                "required": ["issue_id", "value"],
            },
            "description": "Array of estimates to set",
        },
    },
    ["estimates"],
)
async def set_multiple_estimates(args, transport):
    estimates = args.get("estimates")
    if not isinstance(estimates, list):
        raise ToolInputError("estimates must be an array of {issue_id, value} objects")

    # Independent mutations, so they run concurrently; results keep input order
    results = await asyncio.gather(*(
        transport.execute(
            queries.SET_ESTIMATE,
            {"input": {"issueId": estimate.get("issue_id"), "value": estimate.get("value")}},
        )
        for estimate in estimates
    ))
    return json_response(list(results))


@tool(
    "zenhub_create_issue_with_epic",
    "Create a new issue and add it to an existing epic",
    {
        **_CREATE_ISSUE_PROPERTIES,
        "epic_id": {"type": "string", "description": "Epic ID to add the issue to"},
    },
    ["title", "repository_id", "epic_id"],
)
async def create_issue_with_epic(args, transport):
    try:
        create_result = await transport.execute(queries.CREATE_ISSUE, {"input": _create_issue_input(args)})
        created_issue = (create_result.get("createIssue") or {}).get("issue") or {}
        issue_id = created_issue.get("id")
        if not issue_id:
            raise ToolInputError("Failed to create issue")

        try:
            add_result = await transport.execute(
                queries.ADD_ISSUES_TO_EPICS,
                {"input": {"issueIds": [issue_id], "epicIds": [args.get("epic_id")]}},
            )
        except Exception as e:
            logger.warning("partial_failure", tool="zenhub_create_issue_with_epic", created=issue_id)
            raise ToolInputError(f"issue {issue_id} was created but not added to the epic: {e}") from e
    except Exception as e:
        raise ToolInputError(f"Error creating issue with epic: {e}") from e

    return json_response({
        "createdIssue": created_issue,
        "addedToEpic": (add_result.get("addIssuesToEpics") or {}).get("epics"),
    })


@tool(
    "zenhub_add_issues_to_epics",
    "Add issues to epics",
    {"issue_ids": _ISSUE_IDS, "epic_ids": string_list("Array of epic IDs")},
    ["issue_ids", "epic_ids"],
)
async def add_issues_to_epics(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "epicIds": args.get("epic_ids")}}
    return await run_graphql(transport, queries.ADD_ISSUES_TO_EPICS, variables)


@tool(
    "zenhub_remove_issues_from_epics",
    "Remove issues from epics",
    {"issue_ids": _ISSUE_IDS, "epic_ids": string_list("Array of epic IDs")},
    ["issue_ids", "epic_ids"],
)
async def remove_issues_from_epics(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "epicIds": args.get("epic_ids")}}
    return await run_graphql(transport, queries.REMOVE_ISSUES_FROM_EPICS, variables)


ISSUE_TOOLS = (
    create_issue,
    update_issue,
    close_issues,
    reopen_issues,
    move_issue,
    add_assignees_to_issues,
    remove_assignees_from_issues,
    add_labels_to_issues,
    remove_labels_from_issues,
    set_estimate,
    set_multiple_estimates,
    create_issue_with_epic,
    add_issues_to_epics,
    remove_issues_from_epics,
)
