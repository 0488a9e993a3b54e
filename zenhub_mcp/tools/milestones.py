"""Milestone Management tools."""

from .. import queries
from .base import compact, run_graphql, string_list, tool


_MILESTONE_ID = {"type": "string", "description": "Milestone ID"}


def _milestone_fields(args: dict) -> dict:
    return compact(
        description=args.get("description"),
        dueOn=args.get("due_date"),
        startOn=args.get("start_date"),
    )


@tool(
    "zenhub_create_milestone",
    "Create a milestone",
    {
        "title": {"type": "string", "description": "Milestone title"},
        "repository_id": {"type": "string", "description": "Repository ID"},
        "description": {"type": "string", "description": "Milestone description"},
        "due_date": {"type": "string", "description": "Due date (ISO format)"},
        "start_date": {"type": "string", "description": "Start date (ISO format)"},
    },
    ["title", "repository_id"],
)
async def create_milestone(args, transport):
    variables = {
        "input": {
            "title": args.get("title"),
            "repositoryId": args.get("repository_id"),
            **_milestone_fields(args),
        },
    }
    return await run_graphql(transport, queries.CREATE_MILESTONE, variables)


@tool(
    "zenhub_update_milestone",
    "Update a milestone",
    {
        "milestone_id": _MILESTONE_ID,
        "title": {"type": "string", "description": "Milestone title"},
        "description": {"type": "string", "description": "Milestone description"},
        "due_date": {"type": "string", "description": "Due date (ISO format)"},
        "start_date": {"type": "string", "description": "Start date (ISO format)"},
    },
    ["milestone_id"],
)
async def update_milestone(args, transport):
    variables = {
        "input": {
            "milestoneId": args.get("milestone_id"),
            **compact(title=args.get("title")),
            **_milestone_fields(args),
        },
    }
    return await run_graphql(transport, queries.UPDATE_MILESTONE, variables)


@tool(
    "zenhub_add_milestone_to_issues",
    "Add milestone to multiple issues",
    {"issue_ids": string_list("Array of issue IDs"), "milestone_id": _MILESTONE_ID},
    ["issue_ids", "milestone_id"],
)
async def add_milestone_to_issues(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "milestoneId": args.get("milestone_id")}}
    return await run_graphql(transport, queries.ADD_MILESTONE_TO_ISSUES, variables)


@tool(
    "zenhub_remove_milestone_from_issues",
    "Remove milestone from multiple issues",
    {"issue_ids": string_list("Array of issue IDs")},
    ["issue_ids"],
)
async def remove_milestone_from_issues(args, transport):
    return await run_graphql(
        transport, queries.REMOVE_MILESTONE_FROM_ISSUES, {"input": {"issueIds": args.get("issue_ids")}}
    )


@tool("zenhub_delete_milestone", "Delete a milestone", {"milestone_id": _MILESTONE_ID}, ["milestone_id"])
async def delete_milestone(args, transport):
    return await run_graphql(
        transport, queries.DELETE_MILESTONE, {"input": {"milestoneId": args.get("milestone_id")}}
    )


MILESTONE_TOOLS = (
    create_milestone,
    update_milestone,
    add_milestone_to_issues,
    remove_milestone_from_issues,
    delete_milestone,
)
