"""
Epic Management tools

zenhub_create_epic is a composite: createEpic makes the underlying issue,
then createEpicFromIssue turns it into an epic (attaching any children).
The second call is only built once the first has returned the issue id.
"""

from .. import queries
from ..errors import ToolInputError
from ..log import get_logger
from ..schema import json_response
from .base import compact, run_graphql, string_list, tool


logger = get_logger(__name__)

_EPIC_ID = {"type": "string", "description": "Epic ID"}


@tool(
    "zenhub_create_epic",
    "Create a new epic in ZenHub. Optionally, you can also specify existing issue IDs "
    "that should be added as children of the new epic.",
    {
        "title": {"type": "string", "description": "Epic title"},
        "repository_id": {"type": "string", "description": "Repository ID"},
        "body": {"type": "string", "description": "Epic description"},
        "epic_child_ids": string_list("Array of issue IDs to add as children of the newly created epic"),
    },
    ["title", "repository_id"],
)
async def create_epic(args, transport):
    create_result = await transport.execute(
        queries.CREATE_EPIC,
        {
            "input": {
                "issue": {
                    "title": args.get("title"),
                    "repositoryId": args.get("repository_id"),
                    "body": args.get("body") or "",
                },
            },
        },
    )
    created_epic = (create_result.get("createEpic") or {}).get("epic") or {}
    issue_id = (created_epic.get("issue") or {}).get("id")
    if not issue_id:
        raise ToolInputError("Failed to create the underlying issue for the epic")

    try:
        convert_result = await transport.execute(
            queries.CREATE_EPIC_FROM_ISSUE,
            {"input": {"issueId": issue_id, "epicChildIds": args.get("epic_child_ids") or []}},
        )
    except Exception as e:
        logger.warning("partial_failure", tool="zenhub_create_epic", created=issue_id)
        raise ToolInputError(f"issue {issue_id} was created but could not be converted to an epic: {e}") from e

    return json_response({
        "createEpic": created_epic,
        "convertToEpic": (convert_result.get("createEpicFromIssue") or {}).get("epic"),
    })


@tool(
    "zenhub_create_zenhub_epic",
    "Create a new ZenHub epic (not backed by a GitHub issue)",
    {
        "title": {"type": "string", "description": "Epic title"},
        "workspace_id": {"type": "string", "description": "Workspace ID"},
        "description": {"type": "string", "description": "Epic description"},
    },
    ["title", "workspace_id"],
)
async def create_zenhub_epic(args, transport):
    variables = {
        "input": {
            "title": args.get("title"),
            "workspaceId": args.get("workspace_id"),
            **compact(description=args.get("description")),
        },
    }
    return await run_graphql(transport, queries.CREATE_ZENHUB_EPIC, variables)


@tool(
    "zenhub_update_epic",
    "Update an epic",
    {
        "epic_id": _EPIC_ID,
        "title": {"type": "string", "description": "Epic title"},
        "description": {"type": "string", "description": "Epic description"},
    },
    ["epic_id"],
)
async def update_epic(args, transport):
    variables = {
        "input": {
            "zenhubEpicId": args.get("epic_id"),
            **compact(title=args.get("title"), description=args.get("description")),
        },
    }
    return await run_graphql(transport, queries.UPDATE_ZENHUB_EPIC, variables)


@tool(
    "zenhub_update_epic_dates",
    "Update epic's start and end dates",
    {
        "epic_id": _EPIC_ID,
        "start_date": {"type": "string", "description": "Start date (YYYY-MM-DD)"},
        "end_date": {"type": "string", "description": "End date (YYYY-MM-DD)"},
    },
    ["epic_id"],
)
async def update_epic_dates(args, transport):
    variables = {
        "input": {
            "zenhubEpicId": args.get("epic_id"),
            "startOn": args.get("start_date"),
            "endOn": args.get("end_date"),
        },
    }
    return await run_graphql(transport, queries.UPDATE_ZENHUB_EPIC_DATES, variables)


@tool("zenhub_delete_epic", "Delete an epic", {"epic_id": _EPIC_ID}, ["epic_id"])
async def delete_epic(args, transport):
    return await run_graphql(
        transport, queries.DELETE_ZENHUB_EPIC, {"input": {"zenhubEpicId": args.get("epic_id")}}
    )


EPIC_TOOLS = (
    create_epic,
    create_zenhub_epic,
    update_epic,
    update_epic_dates,
    delete_epic,
)
