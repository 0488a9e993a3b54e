"""Sprint Management tools."""

from .. import queries
from .base import compact, run_graphql, string_list, tool


_WORKSPACE_ID = {"type": "string", "description": "Workspace ID"}


def sprint_settings(settings: dict) -> dict:
    """Map the caller's sprint settings onto SprintConfigSettingsInput."""
    result = {"moveUnfinishedIssues": bool(settings.get("move_unfinished_issues"))}
    if settings.get("pipeline_id"):
        result["issuesFromPipeline"] = {
            "pipelineId": settings["pipeline_id"],
            "enabled": True,
            "totalStoryPoints": settings.get("total_story_points") or 0,
        }
    return result


@tool(
    "zenhub_create_sprint",
    "Create a new sprint configuration (recurring sprints) for a workspace",
    {
        "name": {"type": "string", "description": "Sprint name"},
        "start_date": {"type": "string", "description": "Start date (ISO format)"},
        "end_date": {"type": "string", "description": "End date (ISO format)"},
        "timezone": {"type": "string", "description": "Timezone identifier (default: UTC)"},
        "workspace_id": _WORKSPACE_ID,
        "settings": {
            "type": "object",
            "properties": {
                "pipeline_id": {"type": "string"},
                "total_story_points": {"type": "number"},
                "move_unfinished_issues": {"type": "boolean"},
            },
        },
    },
    ["name", "start_date", "end_date", "workspace_id"],
)
async def create_sprint(args, transport):
    variables = {
        "input": {
            "sprintConfig": {
                "name": args.get("name"),
                "startOn": args.get("start_date"),
                "endOn": args.get("end_date"),
                "tzIdentifier": args.get("timezone") or "UTC",
                "workspaceId": args.get("workspace_id"),
                "settings": sprint_settings(args.get("settings") or {}),
            },
        },
    }
    return await run_graphql(transport, queries.CREATE_SPRINT_CONFIG, variables)


@tool(
    "zenhub_update_sprint",
    "Update an existing sprint",
    {
        "sprint_id": {"type": "string", "description": "Sprint ID"},
        "name": {"type": "string", "description": "Sprint name"},
        "start_date": {"type": "string", "description": "Start date (ISO format)"},
        "end_date": {"type": "string", "description": "End date (ISO format)"},
        "state": {"type": "string", "enum": ["OPEN", "CLOSED"], "description": "Sprint state"},
    },
    ["sprint_id"],
)
async def update_sprint(args, transport):
    variables = {
        "input": {
            "sprintId": args.get("sprint_id"),
            **compact(
                name=args.get("name"),
                startAt=args.get("start_date"),
                endAt=args.get("end_date"),
                state=args.get("state"),
            ),
        },
    }
    return await run_graphql(transport, queries.UPDATE_SPRINT, variables)


@tool(
    "zenhub_add_issues_to_sprints",
    "Add issues to sprints",
    {"issue_ids": string_list("Array of issue IDs"), "sprint_ids": string_list("Array of sprint IDs")},
    ["issue_ids", "sprint_ids"],
)
async def add_issues_to_sprints(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "sprintIds": args.get("sprint_ids")}}
    return await run_graphql(transport, queries.ADD_ISSUES_TO_SPRINTS, variables)


@tool(
    "zenhub_remove_issues_from_sprints",
    "Remove issues from sprints",
    {"issue_ids": string_list("Array of issue IDs"), "sprint_ids": string_list("Array of sprint IDs")},
    ["issue_ids", "sprint_ids"],
)
async def remove_issues_from_sprints(args, transport):
    variables = {"input": {"issueIds": args.get("issue_ids"), "sprintIds": args.get("sprint_ids")}}
    return await run_graphql(transport, queries.REMOVE_ISSUES_FROM_SPRINTS, variables)


@tool(
    "zenhub_delete_sprint",
    "Delete the sprint configuration and open sprints for a workspace",
    {"workspace_id": _WORKSPACE_ID},
    ["workspace_id"],
)
async def delete_sprint(args, transport):
    return await run_graphql(
        transport,
        queries.DELETE_SPRINT_CONFIG_AND_OPEN_SPRINTS,
        {"input": {"workspaceId": args.get("workspace_id")}},
    )


@tool(
    "zenhub_get_workspace_sprints",
    "Get all sprints in a workspace",
    {"workspace_id": _WORKSPACE_ID},
    ["workspace_id"],
)
async def get_workspace_sprints(args, transport):
    return await run_graphql(transport, queries.GET_WORKSPACE_SPRINTS, {"workspaceId": args.get("workspace_id")})


SPRINT_TOOLS = (
    create_sprint,
    update_sprint,
    add_issues_to_sprints,
    remove_issues_from_sprints,
    delete_sprint,
    get_workspace_sprints,
)
