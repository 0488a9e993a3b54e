"""Label Management tools."""

from .. import queries
from .base import compact, run_graphql, string_list, tool


_LABEL_PROPERTIES = {
    "name": {"type": "string", "description": "Label name"},
    "color": {"type": "string", "description": "Label color (hex without #)"},
    "description": {"type": "string", "description": "Label description"},
}


@tool(
    "zenhub_create_github_label",
    "Create a GitHub label",
    {"repository_id": {"type": "string", "description": "Repository ID"}, **_LABEL_PROPERTIES},
    ["repository_id", "name", "color"],
)
async def create_github_label(args, transport):
    variables = {
        "input": {
            "repositoryId": args.get("repository_id"),
            "name": args.get("name"),
            "color": args.get("color"),
            **compact(description=args.get("description")),
        },
    }
    return await run_graphql(transport, queries.CREATE_GITHUB_LABEL, variables)


@tool(
    "zenhub_create_zenhub_label",
    "Create a ZenHub label",
    {"workspace_id": {"type": "string", "description": "Workspace ID"}, **_LABEL_PROPERTIES},
    ["workspace_id", "name", "color"],
)
async def create_zenhub_label(args, transport):
    variables = {
        "input": {
            "workspaceId": args.get("workspace_id"),
            "name": args.get("name"),
            "color": args.get("color"),
            **compact(description=args.get("description")),
        },
    }
    return await run_graphql(transport, queries.CREATE_ZENHUB_LABEL, variables)


@tool(
    "zenhub_delete_zenhub_labels",
    "Delete ZenHub labels",
    {"label_ids": string_list("Array of ZenHub label IDs")},
    ["label_ids"],
)
async def delete_zenhub_labels(args, transport):
    return await run_graphql(transport, queries.DELETE_ZENHUB_LABELS, {"input": {"labelIds": args.get("label_ids")}})


@tool(
    "zenhub_get_repository_labels",
    "Get all labels in a repository",
    {"repository_id": {"type": "string", "description": "Repository ID"}},
    ["repository_id"],
)
async def get_repository_labels(args, transport):
    return await run_graphql(transport, queries.GET_REPOSITORY_LABELS, {"repositoryId": args.get("repository_id")})


@tool(
    "zenhub_get_workspace_labels",
    "Get all ZenHub labels in a workspace",
    {"workspace_id": {"type": "string", "description": "Workspace ID"}},
    ["workspace_id"],
)
async def get_workspace_labels(args, transport):
    return await run_graphql(transport, queries.GET_WORKSPACE_LABELS, {"workspaceId": args.get("workspace_id")})


LABEL_TOOLS = (
    create_github_label,
    create_zenhub_label,
    delete_zenhub_labels,
    get_repository_labels,
    get_workspace_labels,
)
