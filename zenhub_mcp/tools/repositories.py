"""Repository Management tools."""

from .. import queries
from .base import run_graphql, tool


_WORKSPACE_ID = {"type": "string", "description": "Workspace ID"}
_REPOSITORY_ID = {"type": "string", "description": "Repository ID"}


@tool(
    "zenhub_get_workspace_repositories",
    "Get all repositories for a workspace",
    {"workspace_id": _WORKSPACE_ID},
    ["workspace_id"],
)
async def get_workspace_repositories(args, transport):
    return await run_graphql(
        transport, queries.GET_WORKSPACE_REPOSITORIES, {"workspaceId": args.get("workspace_id")}
    )


@tool(
    "zenhub_get_repositories_by_github_ids",
    "Lookup repositories by their GitHub IDs, including the workspaces they belong to",
    {
        "github_ids": {
            "type": "array",
            "items": {"type": "number"},
            "description": "Array of GitHub repository IDs",
        },
    },
    ["github_ids"],
)
async def get_repositories_by_github_ids(args, transport):
    return await run_graphql(transport, queries.GET_REPOSITORIES_BY_GH_IDS, {"ghIds": args.get("github_ids")})


@tool(
    "zenhub_add_repository_to_workspace",
    "Add a GitHub repository to a workspace",
    {
        "workspace_id": _WORKSPACE_ID,
        "repository_github_id": {"type": "number", "description": "GitHub repository ID"},
    },
    ["workspace_id", "repository_github_id"],
)
async def add_repository_to_workspace(args, transport):
    variables = {
        "input": {
            "workspaceId": args.get("workspace_id"),
            "repositoryGhId": args.get("repository_github_id"),
        },
    }
    return await run_graphql(transport, queries.ADD_REPOSITORY_TO_WORKSPACE, variables)


@tool(
    "zenhub_remove_repository_from_workspace",
    "Remove a repository from a workspace",
    {"workspace_id": _WORKSPACE_ID, "repository_id": _REPOSITORY_ID},
    ["workspace_id", "repository_id"],
)
async def remove_repository_from_workspace(args, transport):
    variables = {
        "input": {
            "workspaceId": args.get("workspace_id"),
            "repositoryId": args.get("repository_id"),
        },
    }
    return await run_graphql(transport, queries.DISCONNECT_WORKSPACE_REPOSITORY, variables)


@tool(
    "zenhub_get_repository_details",
    "Get detailed information about a specific repository",
    {"repository_id": _REPOSITORY_ID},
    ["repository_id"],
)
async def get_repository_details(args, transport):
    return await run_graphql(
        transport, queries.GET_REPOSITORY_DETAILS, {"repositoryId": args.get("repository_id")}
    )


@tool(
    "zenhub_get_repository_assignable_users",
    "Get users who can be assigned to issues in a repository",
    {
        "repository_id": _REPOSITORY_ID,
        "first": {"type": "number", "description": "Number of users to return (default: 20)"},
    },
    ["repository_id"],
)
async def get_repository_assignable_users(args, transport):
    variables = {"repositoryId": args.get("repository_id"), "first": args.get("first") or 20}
    return await run_graphql(transport, queries.GET_REPOSITORY_ASSIGNABLE_USERS, variables)


REPOSITORY_TOOLS = (
    get_workspace_repositories,
    get_repositories_by_github_ids,
    add_repository_to_workspace,
    remove_repository_from_workspace,
    get_repository_details,
    get_repository_assignable_users,
)
