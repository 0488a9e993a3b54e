"""User Management tools."""

from .. import queries
from ..schema import json_response
from .base import run_graphql, tool


@tool(
    "zenhub_get_workspace_users",
    "Get all users in a workspace who can be assigned to issues",
    {"workspace_id": {"type": "string", "description": "Workspace ID"}},
    ["workspace_id"],
)
async def get_workspace_users(args, transport):
    return await run_graphql(transport, queries.GET_WORKSPACE_USERS, {"workspaceId": args.get("workspace_id")})


@tool(
    "zenhub_get_repository_collaborators",
    "Get all collaborators for a repository who can be assigned to issues "
    "(Note: Repository collaborators not available in ZenHub API - use workspace users instead)",
    {"repository_id": {"type": "string", "description": "Repository ID (Note: Not supported in ZenHub API)"}},
    ["repository_id"],
)
async def get_repository_collaborators(args, transport):
    # No upstream call: the public API has no collaborators field.
    return json_response({
        "error": "Repository collaborators not available in ZenHub GraphQL API. "
                 "Use zenhub_get_workspace_users instead.",
        "suggestion": "Use zenhub_get_workspace_users to get users who can be assigned "
                      "to issues in a workspace.",
    })


@tool(
    "zenhub_get_owner_by_login",
    "Lookup a GitHub user/organization by login",
    {"login": {"type": "string", "description": "GitHub login"}},
    ["login"],
)
async def get_owner_by_login(args, transport):
    return await run_graphql(transport, queries.OWNER_BY_LOGIN, {"login": args.get("login")})


@tool(
    "zenhub_get_owner_by_gh_id",
    "Lookup a GitHub user/organization by GitHub ID",
    {"github_id": {"type": "number", "description": "GitHub user/organization ID"}},
    ["github_id"],
)
async def get_owner_by_gh_id(args, transport):
    return await run_graphql(transport, queries.OWNER_BY_GH_ID, {"ghId": args.get("github_id")})


USER_TOOLS = (
    get_workspace_users,
    get_repository_collaborators,
    get_owner_by_login,
    get_owner_by_gh_id,
)
