"""Workspace Management tools."""

from .. import queries
from .base import compact, run_graphql, tool


@tool(
    "zenhub_create_workspace",
    "Create a new workspace in ZenHub",
    {
        "name": {"type": "string", "description": "Workspace name"},
        "description": {"type": "string", "description": "Workspace description"},
        "organization_id": {"type": "string", "description": "ZenHub organization ID"},
        "repository_ids": {
            "type": "array",
            "items": {"type": "number"},
            "description": "GitHub repository IDs",
        },
        "default_repository_id": {"type": "number", "description": "Default repository GitHub ID"},
    },
    ["name", "organization_id", "repository_ids"],
)
async def create_workspace(args, transport):
    variables = {
        "input": {
            "name": args.get("name"),
            "description": args.get("description") or "",
            "zenhubOrganizationId": args.get("organization_id"),
            "repositoryGhIds": args.get("repository_ids"),
            **compact(defaultRepositoryGhId=args.get("default_repository_id")),
        },
    }
    return await run_graphql(transport, queries.CREATE_WORKSPACE, variables)


@tool(
    "zenhub_get_user_workspaces",
    "Get all workspaces accessible to the current user",
    {
        "query": {"type": "string", "description": "Optional search query to filter workspaces"},
        "first": {"type": "number", "description": "Number of workspaces to return (default: 20)"},
    },
)
async def get_user_workspaces(args, transport):
    query = (args.get("query") or "").strip()
    first = args.get("first") or 20

    if not query:
        return await run_graphql(transport, queries.GET_USER_WORKSPACES_FROM_ORGS, {"first": first})
    return await run_graphql(transport, queries.SEARCH_USER_WORKSPACES, {"query": query, "first": first})


@tool(
    "zenhub_get_user_organizations",
    "Get all ZenHub organizations accessible to the current user",
    {
        "query": {"type": "string", "description": "Optional search query to filter organizations"},
        "first": {"type": "number", "description": "Number of organizations to return (default: 10)"},
    },
)
async def get_user_organizations(args, transport):
    variables = {**compact(query=args.get("query")), "first": args.get("first") or 10}
    return await run_graphql(transport, queries.GET_USER_ORGANIZATIONS, variables)


@tool(
    "zenhub_get_workspace_overview",
    "Get workspace overview including basic metadata, pipelines with issue counts, "
    "repositories with issue counts, epic summaries, and workspace users",
    {"workspace_id": {"type": "string", "description": "Workspace ID"}},
    ["workspace_id"],
)
async def get_workspace_overview(args, transport):
    return await run_graphql(
        transport, queries.GET_WORKSPACE_OVERVIEW, {"workspaceId": args.get("workspace_id")}
    )


@tool(
    "zenhub_get_organization_workspaces",
    "Get all workspaces within ZenHub organizations, optionally filtered by organization name",
    {
        "query": {"type": "string", "description": "Optional search query to filter organizations"},
        "first": {"type": "number", "description": "Number of organizations to return (default: 10)"},
    },
)
async def get_organization_workspaces(args, transport):
    variables = {**compact(query=args.get("query")), "first": args.get("first") or 10}
    return await run_graphql(transport, queries.GET_ORGANIZATION_WORKSPACES, variables)


WORKSPACE_TOOLS = (
    create_workspace,
    get_user_workspaces,
    get_user_organizations,
    get_workspace_overview,
    get_organization_workspaces,
)
