"""
Query Tools - search, lookups and the raw GraphQL fallback.
"""

from .. import queries
from ..errors import ToolInputError
from .base import compact, run_graphql, string_list, tool


@tool(
    "zenhub_query_potentially_dangerous",
    "FALLBACK: Execute custom GraphQL queries when specific tools don't meet your needs. "
    "**IMPORTANT: Mutations must have EXPLICIT approval from the user, confirmed by "
    "repeating back a minimal confirmation message.**",
    {
        "query": {"type": "string", "description": "GraphQL query to execute"},
        "variables": {"type": "object", "description": "Variables for the GraphQL query"},
    },
    ["query"],
)
async def query_potentially_dangerous(args, transport):
    document = args.get("query")
    if not document:
        raise ToolInputError("query is required")
    return await run_graphql(transport, document, args.get("variables") or {})


@tool(
    "zenhub_search_issues",
    "Search and filter issues within a specific pipeline by title, labels, or assignees",
    {
        "pipeline_id": {
            "type": "string",
            "description": "Pipeline ID to search in. Use zenhub_get_workspace_overview to get pipeline IDs.",
        },
        "query": {
            "type": "string",
            "description": "Search query for title, user (github login name), content",
        },
        "filters": {
            "type": "object",
            "properties": {
                "labels": {
                    "description": "Filter by labels. Use zenhub_get_workspace_labels to get label IDs.",
                    "type": "object",
                    "properties": {"in": {"type": "array", "items": {"type": "string"}}},
                },
                "assignees": {
                    "description": "Filter by assignees github handles. Use zenhub_get_workspace_users.",
                    "type": "object",
                    "properties": {"in": {"type": "array", "items": {"type": "string"}}},
                },
            },
        },
    },
    ["pipeline_id"],
)
async def search_issues(args, transport):
    variables = {
        "pipelineId": args.get("pipeline_id"),
        "query": args.get("query") or "",
        "filters": args.get("filters") or {},
    }
    return await run_graphql(transport, queries.SEARCH_ISSUES_BY_PIPELINE, variables)


@tool(
    "zenhub_search_issues_in_repository",
    "Search and filter issues in a workspace by user, repository, and pipeline. Use "
    "zenhub_get_workspace_overview to get repository IDs and pipeline IDs before using this tool.",
    {
        "workspace_id": {"type": "string", "description": "Workspace ID to search in"},
        "query": {"type": "string", "description": "Query to search for user (github login name), content, title"},
        "repo_ids": string_list("Array of repository IDs to filter."),
        "pipeline_ids": string_list("Array of pipeline IDs to filter."),
    },
    ["workspace_id", "query", "repo_ids", "pipeline_ids"],
)
async def search_issues_in_repository(args, transport):
    variables = {
        "workspaceId": args.get("workspace_id"),
        "user": args.get("query") or "",
        "repoIds": args.get("repo_ids") or [],
        "pipelineIds": args.get("pipeline_ids") or [],
    }
    return await run_graphql(transport, queries.SEARCH_ISSUES, variables)


@tool(
    "zenhub_get_workspace_issues",
    "Get all issues in a workspace (paginated)",
    {
        "workspace_id": {"type": "string", "description": "Workspace ID"},
        "after": {"type": "string", "description": "Cursor for pagination"},
    },
    ["workspace_id"],
)
async def get_workspace_issues(args, transport):
    variables = {"workspaceId": args.get("workspace_id"), **compact(after=args.get("after"))}
    return await run_graphql(transport, queries.WORKSPACE_ISSUES, variables)


@tool(
    "zenhub_get_viewer",
    "Get current authenticated user's ZenHub and GitHub profile information",
)
async def get_viewer(args, transport):
    return await run_graphql(transport, queries.VIEWER)


@tool(
    "zenhub_get_issue_by_info",
    "Lookup an issue by repository and issue number",
    {
        "repository_gh_id": {"type": "number", "description": "GitHub repository ID"},
        "issue_number": {"type": "number", "description": "Issue number"},
    },
    ["repository_gh_id", "issue_number"],
)
async def get_issue_by_info(args, transport):
    variables = {
        "repositoryGhId": args.get("repository_gh_id"),
        "issueNumber": args.get("issue_number"),
    }
    return await run_graphql(transport, queries.ISSUE_BY_INFO, variables)


@tool(
    "zenhub_get_repositories",
    "Lookup repositories by their GitHub IDs",
    {
        "repository_gh_ids": {
            "type": "array",
            "items": {"type": "number"},
            "description": "Array of GitHub repository IDs",
        },
    },
    ["repository_gh_ids"],
)
async def get_repositories(args, transport):
    return await run_graphql(
        transport, queries.GET_REPOSITORIES_BY_GH_IDS, {"ghIds": args.get("repository_gh_ids")}
    )


QUERY_TOOLS = (
    query_potentially_dangerous,
    search_issues,
    search_issues_in_repository,
    get_workspace_issues,
    get_viewer,
    get_issue_by_info,
    get_repositories,
)
