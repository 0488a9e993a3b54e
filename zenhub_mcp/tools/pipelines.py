"""Pipeline Management tools."""

from .. import queries
from .base import compact, run_graphql, tool


_PIPELINE_ID = {"type": "string", "description": "Pipeline ID"}


@tool(
    "zenhub_create_pipeline",
    "Create a new pipeline in a workspace",
    {
        "name": {"type": "string", "description": "Pipeline name"},
        "workspace_id": {"type": "string", "description": "Workspace ID"},
        "description": {"type": "string", "description": "Pipeline description"},
    },
    ["name", "workspace_id"],
)
async def create_pipeline(args, transport):
    variables = {
        "input": {
            "name": args.get("name"),
            "workspaceId": args.get("workspace_id"),
            "description": args.get("description") or "",
        },
    }
    return await run_graphql(transport, queries.CREATE_PIPELINE, variables)


@tool(
    "zenhub_update_pipeline",
    "Update a pipeline",
    {
        "pipeline_id": _PIPELINE_ID,
        "name": {"type": "string", "description": "Pipeline name"},
        "description": {"type": "string", "description": "Pipeline description"},
    },
    ["pipeline_id"],
)
async def update_pipeline(args, transport):
    variables = {
        "input": {
            "pipelineId": args.get("pipeline_id"),
            **compact(name=args.get("name"), description=args.get("description")),
        },
    }
    return await run_graphql(transport, queries.UPDATE_PIPELINE, variables)


@tool(
    "zenhub_delete_pipeline",
    "Delete a pipeline, moving its issues to another pipeline",
    {
        "pipeline_id": _PIPELINE_ID,
        "destination_pipeline_id": {"type": "string", "description": "Pipeline ID to move issues to"},
    },
    ["pipeline_id", "destination_pipeline_id"],
)
async def delete_pipeline(args, transport):
    variables = {
        "input": {
            "pipelineId": args.get("pipeline_id"),
            "destinationPipelineId": args.get("destination_pipeline_id"),
        },
    }
    return await run_graphql(transport, queries.DELETE_PIPELINE, variables)


@tool(
    "zenhub_get_workspace_pipelines",
    "Get all pipelines in a workspace",
    {"workspace_id": {"type": "string", "description": "Workspace ID"}},
    ["workspace_id"],
)
async def get_workspace_pipelines(args, transport):
    return await run_graphql(
        transport, queries.GET_WORKSPACE_PIPELINES, {"workspaceId": args.get("workspace_id")}
    )


PIPELINE_TOOLS = (
    create_pipeline,
    update_pipeline,
    delete_pipeline,
    get_workspace_pipelines,
)
