"""
Tool definitions - the contract every ZenHub tool satisfies.

A tool is plain data plus one async function: name, description, input
schema and a handler taking (args, transport) and returning a
ToolResponse. No base class; each tool module builds a list of
ToolDefinition values.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Protocol

from mcp.types import Tool

from ..schema import ToolResponse, json_response


class Transport(Protocol):
    """What handlers need from the GraphQL client."""

    async def execute(self, document: str, variables: dict | None = None) -> dict: ...


Handler = Callable[[dict, Transport], Awaitable[ToolResponse]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: dict
    handler: Handler = field(repr=False, compare=False)

    def to_mcp_tool(self) -> Tool:
        """Project to the wire shape used for tools/list (no handler)."""
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


@dataclass(frozen=True)
class ToolCategory:
    """A named group of tools. Only affects listing order."""
    name: str
    tools: tuple[ToolDefinition, ...]


def tool(name: str, description: str, properties: dict | None = None, required: list[str] | None = None):
    """
    Decorator turning an async handler into a ToolDefinition.

        @tool("zenhub_get_viewer", "Get the current user", {})
        async def get_viewer(args, transport): ...
    """
    schema = {
        "type": "object",
        "properties": properties or {},
        "required": required or [],
    }

    def decorator(handler: Handler) -> ToolDefinition:
        return ToolDefinition(name=name, description=description, input_schema=schema, handler=handler)

    return decorator


def compact(**fields: Any) -> dict:
    """Keep only the truthy values - optional inputs are omitted, not sent as null."""
    return {key: value for key, value in fields.items() if value}


def string_list(description: str) -> dict:
    return {"type": "array", "items": {"type": "string"}, "description": description}


async def run_graphql(transport: Transport, document: str, variables: dict | None = None) -> ToolResponse:
    """Execute one operation and return its data as the envelope."""
    result = await transport.execute(document, variables or {})
    return json_response(result)
