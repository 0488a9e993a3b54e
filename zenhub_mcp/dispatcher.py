"""
Dispatcher - turns list/call requests into envelopes.

call_tool never raises. Unknown tools, bad arguments and upstream
failures all come back as a normal envelope whose text starts with
"Error: ", so the agent can read the failure and decide what to do.
"""

from typing import Any, Optional

from mcp.types import Tool

from .log import get_logger
from .registry import ToolRegistry
from .schema import ToolResponse, error_response
from .tools.base import Transport


logger = get_logger(__name__)


def describe_error(error: BaseException) -> str:
    """The exception's message, or its type name when it has none."""
    return str(error) or type(error).__name__


class Dispatcher:
    """Routes tool calls to handlers through the shared transport."""

    def __init__(self, registry: ToolRegistry, transport: Transport):
        self.registry = registry
        self.transport = transport

    def list_tools(self) -> list[Tool]:
        """name + description + inputSchema for every tool, in registry order."""
        return [definition.to_mcp_tool() for definition in self.registry.tools]

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]] = None) -> ToolResponse:
        definition = self.registry.lookup(name)
        if definition is None:
            logger.warning("unknown_tool", tool=name)
            return error_response(f"Unknown tool: {name}")

        logger.debug("tool_call", tool=name)
        try:
            response = await definition.handler(arguments or {}, self.transport)
        except Exception as e:
            message = describe_error(e)
            logger.warning("tool_call_failed", tool=name, error=message, error_type=type(e).__name__)
            return error_response(message)

        if not isinstance(response, ToolResponse):
            logger.error("tool_bad_response", tool=name, response_type=type(response).__name__)
            return error_response(f"Tool {name} returned {type(response).__name__}, not a ToolResponse")

        return response
