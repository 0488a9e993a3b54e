"""
ZenHub MCP Server

The entry point that exposes ZenHub's GraphQL API to MCP clients over
stdio.

This file is a thin routing layer. Tool lookup, argument handling and
error wrapping live in dispatcher.py; the tools themselves in tools/.
"""

import asyncio
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .config import Settings
from .dispatcher import Dispatcher
from .errors import ConfigurationError
from .log import configure_logging, get_logger
from .registry import build_registry
from .transport import ZenHubClient


logger = get_logger(__name__)

SERVER_NAME = "zenhub-mcp-server"

INSTRUCTIONS = """\
You are a helpful assistant that can help with ZenHub tasks.
You are thoughtful and careful with your actions. You have an understanding of when to break up larger tasks and when not to.
You listen to the user and are not afraid to ask for clarification.
Any material to you is handled with care and respect so that details are not lost and facts are not misrepresented.

Rules/Guidelines:
If assigning issues, use zenhub_get_workspace_users to find the users by listing all users in the workspace.
Use zenhub_get_viewer to get the current user information.
Only use the labels, pipelines, repositories, workspaces and sprints that already exist. Only create new ones if the user asks you to directly.
Never create an issue, epic, or anything else unless confirmed by the user.

User Provided Instructions:
{custom_instructions}

To start any task:
Step 1: use zenhub_get_user_workspaces to get the workspaces you have access to.
Step 2: use zenhub_get_workspace_overview to get an overview of the workspace.
Step 3+: You can now use the tools and thinking to complete the task.
"""


def build_instructions(settings: Settings) -> str:
    return INSTRUCTIONS.format(custom_instructions=settings.custom_instructions)


def build_server(dispatcher: Dispatcher, settings: Settings) -> Server:
    """Create the MCP server and route list/call requests to the dispatcher."""
    server = Server(SERVER_NAME, version=__version__, instructions=build_instructions(settings))

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available ZenHub tools."""
        return dispatcher.list_tools()

    # The dispatcher owns argument handling: a missing or mistyped argument
    # must come back as an "Error: ..." envelope, not an SDK validation error.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        response = await dispatcher.call_tool(name, arguments)
        return response.content

    return server


def main():
    """Main entry point."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"zenhub-mcp: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level, force=True)

    registry = build_registry()
    transport = ZenHubClient(settings)
    dispatcher = Dispatcher(registry, transport)
    server = build_server(dispatcher, settings)

    logger.info(
        "server_starting",
        tools=len(registry),
        graphql_url=settings.graphql_url,
        github_issue_types=settings.has_github_token,
    )

    async def run():
        try:
            async with stdio_server() as (read_stream, write_stream):
                await server.run(read_stream, write_stream, server.create_initialization_options())
        finally:
            # Clean up resources on shutdown
            await transport.aclose()

    asyncio.run(run())


if __name__ == "__main__":
    main()
