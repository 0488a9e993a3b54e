"""
ZenHub MCP Response Schema

Every tool call returns the same envelope: one text content item. Success
and failure look identical structurally - failures carry an "Error: ..."
text, successes carry pretty-printed JSON. The calling agent reads the
text, it doesn't branch on status codes.
"""

import json
from typing import Any

from mcp.types import TextContent
from pydantic import BaseModel, Field


ERROR_PREFIX = "Error: "


class ToolResponse(BaseModel):
    """The envelope returned by every tool handler and by the dispatcher."""

    content: list[TextContent] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Text of the (single) content item."""
        return self.content[0].text if self.content else ""

    @property
    def is_error(self) -> bool:
        return self.text.startswith(ERROR_PREFIX)

    def payload(self) -> Any:
        """Parse the text back into JSON. Only meaningful for successes."""
        return json.loads(self.text)


def text_response(text: str) -> ToolResponse:
    return ToolResponse(content=[TextContent(type="text", text=text)])


def json_response(payload: Any) -> ToolResponse:
    """Wrap a JSON-serializable result, pretty-printed like the upstream API docs show it."""
    return text_response(json.dumps(payload, indent=2, default=str))


def error_response(message: str) -> ToolResponse:
    return text_response(f"{ERROR_PREFIX}{message}")
