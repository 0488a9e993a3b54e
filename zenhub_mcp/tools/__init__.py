"""
ZenHub MCP tool catalogue

Each module contributes one category. Category order here is the order
tools appear in tools/list.
"""

from .base import ToolCategory, ToolDefinition, tool
from .dependencies import DEPENDENCY_TOOLS
from .epics import EPIC_TOOLS
from .issues import ISSUE_TOOLS
from .labels import LABEL_TOOLS
from .milestones import MILESTONE_TOOLS
from .pipelines import PIPELINE_TOOLS
from .queries import QUERY_TOOLS
from .repositories import REPOSITORY_TOOLS
from .sprints import SPRINT_TOOLS
from .users import USER_TOOLS
from .workspaces import WORKSPACE_TOOLS


TOOL_CATEGORIES = (
    ToolCategory("Issue Management", ISSUE_TOOLS),
    ToolCategory("Epic Management", EPIC_TOOLS),
    ToolCategory("Workspace Management", WORKSPACE_TOOLS),
    ToolCategory("Repository Management", REPOSITORY_TOOLS),
    ToolCategory("Sprint Management", SPRINT_TOOLS),
    ToolCategory("Pipeline Management", PIPELINE_TOOLS),
    ToolCategory("Milestone Management", MILESTONE_TOOLS),
    ToolCategory("Dependency Management", DEPENDENCY_TOOLS),
    ToolCategory("Label Management", LABEL_TOOLS),
    ToolCategory("User Management", USER_TOOLS),
    ToolCategory("Query Tools", QUERY_TOOLS),
)


__all__ = [
    "TOOL_CATEGORIES",
    "ToolCategory",
    "ToolDefinition",
    "tool",
]
