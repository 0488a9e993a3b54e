"""
Tool Registry

Flattens the tool categories into one ordered, name-addressable list.
Built once at startup and never modified afterwards.
"""

from typing import Iterable, Optional

from .errors import DuplicateToolError
from .tools.base import ToolCategory, ToolDefinition


def register(categories: Iterable[ToolCategory]) -> list[ToolDefinition]:
    """Flatten categories in order: category order first, then tool order."""
    return [definition for category in categories for definition in category.tools]


class ToolRegistry:
    """
    Immutable collection of every tool, with O(1) lookup by name.

    Construction fails with DuplicateToolError if two tools share a name,
    so lookups are never ambiguous.
    """

    def __init__(self, categories: Iterable[ToolCategory]):
        self._categories = tuple(categories)
        self._tools = tuple(register(self._categories))
        self._by_name: dict[str, ToolDefinition] = {}
        for definition in self._tools:
            if definition.name in self._by_name:
                raise DuplicateToolError(definition.name)
            self._by_name[definition.name] = definition

    @property
    def tools(self) -> tuple[ToolDefinition, ...]:
        return self._tools

    @property
    def categories(self) -> tuple[ToolCategory, ...]:
        return self._categories

    def lookup(self, name: str) -> Optional[ToolDefinition]:
        """Exact, case-sensitive lookup. Returns None when not registered."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [definition.name for definition in self._tools]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self):
        return iter(self._tools)


def build_registry() -> ToolRegistry:
    """The registry of every ZenHub tool, in category order."""
    from .tools import TOOL_CATEGORIES

    return ToolRegistry(TOOL_CATEGORIES)
