"""
Registry of the tools skillcore exposes.

The registry is the static table of capabilities a host registers:
each entry pairs a name and input schema with an async handler.
"""

from __future__ import annotations

import typing as _typing

import skillcore.tools.base as base
import skillcore.tools.skill as skill_tools

if _typing.TYPE_CHECKING:
    import skillcore.skills as skills


class ToolRegistry:
    """
    Name-keyed table of tools.

    Iteration and the definition exports are ordered by tool name, so the
    output is stable across runs.
    """

    def __init__(self) -> None:
        self._tools: dict[str, base.Tool] = {}

    def register(self, tool: base.Tool) -> None:
        """Add a tool. Raises ValueError if its name is taken."""
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> base.Tool | None:
        return self._tools.get(name)

    def list_tools(self) -> list[base.Tool]:
        """Registered tools ordered by name."""
        return sorted(self._tools.values(), key=lambda t: t.name)

    def list_names(self) -> list[str]:
        return sorted(self._tools)

    async def execute(
        self,
        name: str,
        input: dict[str, _typing.Any] | None = None,
    ) -> base.ToolResult:
        """
        Run a registered tool by name.

        An unknown name yields a failed result listing the known tools.
        """
        tool = self._tools.get(name)
        if tool is None:
            available = ", ".join(self.list_names())
            return base.ToolResult.failure(f"Tool '{name}' not found. Available: {available}")
        return await tool.execute(input or {})

    def to_api_format(self) -> list[dict[str, _typing.Any]]:
        """All tools as Anthropic tool definitions."""
        return [tool.to_api_format() for tool in self.list_tools()]

    def to_openai_format(self) -> list[dict[str, _typing.Any]]:
        """All tools as OpenAI function definitions."""
        return [tool.to_openai_format() for tool in self.list_tools()]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __iter__(self) -> _typing.Iterator[base.Tool]:
        return iter(self.list_tools())


def create_skill_tools(resolver: skills.SkillResolver) -> ToolRegistry:
    """
    Build the registry of skill tools.

    Args:
        resolver: Resolver over the configured skill roots.

    Returns:
        Registry holding use_skill and find_skills.
    """
    registry = ToolRegistry()
    registry.register(skill_tools.UseSkillTool(resolver))
    registry.register(skill_tools.FindSkillsTool(resolver))
    return registry
