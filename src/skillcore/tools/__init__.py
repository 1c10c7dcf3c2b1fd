"""
Tools exposed to the agent.

Tools are declared as {name, input schema, async handler}; the host is
responsible for registering them with its own tool API.
"""

from skillcore.tools.base import Tool, ToolResult
from skillcore.tools.registry import ToolRegistry, create_skill_tools
from skillcore.tools.skill import FindSkillsTool, UseSkillTool, format_skill_header

__all__ = [
    "Tool",
    "ToolResult",
    "ToolRegistry",
    "create_skill_tools",
    "FindSkillsTool",
    "UseSkillTool",
    "format_skill_header",
]
