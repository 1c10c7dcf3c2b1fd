"""
Skill tools for LLM access to the skill library.

- use_skill(skill_name)  - load one skill's guidance
- find_skills()          - list every skill in every root

Both are read-only and stateless; every call reflects the current
contents of the skill roots.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import skillcore.tools.base as base

if _typing.TYPE_CHECKING:
    import skillcore.skills as skills

_logger = _logging.getLogger(__name__)

_HEADER_RULE = "# ============================================"


def format_skill_header(loaded: skills.LoadedSkill) -> str:
    """Render the banner placed above a loaded skill's body."""
    return "\n".join(
        [
            f"# {loaded.display_name}",
            f"# {loaded.description or ''}",
            f"# Supporting tools and docs are in {loaded.resolved.directory}",
            _HEADER_RULE,
        ]
    )


class UseSkillTool(base.Tool):
    """
    Load a skill by name.

    Accepts plain names ("brainstorming") or namespaced names
    ("project:deploy", "superpowers:brainstorming").
    """

    def __init__(self, resolver: skills.SkillResolver) -> None:
        """
        Initialize the tool.

        Args:
            resolver: Resolver over the configured skill roots.
        """
        self._resolver = resolver

    @property
    def name(self) -> str:
        return "use_skill"

    @property
    def description(self) -> str:
        return (
            "Load and read a specific skill to guide your work. Skills contain "
            "proven workflows, mandatory processes, and expert techniques."
        )

    @property
    def read_only(self) -> bool:
        return True

    @property
    def input_schema(self) -> dict[str, _typing.Any]:
        return {
            "type": "object",
            "properties": {
                "skill_name": {
                    "type": "string",
                    "description": (
                        'Name of the skill to load (e.g., "superpowers:brainstorming", '
                        '"my-custom-skill", or "project:my-skill")'
                    ),
                },
            },
            "required": ["skill_name"],
        }

    async def execute(
        self,
        input: dict[str, _typing.Any],
    ) -> base.ToolResult:
        """
        Execute the use_skill tool.

        Args:
            input: Tool input with skill_name.

        Returns:
            ToolResult whose output is the skill banner plus body.
        """
        skill_name = self._text_input(input, "skill_name", label="skill name")
        if isinstance(skill_name, base.ToolResult):
            return skill_name

        try:
            loaded = self._resolver.load_skill(skill_name)
        except (OSError, UnicodeDecodeError) as e:
            _logger.warning("Failed to read skill %r: %s", skill_name, e)
            return base.ToolResult.failure(
                f'Error: Skill "{skill_name}" could not be read: {e}'
            )

        if loaded is None:
            return base.ToolResult.failure(
                f'Error: Skill "{skill_name}" not found.\n\n'
                "Run find_skills to see available skills."
            )

        _logger.info(
            "Loaded skill %s from %s root",
            loaded.display_name,
            loaded.resolved.source_type.value,
        )
        return base.ToolResult(
            success=True,
            output=f"{format_skill_header(loaded)}\n\n{loaded.body}",
            messages=[f"Loading skill: {loaded.display_name}"],
        )


class FindSkillsTool(base.Tool):
    """List all skills in the project, personal and superpowers roots."""

    def __init__(self, resolver: skills.SkillResolver) -> None:
        self._resolver = resolver

    @property
    def name(self) -> str:
        return "find_skills"

    @property
    def description(self) -> str:
        return (
            "List all available skills in the project, personal, and "
            "superpowers skill libraries."
        )

    @property
    def read_only(self) -> bool:
        return True

    @property
    def input_schema(self) -> dict[str, _typing.Any]:
        return {
            "type": "object",
            "properties": {},
            "required": [],
        }

    async def execute(
        self,
        input: dict[str, _typing.Any],
    ) -> base.ToolResult:
        """List skills in priority order, without hiding shadowed names."""
        skill_list = self._resolver.resolve_all()
        roots = self._resolver.roots

        if not skill_list:
            return base.ToolResult(
                success=True,
                output=(
                    f"No skills found. Install superpowers skills to {roots.superpowers}/ "
                    f"or add personal skills to {roots.personal}/"
                ),
            )

        lines = ["Available skills:", ""]
        for skill in skill_list:
            lines.append(skill.qualified_name)
            if skill.description:
                lines.append(f"  {skill.description}")
            lines.append(f"  Directory: {skill.path}")
            lines.append("")

        return base.ToolResult(
            success=True,
            output="\n".join(lines),
        )
