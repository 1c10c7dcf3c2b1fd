"""
Bootstrap prompt injected at session start and after compaction.

The bootstrap wraps the body of the using-superpowers skill with a
tool mapping and the skill naming rules. The compact form, used after
context compaction, keeps the mapping to two lines.
"""

from __future__ import annotations

import logging as _logging

import skillcore.constants as constants
import skillcore.skills.frontmatter as frontmatter
import skillcore.skills.resolver as resolver
import skillcore.skills.roots as roots_module
import skillcore.skills.skill as skill_module

_logger = _logging.getLogger(__name__)

_COMPACT_TOOL_MAPPING = """\
**Tool Mapping:** TodoWrite->update_plan, Task->@mention, Skill->use_skill

**Skills naming (priority order):** project: > personal > superpowers:"""

_FULL_TOOL_MAPPING = """\
**Tool Mapping for OpenCode:**
When skills reference tools you don't have, substitute OpenCode equivalents:
- `TodoWrite` → `update_plan`
- `Task` tool with subagents → Use OpenCode's subagent system (@mention)
- `Skill` tool → `use_skill` custom tool
- `Read`, `Write`, `Edit`, `Bash` → Your native tools

**Skills naming (priority order):**
- Project skills: `project:skill-name` (in .opencode/skills/)
- Personal skills: `skill-name` (in {personal_dir}/)
- Superpowers skills: `superpowers:skill-name`
- Project skills override personal, which override superpowers when names match"""

_BOOTSTRAP_TEMPLATE = """\
<EXTREMELY_IMPORTANT>
You have superpowers.

**IMPORTANT: The {skill} skill content is included below. It is ALREADY LOADED - \
you are currently following it. Do NOT use the use_skill tool to load "{skill}" - \
that would be redundant. Use use_skill only for OTHER skills.**

{content}

{tool_mapping}
</EXTREMELY_IMPORTANT>"""


def render_tool_mapping(roots: roots_module.SkillRoots, *, compact: bool = False) -> str:
    """Render the tool mapping and naming rules."""
    if compact:
        return _COMPACT_TOOL_MAPPING
    return _FULL_TOOL_MAPPING.format(personal_dir=roots.personal)


def render_bootstrap(
    roots: roots_module.SkillRoots,
    *,
    compact: bool = False,
) -> str | None:
    """
    Build the bootstrap text.

    The using-superpowers skill is looked up in the personal root, then
    the superpowers root.

    Args:
        roots: Configured skill roots.
        compact: Use the short tool mapping (after compaction).

    Returns:
        Bootstrap text, or None if the bootstrap skill is not installed
        or cannot be read.
    """
    resolved = resolver.resolve_skill_path(
        constants.BOOTSTRAP_SKILL,
        roots.library_roots(),
    )
    if not isinstance(resolved, skill_module.ResolvedSkill):
        _logger.debug("Bootstrap skill %s not installed", constants.BOOTSTRAP_SKILL)
        return None

    try:
        raw = resolved.skill_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _logger.warning("Could not read bootstrap skill %s: %s", resolved.skill_file, e)
        return None

    return _BOOTSTRAP_TEMPLATE.format(
        skill=constants.BOOTSTRAP_SKILL,
        content=frontmatter.strip_frontmatter(raw),
        tool_mapping=render_tool_mapping(roots, compact=compact),
    )
