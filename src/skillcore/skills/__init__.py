"""
Skill resolution and discovery.

Skills are directories holding a SKILL.md document. They live under
three roots (in priority order):
1. Project skills     - <project>/.opencode/skills/
2. Personal skills    - <config dir>/skills/
3. Superpowers skills - the superpowers skill library

Lookups pick the highest-priority match; enumeration lists every skill
in every root, tagged with where it was found.
"""

from skillcore.skills.discovery import find_skills_in_dir
from skillcore.skills.frontmatter import (
    SkillFrontmatter,
    extract_frontmatter,
    parse_frontmatter,
    strip_frontmatter,
)
from skillcore.skills.registry import SkillResolver
from skillcore.skills.resolver import resolve_skill_path, skill_file_for
from skillcore.skills.roots import SkillRoot, SkillRoots
from skillcore.skills.skill import (
    LoadedSkill,
    Resolution,
    ResolvedSkill,
    SkillDescriptor,
    SkillNotFound,
    SourceType,
)

__all__ = [
    # Records
    "LoadedSkill",
    "Resolution",
    "ResolvedSkill",
    "SkillDescriptor",
    "SkillNotFound",
    "SourceType",
    # Roots
    "SkillRoot",
    "SkillRoots",
    # Parsing
    "SkillFrontmatter",
    "extract_frontmatter",
    "parse_frontmatter",
    "strip_frontmatter",
    # Lookup and enumeration
    "find_skills_in_dir",
    "resolve_skill_path",
    "skill_file_for",
    "SkillResolver",
]
