"""
Skill enumeration within a single root.

Walks a root directory depth-first, in sorted order, and reports every
directory that holds a SKILL.md. A skill directory is a leaf: its
subdirectories are not searched. Directories more than max_depth levels
below the root (a direct child is level 1) are never visited.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib

import skillcore.constants as constants
import skillcore.skills.frontmatter as frontmatter
import skillcore.skills.skill as skill_module

_logger = _logging.getLogger(__name__)


def _list_subdirectories(directory: _pathlib.Path) -> list[_pathlib.Path]:
    """List child directories in sorted order; unreadable directories are empty."""
    try:
        return sorted(child for child in directory.iterdir() if child.is_dir())
    except OSError as e:
        _logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return []


def _has_skill_file(directory: _pathlib.Path) -> bool:
    try:
        return (directory / constants.SKILL_FILENAME).is_file()
    except OSError as e:
        _logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return False


def find_skills_in_dir(
    root: _pathlib.Path,
    source_type: skill_module.SourceType,
    max_depth: int = constants.DEFAULT_MAX_DEPTH,
) -> list[skill_module.SkillDescriptor]:
    """
    Find all skills under a root directory.

    A missing or unreadable root yields an empty list. A skill whose
    header cannot be read is still reported, with name and description
    unset.

    Args:
        root: Root directory to search.
        source_type: Source type to tag every descriptor with.
        max_depth: Deepest directory level (below root) to consider.

    Returns:
        Descriptors in depth-first, name-sorted order.
    """
    skills: list[skill_module.SkillDescriptor] = []

    if not root.is_dir():
        _logger.debug("Skills root does not exist, skipping: %s", root)
        return skills

    def walk(directory: _pathlib.Path, depth: int) -> None:
        if depth > max_depth:
            return
        for child in _list_subdirectories(directory):
            if _has_skill_file(child):
                fm = frontmatter.extract_frontmatter(child / constants.SKILL_FILENAME)
                skills.append(
                    skill_module.SkillDescriptor(
                        path=child,
                        source_type=source_type,
                        name=fm.name,
                        description=fm.description,
                    )
                )
                continue
            walk(child, depth + 1)

    walk(root, 1)
    return skills
