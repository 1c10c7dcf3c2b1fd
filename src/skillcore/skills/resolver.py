"""
Direct skill lookup across an ordered list of roots.

For each root, in order, the resolver checks whether
<root>/<identifier>/SKILL.md exists. The first hit wins. Roots are
never searched recursively here; see skillcore.skills.discovery for
enumeration.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import skillcore.constants as constants
import skillcore.skills.roots as roots_module
import skillcore.skills.skill as skill_module

_logger = _logging.getLogger(__name__)


def skill_file_for(root: _pathlib.Path, identifier: str) -> _pathlib.Path | None:
    """
    Build the expected SKILL.md path for an identifier under a root.

    The identifier is an opaque relative path. Empty identifiers,
    absolute paths, and paths that climb out of the root have no
    candidate location.

    Args:
        root: Skill root directory.
        identifier: Skill identifier with any namespace prefix removed.

    Returns:
        Candidate SKILL.md path, or None if the identifier is unusable.
    """
    if not identifier:
        return None
    relative = _pathlib.PurePath(identifier)
    if relative.is_absolute() or ".." in relative.parts or not relative.parts:
        return None
    return root / relative / constants.SKILL_FILENAME


def _is_file(candidate: _pathlib.Path) -> bool:
    try:
        return candidate.is_file()
    except OSError as e:
        _logger.debug("Treating %s as missing: %s", candidate, e)
        return False


def resolve_skill_path(
    identifier: str,
    roots: _typing.Sequence[roots_module.SkillRoot],
) -> skill_module.Resolution:
    """
    Find the first root that contains a skill.

    Args:
        identifier: Skill identifier with any namespace prefix removed.
        roots: Roots to check, highest priority first.

    Returns:
        ResolvedSkill for the first matching root, otherwise SkillNotFound.
    """
    searched = tuple(root.path for root in roots)

    for root in roots:
        candidate = skill_file_for(root.path, identifier)
        if candidate is None:
            break
        if _is_file(candidate):
            _logger.debug(
                "Resolved skill %r in %s root: %s",
                identifier,
                root.source_type.value,
                candidate,
            )
            return skill_module.ResolvedSkill(
                skill_file=candidate.absolute(),
                source_type=root.source_type,
                skill_path=identifier,
            )

    return skill_module.SkillNotFound(identifier=identifier, searched=searched)
