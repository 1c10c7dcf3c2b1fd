"""
Skill resolution across the three roots.

Applies the priority policy project > personal > superpowers, with
namespace prefixes able to pin or skip roots for a single lookup:

- "project:name"     - project root only, no fallback
- "superpowers:name" - personal then superpowers; project is skipped
- "name"             - project, then personal, then superpowers

Nothing is cached: every call re-reads the filesystem.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import skillcore.constants as constants
import skillcore.skills.discovery as discovery
import skillcore.skills.frontmatter as frontmatter
import skillcore.skills.resolver as resolver
import skillcore.skills.roots as roots_module
import skillcore.skills.skill as skill_module

_logger = _logging.getLogger(__name__)


class SkillResolver:
    """
    Resolves skill identifiers and enumerates skills.

    Holds only the immutable root configuration, so one instance can be
    shared freely between callers.
    """

    def __init__(
        self,
        roots: roots_module.SkillRoots,
        *,
        max_depth: int = constants.DEFAULT_MAX_DEPTH,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            roots: The project, personal and superpowers roots.
            max_depth: Deepest directory level searched by resolve_all().
        """
        self._roots = roots
        self._max_depth = max_depth

    @property
    def roots(self) -> roots_module.SkillRoots:
        return self._roots

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def resolve_one(self, identifier: str) -> skill_module.Resolution:
        """
        Resolve a (possibly namespaced) identifier to a single skill.

        Args:
            identifier: e.g. "brainstorming", "project:deploy",
                "superpowers:brainstorming".

        Returns:
            ResolvedSkill, or SkillNotFound carrying the original identifier.
        """
        identifier = identifier or ""

        if identifier.startswith(constants.PROJECT_PREFIX):
            name = identifier.removeprefix(constants.PROJECT_PREFIX)
            search = (self._roots.project_root,)
        elif identifier.startswith(constants.SUPERPOWERS_PREFIX):
            name = identifier.removeprefix(constants.SUPERPOWERS_PREFIX)
            search = self._roots.library_roots()
        else:
            name = identifier
            search = self._roots.in_priority_order()

        result = resolver.resolve_skill_path(name, search)
        if not result.found:
            _logger.debug("Skill %r not found in %d root(s)", identifier, len(search))
            return skill_module.SkillNotFound(
                identifier=identifier,
                searched=tuple(root.path for root in search),
            )
        return result

    def resolve_all(self) -> list[skill_module.SkillDescriptor]:
        """
        Enumerate skills in every root, in priority order.

        Names are not de-duplicated: a skill present in several roots is
        listed once per root, highest priority first.

        Returns:
            Project descriptors, then personal, then superpowers.
        """
        skills: list[skill_module.SkillDescriptor] = []
        for root in self._roots.in_priority_order():
            skills.extend(
                discovery.find_skills_in_dir(root.path, root.source_type, self._max_depth)
            )
        return skills

    def iter_unique(self) -> _typing.Iterator[skill_module.SkillDescriptor]:
        """
        Enumerate skills, keeping only the first occurrence of each name.

        Names are compared by display_name (header name, else directory
        name), and earlier roots win. This is a listing filter, not the
        lookup rule: resolve_one() matches directory identifiers, so a
        project skill whose header name is "bar" hides a personal "bar/"
        here while resolve_one("bar") still returns the personal one.
        """
        seen: set[str] = set()
        for descriptor in self.resolve_all():
            if descriptor.display_name in seen:
                continue
            seen.add(descriptor.display_name)
            yield descriptor

    def load_skill(self, identifier: str) -> skill_module.LoadedSkill | None:
        """
        Resolve a skill and read its document.

        Args:
            identifier: Skill identifier, optionally namespaced.

        Returns:
            LoadedSkill with header fields and body, or None if not found.

        Raises:
            OSError: If the resolved document cannot be read.
            UnicodeDecodeError: If the document is not valid UTF-8.
        """
        resolved = self.resolve_one(identifier)
        if not isinstance(resolved, skill_module.ResolvedSkill):
            return None

        content = resolved.skill_file.read_text(encoding="utf-8")
        fm = frontmatter.parse_frontmatter(content)
        return skill_module.LoadedSkill(
            resolved=resolved,
            body=frontmatter.strip_frontmatter(content),
            name=fm.name,
            description=fm.description,
        )
