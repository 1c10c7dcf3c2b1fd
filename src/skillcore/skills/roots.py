"""
Skill root configuration.

Roots are resolved once (see skillcore.config.Settings.skill_roots) into
an immutable SkillRoots value that is passed into every lookup. Nothing
here reads the environment.

Priority order (highest first):
1. project     - <project>/.opencode/skills
2. personal    - <config dir>/skills
3. superpowers - the bundled superpowers skill library
"""

from __future__ import annotations

import dataclasses as _dataclasses
import pathlib as _pathlib

import skillcore.skills.skill as skill_module


@_dataclasses.dataclass(frozen=True)
class SkillRoot:
    """One skill root directory bound to its source type."""

    path: _pathlib.Path
    source_type: skill_module.SourceType

    def __str__(self) -> str:
        return f"{self.source_type.value}:{self.path}"


@_dataclasses.dataclass(frozen=True)
class SkillRoots:
    """The three skill roots of a process."""

    project: _pathlib.Path
    personal: _pathlib.Path
    superpowers: _pathlib.Path

    @property
    def project_root(self) -> SkillRoot:
        return SkillRoot(self.project, skill_module.SourceType.PROJECT)

    @property
    def personal_root(self) -> SkillRoot:
        return SkillRoot(self.personal, skill_module.SourceType.PERSONAL)

    @property
    def superpowers_root(self) -> SkillRoot:
        return SkillRoot(self.superpowers, skill_module.SourceType.SUPERPOWERS)

    def in_priority_order(self) -> tuple[SkillRoot, ...]:
        """All roots, highest priority first."""
        return (self.project_root, self.personal_root, self.superpowers_root)

    def library_roots(self) -> tuple[SkillRoot, ...]:
        """Personal then superpowers; the roots searched outside a project."""
        return (self.personal_root, self.superpowers_root)

    def get(self, source_type: skill_module.SourceType) -> SkillRoot:
        """Get the root bound to a source type."""
        for root in self.in_priority_order():
            if root.source_type is source_type:
                return root
        raise KeyError(source_type)
