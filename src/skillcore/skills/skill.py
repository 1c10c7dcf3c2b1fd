"""
Skill records produced by resolution and enumeration.

Every record carries exactly one SourceType. None of these records
are persisted; they are derived from the filesystem on each call.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import pathlib as _pathlib
import typing as _typing

import skillcore.constants as constants


class SourceType(str, _enum.Enum):
    """Provenance tag for a skill root, in priority order."""

    PROJECT = "project"
    PERSONAL = "personal"
    SUPERPOWERS = "superpowers"

    @property
    def namespace(self) -> str:
        """
        Prefix used when presenting a skill from this source.

        Personal skills are addressed without a prefix.
        """
        if self is SourceType.PROJECT:
            return constants.PROJECT_PREFIX
        if self is SourceType.PERSONAL:
            return ""
        return constants.SUPERPOWERS_PREFIX


@_dataclasses.dataclass(frozen=True)
class ResolvedSkill:
    """
    A skill located by a single lookup.

    Produced by the resolver; consumed by callers that read the document
    and report where it came from.
    """

    found: _typing.ClassVar[bool] = True

    skill_file: _pathlib.Path
    """Absolute path to the skill's SKILL.md."""

    source_type: SourceType
    """Root the skill was found in."""

    skill_path: str
    """Identifier (without namespace prefix) used to find it."""

    @property
    def directory(self) -> _pathlib.Path:
        """Directory holding SKILL.md and any supporting files."""
        return self.skill_file.parent

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "skill_file": str(self.skill_file),
            "source_type": self.source_type.value,
            "skill_path": self.skill_path,
        }


@_dataclasses.dataclass(frozen=True)
class SkillNotFound:
    """
    Explicit "no match" result of a lookup.

    Carries the identifier as given and the roots that were checked,
    so callers can render a useful message.
    """

    found: _typing.ClassVar[bool] = False

    identifier: str
    searched: tuple[_pathlib.Path, ...] = ()


Resolution = ResolvedSkill | SkillNotFound
"""Tagged result of a single lookup."""


@_dataclasses.dataclass(frozen=True)
class SkillDescriptor:
    """
    A skill discovered by enumerating a root.

    name and description come from the document header and are None
    when the header is absent or does not set them.
    """

    path: _pathlib.Path
    """Directory containing the skill's SKILL.md."""

    source_type: SourceType
    """Root the skill was found under."""

    name: str | None = None
    description: str | None = None

    @property
    def skill_file(self) -> _pathlib.Path:
        """Path to the SKILL.md file."""
        return self.path / constants.SKILL_FILENAME

    @property
    def display_name(self) -> str:
        """Header name, falling back to the directory's base name."""
        return self.name or self.path.name

    @property
    def qualified_name(self) -> str:
        """Display name with the source's namespace prefix."""
        return f"{self.source_type.namespace}{self.display_name}"

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "path": str(self.path),
            "source_type": self.source_type.value,
        }


@_dataclasses.dataclass(frozen=True)
class LoadedSkill:
    """A resolved skill together with its parsed document."""

    resolved: ResolvedSkill
    body: str
    """Document text with the header block removed."""

    name: str | None = None
    description: str | None = None

    @property
    def display_name(self) -> str:
        """Header name, falling back to the identifier used for lookup."""
        return self.name or self.resolved.skill_path

    @property
    def body_line_count(self) -> int:
        """Number of lines in the skill body."""
        return len(self.body.splitlines())

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        data = self.resolved.to_dict()
        data.update(
            {
                "name": self.name,
                "description": self.description,
                "directory": str(self.resolved.directory),
                "body_lines": self.body_line_count,
            }
        )
        return data
