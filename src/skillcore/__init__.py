"""
skillcore - skill library resolution for AI coding agents

Finds, parses and lists SKILL.md skills across project, personal and
superpowers roots, and exposes them to an agent host as tools and
session bootstrap text.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("skillcore")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "skillcore Contributors"

from skillcore.config import Settings  # noqa: E402
from skillcore.plugin import SkillsPlugin  # noqa: E402
from skillcore.skills import SkillResolver, SkillRoots  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "Settings",
    "SkillResolver",
    "SkillRoots",
    "SkillsPlugin",
]
