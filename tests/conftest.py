"""
Shared pytest fixtures for skillcore tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

import skillcore.skills as skills

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "OPENCODE_CONFIG_DIR",
    "SKILLCORE_CONFIG_DIR",
    "SKILLCORE_PROJECT_DIR",
    "SKILLCORE_SUPERPOWERS_DIR",
    "SKILLCORE_MAX_DEPTH",
    "SKILLCORE_LOG_LEVEL",
    "SKILLCORE_ENV_FILE",
]


def write_skill(
    skill_dir: _pathlib.Path,
    name: str | None = None,
    description: str | None = None,
    body: str = "# Skill\n\nInstructions here.\n",
) -> _pathlib.Path:
    """
    Create a skill directory with a SKILL.md.

    A header block is written only when name or description is given.

    Returns:
        Path to the SKILL.md file.
    """
    skill_dir.mkdir(parents=True, exist_ok=True)
    header = ""
    if name is not None or description is not None:
        lines = ["---"]
        if name is not None:
            lines.append(f"name: {name}")
        if description is not None:
            lines.append(f"description: {description}")
        lines.append("---")
        header = "\n".join(lines) + "\n"
    skill_file = skill_dir / "SKILL.md"
    skill_file.write_text(header + body, encoding="utf-8")
    return skill_file


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """Return environment dict with skillcore-related keys removed."""
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def isolated_env(clean_env: dict[str, str]):
    """
    Context manager that isolates tests from environment variables.

    Usage:
        def test_something(isolated_env):
            with isolated_env:
                settings = config.Settings.construct_without_dotenv()
    """
    return _mock.patch.dict(_os.environ, clean_env, clear=True)


@_pytest.fixture
def skill_roots(tmp_path: _pathlib.Path) -> skills.SkillRoots:
    """Three empty-but-existing roots: /p (project), /h (personal), /s (superpowers)."""
    roots = skills.SkillRoots(
        project=tmp_path / "p",
        personal=tmp_path / "h",
        superpowers=tmp_path / "s",
    )
    for root in roots.in_priority_order():
        root.path.mkdir()
    return roots


@_pytest.fixture
def resolver(skill_roots: skills.SkillRoots) -> skills.SkillResolver:
    """Resolver over the skill_roots fixture."""
    return skills.SkillResolver(skill_roots)


@_pytest.fixture
def make_skill() -> _typing.Callable[..., _pathlib.Path]:
    """Factory fixture wrapping write_skill."""
    return write_skill
