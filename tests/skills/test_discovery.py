"""
Tests for skill enumeration within a root.

Tests verify that:
- Skills are found up to the max depth and never below it
- A skill directory is a leaf (nested skills inside it are not listed)
- Missing roots and broken documents do not abort enumeration
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import skillcore.skills as skills

MakeSkill = _typing.Callable[..., _pathlib.Path]

PROJECT = skills.SourceType.PROJECT


def _names(found: list[skills.SkillDescriptor]) -> list[str]:
    return [d.path.name for d in found]


class TestFindSkillsInDir:
    """Tests for find_skills_in_dir."""

    def test_finds_direct_children(self, tmp_path: _pathlib.Path, make_skill: MakeSkill) -> None:
        make_skill(tmp_path / "alpha", name="alpha", description="First")
        make_skill(tmp_path / "beta")

        found = skills.find_skills_in_dir(tmp_path, PROJECT)

        assert _names(found) == ["alpha", "beta"]
        assert found[0].name == "alpha"
        assert found[0].description == "First"
        assert found[0].path == tmp_path / "alpha"
        assert all(d.source_type is PROJECT for d in found)

    def test_document_without_header_still_listed(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        make_skill(tmp_path / "plain", body="No header at all.\n")

        found = skills.find_skills_in_dir(tmp_path, PROJECT)

        assert len(found) == 1
        assert found[0].name is None
        assert found[0].description is None
        assert found[0].display_name == "plain"

    def test_malformed_header_does_not_stop_enumeration(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        (tmp_path / "broken").mkdir()
        (tmp_path / "broken" / "SKILL.md").write_bytes(b"---\nname: \xff\n")
        make_skill(tmp_path / "good", name="good")

        found = skills.find_skills_in_dir(tmp_path, PROJECT)

        assert _names(found) == ["broken", "good"]
        assert found[0].name is None
        assert found[1].name == "good"

    def test_finds_skills_up_to_max_depth(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        make_skill(tmp_path / "one")
        make_skill(tmp_path / "a" / "two")
        make_skill(tmp_path / "a" / "b" / "three")

        found = skills.find_skills_in_dir(tmp_path, PROJECT, max_depth=3)

        assert sorted(_names(found)) == ["one", "three", "two"]

    def test_never_lists_below_max_depth(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        make_skill(tmp_path / "a" / "b" / "c" / "four")
        make_skill(tmp_path / "a" / "b" / "c" / "d" / "five")

        found = skills.find_skills_in_dir(tmp_path, PROJECT, max_depth=3)

        assert found == []

    @_pytest.mark.parametrize("max_depth", [1, 2, 3, 4])
    def test_depth_limit_is_relative_to_root(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill, max_depth: int
    ) -> None:
        # One skill at each level 1..5
        parent = tmp_path
        for level in range(1, 6):
            make_skill(parent / f"skill{level}")
            parent = parent / f"dir{level}"

        found = skills.find_skills_in_dir(tmp_path, PROJECT, max_depth=max_depth)

        assert sorted(_names(found)) == [f"skill{n}" for n in range(1, max_depth + 1)]

    def test_skill_directory_is_a_leaf(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        make_skill(tmp_path / "outer")
        make_skill(tmp_path / "outer" / "examples" / "inner")

        found = skills.find_skills_in_dir(tmp_path, PROJECT)

        assert _names(found) == ["outer"]

    def test_files_at_root_are_ignored(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        (tmp_path / "SKILL.md").write_text("---\nname: root\n---\n")
        (tmp_path / "README.md").write_text("hi")
        make_skill(tmp_path / "real")

        found = skills.find_skills_in_dir(tmp_path, PROJECT)

        assert _names(found) == ["real"]

    def test_missing_root_returns_empty(self, tmp_path: _pathlib.Path) -> None:
        assert skills.find_skills_in_dir(tmp_path / "missing", PROJECT) == []

    def test_root_that_is_a_file_returns_empty(self, tmp_path: _pathlib.Path) -> None:
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("x")

        assert skills.find_skills_in_dir(not_a_dir, PROJECT) == []

    def test_empty_root_returns_empty(self, tmp_path: _pathlib.Path) -> None:
        assert skills.find_skills_in_dir(tmp_path, PROJECT) == []

    def test_result_is_deterministic(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        for name in ["zeta", "alpha", "mid", "beta"]:
            make_skill(tmp_path / "group" / name)

        first = skills.find_skills_in_dir(tmp_path, PROJECT)
        second = skills.find_skills_in_dir(tmp_path, PROJECT)

        assert first == second
        assert _names(first) == ["alpha", "beta", "mid", "zeta"]

    def test_reflects_filesystem_changes_between_calls(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        make_skill(tmp_path / "first")
        assert _names(skills.find_skills_in_dir(tmp_path, PROJECT)) == ["first"]

        make_skill(tmp_path / "second")
        assert _names(skills.find_skills_in_dir(tmp_path, PROJECT)) == ["first", "second"]

    @_pytest.mark.skipif(
        not hasattr(_os, "geteuid") or _os.geteuid() == 0,
        reason="permission bits are not enforced for root",
    )
    def test_unreadable_subdirectory_is_skipped(
        self, tmp_path: _pathlib.Path, make_skill: MakeSkill
    ) -> None:
        make_skill(tmp_path / "locked" / "hidden-skill")
        make_skill(tmp_path / "open")
        locked = tmp_path / "locked"
        locked.chmod(0o000)
        try:
            found = skills.find_skills_in_dir(tmp_path, PROJECT)
        finally:
            locked.chmod(0o755)

        assert _names(found) == ["open"]
