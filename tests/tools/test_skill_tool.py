"""
Tests for the use_skill and find_skills tools.

use_skill resolves one skill and returns its banner and body;
find_skills lists every skill in priority order.
"""

from __future__ import annotations

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import skillcore.skills as skills
import skillcore.tools.skill as skill_tool

MakeSkill = _typing.Callable[..., _pathlib.Path]


class TestUseSkillToolBasics:
    """Basic tool property tests."""

    def test_tool_name(self, resolver: skills.SkillResolver) -> None:
        assert skill_tool.UseSkillTool(resolver).name == "use_skill"

    def test_requires_no_permission(self, resolver: skills.SkillResolver) -> None:
        assert skill_tool.UseSkillTool(resolver).read_only is True

    def test_schema_requires_skill_name(self, resolver: skills.SkillResolver) -> None:
        schema = skill_tool.UseSkillTool(resolver).input_schema

        assert schema["type"] == "object"
        assert schema["properties"]["skill_name"]["type"] == "string"
        assert schema["required"] == ["skill_name"]


class TestUseSkillToolExecute:
    """Tests for loading a skill."""

    @_pytest.mark.asyncio
    async def test_returns_banner_and_body(
        self,
        resolver: skills.SkillResolver,
        skill_roots: skills.SkillRoots,
        make_skill: MakeSkill,
    ) -> None:
        make_skill(
            skill_roots.superpowers / "brainstorming",
            name="brainstorming",
            description="Turn ideas into designs",
            body="Ask one question at a time.\n",
        )
        tool = skill_tool.UseSkillTool(resolver)

        result = await tool.execute({"skill_name": "superpowers:brainstorming"})

        assert result.success is True
        directory = (skill_roots.superpowers / "brainstorming").absolute()
        assert result.output == (
            "# brainstorming\n"
            "# Turn ideas into designs\n"
            f"# Supporting tools and docs are in {directory}\n"
            "# ============================================\n"
            "\n"
            "Ask one question at a time.\n"
        )
        assert result.messages == ["Loading skill: brainstorming"]

    @_pytest.mark.asyncio
    async def test_header_falls_back_to_requested_name(
        self,
        resolver: skills.SkillResolver,
        skill_roots: skills.SkillRoots,
        make_skill: MakeSkill,
    ) -> None:
        make_skill(skill_roots.project / "deploy", body="Ship it.\n")
        tool = skill_tool.UseSkillTool(resolver)

        result = await tool.execute({"skill_name": "project:deploy"})

        assert result.success is True
        assert result.output.startswith("# deploy\n# \n")
        assert "---" not in result.output.split("\n\n", 1)[1]

    @_pytest.mark.asyncio
    async def test_project_skill_wins_without_prefix(
        self,
        resolver: skills.SkillResolver,
        skill_roots: skills.SkillRoots,
        make_skill: MakeSkill,
    ) -> None:
        make_skill(skill_roots.project / "foo", body="project version\n")
        make_skill(skill_roots.superpowers / "foo", body="superpowers version\n")
        tool = skill_tool.UseSkillTool(resolver)

        result = await tool.execute({"skill_name": "foo"})

        assert result.success is True
        assert "project version" in result.output
        assert "superpowers version" not in result.output

    @_pytest.mark.asyncio
    async def test_not_found(self, resolver: skills.SkillResolver) -> None:
        tool = skill_tool.UseSkillTool(resolver)

        result = await tool.execute({"skill_name": "bar"})

        assert result.success is False
        assert result.error == (
            'Error: Skill "bar" not found.\n\nRun find_skills to see available skills.'
        )

    @_pytest.mark.asyncio
    async def test_overlong_name_is_not_found(self, resolver: skills.SkillResolver) -> None:
        tool = skill_tool.UseSkillTool(resolver)
        skill_name = "x" * 300

        result = await tool.execute({"skill_name": skill_name})

        assert result.success is False
        assert result.error is not None
        assert result.error.startswith(f'Error: Skill "{skill_name}" not found.')

    @_pytest.mark.asyncio
    @_pytest.mark.parametrize("tool_input", [{}, {"skill_name": ""}, {"skill_name": "  "}])
    async def test_missing_skill_name(
        self,
        resolver: skills.SkillResolver,
        tool_input: dict[str, _typing.Any],
    ) -> None:
        tool = skill_tool.UseSkillTool(resolver)

        result = await tool.execute(tool_input)

        assert result.success is False
        assert result.error == "No skill name provided"


class TestFindSkillsTool:
    """Tests for listing skills."""

    def test_schema_takes_no_arguments(self, resolver: skills.SkillResolver) -> None:
        schema = skill_tool.FindSkillsTool(resolver).input_schema
        assert schema["properties"] == {}
        assert schema["required"] == []

    @_pytest.mark.asyncio
    async def test_lists_with_namespaces(
        self,
        resolver: skills.SkillResolver,
        skill_roots: skills.SkillRoots,
        make_skill: MakeSkill,
    ) -> None:
        make_skill(skill_roots.project / "deploy", name="deploy", description="Ship it")
        make_skill(skill_roots.personal / "notes")
        make_skill(skill_roots.superpowers / "tdd", name="test-driven-development")
        tool = skill_tool.FindSkillsTool(resolver)

        result = await tool.execute({})

        assert result.success is True
        assert result.output == (
            "Available skills:\n"
            "\n"
            "project:deploy\n"
            "  Ship it\n"
            f"  Directory: {skill_roots.project / 'deploy'}\n"
            "\n"
            "notes\n"
            f"  Directory: {skill_roots.personal / 'notes'}\n"
            "\n"
            "superpowers:test-driven-development\n"
            f"  Directory: {skill_roots.superpowers / 'tdd'}\n"
        )

    @_pytest.mark.asyncio
    async def test_shadowed_skills_are_listed(
        self,
        resolver: skills.SkillResolver,
        skill_roots: skills.SkillRoots,
        make_skill: MakeSkill,
    ) -> None:
        make_skill(skill_roots.project / "foo")
        make_skill(skill_roots.superpowers / "foo")
        tool = skill_tool.FindSkillsTool(resolver)

        result = await tool.execute({})

        assert "project:foo" in result.output
        assert "superpowers:foo" in result.output
        assert result.output.index("project:foo") < result.output.index("superpowers:foo")

    @_pytest.mark.asyncio
    async def test_no_skills_message(
        self,
        resolver: skills.SkillResolver,
        skill_roots: skills.SkillRoots,
    ) -> None:
        tool = skill_tool.FindSkillsTool(resolver)

        result = await tool.execute({})

        assert result.success is True
        assert result.output == (
            f"No skills found. Install superpowers skills to {skill_roots.superpowers}/ "
            f"or add personal skills to {skill_roots.personal}/"
        )
