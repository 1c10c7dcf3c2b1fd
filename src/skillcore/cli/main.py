"""
Main CLI entry point for skillcore.

Provides the command-line interface using Click: inspect the skill
roots, list and show skills, and print the session bootstrap text.
"""

import asyncio as _asyncio
import json as _json
import logging as _logging
import typing as _typing

import click as _click

import skillcore
import skillcore.config as config
import skillcore.plugin as plugin

# Shared by every command: short -h and a wider help layout
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _run_async(coro: _typing.Coroutine[_typing.Any, _typing.Any, _typing.Any]) -> _typing.Any:
    """Run an async coroutine synchronously."""
    return _asyncio.run(coro)


def _configure_logging(settings: config.Settings, verbose: bool) -> None:
    """Send skillcore log records to stderr at the configured level."""
    level = _logging.DEBUG if verbose else getattr(_logging, settings.log_level)
    _logging.basicConfig(
        level=_logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _logging.getLogger("skillcore").setLevel(level)


def _get_plugin(ctx: _click.Context) -> plugin.SkillsPlugin:
    settings: config.Settings = ctx.obj["settings"]
    return plugin.SkillsPlugin.from_settings(settings)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(skillcore.__version__, "-v", "--version", prog_name="skillcore")
@_click.option(
    "--project-dir",
    type=str,
    default=None,
    help="Project directory (default: current directory)",
)
@_click.option(
    "--config-dir",
    type=str,
    default=None,
    help="Personal config directory (default: $OPENCODE_CONFIG_DIR or ~/.config/opencode)",
)
@_click.option(
    "--superpowers-dir",
    type=str,
    default=None,
    help="Superpowers skill library directory",
)
@_click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    project_dir: str | None,
    config_dir: str | None,
    superpowers_dir: str | None,
    verbose: bool,
) -> None:
    """
    skillcore - skill library resolution for AI coding agents.

    \b
    Examples:
        skillcore roots                          # Show the skill roots
        skillcore skill list                     # List every skill
        skillcore skill show brainstorming       # Resolve and show one skill
        skillcore skill show project:deploy      # Pin lookup to the project
        skillcore bootstrap --compact            # Print post-compaction bootstrap
    """
    # Command-line paths take precedence over SKILLCORE_* variables
    settings = config.Settings()

    if project_dir:
        settings.project_dir = project_dir
    if config_dir:
        settings.config_dir = config_dir
    if superpowers_dir:
        settings.superpowers_dir = superpowers_dir

    _configure_logging(settings, verbose)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command(name="roots")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.pass_context
def roots_command(ctx: _click.Context, json_output: bool) -> None:
    """Show the skill roots in priority order."""
    settings: config.Settings = ctx.obj["settings"]
    skill_roots = settings.skill_roots()

    if json_output:
        data = [
            {
                "source_type": root.source_type.value,
                "path": str(root.path),
                "exists": root.path.is_dir(),
            }
            for root in skill_roots.in_priority_order()
        ]
        _click.echo(_json.dumps(data, indent=2))
        return

    _click.echo("Skill Roots (highest priority first):")
    for root in skill_roots.in_priority_order():
        exists = "✓" if root.path.is_dir() else "(not found)"
        _click.echo(f"  {root.source_type.value:<12} {root.path} {exists}")


# =============================================================================
# Skill Commands
# =============================================================================


@cli.group(name="skill")
def skill_group() -> None:
    """Skill lookup commands."""
    pass


@skill_group.command(name="list")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.option(
    "--unique",
    is_flag=True,
    help="Hide skills shadowed by a same-named skill in a higher-priority root",
)
@_click.pass_context
def skill_list(ctx: _click.Context, json_output: bool, unique: bool) -> None:
    """List skills from every root, highest priority first."""
    resolver = _get_plugin(ctx).resolver

    if unique:
        skill_list = list(resolver.iter_unique())
    else:
        skill_list = resolver.resolve_all()

    if json_output:
        _click.echo(_json.dumps([s.to_dict() for s in skill_list], indent=2))
        return

    if not skill_list:
        _click.echo("No skills found.")
        return

    _click.echo(f"Discovered Skills ({len(skill_list)}):")
    _click.echo(f"{'Name':<40} {'Source'}")
    _click.echo("-" * 70)
    for s in skill_list:
        _click.echo(f"{s.qualified_name:<40} {s.source_type.value}")


@skill_group.command(name="show")
@_click.argument("name")
@_click.option("--json", "json_output", is_flag=True, help="JSON output")
@_click.option("--body", is_flag=True, help="Show full skill body")
@_click.pass_context
def skill_show(
    ctx: _click.Context, name: str, json_output: bool, body: bool
) -> None:
    """Resolve a skill name and show where it comes from."""
    resolver = _get_plugin(ctx).resolver

    try:
        loaded = resolver.load_skill(name)
    except (OSError, UnicodeDecodeError) as e:
        _click.echo(f"Error: Could not read skill '{name}': {e}", err=True)
        raise SystemExit(1) from None

    if loaded is None:
        if json_output:
            _click.echo(_json.dumps({"error": f"Skill not found: {name}"}))
        else:
            _click.echo(f"Error: Skill '{name}' not found", err=True)
        raise SystemExit(1)

    if json_output:
        data = loaded.to_dict()
        if body:
            data["body"] = loaded.body
        _click.echo(_json.dumps(data, indent=2))
        return

    _click.echo(f"Skill: {loaded.display_name}")
    if loaded.description:
        _click.echo(f"  Description: {loaded.description}")
    _click.echo(f"  File: {loaded.resolved.skill_file}")
    _click.echo(f"  Source: {loaded.resolved.source_type.value}")
    _click.echo(f"  Body lines: {loaded.body_line_count}")

    if body:
        _click.echo()
        _click.echo("--- Body ---")
        _click.echo(loaded.body)


@skill_group.command(name="use")
@_click.argument("name")
@_click.pass_context
def skill_use(ctx: _click.Context, name: str) -> None:
    """Print exactly what the use_skill tool returns for NAME."""
    tools = _get_plugin(ctx).tools
    result = _run_async(tools.execute("use_skill", {"skill_name": name}))

    if not result.success:
        _click.echo(result.error, err=True)
        raise SystemExit(1)
    _click.echo(result.output)


# =============================================================================
# Host Integration Commands
# =============================================================================


@cli.command(name="bootstrap")
@_click.option("--compact", is_flag=True, help="Short form used after context compaction")
@_click.pass_context
def bootstrap_command(ctx: _click.Context, compact: bool) -> None:
    """Print the session bootstrap text."""
    text = _get_plugin(ctx).bootstrap_text(compact=compact)

    if text is None:
        _click.echo("Error: Bootstrap skill 'using-superpowers' is not installed", err=True)
        raise SystemExit(1)
    _click.echo(text)


@cli.command(name="tools")
@_click.option(
    "--format",
    "api_format",
    type=_click.Choice(["anthropic", "openai"]),
    default="anthropic",
    help="Tool definition format",
)
@_click.pass_context
def tools_command(ctx: _click.Context, api_format: str) -> None:
    """Print the tool definitions a host should register."""
    tools = _get_plugin(ctx).tools

    if api_format == "openai":
        definitions = tools.to_openai_format()
    else:
        definitions = tools.to_api_format()
    _click.echo(_json.dumps(definitions, indent=2))


def main() -> None:
    """Console script entry point."""
    cli(prog_name="skillcore")


if __name__ == "__main__":
    main()
