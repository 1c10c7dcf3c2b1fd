"""
skillcore settings, loaded with pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with SKILLCORE_ prefix
3. .env file named by SKILLCORE_ENV_FILE (if set and present)

The personal config directory also honours OPENCODE_CONFIG_DIR, so an
existing OpenCode setup is picked up without extra configuration.
"""

from __future__ import annotations

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import skillcore.constants as constants
import skillcore.skills.roots as roots


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit SKILLCORE_ENV_FILE that exists is used; otherwise
    configuration comes from the environment alone.
    """
    if env_file := _os.environ.get("SKILLCORE_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


def normalize_path(
    path: str | None,
    home: _pathlib.Path | None = None,
) -> _pathlib.Path | None:
    """
    Normalize a user-supplied directory path.

    Trims whitespace, expands a leading ~ and makes the path absolute.

    Args:
        path: Raw path string (may be None or blank).
        home: Home directory used for ~ expansion. Defaults to the
            current user's home.

    Returns:
        Absolute path, or None if the input is missing or blank.
    """
    if not path or not isinstance(path, str):
        return None
    normalized = path.strip()
    if not normalized:
        return None

    if home is None:
        home = _pathlib.Path.home()
    if normalized == "~":
        return home.resolve()
    if normalized.startswith("~/"):
        return (home / normalized[2:]).resolve()
    return _pathlib.Path(normalized).resolve()


class Settings(_pydantic_settings.BaseSettings):
    """
    skillcore configuration settings.

    All settings can be overridden via environment variables with the
    SKILLCORE_ prefix, e.g. SKILLCORE_MAX_DEPTH=2.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="SKILLCORE_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> Settings:
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation and for reproducing issues without
        .env interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    project_dir: str | None = _pydantic.Field(
        default=None,
        description="Project directory (defaults to the current directory)",
    )

    config_dir: str | None = _pydantic.Field(
        default=None,
        validation_alias=_pydantic.AliasChoices(
            "SKILLCORE_CONFIG_DIR",
            "OPENCODE_CONFIG_DIR",
        ),
        description="Personal config directory (defaults to ~/.config/opencode)",
    )

    superpowers_dir: str | None = _pydantic.Field(
        default=None,
        description="Superpowers skill library (defaults to <config dir>/superpowers/skills)",
    )

    max_depth: int = _pydantic.Field(
        default=constants.DEFAULT_MAX_DEPTH,
        ge=1,
        description="Directory levels below each root searched when listing skills",
    )

    log_level: str = _pydantic.Field(
        default="WARNING",
        description="Log level for skillcore loggers",
    )

    @_pydantic.field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    # =========================================================================
    # Derived directories
    # =========================================================================

    @property
    def resolved_project_dir(self) -> _pathlib.Path:
        """Project directory, defaulting to the current directory."""
        return normalize_path(self.project_dir) or _pathlib.Path.cwd().resolve()

    @property
    def resolved_config_dir(self) -> _pathlib.Path:
        """Personal config directory, defaulting to ~/.config/opencode."""
        return normalize_path(self.config_dir) or (
            _pathlib.Path.home() / ".config" / "opencode"
        )

    @property
    def project_skills_dir(self) -> _pathlib.Path:
        return self.resolved_project_dir / ".opencode" / "skills"

    @property
    def personal_skills_dir(self) -> _pathlib.Path:
        return self.resolved_config_dir / "skills"

    @property
    def superpowers_skills_dir(self) -> _pathlib.Path:
        return normalize_path(self.superpowers_dir) or (
            self.resolved_config_dir / "superpowers" / "skills"
        )

    def skill_roots(self) -> roots.SkillRoots:
        """Resolve the three skill roots into an immutable value."""
        return roots.SkillRoots(
            project=self.project_skills_dir,
            personal=self.personal_skills_dir,
            superpowers=self.superpowers_skills_dir,
        )

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert resolved settings to a JSON-serializable dict."""
        return {
            "project_dir": str(self.resolved_project_dir),
            "config_dir": str(self.resolved_config_dir),
            "project_skills_dir": str(self.project_skills_dir),
            "personal_skills_dir": str(self.personal_skills_dir),
            "superpowers_skills_dir": str(self.superpowers_skills_dir),
            "max_depth": self.max_depth,
            "log_level": self.log_level,
        }
