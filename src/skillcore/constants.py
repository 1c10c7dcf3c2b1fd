"""
Shared constants for skillcore.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Skill layout
SKILL_FILENAME = "SKILL.md"
"""Name of the primary document inside every skill directory."""

DEFAULT_MAX_DEPTH = 3
"""How many directory levels below a root are searched for skills."""

FRONTMATTER_MARKER = "---"
"""Marker line that opens and closes a skill document's header block."""

# Namespace prefixes
PROJECT_PREFIX = "project:"
"""Pins a lookup to the project root."""

SUPERPOWERS_PREFIX = "superpowers:"
"""Skips the project root for a lookup."""

BOOTSTRAP_SKILL = "using-superpowers"
"""Skill whose body is injected at session start."""
