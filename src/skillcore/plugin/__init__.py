"""
Agent host integration.

Provides the bootstrap prompt and the skill tools as plain values; the
host delivers text and registers tools with its own APIs.
"""

from skillcore.plugin.bootstrap import render_bootstrap, render_tool_mapping
from skillcore.plugin.plugin import SkillsPlugin

__all__ = ["SkillsPlugin", "render_bootstrap", "render_tool_mapping"]
