"""
CLI module for skillcore.

Provides the command-line interface using Click.
"""

from skillcore.cli.main import cli, main

__all__ = ["main", "cli"]
