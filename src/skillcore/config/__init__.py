"""
Configuration module for skillcore.

Uses pydantic-settings for environment variable loading.
"""

from skillcore.config.settings import Settings, normalize_path

__all__ = ["Settings", "normalize_path"]
