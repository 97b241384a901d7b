"""Configuration module with YAML and environment variable support."""

from .settings import RecipeSourceMode, Settings, get_settings


__all__ = [
    "RecipeSourceMode",
    "Settings",
    "get_settings",
]
