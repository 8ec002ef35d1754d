"""Configuration management for the rune matcher."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
