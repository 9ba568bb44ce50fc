"""Core: config and shared constants."""

from content.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
