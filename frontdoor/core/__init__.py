"""Core: config, constants, and startup context.

Single place for settings and shared constants.
"""

from frontdoor.core.config import Settings, get_settings, resolve_settings

__all__ = ["Settings", "get_settings", "resolve_settings"]
