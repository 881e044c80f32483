"""
Configuration management for Slotgrid.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/slotgrid/config.yaml)
- Environment variables

Modified: 2026-10-18
"""

from slotgrid.config.settings import (
    Settings,
    KeySettings,
    ThemeSettings,
    LoggingSettings,
)

__all__ = [
    "Settings",
    "KeySettings",
    "ThemeSettings",
    "LoggingSettings",
]
