"""
Custom exceptions for Slotgrid.

Modified: 2026-10-18
"""


class SlotGridError(Exception):
    """Base exception for all Slotgrid errors."""

    pass


class ConfigurationError(SlotGridError):
    """Raised when configuration or the key map is invalid."""

    pass


class TerminalError(SlotGridError):
    """Raised when the terminal application cannot start, read input or stop."""

    pass
