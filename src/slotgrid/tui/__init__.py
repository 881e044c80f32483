"""
TUI (Terminal User Interface) for Slotgrid.

Textual-based three-column slot grid with a command legend.

Modified: 2026-10-18
"""

__all__ = ["app", "keybindings", "messages"]
