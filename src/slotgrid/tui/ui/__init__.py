"""
UI components for Slotgrid TUI.

Modified: 2026-10-18
"""

__all__ = [
    "grid_view",
    "legend_panel",
    "status_bar",
]
