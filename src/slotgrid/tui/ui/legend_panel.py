"""Command legend panel for Slotgrid.

Modified: 2026-10-18
"""

from typing import List

from textual.widgets import Static


class LegendPanel(Static):
    """Bordered, titled panel listing the available commands."""

    DEFAULT_CSS = """
    LegendPanel {
        width: 100%;
        height: 30%;
        border: solid $accent;
        padding: 0 1;
    }
    """

    def __init__(self, lines: List[str], title: str = "Available Commands", **kwargs):
        super().__init__("\n".join(lines), markup=False, **kwargs)
        self.legend_lines = list(lines)
        self.border_title = title
