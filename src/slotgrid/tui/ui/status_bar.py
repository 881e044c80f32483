"""Status bar widget for Slotgrid.

Shows the focused slot, the last action and keyboard hints.

Modified: 2026-10-18
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive

from ...core.dispatcher import GridCommand
from ...core.models import GridSnapshot


class StatusBar(Widget):
    """Status bar showing the focused slot and the last action."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }
    """

    # Reactive properties
    context = reactive("")
    status = reactive("")

    def __init__(self, hints: str = "", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hints = hints
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left")
            self.center_widget = Static("", classes="status-center")
            self.right_widget = Static(self.hints, classes="status-right")

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def update_position(self, snapshot: GridSnapshot) -> None:
        """Show the active column and selected row (left side)."""
        row = snapshot.columns[snapshot.active_column].selected_row
        row_text = "-" if row is None else str(row + 1)
        self.context = f"Column {snapshot.active_column + 1} | Row {row_text}"

        if self.left_widget:
            self.left_widget.update(self.context)

    def update_status(self, command: Optional[GridCommand]) -> None:
        """Show the last command (center)."""
        self.status = command.value.replace("_", " ") if command else ""

        if self.center_widget:
            self.center_widget.update(self.status)
