"""Grid view for Slotgrid.

Three equally weighted columns of three slots. The view only reads
GridSnapshot objects; it never touches the Grid itself.

Modified: 2026-10-18
"""

from typing import List, Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static
from textual.widget import Widget

from ...config.settings import ThemeSettings
from ...core.models import CellState, GridSnapshot, ROW_COUNT, COLUMN_COUNT


STATE_CLASSES = {
    CellState.EMPTY: "cell-empty",
    CellState.WHITE: "cell-white",
    CellState.BLACK: "cell-black",
}


class SlotCell(Static):
    """One slot of the grid."""

    DEFAULT_CSS = """
    SlotCell {
        width: 100%;
        height: 1fr;
        margin: 0 0 1 0;
        content-align: center middle;
    }

    SlotCell.highlighted {
        text-style: bold;
    }
    """

    def __init__(self, column: int, row: int, theme: ThemeSettings, **kwargs):
        super().__init__(" ", id=f"cell-{column}-{row}", classes="cell-empty", **kwargs)
        self.column = column
        self.row = row
        self.theme_settings = theme
        self.state = CellState.EMPTY
        self.highlighted = False

    def on_mount(self) -> None:
        self._apply_colors()

    def show(self, state: CellState, highlighted: bool) -> None:
        """Update the slot to reflect state and highlight."""
        if state is not self.state:
            self.remove_class(STATE_CLASSES[self.state])
            self.add_class(STATE_CLASSES[state])
            self.state = state
        self.set_class(highlighted, "highlighted")
        self.highlighted = highlighted
        self.update("▸" if highlighted else " ")
        self._apply_colors()

    def _apply_colors(self) -> None:
        theme = self.theme_settings
        if self.state is CellState.WHITE:
            background = theme.white_color
        elif self.state is CellState.BLACK:
            background = theme.black_color
        else:
            background = theme.empty_color
        self.styles.background = background
        self.styles.color = theme.text_color
        # Every cell keeps a border; only the focused one is tinted.
        self.styles.border = ("tall", theme.highlight_color if self.highlighted else background)


class SlotColumn(Vertical):
    """A column of three slots."""

    DEFAULT_CSS = """
    SlotColumn {
        width: 1fr;
        height: 100%;
        padding: 0 1;
    }

    SlotColumn.active {
        background: $boost;
    }
    """

    def __init__(self, index: int, theme: ThemeSettings, **kwargs):
        super().__init__(id=f"column-{index}", **kwargs)
        self.index = index
        self.cells: List[SlotCell] = [
            SlotCell(index, row, theme) for row in range(ROW_COUNT)
        ]

    def compose(self) -> ComposeResult:
        yield from self.cells

    def show(self, snapshot: GridSnapshot) -> None:
        highlight = snapshot.highlighted()
        for row, cell in enumerate(self.cells):
            cell.show(
                snapshot.cell_state(self.index, row),
                highlight == (self.index, row),
            )
        self.set_class(snapshot.active_column == self.index, "active")


class GridView(Widget):
    """Three-column slot grid."""

    DEFAULT_CSS = """
    GridView {
        layout: horizontal;
        width: 1fr;
        height: 100%;
    }
    """

    def __init__(self, theme: Optional[ThemeSettings] = None, **kwargs):
        super().__init__(**kwargs)
        theme = theme or ThemeSettings()
        self.columns: List[SlotColumn] = [
            SlotColumn(index, theme) for index in range(COLUMN_COUNT)
        ]

    def compose(self) -> ComposeResult:
        yield from self.columns

    def show(self, snapshot: GridSnapshot) -> None:
        """Redraw every column from snapshot."""
        for column in self.columns:
            column.show(snapshot)

    def highlighted_cells(self) -> List[SlotCell]:
        return [
            cell for column in self.columns for cell in column.cells if cell.highlighted
        ]
