"""
Core data models for Slotgrid.

A grid is three columns of three cells. Each column remembers its own
selected row; the grid keeps only one column selected at a time and
carries the last row across column switches.

Modified: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

ROW_COUNT = 3
COLUMN_COUNT = 3


class CellState(Enum):
    """Visual state of a slot."""

    EMPTY = "empty"
    BLACK = "black"
    WHITE = "white"


@dataclass
class GridCell:
    """A single slot in the grid."""

    state: CellState = CellState.EMPTY

    def apply(self, target: CellState) -> None:
        """
        Paint the cell with target, or clear it if it already holds target.

        Args:
            target: State to apply (BLACK or WHITE)
        """
        if target is CellState.EMPTY or self.state is target:
            self.state = CellState.EMPTY
        else:
            self.state = target


def _clamp_row(row: int) -> int:
    return max(0, min(row, ROW_COUNT - 1))


@dataclass
class Column:
    """
    Three cells plus an optional selected row.

    ``selected_row`` is None while nothing is selected. Row 0 is a real
    selection and is never used to mean "nothing".
    """

    cells: List[GridCell] = field(
        default_factory=lambda: [GridCell() for _ in range(ROW_COUNT)]
    )
    selected_row: Optional[int] = None

    def move_down(self, fallback_row: int) -> None:
        """Advance one row, stopping at the last one; select fallback_row if unselected."""
        if self.selected_row is None:
            self.selected_row = _clamp_row(fallback_row)
        else:
            self.selected_row = _clamp_row(self.selected_row + 1)

    def move_up(self, fallback_row: int) -> None:
        """Go back one row, stopping at row 0; select fallback_row if unselected."""
        if self.selected_row is None:
            self.selected_row = _clamp_row(fallback_row)
        else:
            self.selected_row = _clamp_row(self.selected_row - 1)

    def current_row(self) -> Optional[int]:
        return self.selected_row

    def clear_selection(self) -> None:
        self.selected_row = None

    def selected_cell(self) -> Optional[GridCell]:
        if self.selected_row is None:
            return None
        return self.cells[self.selected_row]

    def snapshot(self) -> "ColumnSnapshot":
        return ColumnSnapshot(
            states=tuple(cell.state for cell in self.cells),
            selected_row=self.selected_row,
        )


@dataclass(frozen=True)
class ColumnSnapshot:
    """Read-only view of one column."""

    states: Tuple[CellState, ...]
    selected_row: Optional[int] = None


@dataclass(frozen=True)
class GridSnapshot:
    """Read-only view of the whole grid, handed to the renderer."""

    columns: Tuple[ColumnSnapshot, ...]
    active_column: int
    remembered_row: int

    def highlighted(self) -> Optional[Tuple[int, int]]:
        """Return (column, row) of the highlighted cell, if any."""
        row = self.columns[self.active_column].selected_row
        if row is None:
            return None
        return self.active_column, row

    def cell_state(self, column: int, row: int) -> CellState:
        return self.columns[column].states[row]


class Grid:
    """
    Three columns with a single active column.

    All mutators are total: they never raise and clamp at the edges.
    Each returns True if the grid changed and False for a no-op.
    """

    def __init__(self):
        self.columns: List[Column] = [Column() for _ in range(COLUMN_COUNT)]
        self.active_column: int = 0
        self.remembered_row: int = 0

    @property
    def active(self) -> Column:
        return self.columns[self.active_column]

    def selected_row(self) -> Optional[int]:
        """Selected row of the active column, or None."""
        return self.active.current_row()

    def move_down(self) -> bool:
        before = self.active.current_row()
        self.active.move_down(self.remembered_row)
        self.remembered_row = self.active.current_row()
        return self.active.current_row() != before

    def move_up(self) -> bool:
        before = self.active.current_row()
        self.active.move_up(self.remembered_row)
        self.remembered_row = self.active.current_row()
        return self.active.current_row() != before

    def move_right(self) -> bool:
        if self.active_column >= COLUMN_COUNT - 1:
            return False
        self._switch_column(self.active_column + 1)
        return True

    def move_left(self) -> bool:
        if self.active_column <= 0:
            return False
        self._switch_column(self.active_column - 1)
        return True

    def _switch_column(self, index: int) -> None:
        self.active.clear_selection()
        self.active_column = index
        # The new column starts unselected, so this lands on remembered_row.
        self.active.move_down(self.remembered_row)

    def apply(self, target: CellState) -> bool:
        """
        Apply target to the active column's selected cell.

        Returns:
            False if the active column has no selection
        """
        cell = self.active.selected_cell()
        if cell is None:
            return False
        cell.apply(target)
        return True

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            columns=tuple(column.snapshot() for column in self.columns),
            active_column=self.active_column,
            remembered_row=self.remembered_row,
        )
