"""Test utilities and helper functions.

Created: 2026-10-18
"""

from typing import List

from slotgrid.core.models import Grid, CellState


def selected_columns(grid: Grid) -> List[int]:
    """Indexes of columns that currently hold a selection."""
    return [
        index for index, column in enumerate(grid.columns)
        if column.current_row() is not None
    ]


def cell_states(grid: Grid) -> List[List[CellState]]:
    """Cell states as a column-major nested list."""
    return [[cell.state for cell in column.cells] for column in grid.columns]
