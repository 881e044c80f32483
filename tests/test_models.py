"""
Tests for core grid models.

Modified: 2026-10-18
"""

import pytest
from slotgrid.core.models import (
    CellState,
    GridCell,
    Column,
    Grid,
    GridSnapshot,
    ROW_COUNT,
)

from tests.utils import selected_columns, cell_states


class TestGridCell:
    """Test GridCell."""

    def test_starts_empty(self):
        assert GridCell().state is CellState.EMPTY

    def test_apply_paints_empty_cell(self):
        cell = GridCell()
        cell.apply(CellState.WHITE)
        assert cell.state is CellState.WHITE

    def test_apply_same_target_clears(self):
        cell = GridCell(CellState.BLACK)
        cell.apply(CellState.BLACK)
        assert cell.state is CellState.EMPTY

    def test_apply_other_target_replaces(self):
        cell = GridCell(CellState.BLACK)
        cell.apply(CellState.WHITE)
        assert cell.state is CellState.WHITE


class TestColumn:
    """Test Column navigation."""

    def test_new_column_has_no_selection(self):
        column = Column()

        assert column.current_row() is None
        assert len(column.cells) == ROW_COUNT
        assert all(cell.state is CellState.EMPTY for cell in column.cells)

    def test_cells_are_not_shared(self):
        column = Column()
        column.cells[0].apply(CellState.WHITE)

        assert column.cells[1].state is CellState.EMPTY
        assert Column().cells[0].state is CellState.EMPTY

    @pytest.mark.parametrize("fallback", [0, 1, 2])
    def test_move_down_unselected_uses_fallback(self, fallback):
        column = Column()
        column.move_down(fallback)
        assert column.current_row() == fallback

    @pytest.mark.parametrize("fallback", [0, 1, 2])
    def test_move_up_unselected_uses_fallback(self, fallback):
        column = Column()
        column.move_up(fallback)
        assert column.current_row() == fallback

    def test_move_down_clamps_at_last_row(self):
        column = Column(selected_row=2)
        column.move_down(0)
        assert column.current_row() == 2

    def test_move_up_clamps_at_first_row(self):
        column = Column(selected_row=0)
        column.move_up(2)
        assert column.current_row() == 0

    def test_move_ignores_fallback_when_selected(self):
        column = Column(selected_row=1)
        column.move_down(0)
        assert column.current_row() == 2

    def test_out_of_range_fallback_is_clamped(self):
        column = Column()
        column.move_down(7)
        assert column.current_row() == 2

        other = Column()
        other.move_up(-3)
        assert other.current_row() == 0

    def test_row_zero_is_a_selection(self):
        column = Column()
        column.move_up(0)

        assert column.current_row() == 0
        assert column.current_row() is not None
        assert column.selected_cell() is column.cells[0]

    def test_clear_selection_is_idempotent(self):
        column = Column(selected_row=1)
        column.clear_selection()
        column.clear_selection()

        assert column.current_row() is None
        assert column.selected_cell() is None

    def test_snapshot_is_frozen(self):
        column = Column(selected_row=1)
        snap = column.snapshot()

        column.move_down(0)
        column.cells[0].apply(CellState.BLACK)

        assert snap.selected_row == 1
        assert snap.states == (CellState.EMPTY,) * 3
        with pytest.raises(AttributeError):
            snap.selected_row = 0


class TestGrid:
    """Test Grid state machine."""

    def test_initial_state(self, grid):
        assert grid.active_column == 0
        assert grid.remembered_row == 0
        assert grid.selected_row() is None
        assert selected_columns(grid) == []

    def test_first_down_selects_row_zero(self, grid):
        assert grid.move_down() is True
        assert grid.selected_row() == 0

    def test_down_presses_never_pass_last_row(self, grid):
        rows = []
        for _ in range(6):
            grid.move_down()
            rows.append(grid.selected_row())

        assert rows == sorted(rows)
        assert max(rows) == 2
        assert rows[-3:] == [2, 2, 2]

    def test_up_presses_never_pass_first_row(self, grid):
        grid.move_down()
        grid.move_down()
        grid.move_down()

        rows = []
        for _ in range(5):
            grid.move_up()
            rows.append(grid.selected_row())

        assert rows == sorted(rows, reverse=True)
        assert rows[-3:] == [0, 0, 0]

    def test_clamped_move_reports_no_change(self, grid):
        grid.move_down()
        grid.move_down()
        grid.move_down()

        assert grid.move_down() is False

    def test_remembered_row_follows_selection(self, grid):
        grid.move_down()
        grid.move_down()
        assert grid.remembered_row == 1

        grid.move_up()
        assert grid.remembered_row == 0

    def test_right_carries_row(self, grid):
        grid.move_down()
        grid.move_down()

        assert grid.move_right() is True
        assert grid.active_column == 1
        assert grid.selected_row() == 1
        assert selected_columns(grid) == [1]

    def test_right_from_initial_selects_remembered_row(self, grid):
        grid.move_right()

        assert grid.active_column == 1
        assert grid.selected_row() == 0
        assert selected_columns(grid) == [1]

    def test_right_at_last_column_is_noop(self, grid):
        grid.move_right()
        grid.move_right()
        grid.move_down()
        before = grid.snapshot()

        assert grid.move_right() is False
        assert grid.snapshot() == before

    def test_left_at_first_column_is_noop(self, grid):
        grid.move_down()
        before = grid.snapshot()

        assert grid.move_left() is False
        assert grid.snapshot() == before

    def test_left_at_first_column_from_initial_is_noop(self, grid):
        before = grid.snapshot()

        assert grid.move_left() is False
        assert grid.snapshot() == before
        assert selected_columns(grid) == []

    def test_round_trip_preserves_row(self, grid):
        grid.move_down()
        grid.move_down()
        grid.move_down()

        grid.move_right()
        grid.move_right()
        grid.move_left()
        grid.move_left()

        assert grid.active_column == 0
        assert grid.selected_row() == 2

    def test_only_one_column_selected(self, grid):
        moves = [
            grid.move_down, grid.move_right, grid.move_up, grid.move_right,
            grid.move_left, grid.move_down, grid.move_left, grid.move_right,
        ]
        for move in moves:
            move()
            assert selected_columns(grid) == [grid.active_column]

    def test_apply_without_selection_is_noop(self, grid):
        assert grid.apply(CellState.WHITE) is False
        assert all(
            state is CellState.EMPTY for column in cell_states(grid) for state in column
        )

    def test_apply_paints_only_selected_cell(self, grid):
        grid.move_down()
        grid.move_right()
        grid.move_down()

        assert grid.apply(CellState.BLACK) is True

        states = cell_states(grid)
        assert states[1][1] is CellState.BLACK
        painted = [s for column in states for s in column if s is not CellState.EMPTY]
        assert len(painted) == 1

    def test_painted_cell_survives_column_switch(self, grid):
        grid.move_down()
        grid.apply(CellState.WHITE)
        grid.move_right()

        assert grid.columns[0].cells[0].state is CellState.WHITE


class TestGridSnapshot:
    """Test GridSnapshot."""

    def test_initial_snapshot_has_no_highlight(self, grid):
        snapshot = grid.snapshot()

        assert isinstance(snapshot, GridSnapshot)
        assert snapshot.highlighted() is None
        assert snapshot.active_column == 0

    def test_highlight_follows_active_selection(self, grid):
        grid.move_down()
        grid.move_down()
        grid.move_right()

        assert grid.snapshot().highlighted() == (1, 1)

    def test_cell_state_lookup(self, grid):
        grid.move_right()
        grid.move_right()
        grid.move_up()
        grid.apply(CellState.WHITE)

        snapshot = grid.snapshot()
        assert snapshot.cell_state(2, 0) is CellState.WHITE
        assert snapshot.cell_state(0, 0) is CellState.EMPTY

    def test_snapshots_compare_by_value(self, grid):
        assert grid.snapshot() == Grid().snapshot()
