"""
Core grid logic for Slotgrid.

Everything here is interface-agnostic: the TUI only reads snapshots
and forwards key names to the dispatcher.

Modified: 2026-10-18
"""

from slotgrid.core.exceptions import (
    SlotGridError,
    ConfigurationError,
    TerminalError,
)
from slotgrid.core.models import (
    CellState,
    GridCell,
    Column,
    Grid,
    ColumnSnapshot,
    GridSnapshot,
)
from slotgrid.core.dispatcher import GridCommand, DispatchResult, InputDispatcher

__all__ = [
    "SlotGridError",
    "ConfigurationError",
    "TerminalError",
    "CellState",
    "GridCell",
    "Column",
    "Grid",
    "ColumnSnapshot",
    "GridSnapshot",
    "GridCommand",
    "DispatchResult",
    "InputDispatcher",
]
