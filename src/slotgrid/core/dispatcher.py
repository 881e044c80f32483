"""
Input dispatcher for Slotgrid.

Maps key names (as Textual reports them) to grid commands and applies
them to a Grid.

Modified: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional
import logging

from slotgrid.core.models import CellState, Grid


logger = logging.getLogger(__name__)


class GridCommand(Enum):
    """Commands the grid understands."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_WHITE = "toggle_white"
    TOGGLE_BLACK = "toggle_black"
    QUIT = "quit"


DEFAULT_KEYMAP: Dict[str, GridCommand] = {
    "up": GridCommand.UP,
    "down": GridCommand.DOWN,
    "left": GridCommand.LEFT,
    "right": GridCommand.RIGHT,
    "w": GridCommand.TOGGLE_WHITE,
    "b": GridCommand.TOGGLE_BLACK,
    "q": GridCommand.QUIT,
}

TOGGLE_TARGETS = {
    GridCommand.TOGGLE_WHITE: CellState.WHITE,
    GridCommand.TOGGLE_BLACK: CellState.BLACK,
}


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a single key press."""

    command: Optional[GridCommand] = None
    changed: bool = False
    quit: bool = False


class InputDispatcher:
    """Applies key presses to a grid until the quit key is seen."""

    def __init__(self, grid: Grid, keymap: Optional[Mapping[str, GridCommand]] = None):
        """
        Args:
            grid: Grid to mutate
            keymap: Key name to command mapping (defaults to DEFAULT_KEYMAP)
        """
        self.grid = grid
        self.keymap: Dict[str, GridCommand] = dict(keymap or DEFAULT_KEYMAP)
        self.finished = False

    def resolve(self, key: str) -> Optional[GridCommand]:
        return self.keymap.get(key)

    def dispatch(self, key: str, character: Optional[str] = None) -> DispatchResult:
        """
        Handle one key press.

        The key name is looked up first, then the printed character, so
        a binding such as "?" matches Textual's "question_mark".
        Unknown keys are ignored. Once QUIT has been dispatched every
        later key is ignored as well.

        Args:
            key: Key name, e.g. "up" or "w"
            character: Character the key produced, if any

        Returns:
            DispatchResult describing what happened
        """
        if self.finished:
            return DispatchResult(quit=True)

        command = self.resolve(key)
        if command is None and character:
            command = self.resolve(character)
        if command is None:
            return DispatchResult()

        if command is GridCommand.QUIT:
            self.finished = True
            logger.info("Quit requested")
            return DispatchResult(command=command, quit=True)

        changed = self.execute(command)
        logger.debug(
            f"{command.value}: changed={changed} column={self.grid.active_column} "
            f"row={self.grid.selected_row()}"
        )
        return DispatchResult(command=command, changed=changed)

    def execute(self, command: GridCommand) -> bool:
        """Run a non-quit command against the grid."""
        if command is GridCommand.DOWN:
            return self.grid.move_down()
        elif command is GridCommand.UP:
            return self.grid.move_up()
        elif command is GridCommand.RIGHT:
            return self.grid.move_right()
        elif command is GridCommand.LEFT:
            return self.grid.move_left()
        elif command in TOGGLE_TARGETS:
            return self.grid.apply(TOGGLE_TARGETS[command])
        return False
