"""Custom Textual messages for Slotgrid.

Modified: 2026-10-18
"""

from textual.message import Message
from typing import Optional

from ..core.dispatcher import GridCommand
from ..core.models import GridSnapshot


class GridChanged(Message):
    """Message sent after the grid has been redrawn from a new snapshot."""

    def __init__(self, snapshot: GridSnapshot, command: Optional[GridCommand] = None):
        """Initialize grid changed message.

        Args:
            snapshot: Grid state that was drawn
            command: Command that caused the change, None for the first frame
        """
        super().__init__()
        self.snapshot = snapshot
        self.command = command
