"""Main Slotgrid TUI application.

Owns the grid and its dispatcher, forwards key presses to the
dispatcher and redraws the grid after every change.

Modified: 2026-10-18
"""

import asyncio
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static
from textual import events

from ..config.settings import Settings
from ..core.dispatcher import GridCommand, InputDispatcher
from ..core.models import Grid

from .keybindings import KeybindingRegistry
from .messages import GridChanged
from .ui.grid_view import GridView
from .ui.legend_panel import LegendPanel
from .ui.status_bar import StatusBar


logger = logging.getLogger(__name__)


class SlotGridApp(App):
    """Main application class for Slotgrid."""

    TITLE = "Slotgrid"

    CSS = """
    #main-container {
        margin: 1;
        height: 1fr;
    }

    #side-panel {
        width: 1fr;
        height: 100%;
    }

    #side-filler {
        height: 70%;
    }
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the application.

        Args:
            settings: Loaded settings (defaults if None)

        Raises:
            ConfigurationError: If the configured keys collide or a colour is invalid
        """
        super().__init__()

        self.settings = settings or Settings()
        self.settings.theme.validate()
        self.registry = KeybindingRegistry(self.settings.keys)

        self.grid = Grid()
        self.dispatcher = InputDispatcher(self.grid, self.registry.keymap())

        # UI components
        self.grid_view: Optional[GridView] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        self.grid_view = GridView(theme=self.settings.theme, id="grid-view")
        quit_key = self.registry.key_for(GridCommand.QUIT)

        with Horizontal(id="main-container"):
            yield self.grid_view
            with Vertical(id="side-panel"):
                yield LegendPanel(self.registry.legend_lines(), id="legend")
                yield Static("", id="side-filler")

        self.status_bar = StatusBar(hints=f"{quit_key}:quit", id="status-bar")
        yield self.status_bar

    def on_mount(self) -> None:
        """Draw the initial frame."""
        logger.info("Slotgrid started")
        self.redraw()

    def redraw(self, command: Optional[GridCommand] = None) -> None:
        """Redraw the grid from a fresh snapshot."""
        snapshot = self.grid.snapshot()
        if self.grid_view:
            self.grid_view.show(snapshot)
        self.post_message(GridChanged(snapshot, command))

    async def on_key(self, event: events.Key) -> None:
        """Handle keyboard events."""
        result = self.dispatcher.dispatch(event.key, event.character)

        if result.quit:
            event.stop()
            self.exit(return_code=0)
            return

        if result.command is None:
            return

        event.stop()
        if result.changed:
            self.redraw(result.command)

    async def on_grid_changed(self, message: GridChanged) -> None:
        """Update the status bar after a redraw."""
        if self.status_bar:
            self.status_bar.update_position(message.snapshot)
            self.status_bar.update_status(message.command)


async def run_app(settings: Optional[Settings] = None) -> int:
    """Run the Slotgrid TUI application.

    Args:
        settings: Optional loaded settings

    Returns:
        Process return code
    """
    app = SlotGridApp(settings=settings)
    await app.run_async()
    logger.info(f"Slotgrid stopped with return code {app.return_code}")
    return app.return_code or 0


if __name__ == "__main__":
    asyncio.run(run_app())
