"""Central keybinding registry for Slotgrid.

Provides a single source of truth for which key drives which grid
command, and the text of the command legend.

Modified: 2026-10-18
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config.settings import KeySettings
from ..core.dispatcher import GridCommand
from ..core.exceptions import ConfigurationError


ARROW_KEYS = {
    "up": GridCommand.UP,
    "down": GridCommand.DOWN,
    "left": GridCommand.LEFT,
    "right": GridCommand.RIGHT,
}


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Textual key name
    command: GridCommand
    description: str  # Legend line
    category: str = "General"
    hidden: bool = False  # Whether to list it individually in the legend


class KeybindingRegistry:
    """Registry for all grid keybindings."""

    def __init__(self, keys: Optional[KeySettings] = None):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings(keys or KeySettings())

    def _initialize_default_bindings(self, keys: KeySettings):
        """Register arrow navigation plus the configured action keys."""

        for key, command in ARROW_KEYS.items():
            self.register(key, command, f"Move {key}", "Navigation", hidden=True)

        self.register(keys.toggle_white, GridCommand.TOGGLE_WHITE,
                      f"Press '{keys.toggle_white}' to select white", "Slot")
        self.register(keys.toggle_black, GridCommand.TOGGLE_BLACK,
                      f"Press '{keys.toggle_black}' to select black", "Slot")
        self.register(keys.quit, GridCommand.QUIT,
                      f"Press '{keys.quit}' to exit", "Application")

    def register(self, key: str, command: GridCommand, description: str,
                 category: str = "General", hidden: bool = False) -> None:
        """Register a keybinding.

        Raises:
            ConfigurationError: If the key is empty or already bound
        """
        if not key:
            raise ConfigurationError(f"No key configured for {command.value}")
        if key in self.keybindings:
            other = self.keybindings[key].command
            raise ConfigurationError(
                f"Key '{key}' is bound to both {other.value} and {command.value}"
            )
        self.keybindings[key] = Keybinding(
            key=key,
            command=command,
            description=description,
            category=category,
            hidden=hidden,
        )

    def keymap(self) -> Dict[str, GridCommand]:
        """Key name to command mapping for the dispatcher."""
        return {key: binding.command for key, binding in self.keybindings.items()}

    def key_for(self, command: GridCommand) -> Optional[str]:
        for binding in self.keybindings.values():
            if binding.command is command:
                return binding.key
        return None

    def legend_lines(self) -> List[str]:
        """Lines shown in the "Available Commands" panel."""
        lines = ["Use arrows to select slot"]
        lines.extend(
            binding.description
            for binding in self.keybindings.values()
            if not binding.hidden
        )
        return lines

    def format_help_text(self) -> str:
        """Format the legend for printing outside the TUI."""
        lines = ["Available Commands", "=" * 18]
        lines.extend(f"  {line}" for line in self.legend_lines())
        return "\n".join(lines)
