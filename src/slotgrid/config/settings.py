"""
Configuration management for Slotgrid.

Hierarchical settings loading: defaults → config file → environment variables

Modified: 2026-10-18
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from textual.color import Color, ColorParseError

from slotgrid.core.exceptions import ConfigurationError


@dataclass
class KeySettings:
    """Single-character action keys. Arrow keys are fixed."""

    toggle_white: str = "w"
    toggle_black: str = "b"
    quit: str = "q"


@dataclass
class ThemeSettings:
    """Colours used by the grid widgets."""

    empty_color: str = "red"
    white_color: str = "white"
    black_color: str = "black"
    highlight_color: str = "#555555"  # dark grey
    text_color: str = "yellow"

    def validate(self, source: Optional[Path] = None) -> None:
        """
        Check that every colour parses.

        Raises:
            ConfigurationError: On the first colour Textual cannot parse
        """
        for name, value in vars(self).items():
            try:
                Color.parse(value)
            except ColorParseError as e:
                where = f" in {source}" if source else ""
                raise ConfigurationError(
                    f"Invalid colour for theme.{name}{where}: {value!r}"
                ) from e


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class Settings:
    """Main settings container."""

    keys: KeySettings = field(default_factory=KeySettings)
    theme: ThemeSettings = field(default_factory=ThemeSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from file and environment variables.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/slotgrid/config.yaml)
        3. Environment variables (override everything)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is not valid YAML, a section is not
                a mapping, or a theme colour is invalid
        """
        settings = cls()

        if config_path is None:
            config_path = Path.home() / ".config" / "slotgrid" / "config.yaml"

        if config_path.exists():
            try:
                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

            if not isinstance(config_data, dict):
                raise ConfigurationError(f"{config_path} must contain a mapping")

            # Key settings
            if "keys" in config_data:
                keys = _section(config_data, "keys", config_path)
                settings.keys = KeySettings(
                    toggle_white=str(keys.get("toggle_white", "w")),
                    toggle_black=str(keys.get("toggle_black", "b")),
                    quit=str(keys.get("quit", "q")),
                )

            # Theme settings
            if "theme" in config_data:
                theme = _section(config_data, "theme", config_path)
                settings.theme = ThemeSettings(
                    empty_color=str(theme.get("empty_color", "red")),
                    white_color=str(theme.get("white_color", "white")),
                    black_color=str(theme.get("black_color", "black")),
                    highlight_color=str(theme.get("highlight_color", "#555555")),
                    text_color=str(theme.get("text_color", "yellow")),
                )
                settings.theme.validate(config_path)

            # Logging settings
            if "logging" in config_data:
                log = _section(config_data, "logging", config_path)
                settings.logging = LoggingSettings(
                    level=str(log.get("level", "WARNING")).upper(),
                    file=log.get("file"),
                )

        # Override with environment variables
        log_level_env = os.getenv("SLOTGRID_LOG_LEVEL")
        if log_level_env:
            settings.logging.level = log_level_env.upper()

        log_file_env = os.getenv("SLOTGRID_LOG_FILE")
        if log_file_env:
            settings.logging.file = log_file_env

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "keys": {
                "toggle_white": self.keys.toggle_white,
                "toggle_black": self.keys.toggle_black,
                "quit": self.keys.quit,
            },
            "theme": {
                "empty_color": self.theme.empty_color,
                "white_color": self.theme.white_color,
                "black_color": self.theme.black_color,
                "highlight_color": self.theme.highlight_color,
                "text_color": self.theme.text_color,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def _section(config_data: Dict[str, Any], name: str, config_path: Path) -> Dict[str, Any]:
    """Return a config section, treating an empty section as defaults."""
    section = config_data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"'{name}' in {config_path} must be a mapping")
    return section
