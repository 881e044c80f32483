"""
CLI entry point for Slotgrid.

Modified: 2026-10-18
"""

import sys
import logging
import click
import yaml
from pathlib import Path
from slotgrid import __version__
from slotgrid.config.settings import Settings
from slotgrid.core.exceptions import ConfigurationError, TerminalError


logger = logging.getLogger(__name__)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.config/slotgrid/config.yaml)",
)


def _load_settings(config_path: Path) -> Settings:
    try:
        return Settings.load(config_path)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Slotgrid - a 3x3 slot grid for the terminal."""
    pass


@cli.command()
@config_option
@click.option(
    "--log-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write logs to this file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: from config, WARNING)",
)
def run(config_path: Path, log_file: Path, log_level: str):
    """Launch the slot grid."""
    settings = _load_settings(config_path)
    if log_file:
        settings.logging.file = str(log_file)
    if log_level:
        settings.logging.level = log_level.upper()

    try:
        import asyncio
        from slotgrid.logging_config import setup_logging
        from slotgrid.tui.app import run_app

        setup_logging(settings.logging.level, settings.logging.file)

        return_code = asyncio.run(run_app(settings))
        if return_code:
            raise TerminalError(f"terminal application exited with code {return_code}")
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"TUI error: {e}", exc_info=True)
        click.echo(f"✗ TUI error: {e}", err=True)
        sys.exit(1)


@cli.command()
@config_option
def keys(config_path: Path):
    """Show the command legend."""
    from slotgrid.tui.keybindings import KeybindingRegistry

    settings = _load_settings(config_path)
    try:
        registry = KeybindingRegistry(settings.keys)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    click.echo(registry.format_help_text())


@cli.command()
@config_option
def config(config_path: Path):
    """Show the effective configuration."""
    settings = _load_settings(config_path)
    click.echo(yaml.safe_dump(settings.to_dict(), sort_keys=False).rstrip())


if __name__ == "__main__":
    cli()
