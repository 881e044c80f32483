"""Shared test fixtures for Slotgrid tests.

Created: 2026-10-18
"""

import pytest
import yaml

from slotgrid.core.dispatcher import InputDispatcher
from slotgrid.core.models import Grid


@pytest.fixture
def grid():
    """Fresh grid in its initial state."""
    return Grid()


@pytest.fixture
def dispatcher(grid):
    """Dispatcher with the default key map bound to the grid fixture."""
    return InputDispatcher(grid)


@pytest.fixture
def press(dispatcher):
    """Press a sequence of keys and return the last result.

    Usage:
        press("down", "down", "right")
    """
    def _press(*keys):
        result = None
        for key in keys:
            result = dispatcher.dispatch(key)
        return result

    return _press


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(data, name="config.yaml"):
        config_file = tmp_path / name
        with open(config_file, "w") as f:
            yaml.dump(data, f)
        return config_file

    return _write

