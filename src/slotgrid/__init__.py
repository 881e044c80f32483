"""
Slotgrid - a 3x3 slot grid for the terminal.

Arrow keys move the focus between three columns of three slots;
single keys paint the focused slot.

Created: 2026-10-18
"""

__version__ = "0.1.0"
