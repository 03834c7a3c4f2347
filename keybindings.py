"""
keybindings.py - Centralized key mappings for the erosion sandbox (Pygame version)

Single source of truth for all keyboard controls.
"""
from __future__ import annotations

try:
    import pygame
except ImportError:
    # Allow import without pygame for type checking
    pygame = None


def _key(name: str) -> int:
    """Get pygame key constant by name, or placeholder if pygame not loaded."""
    if pygame is None:
        return 0
    return getattr(pygame, f"K_{name}", 0)


# Simulation control keys
TOGGLE_KEY = _key("SPACE")       # Start / stop erosion
STEP_KEY = _key("PERIOD")        # Single tick while paused
RESET_KEY = _key("r")            # Rebuild terrain from the current seed
NEW_SEED_KEY = _key("n")         # Rebuild terrain from a new random seed
STATUS_KEY = _key("s")           # Print totals to the event log

# Density slider
DENSITY_UP_KEYS = (_key("EQUALS"), _key("PLUS"), _key("KP_PLUS"))
DENSITY_DOWN_KEYS = (_key("MINUS"), _key("KP_MINUS"))

# System keys
QUIT_KEY = _key("ESCAPE")
HELP_KEY = _key("h")

# Control descriptions for help display
CONTROL_DESCRIPTIONS = [
    "Space: start/stop",
    ".: single step",
    "R: reset terrain",
    "N: new seed",
    "+/-: density",
    "S: status",
    "LClick: rain",
    "H: help",
    "Esc: quit",
]
