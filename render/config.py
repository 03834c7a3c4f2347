"""
Configuration constants for the rendering domain.
Includes window layout, colors, font sizes, and other visual tuning values.
"""
from __future__ import annotations

from typing import Dict, Tuple

from world.terrain import TerrainBand

Color = Tuple[int, int, int]

# =============================================================================
# UI LAYOUT & DIMENSIONS
# =============================================================================
CELL_SIZE = 10                        # Pixels per grid cell in the top-down map
MAP_MARGIN = 12
LOG_PANEL_HEIGHT = 110
LINE_HEIGHT = 18
FONT_SIZE = 18
TARGET_FPS = 60

# =============================================================================
# COLORS
# =============================================================================
# UI Colors
COLOR_BG_DARK = (20, 20, 25)
COLOR_BG_PANEL = (25, 25, 30)
COLOR_TEXT_WHITE = (230, 230, 230)
COLOR_TEXT_GRAY = (160, 160, 160)
COLOR_TEXT_HIGHLIGHT = (220, 200, 120)
COLOR_RUNNING = (120, 200, 120)
COLOR_PAUSED = (200, 120, 100)

# Terrain band colors
BAND_COLORS: Dict[TerrainBand, Color] = {
    TerrainBand.WATER: (60, 130, 200),
    TerrainBand.LOWLAND: (60, 120, 60),
    TerrainBand.GRASS: (100, 140, 80),
    TerrainBand.ROCK: (130, 110, 90),
    TerrainBand.SNOW: (200, 200, 210),
}

# Elevation shading: brightness = SHADE_BASE + relative_height * SHADE_SPAN
SHADE_BASE = 0.6
SHADE_SPAN = 0.4
