"""Color calculations for terrain rendering.

Provides utilities for:
- Terrain band colors from height and water depth
- Elevation-based shading
- Whole-grid color arrays for fast blitting
"""
from __future__ import annotations

from typing import cast

import numpy as np

from render.config import BAND_COLORS, SHADE_BASE, SHADE_SPAN, Color
from world.terrain import TerrainBand, classify_cell, classify_grid, relative_elevation

# Lookup table indexed by TerrainBand value
_BAND_TABLE = np.array([BAND_COLORS[band] for band in TerrainBand], dtype=np.float64)


def elevation_shade(height: float) -> float:
    """Brightness multiplier for a cell height (higher terrain is brighter)."""
    return SHADE_BASE + relative_elevation(height) * SHADE_SPAN


def apply_brightness(color: Color, brightness: float) -> Color:
    """Apply brightness multiplier to a color."""
    return cast(Color, tuple(max(0, min(255, int(c * brightness))) for c in color))


def terrain_color(height: float, water: float) -> Color:
    """Shaded display color for one cell."""
    band = classify_cell(height, water)
    return apply_brightness(BAND_COLORS[band], elevation_shade(height))


def terrain_color_grid(heights: np.ndarray, water: np.ndarray) -> np.ndarray:
    """Vectorized terrain_color.

    Returns:
        (rows, cols, 3) uint8 array with the layout of the input grids
    """
    bands = classify_grid(heights, water)
    shade = SHADE_BASE + relative_elevation(np.asarray(heights, dtype=np.float64)) * SHADE_SPAN
    colors = _BAND_TABLE[bands] * shade[..., np.newaxis]
    # Truncate like apply_brightness
    return np.clip(colors.astype(np.int64), 0, 255).astype(np.uint8)
