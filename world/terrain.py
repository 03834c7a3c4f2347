# world/terrain.py
"""
Terrain bands for reading the erosion grids.

The renderer picks a colour band per cell from its height and water depth:
standing water wins, otherwise the band follows relative elevation.
"""
from __future__ import annotations

from enum import IntEnum

import numpy as np

# Band thresholds
WATER_VISIBLE_DEPTH = 0.3       # Cells with more water render as water
ELEVATION_REFERENCE = 60.0      # Height treated as the top of the range
LOWLAND_LIMIT = 0.3             # Fractions of ELEVATION_REFERENCE
GRASS_LIMIT = 0.5
ROCK_LIMIT = 0.7


class TerrainBand(IntEnum):
    WATER = 0
    LOWLAND = 1
    GRASS = 2
    ROCK = 3
    SNOW = 4


def relative_elevation(height: float) -> float:
    """Height as a fraction of ELEVATION_REFERENCE (not clamped)."""
    return height / ELEVATION_REFERENCE


def classify_cell(height: float, water: float) -> TerrainBand:
    """Get the terrain band for a single cell."""
    if water > WATER_VISIBLE_DEPTH:
        return TerrainBand.WATER
    h = relative_elevation(height)
    if h < LOWLAND_LIMIT:
        return TerrainBand.LOWLAND
    if h < GRASS_LIMIT:
        return TerrainBand.GRASS
    if h < ROCK_LIMIT:
        return TerrainBand.ROCK
    return TerrainBand.SNOW


def classify_grid(heights: np.ndarray, water: np.ndarray) -> np.ndarray:
    """Vectorized classify_cell over whole grids.

    Returns:
        int8 array of TerrainBand values with the shape of the inputs
    """
    h = np.asarray(heights, dtype=np.float64) / ELEVATION_REFERENCE
    bands = np.full(h.shape, TerrainBand.SNOW, dtype=np.int8)
    # Assign from highest to lowest so lower bands overwrite
    bands[h < ROCK_LIMIT] = TerrainBand.ROCK
    bands[h < GRASS_LIMIT] = TerrainBand.GRASS
    bands[h < LOWLAND_LIMIT] = TerrainBand.LOWLAND
    bands[np.asarray(water) > WATER_VISIBLE_DEPTH] = TerrainBand.WATER
    return bands
