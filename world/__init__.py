# world/__init__.py
"""
World module: terrain noise and terrain bands.

Provides:
- Deterministic fractal noise and heightmap generation (from noise.py)
- Terrain band classification for renderers (from terrain.py)
"""

# Noise and heightmap generation
from world.noise import (
    hash_coords,
    value_noise,
    fractal_noise,
    generate_heightmap,
)

# Terrain bands
from world.terrain import (
    TerrainBand,
    classify_cell,
    classify_grid,
)

__all__ = [
    # Noise
    "hash_coords",
    "value_noise",
    "fractal_noise",
    "generate_heightmap",
    # Terrain
    "TerrainBand",
    "classify_cell",
    "classify_grid",
]
