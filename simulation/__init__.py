# simulation/__init__.py
"""Simulation modules for the erosion sandbox.

- erosion: Height/water/sediment grids and the per-tick erosion rules
- config: Tuning constants and ErosionParams
"""

from simulation.config import DEFAULT_PARAMS, ErosionParams
from simulation.erosion import ErosionEngine, ErosionStats

__all__ = ["DEFAULT_PARAMS", "ErosionParams", "ErosionEngine", "ErosionStats"]
