# simulation/config.py
"""
Configuration constants for the simulation domain.
Includes noise, rainfall, flow and erosion tuning values.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

# Terrain generation constants live with the noise functions
from world.noise import NOISE_OCTAVES, NOISE_SCALE

# =============================================================================
# WATER PHYSICS
# =============================================================================
RAIN_DROPS_PER_TICK = 5      # Random cells receiving rain each tick
RAIN_AMOUNT = 0.5            # Water added per rain drop
EVAPORATION_FACTOR = 0.9     # Fraction of water kept each tick
TRANSFER_RATE = 0.3          # Share of the surface drop moved downhill

# Flow thresholds
WATER_EPSILON = 0.01         # Cells with less water do not route flow
DRY_THRESHOLD = 1e-6         # Water below this evaporates completely

# =============================================================================
# EROSION & SEDIMENT
# =============================================================================
EROSION_RATE = 0.02          # Height removed per unit of flow
CALM_SLOPE_THRESHOLD = 0.5   # Drops below this let sediment settle
DEPOSITION_FRACTION = 0.1    # Share of suspended sediment deposited when calm

MIN_DENSITY = 0.01           # Lower bound for the calm-threshold multiplier


@dataclass(frozen=True)
class ErosionParams:
    """
    Tunable rates for one erosion engine.

    Setting a rate to zero disables that part of the tick, which is how
    tests isolate rainfall, flow, erosion and deposition.
    """
    rain_drops: int = RAIN_DROPS_PER_TICK
    rain_amount: float = RAIN_AMOUNT
    evaporation: float = EVAPORATION_FACTOR
    transfer_rate: float = TRANSFER_RATE
    erosion_rate: float = EROSION_RATE
    calm_threshold: float = CALM_SLOPE_THRESHOLD
    deposition_fraction: float = DEPOSITION_FRACTION
    water_epsilon: float = WATER_EPSILON
    dry_threshold: float = DRY_THRESHOLD
    octaves: int = NOISE_OCTAVES
    noise_scale: float = NOISE_SCALE

    def without_rain(self) -> "ErosionParams":
        return replace(self, rain_drops=0)

    def without_erosion(self) -> "ErosionParams":
        """Water still rains and evaporates but nothing moves or erodes."""
        return replace(self, transfer_rate=0.0, erosion_rate=0.0, deposition_fraction=0.0)


DEFAULT_PARAMS = ErosionParams()
