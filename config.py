# config.py
"""
Centralized configuration for the erosion sandbox.

This file contains high-level, cross-cutting constants.
Domain-specific constants are in:
- simulation/config.py (noise, rainfall, flow, erosion)
- render/config.py (colors, window layout)
"""
from __future__ import annotations

# =============================================================================
# CORE DESIGN
# =============================================================================
# Simulation grid resolution (fixed for the lifetime of one engine)
GRID_WIDTH = 50
GRID_HEIGHT = 50

# Seed used when the controller starts without one
DEFAULT_SEED = 0
SEED_MAX = 2**31 - 1

# =============================================================================
# TIME & SIMULATION
# =============================================================================
TICK_INTERVAL = 1.0 / 60.0   # Seconds per simulation tick (one tick per frame)
START_RUNNING = True         # Erosion runs as soon as the window opens

# Density slider range (scales the calm-slope threshold)
DENSITY_DEFAULT = 1.0
DENSITY_MIN = 0.1
DENSITY_MAX = 4.0
DENSITY_STEP = 0.1

# =============================================================================
# CONTROLLER
# =============================================================================
MESSAGE_LOG_SIZE = 100       # Messages kept by the controller

# Rain events triggered by hand (controller "rain" command)
MANUAL_RAIN_AMOUNT = 0.5

