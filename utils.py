"""
utils.py - Common utility functions for the erosion sandbox

Provides shared, stateless helper functions used across different modules.
"""
from __future__ import annotations

import random
from typing import Optional

from config import SEED_MAX


def clamp(val: float, low: float, high: float) -> float:
    """Clamp a value between low and high bounds."""
    return max(low, min(high, val))


def random_seed(rng: Optional[random.Random] = None) -> int:
    """Draw a fresh terrain seed."""
    return (rng or random).randint(0, SEED_MAX)
