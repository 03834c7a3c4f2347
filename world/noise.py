# world/noise.py
"""
Deterministic noise for terrain generation.

All functions are pure: the same (seed, x, z) always gives the same value,
so a seed fully reproduces a heightmap. Inputs may be scalars or NumPy
arrays; arrays are evaluated element-wise.
"""
from __future__ import annotations

from typing import Union

import numpy as np

ArrayLike = Union[int, float, np.ndarray]

# Terrain generation parameters
NOISE_OCTAVES = 4            # fBm octaves
NOISE_SCALE = 0.08           # Grid coordinate -> noise coordinate
ELEVATION_SCALE = 50.0       # Noise [0, 1) -> elevation span
ELEVATION_OFFSET = 10.0      # Minimum generated elevation

# Lattice hash constants (Mersenne prime modulus keeps products inside int64)
HASH_PRIME = 2147483647
HASH_X = 374761393
HASH_Z = 668265263
HASH_SEED = 1664525
HASH_MIX = 1274126177

OCTAVE_SEED_STEP = 7919     # Decorrelates the lattice of each octave


def hash_coords(x: ArrayLike, z: ArrayLike, seed: int = 0) -> np.ndarray:
    """Scramble integer lattice coordinates into a uniform-ish value in [0, 1).

    Any integer seed is accepted; it is reduced modulo the hash prime.
    """
    xs = np.asarray(x, dtype=np.int64) % HASH_PRIME
    zs = np.asarray(z, dtype=np.int64) % HASH_PRIME
    s = int(seed) % HASH_PRIME

    h = (xs * HASH_X + zs * HASH_Z + s * HASH_SEED) % HASH_PRIME
    h = h ^ (h >> 13)
    h = (h * HASH_MIX) % HASH_PRIME
    h = (h ^ (h >> 16)) % HASH_PRIME
    return h / float(HASH_PRIME)


def smooth_step(t: np.ndarray) -> np.ndarray:
    """Smooth interpolation function (3t² - 2t³)."""
    return t * t * (3.0 - 2.0 * t)


def value_noise(x: ArrayLike, z: ArrayLike, seed: int = 0) -> np.ndarray:
    """Smoothly interpolated lattice noise in [0, 1)."""
    x = np.asarray(x, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    x0 = np.floor(x)
    z0 = np.floor(z)
    ix = x0.astype(np.int64)
    iz = z0.astype(np.int64)

    u = smooth_step(x - x0)
    v = smooth_step(z - z0)

    v00 = hash_coords(ix, iz, seed)
    v10 = hash_coords(ix + 1, iz, seed)
    v01 = hash_coords(ix, iz + 1, seed)
    v11 = hash_coords(ix + 1, iz + 1, seed)

    near = v00 + u * (v10 - v00)
    far = v01 + u * (v11 - v01)
    return near + v * (far - near)


def fractal_noise(
    x: ArrayLike,
    z: ArrayLike,
    octaves: int = NOISE_OCTAVES,
    seed: int = 0,
) -> np.ndarray:
    """
    Fractal Brownian motion built from value noise.

    Each octave doubles the frequency and halves the amplitude. The sum is
    divided by the total amplitude used, so the result stays in [0, 1) for
    any octave count.

    Args:
        x, z: Noise-space coordinates
        octaves: Number of octaves to sum (values below 1 are treated as 1)
        seed: Random seed

    Returns:
        Noise values in [0, 1)
    """
    octaves = max(1, int(octaves))
    x = np.asarray(x, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    total = np.zeros(np.broadcast(x, z).shape, dtype=np.float64)
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0

    for i in range(octaves):
        octave_seed = int(seed) + i * OCTAVE_SEED_STEP
        total += amplitude * value_noise(x * frequency, z * frequency, octave_seed)
        max_value += amplitude
        amplitude *= 0.5
        frequency *= 2.0

    return total / max_value


def generate_heightmap(
    width: int,
    height: int,
    seed: int = 0,
    octaves: int = NOISE_OCTAVES,
    scale: float = NOISE_SCALE,
) -> np.ndarray:
    """
    Build a fully populated heightmap from fractal noise.

    Returns:
        (height, width) float64 array indexed [z, x], with values in
        [ELEVATION_OFFSET, ELEVATION_OFFSET + ELEVATION_SCALE)
    """
    if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
        raise ValueError(f"Grid dimensions must be integers, got {width!r}x{height!r}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    zs, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    values = fractal_noise(xs * scale, zs * scale, octaves, seed)
    return values * ELEVATION_SCALE + ELEVATION_OFFSET
