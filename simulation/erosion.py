# simulation/erosion.py
"""Grid-based hydraulic erosion.

The engine owns three same-sized fields (height, water, sediment) and
advances them one discrete tick at a time.

Key concepts:
- Each field is one flat float64 buffer of width*height cells, indexed z*width + x
- Flow is 4-directional: a wet cell sends water to its lowest neighbor surface
- Every tick reads a snapshot and writes into separate "next" buffers, so the
  result does not depend on cell visitation order
- Border cells never erode and water never leaves the grid
- Nothing in a tick raises: results are clamped to stay finite and non-negative
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import structlog

from simulation.config import DEFAULT_PARAMS, MIN_DENSITY, ErosionParams
from utils import clamp
from world.noise import generate_heightmap

logger = structlog.get_logger()

Point = Tuple[int, int]

# Neighbor offsets (dx, dz) in tie-break order: -x, +x, -z, +z
NEIGHBOR_OFFSETS: Tuple[Point, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
_OFFSET_DX = np.array([dx for dx, _ in NEIGHBOR_OFFSETS], dtype=np.int64)
_OFFSET_DZ = np.array([dz for _, dz in NEIGHBOR_OFFSETS], dtype=np.int64)


@dataclass(frozen=True)
class ErosionStats:
    """Snapshot of aggregate engine state, for status lines and benchmarks."""
    tick_count: int
    total_water: float
    total_sediment: float
    min_height: float
    max_height: float
    wet_cells: int


def validate_dimensions(width: int, height: int) -> None:
    """Raise ValueError unless both dimensions are positive integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Grid {name} must be an integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"Grid {name} must be positive, got {value}")


class ErosionEngine:
    """
    Heightmap, water and sediment grids plus the rules that update them.

    Construction is all-or-nothing: invalid dimensions raise ValueError before
    any grid exists. Once built the engine is always ready; tick() may be
    called indefinitely and never raises.

    Accessors clamp out-of-range coordinates into the grid, so reading
    (-3, 100) on a 50x50 grid returns cell (0, 49).
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: int = 0,
        params: Optional[ErosionParams] = None,
        density: float = 1.0,
    ):
        validate_dimensions(width, height)

        self.width = int(width)
        self.height = int(height)
        self.params = params if params is not None else DEFAULT_PARAMS
        self.density = 1.0
        self.seed = int(seed)
        self.tick_count = 0

        size = self.width * self.height
        self._height = np.zeros(size, dtype=np.float64)
        self._water = np.zeros(size, dtype=np.float64)
        self._sediment = np.zeros(size, dtype=np.float64)
        self._rng = np.random.default_rng(0)

        self._interior_src, self._interior_shape = self._build_interior_index()

        self.set_density(density)
        self.reset(seed)

    @classmethod
    def from_grids(
        cls,
        heights: np.ndarray,
        water: Optional[np.ndarray] = None,
        sediment: Optional[np.ndarray] = None,
        params: Optional[ErosionParams] = None,
        seed: int = 0,
    ) -> "ErosionEngine":
        """Build an engine around hand-made (height, width) grids instead of noise.

        Negative and non-finite values are clamped to zero. reset() still
        regenerates terrain from the seed.
        """
        heights = np.asarray(heights, dtype=np.float64)
        if heights.ndim != 2:
            raise ValueError(f"Grids must be 2D, got shape {heights.shape}")
        grid_h, grid_w = heights.shape
        engine = cls(grid_w, grid_h, seed=seed, params=params)

        for buffer, values in (
            (engine._height, heights),
            (engine._water, water),
            (engine._sediment, sediment),
        ):
            if values is None:
                continue
            values = np.asarray(values, dtype=np.float64)
            if values.shape != heights.shape:
                raise ValueError(f"Grid shape {values.shape} does not match {heights.shape}")
            clean = np.nan_to_num(values, nan=0.0, posinf=0.0, neginf=0.0)
            np.fmax(clean.ravel(), 0.0, out=buffer)
        return engine

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def reset(self, seed: Optional[int] = None) -> None:
        """Rebuild all grids in place from a seed (default: the current seed).

        The same seed always reproduces a bit-identical heightmap and the same
        sequence of rainfall draws.
        """
        if seed is not None:
            self.seed = int(seed)

        terrain = generate_heightmap(
            self.width,
            self.height,
            self.seed,
            octaves=self.params.octaves,
            scale=self.params.noise_scale,
        )
        self._height[:] = terrain.ravel()
        self._water.fill(0.0)
        self._sediment.fill(0.0)
        self._rng = np.random.default_rng(self.seed % 2**64)
        self.tick_count = 0

        logger.debug(
            "terrain_generated",
            seed=self.seed,
            width=self.width,
            height=self.height,
            min_height=float(terrain.min()),
            max_height=float(terrain.max()),
        )

    def set_density(self, density: float) -> None:
        """Scale the calm-slope threshold. Invalid values are ignored."""
        try:
            value = float(density)
        except (TypeError, ValueError):
            return
        if not math.isfinite(value):
            return
        self.density = max(MIN_DENSITY, value)
        logger.debug("density_set", density=self.density)

    @property
    def calm_threshold(self) -> float:
        return self.params.calm_threshold * self.density

    # =========================================================================
    # SIMULATION
    # =========================================================================

    def tick(self) -> None:
        """Advance all grids by one step.

        1. Rainfall on a few random cells
        2. Evaporation into a fresh water buffer
        3. Flow routing, erosion and calm-slope deposition over interior cells,
           reading the post-rain snapshot
        4. Commit the buffers
        """
        p = self.params
        self._inject_rain()

        shape = (self.height, self.width)
        height = self._height.reshape(shape)
        water = self._water.reshape(shape)
        sediment = self._sediment.reshape(shape)

        evaporation = clamp(p.evaporation, 0.0, 1.0)
        next_water = water * evaporation
        next_height = height.copy()
        next_sediment = sediment.copy()

        if self.width >= 3 and self.height >= 3:
            self._route_flow(height, water, sediment, next_height, next_water, next_sediment)

        next_water[next_water < p.dry_threshold] = 0.0

        # fmax also maps any NaN to zero
        np.fmax(next_height.ravel(), 0.0, out=self._height)
        np.fmax(next_water.ravel(), 0.0, out=self._water)
        np.fmax(next_sediment.ravel(), 0.0, out=self._sediment)
        self.tick_count += 1

    def _inject_rain(self) -> None:
        drops = max(0, int(self.params.rain_drops))
        amount = max(0.0, self.params.rain_amount)
        if drops == 0 or amount == 0.0:
            return
        cells = self._rng.integers(0, self._water.size, size=drops)
        np.add.at(self._water, cells, amount)

    def _build_interior_index(self) -> Tuple[np.ndarray, Tuple[int, int]]:
        """Flat indices of interior cells, shaped like the interior block."""
        w, h = self.width, self.height
        if w < 3 or h < 3:
            return np.zeros((0, 0), dtype=np.int64), (0, 0)
        zs, xs = np.mgrid[1:h - 1, 1:w - 1]
        return zs * w + xs, (h - 2, w - 2)

    def _route_flow(
        self,
        height: np.ndarray,
        water: np.ndarray,
        sediment: np.ndarray,
        next_height: np.ndarray,
        next_water: np.ndarray,
        next_sediment: np.ndarray,
    ) -> None:
        """Move water downhill, erode sources and settle sediment on calm cells.

        Reads only height, water and sediment (the snapshot). Writes only the
        next_* buffers, accumulating with np.add.at where several cells can
        target the same destination.
        """
        p = self.params
        w, h = self.width, self.height
        inner = (slice(1, -1), slice(1, -1))

        surface = height + water
        center = surface[inner]

        # Neighbor surfaces aligned with the interior block, one layer per offset
        neighbors = np.stack([
            surface[1 + dz:h - 1 + dz, 1 + dx:w - 1 + dx]
            for dx, dz in NEIGHBOR_OFFSETS
        ])
        choice = np.argmin(neighbors, axis=0)
        lowest = np.take_along_axis(neighbors, choice[np.newaxis], axis=0)[0]
        drop = center - lowest

        # --- Flow and erosion ---
        src_water = water[inner]
        moving = (src_water >= p.water_epsilon) & (drop > 0)
        if np.any(moving):
            transfer_rate = max(0.0, p.transfer_rate)
            flow = np.minimum(src_water, drop * transfer_rate)
            # A cell can never send more than it keeps after evaporation
            flow = np.minimum(flow, next_water[inner])
            flow = flow[moving]

            erosion_rate = max(0.0, p.erosion_rate)
            eroded = np.minimum(flow * erosion_rate, height[inner][moving])

            src = self._interior_src[moving]
            dst = src + _OFFSET_DZ[choice[moving]] * w + _OFFSET_DX[choice[moving]]

            water_flat = next_water.reshape(-1)
            height_flat = next_height.reshape(-1)
            sediment_flat = next_sediment.reshape(-1)

            # Sources are unique (one outflow per cell); destinations may repeat
            water_flat[src] -= flow
            np.add.at(water_flat, dst, flow)
            height_flat[src] -= eroded
            np.add.at(sediment_flat, dst, eroded)

        # --- Calm-slope deposition ---
        fraction = clamp(p.deposition_fraction, 0.0, 1.0)
        if fraction > 0.0:
            calm = np.maximum(drop, 0.0) < self.calm_threshold
            deposit = np.where(calm, sediment[inner] * fraction, 0.0)
            next_height[inner] += deposit
            next_sediment[inner] -= deposit

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def clamp_coords(self, x: int, z: int) -> Point:
        """The in-grid cell that accessors use for (x, z)."""
        return (
            int(clamp(int(x), 0, self.width - 1)),
            int(clamp(int(z), 0, self.height - 1)),
        )

    def _index(self, x: int, z: int) -> int:
        cx, cz = self.clamp_coords(x, z)
        return cz * self.width + cx

    def height_at(self, x: int, z: int) -> float:
        """Terrain elevation at (x, z). Out-of-range coordinates are clamped."""
        return float(self._height[self._index(x, z)])

    def water_at(self, x: int, z: int) -> float:
        """Water depth at (x, z). Out-of-range coordinates are clamped."""
        return float(self._water[self._index(x, z)])

    def sediment_at(self, x: int, z: int) -> float:
        """Suspended sediment at (x, z). Out-of-range coordinates are clamped."""
        return float(self._sediment[self._index(x, z)])

    def add_water(self, x: int, z: int, amount: float) -> None:
        """Single rain event at (x, z). Non-positive or non-finite amounts are ignored."""
        if not math.isfinite(amount) or amount <= 0:
            return
        self._water[self._index(x, z)] += amount

    def _read_only(self, buffer: np.ndarray) -> np.ndarray:
        view = buffer.reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    @property
    def heights(self) -> np.ndarray:
        """Read-only (height, width) view of the heightmap, indexed [z, x]."""
        return self._read_only(self._height)

    @property
    def water(self) -> np.ndarray:
        """Read-only (height, width) view of the water grid, indexed [z, x]."""
        return self._read_only(self._water)

    @property
    def sediment(self) -> np.ndarray:
        """Read-only (height, width) view of the sediment grid, indexed [z, x]."""
        return self._read_only(self._sediment)

    def total_water(self) -> float:
        return float(np.sum(self._water))

    def total_sediment(self) -> float:
        return float(np.sum(self._sediment))

    def stats(self) -> ErosionStats:
        return ErosionStats(
            tick_count=self.tick_count,
            total_water=self.total_water(),
            total_sediment=self.total_sediment(),
            min_height=float(np.min(self._height)),
            max_height=float(np.max(self._height)),
            wet_cells=int(np.count_nonzero(self._water >= self.params.water_epsilon)),
        )
