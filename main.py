# main.py
"""
Erosion Sandbox - procedural terrain shaped by rain.

Controller for the erosion engine: owns the engine, tracks whether the
simulation is running, and turns text commands into lifecycle calls.
"""
from __future__ import annotations

import collections
import random
from dataclasses import dataclass, field
from typing import Deque, List, Optional

import structlog

from config import (
    DEFAULT_SEED,
    DENSITY_DEFAULT,
    DENSITY_MAX,
    DENSITY_MIN,
    GRID_HEIGHT,
    GRID_WIDTH,
    MANUAL_RAIN_AMOUNT,
    MESSAGE_LOG_SIZE,
    START_RUNNING,
)
from simulation.config import ErosionParams
from simulation.erosion import ErosionEngine
from utils import clamp, random_seed

logger = structlog.get_logger()


@dataclass
class SimulationState:
    """Everything the animation loop needs between frames."""
    engine: ErosionEngine
    running: bool = START_RUNNING
    density: float = DENSITY_DEFAULT
    messages: Deque[str] = field(default_factory=lambda: collections.deque(maxlen=MESSAGE_LOG_SIZE))
    rng: random.Random = field(default_factory=random.Random)

    @property
    def seed(self) -> int:
        return self.engine.seed

    @property
    def cycles(self) -> int:
        return self.engine.tick_count


def build_initial_state(
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    seed: int = DEFAULT_SEED,
    density: float = DENSITY_DEFAULT,
    params: Optional[ErosionParams] = None,
) -> SimulationState:
    """Create the engine and wrap it in a fresh controller state.

    Raises ValueError for invalid grid dimensions.
    """
    density = clamp(density, DENSITY_MIN, DENSITY_MAX)
    engine = ErosionEngine(width, height, seed=seed, params=params, density=density)
    state = SimulationState(engine=engine, density=density, rng=random.Random(seed))
    state.messages.append(f"Terrain generated (seed {seed}).")
    logger.info("simulation_started", width=width, height=height, seed=seed, density=density)
    return state


def simulate_tick(state: SimulationState) -> bool:
    """Advance one tick if running. Returns True if the engine ticked."""
    if not state.running:
        return False
    state.engine.tick()
    return True


def start(state: SimulationState) -> None:
    state.running = True
    state.messages.append("Erosion running.")


def stop(state: SimulationState) -> None:
    state.running = False
    state.messages.append("Erosion paused.")


def toggle(state: SimulationState) -> None:
    if state.running:
        stop(state)
    else:
        start(state)


def reset(state: SimulationState, seed: Optional[int] = None) -> None:
    """Rebuild the terrain from the given seed, or the current one."""
    state.engine.reset(seed)
    state.messages.append(f"Terrain reset (seed {state.engine.seed}).")
    logger.info("terrain_reset", seed=state.engine.seed)


def new_seed(state: SimulationState) -> None:
    reset(state, random_seed(state.rng))


def set_density(state: SimulationState, value: float) -> None:
    """Change the density slider; values are clamped to the slider range."""
    state.density = clamp(float(value), DENSITY_MIN, DENSITY_MAX)
    state.engine.set_density(state.density)
    state.messages.append(f"Density {state.density:.1f}.")


def adjust_density(state: SimulationState, delta: float) -> None:
    set_density(state, round(state.density + delta, 3))


def rain_at(state: SimulationState, x: int, z: int, amount: float = MANUAL_RAIN_AMOUNT) -> None:
    x, z = state.engine.clamp_coords(x, z)
    state.engine.add_water(x, z, amount)
    state.messages.append(f"Rain at {x},{z}.")


def show_status(state: SimulationState) -> None:
    stats = state.engine.stats()
    mode = "running" if state.running else "paused"
    state.messages.append(
        f"Cycle {stats.tick_count} ({mode}) | seed {state.seed} | density {state.density:.1f} | "
        f"water {stats.total_water:.2f} | sediment {stats.total_sediment:.3f} | "
        f"height {stats.min_height:.1f}-{stats.max_height:.1f}"
    )


def handle_command(state: SimulationState, cmd: str, args: List[str]) -> bool:
    """Process a controller command. Returns True if the loop should quit."""
    command_map = {
        "start": lambda s, a: start(s),
        "stop": lambda s, a: stop(s),
        "toggle": lambda s, a: toggle(s),
        "reset": lambda s, a: reset(s, int(a[0]) if a else None),
        "seed": lambda s, a: new_seed(s),
        "density": lambda s, a: set_density(s, float(a[0])) if a else s.messages.append("Usage: density <value>"),
        "rain": lambda s, a: rain_at(s, int(a[0]), int(a[1])),
        "status": lambda s, a: show_status(s),
    }
    if cmd == "quit":
        return True
    handler = command_map.get(cmd)
    if not handler:
        state.messages.append(f"Unknown command: {cmd}")
        return False
    try:
        handler(state, args)
    except (TypeError, ValueError, IndexError):
        state.messages.append(f"Invalid usage for '{cmd}'.")
    logger.debug("command_handled", command=cmd, args=args)
    return False
