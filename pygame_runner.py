# pygame_runner.py
"""
Pygame-CE frontend for the erosion sandbox.

Draws the terrain top-down, one colored square per grid cell, and ticks the
erosion engine once per frame while running.

Controls:
- Space: start/stop erosion
- .: single tick while paused
- R: reset terrain (same seed)
- N: new random seed
- +/-: density
- S: status line
- Left click: rain on the clicked cell
- H: show help
- ESC: quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

try:
    import pygame
except ImportError as exc:
    raise SystemExit("pygame-ce is required. Install with: pip install pygame-ce") from exc

import structlog

from main import (
    SimulationState,
    adjust_density,
    build_initial_state,
    handle_command,
    simulate_tick,
)
from keybindings import (
    CONTROL_DESCRIPTIONS,
    DENSITY_DOWN_KEYS,
    DENSITY_UP_KEYS,
    HELP_KEY,
    NEW_SEED_KEY,
    QUIT_KEY,
    RESET_KEY,
    STATUS_KEY,
    STEP_KEY,
    TOGGLE_KEY,
)
from config import (
    DEFAULT_SEED,
    DENSITY_DEFAULT,
    DENSITY_STEP,
    GRID_HEIGHT,
    GRID_WIDTH,
)
from render import (
    cell_at,
    render_event_log,
    render_help_overlay,
    render_status,
    render_terrain,
)
from render.config import (
    CELL_SIZE,
    COLOR_BG_DARK,
    FONT_SIZE,
    LINE_HEIGHT,
    LOG_PANEL_HEIGHT,
    MAP_MARGIN,
    TARGET_FPS,
)

logger = structlog.get_logger()


def configure_logging(level: str = "INFO") -> None:
    """Route structlog through the standard library with a console renderer."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.upper())
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def handle_key(state: SimulationState, key: int) -> bool:
    """Map a key press to a controller command. Returns True to quit."""
    if key == QUIT_KEY:
        return True
    if key == TOGGLE_KEY:
        return handle_command(state, "toggle", [])
    if key == STEP_KEY:
        if not state.running:
            state.engine.tick()
        return False
    if key == RESET_KEY:
        return handle_command(state, "reset", [])
    if key == NEW_SEED_KEY:
        return handle_command(state, "seed", [])
    if key == STATUS_KEY:
        return handle_command(state, "status", [])
    if key in DENSITY_UP_KEYS:
        adjust_density(state, DENSITY_STEP)
    elif key in DENSITY_DOWN_KEYS:
        adjust_density(state, -DENSITY_STEP)
    return False


def run(
    width: int = GRID_WIDTH,
    height: int = GRID_HEIGHT,
    seed: int = DEFAULT_SEED,
    density: float = DENSITY_DEFAULT,
    cell_size: int = CELL_SIZE,
) -> None:
    """Main animation loop."""
    state = build_initial_state(width=width, height=height, seed=seed, density=density)
    state.messages.append("Press H for help.")

    pygame.init()
    map_w, map_h = width * cell_size, height * cell_size
    window_w = max(map_w + 2 * MAP_MARGIN, 480)
    window_h = map_h + 2 * MAP_MARGIN + LINE_HEIGHT + LOG_PANEL_HEIGHT
    screen = pygame.display.set_mode((window_w, window_h))
    pygame.display.set_caption("Erosion Sandbox")

    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()
    map_origin = (MAP_MARGIN, MAP_MARGIN)
    map_rect = pygame.Rect(map_origin, (map_w, map_h))
    show_help = False

    running = True
    while running:
        clock.tick(TARGET_FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == HELP_KEY:
                    show_help = not show_help
                elif handle_key(state, event.key):
                    running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = cell_at(event.pos, map_rect, cell_size)
                if cell is not None:
                    handle_command(state, "rain", [str(cell[0]), str(cell[1])])

        # One tick per frame while running
        simulate_tick(state)

        screen.fill(COLOR_BG_DARK)
        render_terrain(screen, state.engine, map_origin, cell_size)
        status_y = map_rect.bottom + MAP_MARGIN // 2
        render_status(screen, font, state, (MAP_MARGIN, status_y))
        log_pos = (MAP_MARGIN, status_y + LINE_HEIGHT + 4)
        if show_help:
            render_help_overlay(screen, font, CONTROL_DESCRIPTIONS, log_pos,
                                window_w - 2 * MAP_MARGIN, LOG_PANEL_HEIGHT - 8)
        else:
            render_event_log(screen, font, state, log_pos, LOG_PANEL_HEIGHT - 8)

        pygame.display.flip()

    logger.info("simulation_stopped", cycles=state.cycles, seed=state.seed)
    pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive terrain erosion sandbox")
    parser.add_argument("--width", type=int, default=GRID_WIDTH, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT, help="Grid height in cells")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Terrain seed")
    parser.add_argument("--density", type=float, default=DENSITY_DEFAULT, help="Calm-threshold multiplier")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Pixels per grid cell")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        run(args.width, args.height, args.seed, args.density, args.cell_size)
    except ValueError as exc:
        raise SystemExit(f"Cannot start: {exc}") from exc


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
