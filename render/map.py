# render/map.py
"""Top-down terrain map rendering.

Reads the engine's height and water grids once per frame and draws one
colored square per cell. Never writes to the engine.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import pygame

from render.colors import terrain_color_grid

if TYPE_CHECKING:
    from simulation.erosion import ErosionEngine


def render_terrain(
    surface: pygame.Surface,
    engine: "ErosionEngine",
    origin: Tuple[int, int],
    cell_size: int,
) -> pygame.Rect:
    """Draw the whole grid with its top-left corner at origin.

    Returns:
        The screen rect covered by the map.
    """
    colors = terrain_color_grid(engine.heights, engine.water)
    # Grids are indexed [z, x]; surfarray expects [x, y]
    cells = pygame.surfarray.make_surface(colors.transpose(1, 0, 2))
    size = (engine.width * cell_size, engine.height * cell_size)
    scaled = pygame.transform.scale(cells, size)
    return surface.blit(scaled, origin)


def cell_at(
    pos: Tuple[int, int],
    map_rect: pygame.Rect,
    cell_size: int,
) -> Tuple[int, int] | None:
    """Grid cell (x, z) under a screen position, or None outside the map."""
    if not map_rect.collidepoint(pos):
        return None
    return (pos[0] - map_rect.x) // cell_size, (pos[1] - map_rect.y) // cell_size
