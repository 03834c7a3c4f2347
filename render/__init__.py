# render/__init__.py
"""
Rendering module for the erosion sandbox pygame frontend.

Provides modular rendering functions for the terrain map and overlays.
"""
from render.config import Color
from render.colors import (
    elevation_shade,
    apply_brightness,
    terrain_color,
    terrain_color_grid,
)
from render.primitives import draw_text
from render.map import render_terrain, cell_at
from render.overlays import render_status, render_help_overlay, render_event_log

__all__ = [
    # Colors
    "Color",
    "elevation_shade",
    "apply_brightness",
    "terrain_color",
    "terrain_color_grid",
    # Primitives
    "draw_text",
    # Map
    "render_terrain",
    "cell_at",
    # Overlays
    "render_status",
    "render_help_overlay",
    "render_event_log",
]
