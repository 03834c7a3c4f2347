# render/overlays.py
"""Overlay rendering: status line, help text, event log."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

import pygame

from render.primitives import draw_text
from render.config import (
    LINE_HEIGHT,
    COLOR_BG_PANEL,
    COLOR_PAUSED,
    COLOR_RUNNING,
    COLOR_TEXT_GRAY,
    COLOR_TEXT_HIGHLIGHT,
)

if TYPE_CHECKING:
    from main import SimulationState


def render_status(surface, font, state: "SimulationState", pos: Tuple[int, int]) -> None:
    """Render the one-line cycle counter and run state."""
    x, y = pos
    if state.running:
        label, color = "RUNNING", COLOR_RUNNING
    else:
        label, color = "PAUSED", COLOR_PAUSED
    draw_text(surface, font, label, (x, y), color=color)
    draw_text(
        surface, font,
        f"Cycle {state.cycles}  seed {state.seed}  density {state.density:.1f}",
        (x + 90, y),
        color=COLOR_TEXT_GRAY,
    )


def render_help_overlay(
    surface,
    font,
    controls: List[str],
    pos: Tuple[int, int],
    available_width: int,
    available_height: int,
) -> None:
    """Render the help overlay with control descriptions."""
    x, y = pos
    col_width, row_height = 150, LINE_HEIGHT
    cols = max(1, available_width // col_width)

    pygame.draw.rect(surface, COLOR_BG_PANEL, (x - 4, y - 4, available_width, available_height), 0)
    draw_text(surface, font, "CONTROLS", (x, y), color=COLOR_TEXT_HIGHLIGHT)
    y += row_height + 4

    for i, control in enumerate(controls):
        cx = x + (i % cols * col_width)
        cy = y + (i // cols * row_height)
        if cy + row_height < pos[1] + available_height:
            draw_text(surface, font, control, (cx, cy), color=COLOR_TEXT_GRAY)


def render_event_log(
    surface,
    font,
    state: "SimulationState",
    pos: Tuple[int, int],
    max_height: int,
) -> None:
    """Render the most recent controller messages, newest at the bottom."""
    log_x, log_y = pos
    visible = max(0, max_height // LINE_HEIGHT)
    messages = list(state.messages)[-visible:] if visible else []
    for i, message in enumerate(messages):
        draw_text(surface, font, message, (log_x, log_y + i * LINE_HEIGHT), color=COLOR_TEXT_GRAY)
