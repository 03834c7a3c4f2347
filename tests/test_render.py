"""Tests for terrain bands and render colors."""

import numpy as np
import pytest

from render.colors import apply_brightness, elevation_shade, terrain_color, terrain_color_grid
from render.config import BAND_COLORS
from render.map import cell_at
from world.terrain import TerrainBand, classify_cell, classify_grid


class TestTerrainBands:
    """Test band classification."""

    @pytest.mark.parametrize("height,water,band", [
        (10.0, 0.5, TerrainBand.WATER),
        (55.0, 0.31, TerrainBand.WATER),
        (10.0, 0.0, TerrainBand.LOWLAND),
        (25.0, 0.3, TerrainBand.GRASS),
        (40.0, 0.0, TerrainBand.ROCK),
        (50.0, 0.1, TerrainBand.SNOW),
    ])
    def test_classify_cell(self, height, water, band):
        assert classify_cell(height, water) == band

    def test_classify_grid_matches_cells(self):
        rng = np.random.default_rng(0)
        heights = rng.uniform(0.0, 70.0, (12, 9))
        water = rng.uniform(0.0, 0.6, (12, 9))
        bands = classify_grid(heights, water)
        for z in range(12):
            for x in range(9):
                assert bands[z, x] == classify_cell(heights[z, x], water[z, x])


class TestColors:
    """Test color shading."""

    def test_shade_grows_with_height(self):
        assert elevation_shade(0.0) == pytest.approx(0.6)
        assert elevation_shade(60.0) == pytest.approx(1.0)

    def test_apply_brightness_clamps(self):
        assert apply_brightness((200, 100, 10), 2.0) == (255, 200, 20)

    def test_water_color(self):
        assert terrain_color(60.0, 1.0) == BAND_COLORS[TerrainBand.WATER]

    def test_grid_matches_single_cells(self):
        heights = np.array([[5.0, 20.0, 35.0], [45.0, 59.0, 12.0]])
        water = np.array([[0.0, 0.4, 0.0], [0.0, 0.0, 0.31]])
        colors = terrain_color_grid(heights, water)
        assert colors.shape == (2, 3, 3)
        assert colors.dtype == np.uint8
        for z in range(2):
            for x in range(3):
                assert tuple(int(c) for c in colors[z, x]) == terrain_color(heights[z, x], water[z, x])


class TestCellAt:
    """Test screen to grid conversion."""

    def test_inside_and_outside(self):
        import pygame

        rect = pygame.Rect(10, 10, 100, 50)
        assert cell_at((10, 10), rect, 10) == (0, 0)
        assert cell_at((109, 59), rect, 10) == (9, 4)
        assert cell_at((5, 30), rect, 10) is None


class TestRenderConfig:
    """Test the shared render constants."""

    def test_color_alias_is_shared(self):
        import render
        import render.colors
        import render.config
        import render.primitives

        assert render.Color is render.config.Color
        assert render.colors.Color is render.config.Color
        assert render.primitives.Color is render.config.Color

    def test_every_ui_color_is_used(self):
        from pathlib import Path

        import render.config

        root = Path(render.config.__file__).resolve().parent.parent
        sources = "".join(
            path.read_text()
            for path in [root / "pygame_runner.py", *(root / "render").glob("*.py")]
            if path.name != "config.py"
        )
        names = [name for name in vars(render.config) if name.startswith("COLOR_")]
        assert names
        unused = [name for name in names if name not in sources]
        assert unused == []
