"""Tests for the terrain noise functions."""

import numpy as np
import pytest

from world.noise import (
    ELEVATION_OFFSET,
    ELEVATION_SCALE,
    fractal_noise,
    generate_heightmap,
    hash_coords,
    value_noise,
)


class TestHashCoords:
    """Test the lattice hash."""

    def test_range(self):
        zs, xs = np.mgrid[-50:50, -50:50]
        values = hash_coords(xs, zs, seed=123)
        assert values.min() >= 0.0
        assert values.max() < 1.0

    def test_pure_function(self):
        assert hash_coords(3, 4, 99) == hash_coords(3, 4, 99)
        xs = np.arange(20)
        np.testing.assert_array_equal(hash_coords(xs, xs, 5), hash_coords(xs, xs, 5))

    def test_seed_changes_values(self):
        xs = np.arange(64)
        assert not np.array_equal(hash_coords(xs, 0, 1), hash_coords(xs, 0, 2))

    def test_any_seed_is_accepted(self):
        for seed in (-1, 0, 2**31 - 1, 2**40, -(2**62)):
            value = float(hash_coords(7, 11, seed))
            assert 0.0 <= value < 1.0

    def test_values_spread_out(self):
        """Neighbouring lattice points should not collapse to a few values."""
        zs, xs = np.mgrid[0:32, 0:32]
        values = hash_coords(xs, zs, 0)
        assert len(np.unique(values)) > 1000
        assert 0.35 < values.mean() < 0.65


class TestFractalNoise:
    """Test value noise and fBm."""

    @pytest.fixture
    def coords(self):
        zs, xs = np.mgrid[0:40, 0:40]
        return xs * 0.13, zs * 0.13

    def test_value_noise_matches_lattice(self):
        """At integer coordinates the interpolation returns the lattice hash."""
        assert value_noise(4.0, 9.0, 3) == pytest.approx(float(hash_coords(4, 9, 3)))

    @pytest.mark.parametrize("octaves", [1, 2, 4, 8])
    def test_range(self, coords, octaves):
        values = fractal_noise(coords[0], coords[1], octaves=octaves, seed=17)
        assert values.min() >= 0.0
        assert values.max() < 1.0

    def test_zero_octaves_treated_as_one(self, coords):
        np.testing.assert_array_equal(
            fractal_noise(coords[0], coords[1], octaves=0, seed=1),
            fractal_noise(coords[0], coords[1], octaves=1, seed=1),
        )

    def test_smooth(self):
        """Small steps in input produce small steps in output."""
        xs = np.linspace(0.0, 5.0, 2001)
        values = fractal_noise(xs, np.zeros_like(xs), octaves=4, seed=8)
        assert np.max(np.abs(np.diff(values))) < 0.05


class TestGenerateHeightmap:
    """Test heightmap generation."""

    def test_shape_is_rows_by_columns(self):
        terrain = generate_heightmap(7, 5, seed=1)
        assert terrain.shape == (5, 7)
        assert terrain.dtype == np.float64

    def test_elevation_range(self):
        terrain = generate_heightmap(50, 50, seed=2024)
        assert terrain.min() >= ELEVATION_OFFSET
        assert terrain.max() < ELEVATION_OFFSET + ELEVATION_SCALE

    def test_deterministic(self):
        np.testing.assert_array_equal(generate_heightmap(30, 20, seed=9), generate_heightmap(30, 20, seed=9))

    def test_seed_changes_terrain(self):
        assert not np.array_equal(generate_heightmap(30, 20, seed=9), generate_heightmap(30, 20, seed=10))

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-3, 4), (4.5, 4)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ValueError):
            generate_heightmap(width, height)
