"""Tests for elevation/precipitation rasterization."""

import numpy as np

from worldgen.terrain.fields import generate_fields
from worldgen.terrain.noise import NoiseField


class TestGenerateFields:
    """Tests for generate_fields."""

    def test_output_shape(self) -> None:
        """Both grids are (height, width)."""
        elevation, precipitation = generate_fields(20, 8, 0.05, 3, 1, 2)
        assert elevation.shape == (8, 20)
        assert precipitation.shape == (8, 20)

    def test_deterministic(self) -> None:
        """Identical inputs produce bit-identical grids."""
        first = generate_fields(16, 16, 0.05, 4, 1, 2)
        second = generate_fields(16, 16, 0.05, 4, 1, 2)
        np.testing.assert_array_equal(first[0], second[0])
        np.testing.assert_array_equal(first[1], second[1])

    def test_fields_are_independent(self) -> None:
        """Elevation and precipitation come from different seeds."""
        elevation, precipitation = generate_fields(16, 16, 0.05, 4, 1, 2)
        assert not np.allclose(elevation, precipitation)

    def test_equal_seeds_give_equal_fields(self) -> None:
        elevation, precipitation = generate_fields(12, 12, 0.05, 4, 9, 9)
        np.testing.assert_array_equal(elevation, precipitation)

    def test_cell_samples_scaled_coordinates(self) -> None:
        """Cell (x, y) samples noise space at (x * scale, y * scale)."""
        scale = 0.07
        elevation, _ = generate_fields(10, 6, scale, 5, 31, 32)
        field = NoiseField(31)
        for x, y in [(0, 0), (9, 0), (3, 5), (7, 2)]:
            expected = field.sample_fractal(x * scale, y * scale, 5)
            np.testing.assert_allclose(elevation[y, x], expected, atol=1e-9)

    def test_origin_cell(self) -> None:
        """Cell (0, 0) samples the noise-space origin."""
        elevation, _ = generate_fields(4, 4, 0.05, 4, 1, 2)
        field = NoiseField(1)
        np.testing.assert_allclose(elevation[0, 0], field.sample_fractal(0.0, 0.0, 4), atol=1e-9)
