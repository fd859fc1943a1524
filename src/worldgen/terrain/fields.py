"""Elevation and precipitation field rasterization."""

import numpy as np
from numpy.typing import NDArray

from .noise import NoiseField

DEFAULT_SCALE = 0.00675
DEFAULT_OCTAVES = 25


def generate_fields(
    width: int,
    height: int,
    scale: float,
    octaves: int,
    seed_elevation: int,
    seed_precipitation: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Sample the elevation and precipitation fields over the whole map.

    Cell (x, y) samples noise space at (x * scale, y * scale). The two
    fields are seeded independently so they are uncorrelated.

    Args:
        width: Map width in cells.
        height: Map height in cells.
        scale: Noise-space distance between adjacent cells.
        octaves: Octaves summed per sample.
        seed_elevation: Seed of the elevation field.
        seed_precipitation: Seed of the precipitation field.

    Returns:
        Tuple of (elevation, precipitation), each of shape (height, width).
    """
    xs = np.arange(width, dtype=np.float64) * scale
    ys = np.arange(height, dtype=np.float64) * scale

    elevation = make_field(xs, ys, octaves, seed_elevation)
    precipitation = make_field(xs, ys, octaves, seed_precipitation)
    return elevation, precipitation


def make_field(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    octaves: int,
    seed: int,
) -> NDArray[np.float64]:
    """Fractal-sample one seeded field over the given noise coordinates."""
    return NoiseField(seed).sample_fractal_grid(xs, ys, octaves)
