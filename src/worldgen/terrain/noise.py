"""Seeded coherent noise with octave summation.

Each octave samples the base OpenSimplex field at twice the frequency and
half the amplitude of the previous one.
"""

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex


class NoiseField:
    """A deterministic 2D coherent noise field for a single seed."""

    def __init__(self, seed: int):
        """Initialize NoiseField.

        Args:
            seed: Unsigned 32-bit seed. Equal seeds give identical fields.
        """
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        """Sample the base noise at one point, roughly in [-1, 1]."""
        return self._simplex.noise2(x, y)

    def sample_fractal(self, x: float, y: float, octaves: int) -> float:
        """Sum `octaves` layers of noise at one point.

        Layer i samples at coordinates scaled by 2**i and contributes its
        value divided by 2**i.

        Args:
            x: Noise-space x coordinate.
            y: Noise-space y coordinate.
            octaves: Number of layers to sum.

        Returns:
            Fractal noise value, practically in [-1, 1] but may exceed it.
        """
        _check_octaves(octaves)
        value = 0.0
        for i in range(octaves):
            frequency = 2.0**i
            value += self._simplex.noise2(x * frequency, y * frequency) / frequency
        return value

    def sample_fractal_grid(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        octaves: int,
    ) -> NDArray[np.float64]:
        """Fractal-sample the outer product of two coordinate vectors.

        Args:
            xs: 1D array of noise-space x coordinates (columns).
            ys: 1D array of noise-space y coordinates (rows).
            octaves: Number of layers to sum.

        Returns:
            2D array of shape (len(ys), len(xs)).
        """
        _check_octaves(octaves)
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        result = np.zeros((ys.size, xs.size), dtype=np.float64)

        for i in range(octaves):
            frequency = 2.0**i
            result += self._simplex.noise2array(xs * frequency, ys * frequency) / frequency

        return result


def _check_octaves(octaves: int) -> None:
    if octaves < 1:
        raise ValueError(f"octaves must be at least 1, got {octaves}")
