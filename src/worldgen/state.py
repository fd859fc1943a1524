"""Generated world map state."""

from collections import Counter

import numpy as np
from numpy.typing import NDArray

from .config import WorldGenConfig
from .types import BiomeTag, TerrainTag


class WorldMap:
    """Co-indexed terrain, biome, elevation and precipitation grids.

    All grids have shape (height, width), row 0 at the north edge. Once
    generation finishes the grids are frozen (read-only numpy arrays).
    """

    def __init__(
        self,
        terrain: NDArray[np.uint8],
        biomes: NDArray[np.uint8],
        elevation: NDArray[np.float64],
        precipitation: NDArray[np.float64],
        config: WorldGenConfig,
        seed_elevation: int,
        seed_precipitation: int,
    ):
        shapes = {a.shape for a in (terrain, biomes, elevation, precipitation)}
        if len(shapes) != 1:
            raise ValueError(f"Grid shapes differ: {sorted(shapes)}")

        self.terrain = terrain
        self.biomes = biomes
        self.elevation = elevation
        self.precipitation = precipitation
        self.config = config
        self.seed_elevation = seed_elevation
        self.seed_precipitation = seed_precipitation

    @property
    def width(self) -> int:
        return self.terrain.shape[1]

    @property
    def height(self) -> int:
        return self.terrain.shape[0]

    def terrain_at(self, x: int, y: int) -> TerrainTag:
        return TerrainTag.from_code(self.terrain[y, x])

    def biome_at(self, x: int, y: int) -> BiomeTag:
        return BiomeTag.from_code(self.biomes[y, x])

    def biome_counts(self) -> dict[BiomeTag, int]:
        """Number of cells per biome, omitting biomes that do not occur."""
        counts = Counter(self.biomes.ravel().tolist())
        return {
            BiomeTag.from_code(code): count
            for code, count in sorted(counts.items())
        }

    def freeze(self) -> None:
        """Make every grid read-only."""
        for grid in (self.terrain, self.biomes, self.elevation, self.precipitation):
            grid.flags.writeable = False
