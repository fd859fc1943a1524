"""Map colorization: (terrain, biome) palette with elevation snow-capping."""

import numpy as np
from numpy.typing import NDArray

from ..state import WorldMap
from ..types import BiomeTag, TerrainTag

RGB = tuple[int, int, int]

WHITE: RGB = (255, 255, 255)

# Every pair the classifier can emit, plus the coastal/wetland vocabulary.
BASE_COLORS: dict[tuple[TerrainTag, BiomeTag], RGB] = {
    (TerrainTag.WATER, BiomeTag.OCEAN): (42, 132, 171),
    (TerrainTag.WATER, BiomeTag.COAST): (47, 172, 225),
    (TerrainTag.WATER, BiomeTag.BEACH): (92, 207, 255),
    (TerrainTag.WATER, BiomeTag.ICE): (188, 230, 240),
    (TerrainTag.LAND, BiomeTag.GRASSLAND): (34, 139, 34),
    (TerrainTag.LAND, BiomeTag.FOREST): (21, 111, 48),
    (TerrainTag.LAND, BiomeTag.JUNGLE): (41, 120, 24),
    (TerrainTag.LAND, BiomeTag.RAINFOREST): (0, 90, 40),
    (TerrainTag.LAND, BiomeTag.SWAMP): (0, 102, 51),
    (TerrainTag.LAND, BiomeTag.TUNDRA): (0, 153, 153),
    (TerrainTag.LAND, BiomeTag.TAIGA): (0, 173, 173),
    (TerrainTag.LAND, BiomeTag.MOUNTAIN): (139, 69, 19),
    (TerrainTag.LAND, BiomeTag.HIGHLAND): (95, 193, 123),
    (TerrainTag.LAND, BiomeTag.HILL): (74, 150, 96),
    (TerrainTag.LAND, BiomeTag.DESERT): (230, 155, 24),
    (TerrainTag.LAND, BiomeTag.STEPPE): (161, 144, 36),
    (TerrainTag.LAND, BiomeTag.ICE): (204, 255, 255),
    (TerrainTag.SNOW, BiomeTag.ICE): (255, 255, 255),
    (TerrainTag.SNOW, BiomeTag.MOUNTAIN): (200, 200, 210),
    (TerrainTag.SNOW, BiomeTag.HIGHLAND): (220, 230, 225),
    (TerrainTag.SNOW, BiomeTag.HILL): (230, 235, 230),
}

# Used when smoothing carries a biome onto terrain it was never classified on.
TERRAIN_DEFAULT_COLORS: dict[TerrainTag, RGB] = {
    TerrainTag.WATER: (42, 132, 171),
    TerrainTag.LAND: (34, 139, 34),
    TerrainTag.SNOW: (255, 255, 255),
}

ASCII_SYMBOLS: dict[TerrainTag, str] = {
    TerrainTag.WATER: "~",
    TerrainTag.LAND: "#",
    TerrainTag.SNOW: "^",
}


def base_color(terrain: TerrainTag, biome: BiomeTag) -> RGB:
    """Palette color for a pair, falling back to the terrain's default."""
    return BASE_COLORS.get((terrain, biome), TERRAIN_DEFAULT_COLORS[terrain])


def color_for(
    terrain: TerrainTag,
    biome: BiomeTag,
    elevation: float,
    precipitation: float,
) -> RGB:
    """Final pixel color of a cell.

    The base color is blended toward white by elevation / 2. The factor is
    not clamped, so each channel is saturated to [0, 255] before truncation.
    Precipitation does not affect the color.
    """
    factor = elevation / 2.0
    return tuple(
        int(min(max(channel * (1.0 - factor) + 255 * factor, 0.0), 255.0))
        for channel in base_color(terrain, biome)
    )


def build_palette() -> NDArray[np.float64]:
    """Base colors indexed by [terrain code, biome code, channel]."""
    palette = np.zeros((len(TerrainTag), len(BiomeTag), 3), dtype=np.float64)
    for terrain in TerrainTag:
        for biome in BiomeTag:
            palette[terrain.code, biome.code] = base_color(terrain, biome)
    return palette


def colorize_grids(
    terrain: NDArray[np.uint8],
    biomes: NDArray[np.uint8],
    elevation: NDArray[np.float64],
) -> NDArray[np.uint8]:
    """Vectorized color_for over whole grids.

    Returns:
        RGB array of shape (height, width, 3).
    """
    base = build_palette()[terrain, biomes]
    factor = (elevation / 2.0)[..., np.newaxis]
    blended = base * (1.0 - factor) + 255 * factor
    return np.clip(blended, 0.0, 255.0).astype(np.uint8)


def colorize_map(world: WorldMap) -> NDArray[np.uint8]:
    """Render a WorldMap to an RGB array of shape (height, width, 3)."""
    return colorize_grids(world.terrain, world.biomes, world.elevation)


def render_ascii(world: WorldMap) -> str:
    """Text rendering of the terrain grid, one character per cell."""
    symbols = [ASCII_SYMBOLS[tag] for tag in TerrainTag]
    return "\n".join(
        "".join(symbols[code] for code in row) for row in world.terrain
    )
