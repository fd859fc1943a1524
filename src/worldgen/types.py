"""Terrain and biome tags and their compact grid encodings."""

from enum import Enum


class TerrainTag(str, Enum):
    """Coarse terrain classification of a cell."""

    WATER = "water"
    LAND = "land"
    SNOW = "snow"

    @property
    def code(self) -> int:
        """uint8 value used when the tag is stored in a grid."""
        return _TERRAIN_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "TerrainTag":
        """Convert a grid value back to a TerrainTag."""
        return _TERRAINS[int(code)]


class BiomeTag(str, Enum):
    """Ecological biome of a cell.

    Declaration order is significant: it defines the grid codes and the
    tie-break order used when smoothing picks the most common neighbor.
    """

    OCEAN = "ocean"
    COAST = "coast"
    BEACH = "beach"
    GRASSLAND = "grassland"
    FOREST = "forest"
    JUNGLE = "jungle"
    RAINFOREST = "rainforest"
    SWAMP = "swamp"
    TUNDRA = "tundra"
    TAIGA = "taiga"
    MOUNTAIN = "mountain"
    HIGHLAND = "highland"
    HILL = "hill"
    DESERT = "desert"
    STEPPE = "steppe"
    ICE = "ice"

    @property
    def code(self) -> int:
        """uint8 value used when the tag is stored in a grid."""
        return _BIOME_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "BiomeTag":
        """Convert a grid value back to a BiomeTag."""
        return _BIOMES[int(code)]


_TERRAINS = tuple(TerrainTag)
_TERRAIN_CODES = {tag: i for i, tag in enumerate(_TERRAINS)}

_BIOMES = tuple(BiomeTag)
_BIOME_CODES = {tag: i for i, tag in enumerate(_BIOMES)}

# Vocabulary kept for rendering and persistence; classification never emits these.
UNCLASSIFIED_BIOMES = frozenset({
    BiomeTag.COAST,
    BiomeTag.BEACH,
    BiomeTag.SWAMP,
    BiomeTag.TUNDRA,
    BiomeTag.TAIGA,
    BiomeTag.DESERT,
})
