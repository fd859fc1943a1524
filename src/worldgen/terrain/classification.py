"""Terrain and biome classification from elevation, precipitation and latitude."""

import numpy as np
from numpy.typing import NDArray

from ..types import BiomeTag, TerrainTag

OCEAN_LEVEL = -0.2
SNOW_LEVEL = 0.995
MOUNTAIN_LEVEL = 0.85
HIGHLAND_LEVEL = 0.65
HILL_LEVEL = 0.45

ICE_CAP_DISTANCE = 0.95
EQUATOR_BAND = 0.1
DESERT_BAND = (0.1, 0.3)

WET_PRECIPITATION = 0.75
FOREST_PRECIPITATION = 0.5
DRY_PRECIPITATION = -0.9


def latitude_for_row(row: int, height: int) -> float:
    """Latitude in degrees for a row: +90 on the top row, -90 on the bottom.

    A single-row map lies on the equator.
    """
    if height <= 1:
        return 0.0
    return 90.0 - 180.0 * row / (height - 1)


def latitude_grid(height: int) -> NDArray[np.float64]:
    """Latitude of every row as a (height, 1) column for broadcasting."""
    if height <= 1:
        return np.zeros((height, 1), dtype=np.float64)
    rows = np.arange(height, dtype=np.float64)
    return (90.0 - 180.0 * rows / (height - 1)).reshape(height, 1)


def distance_to_equator(latitude):
    """Normalized distance from the equator in [0, 1]."""
    return np.abs(latitude) / 90.0


def equivalent_elevation(elevation, distance):
    """Raise land elevation toward the poles; open ocean is left untouched."""
    return np.where(elevation <= OCEAN_LEVEL, elevation, 0.5 * elevation + distance)


def classify_terrain_tag(elevation: float) -> TerrainTag:
    """Coarse terrain from raw (not latitude-adjusted) elevation."""
    if elevation > SNOW_LEVEL:
        return TerrainTag.SNOW
    elif elevation > OCEAN_LEVEL:
        return TerrainTag.LAND
    else:
        return TerrainTag.WATER


def classify_biome(
    equivalent: float,
    precipitation: float,
    distance: float,
) -> BiomeTag:
    """Biome from latitude-adjusted elevation; first matching rule wins."""
    if distance > ICE_CAP_DISTANCE:
        return BiomeTag.ICE
    elif equivalent > MOUNTAIN_LEVEL:
        return BiomeTag.MOUNTAIN
    elif equivalent > HIGHLAND_LEVEL:
        return BiomeTag.HIGHLAND
    elif equivalent > HILL_LEVEL:
        return BiomeTag.HILL
    elif equivalent > OCEAN_LEVEL:
        if precipitation > WET_PRECIPITATION and distance > EQUATOR_BAND:
            return BiomeTag.JUNGLE
        elif precipitation > WET_PRECIPITATION:
            return BiomeTag.RAINFOREST
        elif precipitation > FOREST_PRECIPITATION:
            return BiomeTag.FOREST
        elif precipitation > DRY_PRECIPITATION:
            return BiomeTag.GRASSLAND
        elif precipitation > DRY_PRECIPITATION and _in_desert_band(distance):
            # Shadowed by the grassland rule above; kept in this order.
            return BiomeTag.DESERT
        else:
            return BiomeTag.STEPPE
    else:
        return BiomeTag.OCEAN


def classify(
    elevation: float,
    precipitation: float,
    latitude: float,
) -> tuple[TerrainTag, BiomeTag]:
    """Classify a single cell.

    Args:
        elevation: Raw elevation sample.
        precipitation: Precipitation sample.
        latitude: Latitude of the cell's row in degrees.

    Returns:
        Tuple of (terrain tag, biome tag).
    """
    distance = abs(latitude) / 90.0
    if elevation <= OCEAN_LEVEL:
        equivalent = elevation
    else:
        equivalent = 0.5 * elevation + distance
    return (
        classify_terrain_tag(elevation),
        classify_biome(equivalent, precipitation, distance),
    )


def classify_grid(
    elevation: NDArray[np.float64],
    precipitation: NDArray[np.float64],
) -> tuple[NDArray[np.uint8], NDArray[np.uint8]]:
    """Classify every cell of a map.

    Latitude is derived from the row index, with row 0 at the north pole.

    Args:
        elevation: Raw elevation field, shape (height, width).
        precipitation: Precipitation field, same shape.

    Returns:
        Tuple of (terrain codes, biome codes) as uint8 arrays.
    """
    height, width = elevation.shape
    distance = np.broadcast_to(
        distance_to_equator(latitude_grid(height)), (height, width)
    )
    equivalent = equivalent_elevation(elevation, distance)

    terrain = np.select(
        [elevation > SNOW_LEVEL, elevation > OCEAN_LEVEL],
        [TerrainTag.SNOW.code, TerrainTag.LAND.code],
        default=TerrainTag.WATER.code,
    ).astype(np.uint8)

    land = equivalent > OCEAN_LEVEL
    wet = precipitation > WET_PRECIPITATION
    biomes = np.select(
        [
            distance > ICE_CAP_DISTANCE,
            equivalent > MOUNTAIN_LEVEL,
            equivalent > HIGHLAND_LEVEL,
            equivalent > HILL_LEVEL,
            land & wet & (distance > EQUATOR_BAND),
            land & wet,
            land & (precipitation > FOREST_PRECIPITATION),
            land & (precipitation > DRY_PRECIPITATION),
            land,
        ],
        [
            BiomeTag.ICE.code,
            BiomeTag.MOUNTAIN.code,
            BiomeTag.HIGHLAND.code,
            BiomeTag.HILL.code,
            BiomeTag.JUNGLE.code,
            BiomeTag.RAINFOREST.code,
            BiomeTag.FOREST.code,
            BiomeTag.GRASSLAND.code,
            BiomeTag.STEPPE.code,
        ],
        default=BiomeTag.OCEAN.code,
    ).astype(np.uint8)

    return terrain, biomes


def _in_desert_band(distance: float) -> bool:
    low, high = DESERT_BAND
    return low < distance < high
