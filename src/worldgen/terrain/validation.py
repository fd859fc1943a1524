"""Post-generation validation of world map invariants."""

import numpy as np
import structlog

from ..state import WorldMap
from ..types import BiomeTag, TerrainTag
from .classification import OCEAN_LEVEL, SNOW_LEVEL

logger = structlog.get_logger()


class ValidationResult:
    """Result of world map validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_world(world: WorldMap) -> ValidationResult:
    """Validate a generated world against its invariants.

    Args:
        world: World map to check.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    _check_dimensions(world, result)
    _check_codes(world, result)
    _check_terrain_elevation(world, result)
    _check_land_and_water(world, result)

    if result.passed:
        logger.info("validation_passed")
    else:
        logger.warning("validation_failed", errors=len(result.errors))
        for error in result.errors:
            logger.error("validation_error", message=error)

    for warning in result.warnings:
        logger.warning("validation_warning", message=warning)

    return result


def _check_dimensions(world: WorldMap, result: ValidationResult) -> None:
    """Grids match the configured size."""
    expected = (world.config.height, world.config.width)
    if world.terrain.shape != expected:
        result.add_error(
            f"Grid shape {world.terrain.shape} does not match configured {expected}"
        )


def _check_codes(world: WorldMap, result: ValidationResult) -> None:
    """Every stored value is a known tag."""
    if world.terrain.size and int(world.terrain.max()) >= len(TerrainTag):
        result.add_error("Terrain grid contains unknown terrain codes")
    if world.biomes.size and int(world.biomes.max()) >= len(BiomeTag):
        result.add_error("Biome grid contains unknown biome codes")


def _check_terrain_elevation(world: WorldMap, result: ValidationResult) -> None:
    """Terrain tags agree with raw elevation."""
    elevation = world.elevation

    snow = world.terrain == TerrainTag.SNOW.code
    if np.any(elevation[snow] <= SNOW_LEVEL):
        result.add_error("Snow cells found at or below snow level")

    water = world.terrain == TerrainTag.WATER.code
    if np.any(elevation[water] > OCEAN_LEVEL):
        result.add_error("Water cells found above ocean level")

    land = world.terrain == TerrainTag.LAND.code
    land_elevation = elevation[land]
    if np.any((land_elevation <= OCEAN_LEVEL) | (land_elevation > SNOW_LEVEL)):
        result.add_error("Land cells found outside the land elevation range")


def _check_land_and_water(world: WorldMap, result: ValidationResult) -> None:
    """Warn about degenerate maps."""
    water = np.count_nonzero(world.terrain == TerrainTag.WATER.code)
    if water == 0:
        result.add_warning("Map has no water")
    elif water == world.terrain.size:
        result.add_warning("Map has no land")
