"""Main world generation orchestration."""

from pathlib import Path

import numpy as np
import structlog

from ..config import U32_MAX, WorldGenConfig
from ..state import WorldMap
from .classification import classify_grid
from .colorize import colorize_map
from .fields import generate_fields
from .persistence import save_image, save_map
from .smoothing import smooth_biomes

logger = structlog.get_logger()


def resolve_seeds(config: WorldGenConfig) -> tuple[int, int]:
    """Pick the elevation and precipitation seeds for a run.

    Explicit field seeds win. Missing ones are drawn from a generator
    seeded with the master seed, or from OS entropy when there is none.

    Args:
        config: World generation configuration.

    Returns:
        Tuple of (seed_elevation, seed_precipitation), both unsigned 32-bit.
    """
    rng = np.random.default_rng(config.seed)
    drawn = rng.integers(0, U32_MAX, size=2, endpoint=True)

    seed_elevation = config.seed_elevation
    if seed_elevation is None:
        seed_elevation = int(drawn[0])

    seed_precipitation = config.seed_precipitation
    if seed_precipitation is None:
        seed_precipitation = int(drawn[1])

    return seed_elevation, seed_precipitation


def generate_world(config: WorldGenConfig) -> WorldMap:
    """Generate a complete world map from configuration.

    Runs rasterize -> classify -> smooth; each stage finishes before the
    next one starts.

    Args:
        config: World generation configuration.

    Returns:
        WorldMap with read-only grids.
    """
    width, height = config.width, config.height
    seed_elevation, seed_precipitation = resolve_seeds(config)

    logger.info(
        "generation_started",
        width=width,
        height=height,
        scale=config.noise.scale,
        octaves=config.noise.octaves,
        seed_elevation=seed_elevation,
        seed_precipitation=seed_precipitation,
    )

    logger.info("stage_started", stage="rasterize")
    elevation, precipitation = generate_fields(
        width,
        height,
        config.noise.scale,
        config.noise.octaves,
        seed_elevation,
        seed_precipitation,
    )
    logger.debug(
        "fields_sampled",
        elevation_min=float(elevation.min()),
        elevation_max=float(elevation.max()),
        precipitation_min=float(precipitation.min()),
        precipitation_max=float(precipitation.max()),
    )

    logger.info("stage_started", stage="classify")
    terrain, biomes = classify_grid(elevation, precipitation)

    logger.info("stage_started", stage="smooth", passes=config.smooth_passes)
    changed = smooth_biomes(biomes, config.smooth_passes)
    logger.info("biomes_smoothed", changed=changed)

    world = WorldMap(
        terrain=terrain,
        biomes=biomes,
        elevation=elevation,
        precipitation=precipitation,
        config=config,
        seed_elevation=seed_elevation,
        seed_precipitation=seed_precipitation,
    )
    world.freeze()

    _log_biome_stats(world)
    return world


def generate_and_save_world(
    config: WorldGenConfig,
    image_path: Path,
    map_path: Path | None = None,
) -> WorldMap:
    """Generate a world, render it to an image and optionally save the grids.

    Args:
        config: World generation configuration.
        image_path: Where to write the rendered image.
        map_path: Optional path for the raw grids archive.

    Returns:
        The generated WorldMap.

    Raises:
        ImageWriteError: If the image cannot be written.
        OSError: If the grids archive cannot be written.
    """
    world = generate_world(config)

    logger.info("stage_started", stage="colorize")
    save_image(image_path, colorize_map(world))

    if map_path is not None:
        save_map(map_path, world)

    return world


def _log_biome_stats(world: WorldMap) -> None:
    """Log biome generation statistics."""
    total = world.terrain.size
    for biome, count in world.biome_counts().items():
        logger.info(
            "biome_stats",
            biome=biome.value,
            cells=count,
            percent=round(count / total * 100, 1),
        )
