"""Map persistence: rendered images and raw grid archives."""

import json
import zipfile
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import structlog
from numpy.typing import NDArray
from PIL import Image

from ..config import NoiseConfig, WorldGenConfig
from ..exceptions import ImageWriteError, MapFormatError
from ..state import WorldMap

logger = structlog.get_logger()

MAP_FORMAT_VERSION = 1
_GRIDS = ("terrain", "biomes", "elevation", "precipitation")


def save_image(path: Path, rgb: NDArray[np.uint8]) -> None:
    """Write an RGB array to an image file.

    The format follows the file suffix (PNG for .png).

    Args:
        path: Output path.
        rgb: Array of shape (height, width, 3).

    Raises:
        ImageWriteError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(rgb).save(path)
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"Failed to write image to {path}: {e}") from e

    height, width = rgb.shape[:2]
    logger.info("image_saved", path=str(path), width=width, height=height)


def save_map(path: Path, world: WorldMap) -> None:
    """Save a generated world's grids to disk.

    Uses numpy's compressed .npz format for efficient storage. The archive
    is written to exactly `path`, whatever its suffix.

    Args:
        path: Output path.
        world: World to save.
    """
    metadata = {
        "version": MAP_FORMAT_VERSION,
        "seed_elevation": world.seed_elevation,
        "seed_precipitation": world.seed_precipitation,
        "width": world.width,
        "height": world.height,
        "scale": world.config.noise.scale,
        "octaves": world.config.noise.octaves,
        "smooth_passes": world.config.smooth_passes,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        np.savez_compressed(
            f,
            terrain=world.terrain,
            biomes=world.biomes,
            elevation=world.elevation,
            precipitation=world.precipitation,
            metadata=np.frombuffer(
                json.dumps(metadata).encode("utf-8"), dtype=np.uint8
            ),
        )

    file_size = path.stat().st_size / (1024 * 1024)
    logger.info("map_saved", path=str(path), size_mb=round(file_size, 2))


def load_map(path: Path) -> WorldMap:
    """Load a world saved with save_map.

    Args:
        path: Path to a map archive written by save_map.

    Returns:
        WorldMap with read-only grids.

    Raises:
        FileNotFoundError: If file doesn't exist.
        MapFormatError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {path}")

    try:
        with np.load(path) as data:
            missing = [name for name in (*_GRIDS, "metadata") if name not in data]
            if missing:
                raise MapFormatError(
                    f"Invalid map file: missing {', '.join(missing)}"
                )
            grids = {name: data[name] for name in _GRIDS}
            metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
    except MapFormatError:
        raise
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise MapFormatError(f"Invalid map file: {e}") from e

    if not isinstance(metadata, dict):
        raise MapFormatError("Invalid map file: metadata is not an object")
    if metadata.get("version") != MAP_FORMAT_VERSION:
        raise MapFormatError(
            f"Unsupported map format version: {metadata.get('version')}"
        )

    try:
        config = WorldGenConfig(
            width=metadata["width"],
            height=metadata["height"],
            seed_elevation=metadata["seed_elevation"],
            seed_precipitation=metadata["seed_precipitation"],
            noise=NoiseConfig(scale=metadata["scale"], octaves=metadata["octaves"]),
            smooth_passes=metadata["smooth_passes"],
        )
        world = WorldMap(
            config=config,
            seed_elevation=metadata["seed_elevation"],
            seed_precipitation=metadata["seed_precipitation"],
            **grids,
        )
    except (KeyError, ValueError) as e:
        raise MapFormatError(f"Invalid map file: {e}") from e
    world.freeze()

    logger.info("map_loaded", path=str(path), width=world.width, height=world.height)
    return world
