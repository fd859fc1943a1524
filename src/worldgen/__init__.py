"""Latitude-aware procedural world map generator."""

from .config import NoiseConfig, WorldGenConfig, find_config, load_config
from .exceptions import (
    ConfigNotFoundError,
    ImageWriteError,
    MapFormatError,
    WorldGenError,
)
from .state import WorldMap
from .types import BiomeTag, TerrainTag

__all__ = [
    # Types
    "BiomeTag",
    "TerrainTag",
    # State
    "WorldMap",
    # Config
    "NoiseConfig",
    "WorldGenConfig",
    "find_config",
    "load_config",
    # Exceptions
    "WorldGenError",
    "ConfigNotFoundError",
    "ImageWriteError",
    "MapFormatError",
]
