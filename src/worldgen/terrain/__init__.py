"""Procedural world map generation package.

This package implements the noise-to-image pipeline: octave-summed
elevation and precipitation fields, latitude-aware classification,
majority-vote biome smoothing and colorization.
"""

from .classification import classify, classify_grid, latitude_for_row
from .colorize import color_for, colorize_map, render_ascii
from .fields import generate_fields
from .generator import generate_and_save_world, generate_world, resolve_seeds
from .noise import NoiseField
from .persistence import load_map, save_image, save_map
from .smoothing import smooth_biomes, smooth_pass
from .validation import ValidationResult, validate_world

__all__ = [
    "NoiseField",
    "ValidationResult",
    "classify",
    "classify_grid",
    "color_for",
    "colorize_map",
    "generate_and_save_world",
    "generate_fields",
    "generate_world",
    "latitude_for_row",
    "load_map",
    "render_ascii",
    "resolve_seeds",
    "save_image",
    "save_map",
    "smooth_biomes",
    "smooth_pass",
    "validate_world",
]
