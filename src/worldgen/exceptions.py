"""Custom exceptions for world generation."""


class WorldGenError(Exception):
    """Base exception for world generation errors."""

    pass


class ConfigNotFoundError(WorldGenError, FileNotFoundError):
    """Raised when a named or explicit config file cannot be found."""

    pass


class ImageWriteError(WorldGenError):
    """Raised when the rendered map cannot be written to disk."""

    pass


class MapFormatError(WorldGenError, ValueError):
    """Raised when a saved map archive is missing data or malformed."""

    pass
