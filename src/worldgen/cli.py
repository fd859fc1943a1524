"""Command-line interface for world map generation."""

import argparse
import logging
import sys
import time
import tomllib
from pathlib import Path

import structlog
from pydantic import ValidationError

from .config import WorldGenConfig, find_config, load_config
from .exceptions import ConfigNotFoundError, ImageWriteError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; unset flags stay None so config values win."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural world map image"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path or name of a TOML config file (default: built-in defaults)",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width in cells")
    parser.add_argument("--height", type=int, default=None, help="Map height in cells")
    parser.add_argument(
        "--scale", type=float, default=None, help="Noise coordinates per cell"
    )
    parser.add_argument(
        "--octaves", type=int, default=None, help="Octaves summed per noise sample"
    )
    parser.add_argument(
        "--smooth-passes",
        type=int,
        default=None,
        help="Biome smoothing passes",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Master seed for both noise fields"
    )
    parser.add_argument(
        "--seed-elevation", type=int, default=None, help="Elevation field seed"
    )
    parser.add_argument(
        "--seed-precipitation",
        type=int,
        default=None,
        help="Precipitation field seed",
    )
    parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output image path"
    )
    parser.add_argument(
        "--save-map",
        type=str,
        default=None,
        help="Also save the raw grids to this .npz path",
    )
    parser.add_argument(
        "--ascii", action="store_true", help="Print the terrain as text"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Configure structlog for console output on stderr; stdout carries --ascii."""
    level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def resolve_config(args: argparse.Namespace) -> WorldGenConfig:
    """Load the configured file (if any) and apply CLI overrides.

    Raises:
        ConfigNotFoundError: If --config names a missing file.
        tomllib.TOMLDecodeError: If the config file is malformed.
        pydantic.ValidationError: If a value is out of range.
    """
    if args.config:
        config = load_config(find_config(args.config))
    else:
        config = WorldGenConfig()

    data = config.model_dump()
    overrides = {
        "width": args.width,
        "height": args.height,
        "smooth_passes": args.smooth_passes,
        "seed": args.seed,
        "seed_elevation": args.seed_elevation,
        "seed_precipitation": args.seed_precipitation,
        "output": args.output,
        "map_output": args.save_map,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})

    noise_overrides = {"scale": args.scale, "octaves": args.octaves}
    data["noise"].update({k: v for k, v in noise_overrides.items() if v is not None})

    return WorldGenConfig.model_validate(data)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for world map generation."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    logger = structlog.get_logger()

    try:
        config = resolve_config(args)
    except ConfigNotFoundError as e:
        logger.error("config_not_found", error=str(e))
        raise SystemExit(1)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        logger.error("config_invalid", error=str(e))
        raise SystemExit(1)

    # Import here to avoid slow startup for --help
    from .terrain.colorize import render_ascii
    from .terrain.generator import generate_and_save_world
    from .terrain.validation import validate_world

    map_path = Path(config.map_output) if config.map_output else None

    start_time = time.time()
    try:
        world = generate_and_save_world(config, Path(config.output), map_path)
    except ImageWriteError as e:
        logger.error("image_write_failed", error=str(e))
        raise SystemExit(1)
    except OSError as e:
        logger.error("map_write_failed", error=str(e))
        raise SystemExit(1)
    logger.info("generation_complete", seconds=round(time.time() - start_time, 1))

    validate_world(world)

    if args.ascii:
        print(render_ascii(world))


if __name__ == "__main__":
    main()
