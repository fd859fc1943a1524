"""World generation configuration models and TOML loading."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .exceptions import ConfigNotFoundError

U32_MAX = 2**32 - 1


class NoiseConfig(BaseModel):
    """Noise sampling parameters shared by the elevation and precipitation fields."""

    scale: float = Field(
        default=0.00675, gt=0, description="Noise coordinates per cell (feature size)"
    )
    octaves: int = Field(default=25, ge=1, description="Number of octaves to sum")


class WorldGenConfig(BaseModel):
    """Complete world generation configuration."""

    width: int = Field(default=1024, gt=0, description="Map width in cells")
    height: int = Field(default=1024, gt=0, description="Map height in cells")

    seed: int | None = Field(
        default=None, ge=0, description="Master seed both field seeds derive from"
    )
    seed_elevation: int | None = Field(
        default=None, ge=0, le=U32_MAX, description="Elevation field seed"
    )
    seed_precipitation: int | None = Field(
        default=None, ge=0, le=U32_MAX, description="Precipitation field seed"
    )

    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    smooth_passes: int = Field(
        default=1, ge=0, description="Biome majority-vote smoothing passes"
    )

    output: str = Field(default="map.png", description="Rendered image path")
    map_output: str | None = Field(
        default=None, description="Optional .npz path for the raw grids"
    )


def load_config(config_path: Path) -> WorldGenConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed WorldGenConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If a value is out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return WorldGenConfig.model_validate(data)


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Config name or path.

    Returns:
        Path to the config file.

    Raises:
        ConfigNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise ConfigNotFoundError(f"Config file not found: {name}")

    configs_dir = _configs_dir()

    config_path = configs_dir / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = configs_dir / name
    if config_path.exists():
        return config_path

    raise ConfigNotFoundError(
        f"Config '{name}' not found in {configs_dir}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available config names."""
    configs_dir = _configs_dir()
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))


def _configs_dir() -> Path:
    # src/worldgen/config.py -> repository root
    return Path(__file__).parent.parent.parent / "configs"
