"""Shared test fixtures for world generation tests."""

import pytest
import structlog

from worldgen.config import NoiseConfig, WorldGenConfig
from worldgen.terrain.generator import generate_world
from worldgen.state import WorldMap


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Re-record golden biome grids instead of comparing against them",
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo structlog configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def update_golden(request: pytest.FixtureRequest) -> bool:
    return request.config.getoption("--update-golden")


@pytest.fixture
def small_config() -> WorldGenConfig:
    """16x16 world with fixed seeds and few octaves."""
    return WorldGenConfig(
        width=16,
        height=16,
        seed_elevation=1,
        seed_precipitation=2,
        noise=NoiseConfig(scale=0.05, octaves=4),
        smooth_passes=1,
    )


@pytest.fixture
def small_world(small_config: WorldGenConfig) -> WorldMap:
    """Generated 16x16 world."""
    return generate_world(small_config)
