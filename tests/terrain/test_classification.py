"""Tests for terrain and biome classification."""

import numpy as np
import pytest

from worldgen.terrain.classification import (
    classify,
    classify_grid,
    equivalent_elevation,
    latitude_for_row,
    latitude_grid,
)
from worldgen.types import BiomeTag, TerrainTag, UNCLASSIFIED_BIOMES


class TestLatitude:
    """Tests for row -> latitude mapping."""

    def test_top_row_is_north_pole(self) -> None:
        assert latitude_for_row(0, 11) == 90.0

    def test_bottom_row_is_south_pole(self) -> None:
        assert latitude_for_row(10, 11) == -90.0

    def test_middle_row_is_equator(self) -> None:
        assert latitude_for_row(5, 11) == 0.0

    def test_single_row_is_equator(self) -> None:
        assert latitude_for_row(0, 1) == 0.0

    def test_grid_matches_rows(self) -> None:
        """latitude_grid is a column of latitude_for_row values."""
        grid = latitude_grid(7)
        assert grid.shape == (7, 1)
        for row in range(7):
            assert grid[row, 0] == latitude_for_row(row, 7)


class TestEquivalentElevation:
    """Tests for the latitude elevation adjustment."""

    def test_ocean_unchanged(self) -> None:
        """Open ocean ignores latitude."""
        assert equivalent_elevation(-0.5, 0.9) == -0.5

    def test_ocean_level_boundary_unchanged(self) -> None:
        assert equivalent_elevation(-0.2, 0.9) == -0.2

    def test_land_raised_toward_poles(self) -> None:
        assert float(equivalent_elevation(0.4, 0.5)) == pytest.approx(0.7)


class TestTerrainTag:
    """Terrain comes from raw elevation only."""

    @pytest.mark.parametrize(
        ("elevation", "expected"),
        [
            (1.0, TerrainTag.SNOW),
            (0.996, TerrainTag.SNOW),
            (0.995, TerrainTag.LAND),
            (0.0, TerrainTag.LAND),
            (-0.19, TerrainTag.LAND),
            (-0.2, TerrainTag.WATER),
            (-0.8, TerrainTag.WATER),
        ],
    )
    def test_thresholds(self, elevation: float, expected: TerrainTag) -> None:
        terrain, _ = classify(elevation, 0.0, 0.0)
        assert terrain == expected

    def test_latitude_does_not_change_terrain(self) -> None:
        """A polar cell keeps its raw terrain tag."""
        terrain, biome = classify(0.3, 0.0, 89.0)
        assert terrain == TerrainTag.LAND
        assert biome == BiomeTag.ICE


class TestBiomePriority:
    """Biome rules apply in fixed priority order."""

    def test_ice_cap_wins_over_everything(self) -> None:
        """Near the poles the biome is ice whatever the samples."""
        latitude = 0.96 * 90
        assert classify(0.99, 0.99, latitude)[1] == BiomeTag.ICE
        assert classify(-0.9, -0.95, latitude)[1] == BiomeTag.ICE
        assert classify(0.0, 0.8, -latitude)[1] == BiomeTag.ICE

    def test_mountain(self) -> None:
        # 0.5 * 0.8 + 0.5 = 0.9
        assert classify(0.8, 0.0, 45.0)[1] == BiomeTag.MOUNTAIN

    def test_highland(self) -> None:
        # 0.5 * 0.4 + 0.5 = 0.7
        assert classify(0.4, 0.0, 45.0)[1] == BiomeTag.HIGHLAND

    def test_hill(self) -> None:
        # 0.5 * 0.1 + 0.5 = 0.55
        assert classify(0.1, 0.0, 45.0)[1] == BiomeTag.HILL

    def test_elevation_rules_beat_precipitation(self) -> None:
        assert classify(0.8, 0.99, 45.0)[1] == BiomeTag.MOUNTAIN

    def test_jungle_outside_equator_band(self) -> None:
        assert classify(0.0, 0.8, 18.0)[1] == BiomeTag.JUNGLE

    def test_rainforest_on_equator(self) -> None:
        assert classify(0.0, 0.8, 0.0)[1] == BiomeTag.RAINFOREST

    def test_forest(self) -> None:
        assert classify(0.0, 0.6, 0.0)[1] == BiomeTag.FOREST

    def test_grassland(self) -> None:
        assert classify(0.0, 0.0, 0.0)[1] == BiomeTag.GRASSLAND

    def test_desert_band_is_grassland(self) -> None:
        """The grassland rule shadows the desert rule."""
        assert classify(0.0, -0.5, 18.0)[1] == BiomeTag.GRASSLAND
        assert classify(0.0, -0.5, -18.0)[1] == BiomeTag.GRASSLAND

    def test_steppe(self) -> None:
        assert classify(0.0, -0.95, 0.0)[1] == BiomeTag.STEPPE

    def test_ocean(self) -> None:
        assert classify(-0.5, 0.9, 0.0) == (TerrainTag.WATER, BiomeTag.OCEAN)

    def test_ocean_at_high_latitude(self) -> None:
        """Open ocean stays ocean short of the ice cap."""
        assert classify(-0.5, 0.0, 80.0) == (TerrainTag.WATER, BiomeTag.OCEAN)

    def test_snow_terrain(self) -> None:
        terrain, biome = classify(1.05, 0.0, 0.0)
        assert terrain == TerrainTag.SNOW
        assert biome == BiomeTag.HILL


class TestClassifyGrid:
    """Tests for the vectorized classifier."""

    @pytest.fixture
    def samples(self) -> tuple[np.ndarray, np.ndarray]:
        rng = np.random.default_rng(0)
        elevation = rng.uniform(-1.2, 1.2, size=(41, 37))
        precipitation = rng.uniform(-1.2, 1.2, size=(41, 37))
        return elevation, precipitation

    def test_output_shape_and_dtype(self, samples) -> None:
        terrain, biomes = classify_grid(*samples)
        assert terrain.shape == (41, 37)
        assert biomes.shape == (41, 37)
        assert terrain.dtype == np.uint8
        assert biomes.dtype == np.uint8

    def test_matches_scalar_classify(self, samples) -> None:
        """Every cell agrees with the per-cell classifier."""
        elevation, precipitation = samples
        terrain, biomes = classify_grid(elevation, precipitation)
        height, width = elevation.shape
        for y in range(height):
            latitude = latitude_for_row(y, height)
            for x in range(width):
                expected = classify(elevation[y, x], precipitation[y, x], latitude)
                assert (
                    TerrainTag.from_code(terrain[y, x]),
                    BiomeTag.from_code(biomes[y, x]),
                ) == expected

    def test_never_emits_unclassified_biomes(self, samples) -> None:
        _, biomes = classify_grid(*samples)
        emitted = {BiomeTag.from_code(code) for code in np.unique(biomes)}
        assert emitted.isdisjoint(UNCLASSIFIED_BIOMES)

    def test_polar_rows_are_ice(self, samples) -> None:
        _, biomes = classify_grid(*samples)
        assert np.all(biomes[0] == BiomeTag.ICE.code)
        assert np.all(biomes[-1] == BiomeTag.ICE.code)

    def test_terrain_elevation_consistency(self, samples) -> None:
        elevation, precipitation = samples
        terrain, _ = classify_grid(elevation, precipitation)
        assert np.all(elevation[terrain == TerrainTag.SNOW.code] > 0.995)
        assert np.all(elevation[terrain == TerrainTag.WATER.code] <= -0.2)
