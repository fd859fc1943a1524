"""Biome smoothing by 8-neighbor majority vote."""

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..types import BiomeTag

# A cell keeps its biome when at least this many neighbors share it.
KEEP_THRESHOLD = 6

# 8-connected, exclude center
_NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)


def neighbor_counts(biomes: NDArray[np.uint8]) -> NDArray[np.int32]:
    """Count, for every cell, how many in-bounds neighbors carry each biome.

    Cells outside the map contribute nothing, so edge cells see 5 neighbors
    and corner cells 3.

    Args:
        biomes: Biome code grid, shape (height, width).

    Returns:
        Array of shape (len(BiomeTag), height, width); entry [b, y, x] is
        the number of neighbors of (x, y) whose biome code is b.
    """
    counts = np.empty((len(BiomeTag), *biomes.shape), dtype=np.int32)
    for code in range(len(BiomeTag)):
        counts[code] = ndimage.convolve(
            (biomes == code).astype(np.int32),
            _NEIGHBOR_KERNEL,
            mode="constant",
            cval=0,
        )
    return counts


def smooth_pass(biomes: NDArray[np.uint8]) -> int:
    """Run one majority-vote pass over a biome grid, in place.

    A cell is replaced by its most common neighbor biome when that biome
    differs from its own and fewer than KEEP_THRESHOLD neighbors share its
    current biome. Ties between neighbor biomes go to the one declared first
    in BiomeTag. Every decision reads the grid as it was before the pass.

    Args:
        biomes: Biome code grid, modified in place.

    Returns:
        Number of cells whose biome changed.
    """
    counts = neighbor_counts(biomes)

    # argmax returns the first maximum, i.e. the lowest biome code
    most_common = np.argmax(counts, axis=0).astype(np.uint8)
    has_neighbors = counts.sum(axis=0) > 0
    current_count = np.take_along_axis(
        counts, biomes[np.newaxis].astype(np.intp), axis=0
    )[0]

    replace = (
        has_neighbors
        & (most_common != biomes)
        & (current_count < KEEP_THRESHOLD)
    )
    biomes[replace] = most_common[replace]
    return int(np.count_nonzero(replace))


def smooth_biomes(biomes: NDArray[np.uint8], passes: int = 1) -> int:
    """Run `passes` smoothing passes in place.

    Returns:
        Total number of cell changes across all passes.
    """
    changed = 0
    for _ in range(passes):
        changed += smooth_pass(biomes)
    return changed
