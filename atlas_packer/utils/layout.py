"""Fill statistics and overlap checks for packed atlases.

The measures here are what the order search ranks runs by, and what callers
use to sanity check a layout before baking it into a texture.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np

from .geometry import RectInt

if TYPE_CHECKING:
    from ..packers.atlas_types import AtlasData, AtlasPackData


def _areas(rects: Sequence[RectInt]) -> np.ndarray:
    sizes = np.array([(rect.width, rect.height) for rect in rects], dtype=np.int64).reshape(-1, 2)
    return sizes[:, 0] * sizes[:, 1]


def get_pack_ratio(atlas: "AtlasData") -> float:
    """Fraction of the atlas area covered by its rectangles.

    Args:
        atlas: A packed atlas with padding already removed.

    Returns:
        Used area divided by atlas area, or 0 for an atlas with no area.
    """
    width, height = atlas.size
    if width == 0 or height == 0:
        return 0.0

    used_area = _areas([rect.bounds for rect in atlas.rects]).sum()
    return float(used_area) / (float(width) * float(height))


def get_average_ratio(pack_data: Optional["AtlasPackData"]) -> float:
    """Area-weighted average pack ratio over every atlas of a result.

    Args:
        pack_data: A packing result, may be None.

    Returns:
        Total used area divided by total atlas area, or 0 when there are no
        atlases.
    """
    if pack_data is None or not pack_data.packed_atlases:
        return 0.0

    atlas_areas = np.array(
        [float(atlas.size[0]) * float(atlas.size[1]) for atlas in pack_data.packed_atlases]
    )
    ratios = np.array([get_pack_ratio(atlas) for atlas in pack_data.packed_atlases])

    total_area = atlas_areas.sum()
    if total_area == 0:
        return 0.0
    return float((ratios * atlas_areas).sum() / total_area)


def find_overlaps(rects: Sequence[RectInt]) -> List[Tuple[int, int]]:
    """Finds every pair of rectangles whose areas intersect.

    Touching edges do not count as overlap.

    Args:
        rects: Rectangles to check against each other.

    Returns:
        Sorted (i, j) index pairs with i < j.
    """
    if len(rects) < 2:
        return []

    bounds = np.array([(r.left, r.top, r.right, r.bottom) for r in rects], dtype=np.int64)
    left, top, right, bottom = (bounds[:, i] for i in range(4))

    overlap_x = (left[:, None] < right[None, :]) & (left[None, :] < right[:, None])
    overlap_y = (top[:, None] < bottom[None, :]) & (top[None, :] < bottom[:, None])
    overlaps = np.triu(overlap_x & overlap_y, k=1)

    return [(int(i), int(j)) for i, j in zip(*np.nonzero(overlaps))]


def find_out_of_bounds(rects: Sequence[RectInt], width: int, height: int) -> List[int]:
    """Indices of rectangles that leave the [0, width) x [0, height) area."""
    if not rects:
        return []

    bounds = np.array([(r.left, r.top, r.right, r.bottom) for r in rects], dtype=np.int64)
    outside = (bounds[:, 0] < 0) | (bounds[:, 1] < 0) | (bounds[:, 2] > width) | (bounds[:, 3] > height)
    return [int(i) for i in np.nonzero(outside)[0]]
