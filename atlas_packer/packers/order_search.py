"""Insertion-order search on top of AtlasPacker.

The packer is greedy, so the order rectangles arrive in decides the result.
These helpers sort the input by one of a few fixed keys, run the packer once
per key and keep the run with the best area-weighted fill ratio.
"""

from enum import Enum
from typing import List, Sequence, Tuple

from ..utils.layout import get_average_ratio
from .atlas_packer import AtlasPacker
from .atlas_types import AtlasPackData, AtlasRect


class RectOrder(Enum):
    """Sort keys tried by `pack_rects_with_best_order`, in search order.

    All keys sort descending; the second name breaks ties.
    """

    HEIGHT_THEN_WIDTH = 0
    WIDTH_THEN_HEIGHT = 1
    AREA_THEN_HEIGHT = 2
    AREA_THEN_WIDTH = 3


_SORT_KEYS = {
    RectOrder.HEIGHT_THEN_WIDTH: lambda r: (r.bounds.height, r.bounds.width),
    RectOrder.WIDTH_THEN_HEIGHT: lambda r: (r.bounds.width, r.bounds.height),
    RectOrder.AREA_THEN_HEIGHT: lambda r: (r.bounds.area, r.bounds.height),
    RectOrder.AREA_THEN_WIDTH: lambda r: (r.bounds.area, r.bounds.width),
}


def sort_rects(rects: Sequence[AtlasRect], order: RectOrder) -> List[AtlasRect]:
    """Returns the rectangles sorted descending by ``order``.

    The sort is stable: rectangles with equal keys keep their input order.
    """
    return sorted(rects, key=_SORT_KEYS[order], reverse=True)


def pack_rects(packer: AtlasPacker,
               rects: Sequence[AtlasRect],
               order: RectOrder = RectOrder.HEIGHT_THEN_WIDTH) -> AtlasPackData:
    """Runs one packing pass over ``rects`` in the given order.

    The packer is reset before and after the run, so it can be reused.

    Args:
        packer: Packer providing padding and size limits.
        rects: Rectangles to pack; only the size of each bounds is used.
        order: Insertion order. Defaults to height then width.

    Returns:
        The atlases and rejected rectangles of this run.
    """
    packer.reset()
    packer.add_rects(sort_rects(rects, order))
    result = packer.pack_data
    packer.reset()
    return result


def pack_rects_with_best_order(packer: AtlasPacker,
                               rects: Sequence[AtlasRect]) -> Tuple[AtlasPackData, RectOrder]:
    """Packs ``rects`` once per `RectOrder` and keeps the best fill ratio.

    The first order is always taken; later orders only replace it with a
    strictly higher average ratio.

    Args:
        packer: Packer providing padding and size limits.
        rects: Rectangles to pack.

    Returns:
        A tuple of the winning result and the order that produced it.
    """
    best_result = None
    best_order = None
    best_ratio = 0.0

    for order in RectOrder:
        candidate = pack_rects(packer, rects, order)
        ratio = get_average_ratio(candidate)

        if packer.verbose:
            print("[pack_rects_with_best_order] {}: ratio {:.4f}, {} atlas(es)".format(
                order.name, ratio, len(candidate.packed_atlases)
            ))

        if best_result is None or ratio > best_ratio:
            best_result = candidate
            best_order = order
            best_ratio = ratio

    return best_result, best_order
