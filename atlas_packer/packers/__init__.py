from typing import Optional

from .. import globs
from ..type_hints import ImagesDict
from .atlas_packer import AtlasPacker, PackingError
from .atlas_types import AtlasData, AtlasPackData, AtlasRect, ExpandData
from .order_search import RectOrder, pack_rects, pack_rects_with_best_order, sort_rects
from .packing_context import PackingContext


def pack(images: ImagesDict,
         padding: int = globs.DEFAULT_PADDING,
         max_size: int = globs.DEFAULT_MAX_SIZE,
         order: Optional[RectOrder] = None,
         verbose: bool = False) -> ImagesDict:
    """Packs every image of a combiner-style mapping into atlases.

    Each item receives a 'fit' entry under 'gfx' holding its position, its
    unpadded size and the index of its atlas, or None if it could not be
    packed.

    Args:
        images: Mapping of the form {key: {'gfx': {'size': (w, h)}}}.
            Keys are used as rectangle identifiers.
        padding: Gap reserved after every image. Defaults to 2.
        max_size: Largest allowed atlas side. Defaults to 4096.
        order: Insertion order to use. None searches every order and keeps
            the best fill ratio.
        verbose: If True, prints debug information. Defaults to False.

    Returns:
        The same mapping, updated in place.

    Raises:
        PackingError: If an item has no usable 'gfx' size.
    """
    rects = []
    for key, data in images.items():
        try:
            size = data["gfx"]["size"]
            width, height = int(size[0]), int(size[1])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise PackingError("Invalid image data format for '{}': {}".format(key, e)) from e
        rects.append(AtlasRect.of_size(key, width, height))

    packer = AtlasPacker(padding=padding, max_size=max_size, verbose=verbose)
    if order is None:
        result, _ = pack_rects_with_best_order(packer, rects)
    else:
        result = pack_rects(packer, rects, order)

    for data in images.values():
        data["gfx"]["fit"] = None

    for atlas_index, atlas in enumerate(result.packed_atlases):
        for rect in atlas.rects:
            images[rect.id]["gfx"]["fit"] = {
                "x": rect.bounds.left,
                "y": rect.bounds.top,
                "w": rect.bounds.width,
                "h": rect.bounds.height,
                "atlas": atlas_index,
            }

    return images
