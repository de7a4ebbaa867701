"""Atlas Packer.

Packs rectangular texture regions into one or more growable atlases while
keeping wasted space and the number of atlases low. Placement is a greedy
heuristic: candidate corners are tracked on a sparse grid of rectangle
edges, and atlas growth is priced by the area it adds weighted by the
atlas's aspect ratio. A thin search over a few insertion orders picks the
run with the best fill ratio.

MIT License

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

Typical usage example:
    rects = [AtlasRect.of_size('mat1', 100, 200), AtlasRect.of_size('mat2', 150, 100)]
    packer = AtlasPacker(padding=2, max_size=1024)
    result, order = pack_rects_with_best_order(packer, rects)
"""

__version__ = "1.0.0"

from .packers import (  # noqa: E402
    AtlasData,
    AtlasPackData,
    AtlasPacker,
    AtlasRect,
    PackingError,
    RectOrder,
    pack,
    pack_rects,
    pack_rects_with_best_order,
)
from .utils.geometry import RectInt  # noqa: E402
from .utils.layout import get_average_ratio, get_pack_ratio  # noqa: E402

__all__ = [
    "AtlasData",
    "AtlasPackData",
    "AtlasPacker",
    "AtlasRect",
    "PackingError",
    "RectInt",
    "RectOrder",
    "get_average_ratio",
    "get_pack_ratio",
    "pack",
    "pack_rects",
    "pack_rects_with_best_order",
]
