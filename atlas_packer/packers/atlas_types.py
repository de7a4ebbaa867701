from typing import List, Optional, TYPE_CHECKING

from ..type_hints import Delta, RectId, Size
from ..utils.geometry import RectInt

if TYPE_CHECKING:
    from .packing_context import PackingContext


# __dict__ based baseclass
class _Base:
    def __repr__(self):
        items = ("{}={}".format(k, repr(v)) for k, v in self.__dict__.items())
        return "{}({})".format(type(self).__name__, ", ".join(items))

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.__dict__ == other.__dict__


class AtlasRect(_Base):
    """A rectangle paired with the caller's identifier.

    Used both for input rectangles (only the size of ``bounds`` matters) and
    for rectangles reported back inside an atlas or in the not-packed list.
    """

    def __init__(self, rect_id: RectId = None, bounds: Optional[RectInt] = None):
        self.id = rect_id
        self.bounds = RectInt() if bounds is None else bounds

    @classmethod
    def of_size(cls, rect_id: RectId, width: int, height: int) -> "AtlasRect":
        return cls(rect_id, RectInt(0, 0, width, height))


class AtlasData(_Base):
    def __init__(self, size: Size = (0, 0), rects: Optional[List[AtlasRect]] = None):
        self.size = size
        self.rects = [] if rects is None else rects

    @property
    def area(self) -> int:
        return self.size[0] * self.size[1]

    @property
    def used_area(self) -> int:
        return sum(rect.bounds.area for rect in self.rects)


class AtlasPackData(_Base):
    """Result of one packing run.

    Attributes:
        packed_atlases: Atlases in creation order.
        not_packed_rects: Rectangles that could not be placed, reported at the
            origin with their unpadded size.
    """

    def __init__(self,
                 packed_atlases: Optional[List[AtlasData]] = None,
                 not_packed_rects: Optional[List[AtlasRect]] = None):
        self.packed_atlases = [] if packed_atlases is None else packed_atlases
        self.not_packed_rects = [] if not_packed_rects is None else not_packed_rects


class ExpandData(_Base):
    """Candidate placement of one size inside one packing context.

    A zero ``delta`` means the rectangle fits without growing the atlas.
    Never stored; only compared while routing a rectangle.
    """

    def __init__(self,
                 area_penalty: float,
                 delta: Delta,
                 bounds: RectInt,
                 context: "PackingContext"):
        self.area_penalty = area_penalty
        self.delta = delta
        self.bounds = bounds
        self.context = context

    @property
    def is_exact_fit(self) -> bool:
        return self.delta == (0, 0)
