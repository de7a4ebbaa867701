"""Multi-atlas orchestrator.

Routes every incoming rectangle to the cheapest placement across all open
atlases, grows an atlas when that is the cheapest option, and opens a new
atlas when no existing one can take the rectangle within the size cap.

Typical usage example:
    packer = AtlasPacker(padding=2, max_size=2048)
    packer.add_rect((64, 32), 'mat1')
    packer.add_rect((128, 128), 'mat2')
    result = packer.pack_data
"""

from typing import Iterable, List, Optional

from .. import globs
from ..type_hints import RectId, Size
from ..utils.geometry import RectInt
from .atlas_types import AtlasData, AtlasPackData, AtlasRect, ExpandData
from .packing_context import PackingContext


class PackingError(Exception):
    """Indicates the packer was configured or called with invalid data."""

    pass


class AtlasPacker:
    """Packs rectangles into as few growable atlases as it can.

    Padding is added once to the width and height of every rectangle, so the
    gap sits on the right and bottom of each placement. The maximum size is
    padded the same way internally, and padding is subtracted again from
    everything reported in `pack_data`.

    Attributes:
        padding: Gap reserved after every rectangle on both axes.
        max_size: Largest allowed atlas side, before padding.
        verbose: If True, prints debug information during packing.
    """

    def __init__(self,
                 padding: int = globs.DEFAULT_PADDING,
                 max_size: int = globs.DEFAULT_MAX_SIZE,
                 verbose: bool = False) -> None:
        """Initializes the AtlasPacker.

        Args:
            padding: Gap reserved after every rectangle. Defaults to 2.
            max_size: Largest allowed atlas side. Defaults to 4096.
            verbose: If True, prints debug information. Defaults to False.

        Raises:
            PackingError: If padding or max_size is out of range.
        """
        if not 0 <= int(padding) <= globs.MAX_PADDING:
            raise PackingError(
                "Padding must be between 0 and {}, got {}".format(globs.MAX_PADDING, padding)
            )
        if not 1 <= int(max_size) <= globs.MAX_ATLAS_SIZE:
            raise PackingError(
                "Max size must be between 1 and {}, got {}".format(globs.MAX_ATLAS_SIZE, max_size)
            )

        self.padding = int(padding)
        self.max_size = int(max_size)
        self.verbose = verbose

        self._padded_max_size = (self.max_size + self.padding, self.max_size + self.padding)
        self._contexts = []
        self._not_packed_rects = []

    @property
    def contexts(self) -> List[PackingContext]:
        return list(self._contexts)

    @property
    def pack_data(self) -> AtlasPackData:
        """The atlases and rejected rectangles produced since the last reset.

        Built fresh on every access, so a result stays valid after `reset`.
        """
        atlases = [self._get_atlas_data(context) for context in self._contexts]
        return AtlasPackData(atlases, list(self._not_packed_rects))

    def add_rects(self, rects: Iterable[AtlasRect]) -> None:
        for rect in rects:
            self.add_rect(rect.bounds.size, rect.id)

    def add_rect(self, size: Size, rect_id: RectId) -> bool:
        """Places one rectangle.

        The first atlas offering a placement without growth wins. Otherwise
        the cheapest growth across all atlases is applied. If no atlas can
        take the rectangle, a new atlas is opened for it.

        Args:
            size: Unpadded width and height of the rectangle.
            rect_id: Caller's identifier, reported back with the placement.

        Returns:
            True if the rectangle was placed, False if it went to the
            not-packed list.
        """
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            self._reject(rect_id, width, height, "Invalid size for packing")
            return False

        padded_size = (width + self.padding, height + self.padding)
        if padded_size[0] > self._padded_max_size[0] or padded_size[1] > self._padded_max_size[1]:
            self._reject(rect_id, width, height, "Invalid size for packing")
            return False

        if not self._contexts:
            self._add_new_context(padded_size)

        expand_data = self._find_expand_data(padded_size)
        if expand_data is None:
            if self._contexts[-1].is_empty:
                self._reject(rect_id, width, height, "Cant pack rect")
                return False

            context = self._add_new_context(padded_size)
            expand_data = context.try_get_expand_data(padded_size)
            if expand_data is None:
                self._reject(rect_id, width, height, "Cant pack rect")
                return False

        if not expand_data.is_exact_fit:
            expand_data.context.expand(expand_data.delta)
        expand_data.context.insert(expand_data.bounds, rect_id)
        return True

    def reset(self) -> None:
        self._contexts = []
        self._not_packed_rects = []

    def _find_expand_data(self, padded_size: Size) -> Optional[ExpandData]:
        best = None

        for context in self._contexts:
            expand_data = context.try_get_expand_data(padded_size)
            if expand_data is None:
                continue
            if expand_data.is_exact_fit:
                return expand_data
            if best is None or expand_data.area_penalty < best.area_penalty:
                best = expand_data

        return best

    def _add_new_context(self, padded_size: Size) -> PackingContext:
        if self.verbose:
            print("[_add_new_context] Atlas #{} seeded at {}x{}".format(
                len(self._contexts), padded_size[0] - self.padding, padded_size[1] - self.padding
            ))

        context = PackingContext(padded_size, self._padded_max_size, verbose=self.verbose)
        self._contexts.append(context)
        return context

    def _get_atlas_data(self, context: PackingContext) -> AtlasData:
        rects = []
        for packed in context.packed_rects:
            bounds = packed.bounds
            rects.append(AtlasRect(packed.id, RectInt(
                bounds.left, bounds.top, bounds.width - self.padding, bounds.height - self.padding
            )))

        size = (context.size[0] - self.padding, context.size[1] - self.padding)
        return AtlasData(size, rects)

    def _reject(self, rect_id: RectId, width: int, height: int, reason: str) -> None:
        if self.verbose:
            print("[add_rect] {}: [{} : ({}, {})]".format(reason, rect_id, width, height))
        self._not_packed_rects.append(AtlasRect.of_size(rect_id, width, height))
