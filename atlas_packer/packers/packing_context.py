"""Placement state for a single growable atlas.

Free space is not stored as a partition of rectangles. Instead the context
keeps two sorted grids of boundary coordinates (every x at which some packed
rectangle ends, every y likewise, plus zero) and a sorted set of candidate
points: the grid intersections that are not covered by a packed rectangle.
A new rectangle's top-left corner is only ever tried at a candidate point,
so the cost of one query grows with the number of distinct edges rather than
with the atlas area.

Typical usage example:
    context = PackingContext((66, 34), (4098, 4098))
    expand_data = context.try_get_expand_data((66, 34))
    if expand_data:
        context.expand(expand_data.delta)
        context.insert(expand_data.bounds, 'mat1')
"""

from bisect import bisect_left
from typing import Callable, List, Optional

from ..type_hints import Delta, Point, RectId, Size
from ..utils.geometry import RectInt, is_contain, is_intersect
from .atlas_types import AtlasRect, ExpandData


class PackingContext:
    """Bookkeeping for one atlas.

    Attributes:
        size: Current (padded) width and height of the atlas.
        max_size: Largest (padded) width and height the atlas may grow to.
        packed_rects: Rectangles placed so far, with padded bounds.
        points: Candidate insertion points, sorted by x then y.
        x_lines: Sorted distinct x boundary coordinates.
        y_lines: Sorted distinct y boundary coordinates.
        verbose: If True, prints debug information.
    """

    def __init__(self, initial_size: Size, max_size: Size, verbose: bool = False) -> None:
        self.size = (int(initial_size[0]), int(initial_size[1]))
        self.max_size = (int(max_size[0]), int(max_size[1]))
        self.verbose = verbose

        self.packed_rects = []
        self.points = [(0, 0)]
        self.x_lines = [0]
        self.y_lines = [0]

    @property
    def is_empty(self) -> bool:
        return not self.packed_rects

    def try_get_expand_data(self, size: Size) -> Optional[ExpandData]:
        """Finds the cheapest placement for a rectangle of the given size.

        Every candidate point is tried in sorted order. The first placement
        that needs no growth is returned right away. Otherwise the placement
        with the lowest area penalty wins, with earlier points winning ties.

        Args:
            size: Padded width and height of the rectangle.

        Returns:
            The best placement found, or None if no candidate point can hold
            the rectangle within the maximum size.
        """
        best = None

        for point in self.points:
            candidate = RectInt.from_point(point, size)
            if self._is_intersected_with_packed(candidate):
                continue

            expand_data = self._get_expand_data(candidate)
            if expand_data is None:
                continue

            if expand_data.is_exact_fit:
                return expand_data

            if best is None or expand_data.area_penalty < best.area_penalty:
                best = expand_data

        return best

    def insert(self, bounds: RectInt, rect_id: RectId) -> None:
        """Commits a placement previously returned by `try_get_expand_data`.

        The placement is not validated again; grow the context by the
        placement's delta before inserting.

        Args:
            bounds: Padded bounds of the rectangle inside the atlas.
            rect_id: Caller's identifier for the rectangle.
        """
        self.packed_rects.append(AtlasRect(rect_id, bounds))
        self.points = [point for point in self.points if not is_contain(bounds, point)]

        self._process_new_x_line(bounds.right)
        self._process_new_y_line(bounds.bottom)

    def expand(self, delta: Delta) -> None:
        """Grows the atlas by ``delta`` on each axis.

        An old atlas edge that no packed rectangle ends on stops being a grid
        line, together with the candidate points on it. The new edge becomes
        a grid line.

        Args:
            delta: Growth along x and y, both non-negative.
        """
        old_width, old_height = self.size
        new_width, new_height = old_width + delta[0], old_height + delta[1]
        self.size = (new_width, new_height)

        if self.verbose:
            print("[expand] {}x{} -> {}x{}".format(old_width, old_height, new_width, new_height))

        if delta[0]:
            if all(rect.bounds.right != old_width for rect in self.packed_rects):
                self._remove_line(self.x_lines, old_width)
                self.points = [point for point in self.points if point[0] != old_width]
            self._process_new_x_line(new_width)

        if delta[1]:
            if all(rect.bounds.bottom != old_height for rect in self.packed_rects):
                self._remove_line(self.y_lines, old_height)
                self.points = [point for point in self.points if point[1] != old_height]
            self._process_new_y_line(new_height)

    def _get_expand_data(self, rect: RectInt) -> Optional[ExpandData]:
        if rect.right > self.max_size[0] or rect.bottom > self.max_size[1]:
            return None

        width, height = self.size
        delta = (max(0, rect.right - width), max(0, rect.bottom - height))

        # Growth that worsens the aspect ratio costs more
        multiplier_x = width / height
        multiplier_y = height / width
        area_penalty = delta[0] * height * multiplier_x + delta[1] * width * multiplier_y

        return ExpandData(area_penalty=area_penalty, delta=delta, bounds=rect, context=self)

    def _process_new_x_line(self, x: int) -> None:
        self._process_new_line(self.x_lines, x, self.y_lines, lambda y: (x, y))

    def _process_new_y_line(self, y: int) -> None:
        self._process_new_line(self.y_lines, y, self.x_lines, lambda x: (x, y))

    def _process_new_line(self,
                          lines: List[int],
                          value: int,
                          other_lines: List[int],
                          make_point: Callable[[int], Point]) -> None:
        index = bisect_left(lines, value)
        if index < len(lines) and lines[index] == value:
            return

        lines.insert(index, value)
        for other in other_lines:
            self._process_new_point(make_point(other))

    def _process_new_point(self, point: Point) -> None:
        if self._is_contained_by_packed(point):
            return

        index = bisect_left(self.points, point)
        if index < len(self.points) and self.points[index] == point:
            return
        self.points.insert(index, point)

    @staticmethod
    def _remove_line(lines: List[int], value: int) -> None:
        index = bisect_left(lines, value)
        if index < len(lines) and lines[index] == value:
            del lines[index]

    def _is_intersected_with_packed(self, rect: RectInt) -> bool:
        return any(is_intersect(packed.bounds, rect) for packed in self.packed_rects)

    def _is_contained_by_packed(self, point: Point) -> bool:
        return any(is_contain(packed.bounds, point) for packed in self.packed_rects)
