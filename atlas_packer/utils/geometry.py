"""Integer rectangle type and the spatial predicates used by the packers.

All predicates are pure functions. Rectangles follow the image convention:
the origin is the top-left corner, x grows to the right and y grows down.
"""

from ..type_hints import Point, Size


class RectInt:
    """Axis-aligned rectangle with integer position and size.

    Attributes:
        left: The x-coordinate of the left edge.
        top: The y-coordinate of the top edge.
        width: The width of the rectangle.
        height: The height of the rectangle.
        right: The x-coordinate of the right edge (exclusive).
        bottom: The y-coordinate of the bottom edge (exclusive).
    """

    def __init__(self, left: int = 0, top: int = 0, width: int = 0, height: int = 0) -> None:
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self.right = left + width
        self.bottom = top + height

    @classmethod
    def from_point(cls, point: Point, size: Size) -> "RectInt":
        return cls(point[0], point[1], size[0], size[1])

    @property
    def position(self) -> Point:
        return self.left, self.top

    @property
    def size(self) -> Size:
        return self.width, self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def __eq__(self, other) -> bool:
        return isinstance(other, RectInt) and self.position == other.position and self.size == other.size

    def __hash__(self) -> int:
        return hash((self.left, self.top, self.width, self.height))

    def __repr__(self) -> str:
        return "RectInt(left={}, top={}, width={}, height={})".format(
            self.left, self.top, self.width, self.height
        )


def is_intersect(rect: RectInt, other: RectInt) -> bool:
    """Checks whether two rectangles share any area.

    Rectangles that only touch along an edge do not intersect.

    Args:
        rect: The first rectangle.
        other: The second rectangle.

    Returns:
        True if the interiors of both rectangles overlap, False otherwise.
    """
    separated_by_x = rect.right <= other.left or other.right <= rect.left
    separated_by_y = rect.bottom <= other.top or other.bottom <= rect.top
    return not separated_by_x and not separated_by_y


def is_contain(rect: RectInt, point: Point, include_far_edges: bool = False) -> bool:
    """Checks whether a point lies inside a rectangle.

    The near edges (left, top) are always inclusive. The far edges (right,
    bottom) are exclusive unless ``include_far_edges`` is set.

    Args:
        rect: The rectangle to test against.
        point: The (x, y) point to test.
        include_far_edges: Treat the right and bottom edges as inside.

    Returns:
        True if the point is inside the rectangle, False otherwise.
    """
    x, y = point
    if x < rect.left or y < rect.top:
        return False
    if include_far_edges:
        return x <= rect.right and y <= rect.bottom
    return x < rect.right and y < rect.bottom
