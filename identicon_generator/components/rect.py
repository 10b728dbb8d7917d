"""Canvas geometry components.

``PixelRect`` bounds are half-open: ``top_left`` is inside the rectangle,
``bottom_right`` is the first point past it on both axes. Two neighbouring
cells therefore share an edge coordinate without sharing a pixel.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Pixel column (0 at left).
        y: Pixel row (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class PixelRect:
    """Axis-aligned square covering one filled grid cell."""

    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def contains(self, x: int, y: int) -> bool:
        """Return True if pixel ``(x, y)`` lies inside the half-open bounds."""
        return (
            self.top_left.x <= x < self.bottom_right.x
            and self.top_left.y <= y < self.bottom_right.y
        )

    def overlaps(self, other: "PixelRect") -> bool:
        """Return True if the two rectangles share at least one pixel."""
        return (
            self.top_left.x < other.bottom_right.x
            and other.top_left.x < self.bottom_right.x
            and self.top_left.y < other.bottom_right.y
            and other.top_left.y < self.bottom_right.y
        )

    def as_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (
            (self.top_left.x, self.top_left.y),
            (self.bottom_right.x, self.bottom_right.y),
        )
