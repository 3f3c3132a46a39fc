"""Integer vectors and room rectangles."""
from __future__ import annotations

from typing import Iterator, NamedTuple, Tuple


class Vector(NamedTuple):
    x: int
    y: int

    def __add__(self, other: "Vector") -> "Vector":  # type: ignore[override]
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, k: int) -> "Vector":  # type: ignore[override]
        return Vector(self.x * k, self.y * k)

    def __abs__(self) -> int:
        return abs(self.x) + abs(self.y)


# Order matters: maze growth iterates these to build its candidate list.
UP = Vector(0, -1)
RIGHT = Vector(1, 0)
DOWN = Vector(0, 1)
LEFT = Vector(-1, 0)
CARDINALS: Tuple[Vector, ...] = (UP, RIGHT, DOWN, LEFT)


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.w

    def cells(self) -> Iterator[Vector]:
        for yy in range(self.y, self.y + self.h):
            for xx in range(self.x, self.x + self.w):
                yield Vector(xx, yy)

    def distance_to(self, other: "Rect") -> int:
        """Manhattan gap between two footprints.

        Returns -1 when they overlap on both axes. When they overlap on only
        one axis the gap along the other axis is returned, which is 0 for
        rectangles that share an edge. Callers treat anything <= 0 as a
        conflict.
        """
        if self.top >= other.bottom:
            vertical = self.top - other.bottom
        elif self.bottom <= other.top:
            vertical = other.top - self.bottom
        else:
            vertical = -1

        if self.left >= other.right:
            horizontal = self.left - other.right
        elif self.right <= other.left:
            horizontal = other.left - self.right
        else:
            horizontal = -1

        if vertical == -1 and horizontal == -1:
            return -1
        if vertical == -1:
            return horizontal
        if horizontal == -1:
            return vertical
        return vertical + horizontal


__all__ = ["Vector", "Rect", "CARDINALS", "UP", "RIGHT", "DOWN", "LEFT"]
