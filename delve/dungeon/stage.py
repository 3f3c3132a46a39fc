"""Fixed-size tile grid the generator carves into.

Cells are stored row-major in a flat list. Reads and writes outside the grid
are harmless: ``get`` returns None and ``set`` does nothing.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .errors import StageBusyError
from .geometry import Vector
from .tiles import Tile


class Stage:
    __slots__ = ("width", "height", "tiles", "_lock")

    def __init__(self, width: int, height: int, fill: Tile = Tile.WALL):
        self.width = width
        self.height = height
        self.tiles: List[Tile] = [fill] * (max(width, 0) * max(height, 0))
        self._lock = threading.Lock()

    def contains(self, pos: Vector) -> bool:
        return 0 <= pos[0] < self.width and 0 <= pos[1] < self.height

    def _idx(self, pos: Vector) -> int:
        return pos[1] * self.width + pos[0]

    def get(self, pos: Vector) -> Optional[Tile]:
        if not self.contains(pos):
            return None
        return self.tiles[self._idx(pos)]

    def set(self, pos: Vector, tile: Tile) -> None:
        if self.contains(pos):
            self.tiles[self._idx(pos)] = tile

    def positions(self) -> Iterator[Vector]:
        for y in range(self.height):
            for x in range(self.width):
                yield Vector(x, y)

    def interior(self) -> Iterator[Vector]:
        """Every cell that is not on the outer border."""
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                yield Vector(x, y)

    def count(self, tile: Tile) -> int:
        return self.tiles.count(tile)

    @contextmanager
    def exclusive(self):
        """Hold sole write access for the duration of a generation run."""
        if not self._lock.acquire(blocking=False):
            raise StageBusyError("stage is already being generated")
        try:
            yield self
        finally:
            self._lock.release()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def render(self) -> str:
        border = "-" * (self.width + 2)
        lines = [border]
        for y in range(self.height):
            row = self.tiles[y * self.width:(y + 1) * self.width]
            lines.append("|" + "".join(t.glyph for t in row) + "|")
        lines.append(border)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Stage(width={self.width}, height={self.height})"


__all__ = ["Stage"]
