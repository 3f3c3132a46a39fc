"""Region bookkeeping for carved cells and the union-find used to merge them."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .geometry import Vector
from .stage import Stage
from .tiles import Tile


class RegionMap:
    """Tracks which region each carved cell belongs to.

    A new region is started once per placed room and once per maze seed.
    Only ``carve`` records ownership; junctions are written straight to the
    stage and stay unlabelled.
    """

    def __init__(self, stage: Stage):
        self.stage = stage
        self.current = -1
        self.owner: Dict[Vector, int] = {}

    def start_region(self) -> int:
        self.current += 1
        return self.current

    def carve(self, pos: Vector, tile: Tile = Tile.FLOOR) -> None:
        self.stage.set(pos, tile)
        self.owner[pos] = self.current

    def region_at(self, pos: Vector) -> Optional[int]:
        return self.owner.get(pos)

    @property
    def count(self) -> int:
        return self.current + 1

    def ids(self) -> range:
        return range(self.count)


class DisjointSet:
    """Union-find with path compression and union by size."""

    def __init__(self, items: Iterable[int] = ()):
        self.parent: Dict[int, int] = {}
        self.size: Dict[int, int] = {}
        for i in items:
            self.add(i)

    def add(self, item: int) -> None:
        if item not in self.parent:
            self.parent[item] = item
            self.size[item] = 1

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> int:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return ra
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return ra

    def resolve(self, items: Iterable[int]) -> List[int]:
        """Distinct representatives of ``items`` in first-seen order."""
        out: List[int] = []
        for i in items:
            r = self.find(i)
            if r not in out:
                out.append(r)
        return out


__all__ = ["RegionMap", "DisjointSet"]
