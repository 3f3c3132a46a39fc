"""Maze corridors grown through the wall space left between rooms.

Growth is an iterative growing-tree walk over the odd lattice: the walker
always steps two cells at a time, carving the cell in between, so every
maze is a perfect tree that stays one wall apart from anything already
carved. Loops only appear later when redundant connectors are opened.
"""
import random
from typing import Dict, List, Optional

from .geometry import CARDINALS, Vector
from .regions import RegionMap
from .tiles import FLOOR, WALL


def can_carve(regions: RegionMap, pos: Vector, direction: Vector) -> bool:
    stage = regions.stage
    # Must end in bounds.
    if not stage.contains(pos + direction * 3):
        return False
    # Destination must not be open.
    return stage.get(pos + direction * 2) is WALL


def grow_maze(regions: RegionMap, start: Vector, winding_percent: int = 0, rng=None) -> int:
    """Carve one maze region outward from ``start``.

    Returns the number of cells carved.
    """
    if rng is None:
        rng = random
    cells: List[Vector] = [start]
    last_dir: Optional[Vector] = None
    regions.start_region()
    regions.carve(start, FLOOR)
    carved = 1

    while cells:
        cell = cells[-1]
        unmade = [d for d in CARDINALS if can_carve(regions, cell, d)]
        if not unmade:
            # Dead end for this branch; back up.
            cells.pop()
            last_dir = None
            continue

        if last_dir in unmade and rng.randint(1, 100) > winding_percent:
            direction = last_dir
        else:
            direction = unmade[rng.randrange(len(unmade))]

        regions.carve(cell + direction, FLOOR)
        regions.carve(cell + direction * 2, FLOOR)
        cells.append(cell + direction * 2)
        last_dir = direction
        carved += 2
    return carved


def fill_mazes(regions: RegionMap, winding_percent: int = 0, rng=None, metrics: Optional[Dict] = None) -> int:
    """Seed a maze at every odd-aligned cell that is still solid wall.

    Returns the number of mazes grown.
    """
    stage = regions.stage
    grown = 0
    for y in range(1, stage.height, 2):
        for x in range(1, stage.width, 2):
            pos = Vector(x, y)
            if stage.get(pos) is not WALL:
                continue
            grow_maze(regions, pos, winding_percent, rng)
            grown += 1
    if metrics is not None:
        metrics['mazes'] += grown
    return grown


__all__ = ["can_carve", "grow_maze", "fill_mazes"]
