"""Junction carving: turns a connector wall into a passable tile.

The tile chosen only changes how the junction reads, never connectivity.
"""
from __future__ import annotations

import random

from .geometry import Vector
from .stage import Stage
from .tiles import CLOSED_DOOR, FLOOR, OPEN_DOOR, Tile


def pick_junction_tile(rng=None) -> Tile:
    if rng is None:
        rng = random
    # 1 in 4 junctions are left open; a third of those get an open door.
    if rng.randrange(4) == 0:
        return OPEN_DOOR if rng.randrange(3) == 0 else FLOOR
    return CLOSED_DOOR


def add_junction(stage: Stage, pos: Vector, rng=None) -> Tile:
    tile = pick_junction_tile(rng)
    stage.set(pos, tile)
    return tile


__all__ = ["pick_junction_tile", "add_junction"]
