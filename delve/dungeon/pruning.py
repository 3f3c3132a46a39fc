"""Dead-end removal.

A dead end is an interior passable cell with exactly one passable cardinal
neighbour. Filling one in can turn its neighbour into a new dead end, so
whole-grid passes repeat until a pass changes nothing.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .geometry import CARDINALS, Vector
from .stage import Stage
from .tiles import WALL


def exits(stage: Stage, pos: Vector) -> int:
    return sum(1 for d in CARDINALS if stage.get(pos + d) not in (None, WALL))


def find_dead_ends(stage: Stage) -> List[Vector]:
    return [pos for pos in stage.interior() if stage.get(pos) is not WALL and exits(stage, pos) == 1]


def remove_dead_ends(stage: Stage, metrics: Optional[Dict[str, Any]] = None) -> int:
    """Wall off dead ends until none remain. Returns the number of cells filled."""
    removed = 0
    passes = 0
    done = False
    while not done:
        done = True
        passes += 1
        for pos in stage.interior():
            if stage.get(pos) is WALL:
                continue
            if exits(stage, pos) != 1:
                continue
            done = False
            stage.set(pos, WALL)
            removed += 1
    if metrics is not None:
        metrics['dead_ends_removed'] += removed
        metrics['prune_passes'] += passes
    return removed


__all__ = ["exits", "find_dead_ends", "remove_dead_ends"]
