"""Region connection: merges every carved region into one traversable whole.

Connectors are wall cells whose cardinal neighbours belong to two or more
regions. Random connectors are opened until a single region remains; each
opening merges the touched regions in a union-find. Connectors made
redundant by a merge are discarded, but a small share of them is opened
anyway so the dungeon is not singly connected.
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from ..logging_utils import get_logger
from .doors import add_junction
from .geometry import CARDINALS, Vector
from .regions import DisjointSet, RegionMap
from .tiles import WALL

log = get_logger("delve.dungeon.connectivity")


class Connector(NamedTuple):
    pos: Vector
    regions: Tuple[int, ...]


def find_connectors(regions: RegionMap) -> List[Connector]:
    """Interior wall cells bordering at least two distinct regions, in scan order."""
    stage = regions.stage
    found: List[Connector] = []
    for pos in stage.interior():
        if stage.get(pos) is not WALL:
            continue
        touched: List[int] = []
        for d in CARDINALS:
            rid = regions.region_at(pos + d)
            if rid is not None and rid not in touched:
                touched.append(rid)
        if len(touched) >= 2:
            found.append(Connector(pos, tuple(touched)))
    return found


def connect_regions(regions: RegionMap, extra_connector_chance: int = 20, rng=None,
                    metrics: Optional[Dict[str, Any]] = None) -> DisjointSet:
    """Open connectors until all regions are merged.

    Returns the union-find describing the final merges.
    """
    if rng is None:
        rng = random
    stage = regions.stage
    connectors = find_connectors(regions)
    merged = DisjointSet(regions.ids())
    open_regions = set(regions.ids())
    junctions = extras = 0
    if metrics is not None:
        metrics['connectors'] += len(connectors)

    while len(open_regions) > 1:
        if not connectors:
            log.warn(event="connectors_exhausted", open_regions=len(open_regions))
            break
        chosen = connectors[rng.randrange(len(connectors))]
        add_junction(stage, chosen.pos, rng)
        junctions += 1

        # First touched region is the destination; the rest fold into it.
        resolved = merged.resolve(chosen.regions)
        dest = resolved[0]
        for source in resolved[1:]:
            dest = merged.union(dest, source)
        open_regions.difference_update(resolved)
        open_regions.add(dest)

        kept: List[Connector] = []
        for c in connectors:
            # No doors right next to each other.
            if abs(chosen.pos - c.pos) < 2:
                continue
            if len(merged.resolve(c.regions)) > 1:
                kept.append(c)
                continue
            # Redundant now, but open it occasionally to add a loop.
            if rng.randrange(extra_connector_chance) == 0:
                add_junction(stage, c.pos, rng)
                extras += 1
        connectors = kept

    if metrics is not None:
        metrics['regions'] += regions.count
        metrics['junctions'] += junctions
        metrics['extra_junctions'] += extras
        metrics['regions_unconnected'] += max(0, len(open_regions) - 1)
    return merged


__all__ = ["Connector", "find_connectors", "connect_regions"]
