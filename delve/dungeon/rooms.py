import random
from typing import Dict, List, Optional

from .config import DungeonConfig
from .geometry import Rect
from .regions import RegionMap
from .tiles import FLOOR


def random_room(width: int, height: int, config: DungeonConfig, rng) -> Optional[Rect]:
    """Draw one candidate room, or None when the drawn size cannot fit.

    Sizes are odd so rooms line up with the maze lattice. The even
    rectangularity bonus goes to one axis only, which keeps rooms away from
    both perfect squares and long thin strips.
    """
    size = rng.randint(1, 3 + config.room_extra_size) * 2 + 1
    rectangularity = rng.randint(0, 1 + size // 2) * 2
    w = h = size
    if rng.random() < 0.5:
        w += rectangularity
    else:
        h += rectangularity

    x_slots = (width - w) // 2
    y_slots = (height - h) // 2
    if x_slots <= 0 or y_slots <= 0:
        return None
    x = rng.randrange(x_slots) * 2 + 1
    y = rng.randrange(y_slots) * 2 + 1
    return Rect(x, y, w, h)


def place_rooms(regions: RegionMap, config: DungeonConfig, rng=None, metrics: Optional[Dict] = None) -> List[Rect]:
    """Scatter non-overlapping rooms onto the stage behind ``regions``.

    Each attempt draws once; a room touching or overlapping an accepted one
    is discarded rather than redrawn. Fewer rooms than attempts is normal.
    Returns the accepted rooms in placement order.
    """
    if rng is None:
        rng = random
    stage = regions.stage
    rooms: List[Rect] = []
    rejected = unfit = 0
    for _ in range(config.room_tries):
        room = random_room(stage.width, stage.height, config, rng)
        if room is None:
            unfit += 1
            continue
        if any(room.distance_to(other) <= 0 for other in rooms):
            rejected += 1
            continue
        rooms.append(room)
        regions.start_region()
        for pos in room.cells():
            regions.carve(pos, FLOOR)
    if metrics is not None:
        metrics['room_attempts'] += config.room_tries
        metrics['rooms_placed'] += len(rooms)
        metrics['rooms_rejected'] += rejected
        metrics['rooms_unfit'] += unfit
    return rooms


__all__ = ["place_rooms", "random_room"]
