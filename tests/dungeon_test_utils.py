from collections import deque

from delve.dungeon import CARDINALS, WALL, Stage, Vector


def open_cells(stage: Stage):
    """Set of every non-wall position on the stage."""
    return {p for p in stage.positions() if stage.get(p) is not WALL}


def bfs_reachable(stage: Stage, start):
    """Return set of positions reachable from start over non-wall tiles."""
    if start is None or stage.get(start) in (None, WALL):
        return set()
    q = deque([start])
    vis = {start}
    while q:
        cur = q.popleft()
        for d in CARDINALS:
            nxt = cur + d
            if nxt not in vis and stage.get(nxt) not in (None, WALL):
                vis.add(nxt)
                q.append(nxt)
    return vis


def component_count(stage: Stage) -> int:
    remaining = open_cells(stage)
    count = 0
    while remaining:
        start = next(iter(remaining))
        remaining -= bfs_reachable(stage, start)
        count += 1
    return count


def interior_dead_ends(stage: Stage):
    out = []
    for pos in stage.interior():
        if stage.get(pos) is WALL:
            continue
        n = sum(1 for d in CARDINALS if stage.get(pos + d) not in (None, WALL))
        if n == 1:
            out.append(pos)
    return out


def border_cells(stage: Stage):
    for p in stage.positions():
        if p.x in (0, stage.width - 1) or p.y in (0, stage.height - 1):
            yield p


def stage_from_rows(rows):
    """Build a stage from strings: '#' wall, anything else floor."""
    from delve.dungeon import FLOOR

    stage = Stage(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            stage.set(Vector(x, y), WALL if ch == "#" else FLOOR)
    return stage


class ScriptedRng:
    """Stand-in for random.Random that replays queued answers per method."""

    def __init__(self, randint=(), randrange=(), random=()):
        self._randint = list(randint)
        self._randrange = list(randrange)
        self._random = list(random)

    def randint(self, a, b):
        val = self._randint.pop(0)
        assert a <= val <= b, f"scripted randint {val} outside {a}..{b}"
        return val

    def randrange(self, n):
        val = self._randrange.pop(0) if self._randrange else 0
        assert 0 <= val < n, f"scripted randrange {val} outside 0..{n - 1}"
        return val

    def random(self):
        return self._random.pop(0)
