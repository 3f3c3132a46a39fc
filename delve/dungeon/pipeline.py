"""Pipeline orchestration for dungeon generation.

``Dungeon`` binds to a caller-owned ``Stage`` and carves it in place, one
phase after another: rooms, mazes, region connection, dead-end removal.
The stage is held exclusively for the whole run and every phase draws from
the same injected random source, so a seed reproduces a layout exactly.
"""
from __future__ import annotations

import dataclasses
import random
import time
from typing import Any, Callable, Dict, List, Optional

from ..logging_utils import get_logger
from .config import DungeonConfig
from .connectivity import connect_regions
from .errors import InvalidDimensionsError
from .geometry import Rect
from .mazes import fill_mazes
from .metrics import init_metrics
from .pruning import remove_dead_ends
from .regions import RegionMap
from .rooms import place_rooms
from .stage import Stage

log = get_logger("delve.dungeon")

PhaseObserver = Callable[[str, Stage], None]

PHASES = ("add_rooms", "add_mazes", "connect_regions", "remove_dead_ends")


class Dungeon:
    def __init__(
        self,
        stage: Stage,
        config: Optional[DungeonConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        on_phase: Optional[PhaseObserver] = None,
    ):
        self.stage = stage
        # Private copy; the caller's config is never mutated.
        if config is None:
            self.config = DungeonConfig(width=stage.width, height=stage.height)
        else:
            self.config = dataclasses.replace(config)
        if rng is None:
            if self.config.seed is None:
                self.config.seed = random.randint(0, 2**31 - 1)
            rng = random.Random(self.config.seed)
        self.seed = self.config.seed
        self._rng = rng
        self.on_phase = on_phase
        self.rooms: List[Rect] = []
        self.regions: Optional[RegionMap] = None
        self.metrics: Dict[str, Any] = init_metrics()

    @property
    def width(self) -> int:
        return self.stage.width

    @property
    def height(self) -> int:
        return self.stage.height

    def check_dimensions(self) -> None:
        w, h = self.stage.width, self.stage.height
        if w <= 0 or h <= 0 or w % 2 == 0 or h % 2 == 0:
            raise InvalidDimensionsError(w, h)

    def generate(self) -> None:
        """Run every phase against the stage in place.

        Raises InvalidDimensionsError before touching the stage when either
        dimension is even, and StageBusyError when another run holds it.
        """
        self.check_dimensions()
        self.config.validate()
        with self.stage.exclusive():
            self._run_pipeline()

    def _run_pipeline(self) -> None:
        cfg = self.config
        rng = self._rng
        stage = self.stage
        self.rooms = []
        self.regions = RegionMap(stage)
        self.metrics = init_metrics()
        metrics = self.metrics
        phase_times = metrics['phase_ms']

        def _phase(label, fn, *a, **k):
            log.debug(event="phase_start", phase=label)
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            if self.on_phase is not None:
                self.on_phase(label, stage)
            return r

        start = time.perf_counter()
        self.rooms = _phase('add_rooms', place_rooms, self.regions, cfg, rng, metrics)
        _phase('add_mazes', fill_mazes, self.regions, cfg.winding_percent, rng, metrics)
        _phase('connect_regions', connect_regions, self.regions, cfg.extra_connector_chance, rng, metrics)
        _phase('remove_dead_ends', remove_dead_ends, stage, metrics)
        metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)

        log.info(
            event="dungeon_generated",
            seed=self.seed,
            width=stage.width,
            height=stage.height,
            rooms=metrics['rooms_placed'],
            room_attempts=metrics['room_attempts'],
            regions=metrics['regions'],
            runtime_ms=metrics['runtime_ms'],
        )


def generate(stage: Stage, config: Optional[DungeonConfig] = None, *, rng: Optional[random.Random] = None) -> Dungeon:
    """Convenience wrapper: generate into ``stage`` and return the finished Dungeon."""
    dungeon = Dungeon(stage, config, rng=rng)
    dungeon.generate()
    return dungeon


__all__ = ["Dungeon", "generate", "PHASES"]
