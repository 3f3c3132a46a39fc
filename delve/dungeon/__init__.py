"""Public dungeon package interface."""

from .config import DungeonConfig
from .errors import DungeonError, InvalidDimensionsError, StageBusyError
from .geometry import CARDINALS, Rect, Vector
from .pipeline import Dungeon, generate
from .stage import Stage
from .tiles import CLOSED_DOOR, FLOOR, OPEN_DOOR, WALL, Tile

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "DungeonError",
    "InvalidDimensionsError",
    "StageBusyError",
    "Stage",
    "Tile",
    "Vector",
    "Rect",
    "CARDINALS",
    "generate",
    "WALL",
    "FLOOR",
    "OPEN_DOOR",
    "CLOSED_DOOR",
]
