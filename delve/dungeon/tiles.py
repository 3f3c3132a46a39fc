"""Tile kinds a dungeon stage cell can hold."""
from enum import Enum


class Tile(Enum):
    WALL = " "
    OPEN_DOOR = "/"
    CLOSED_DOOR = "+"
    FLOOR = "█"

    @property
    def glyph(self) -> str:
        return self.value


WALL = Tile.WALL
OPEN_DOOR = Tile.OPEN_DOOR
CLOSED_DOOR = Tile.CLOSED_DOOR
FLOOR = Tile.FLOOR

__all__ = ["Tile", "WALL", "OPEN_DOOR", "CLOSED_DOOR", "FLOOR"]
