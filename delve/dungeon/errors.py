"""Exceptions raised by dungeon generation."""


class DungeonError(Exception):
    """Base class for generation failures a caller can recover from."""


class InvalidDimensionsError(DungeonError, ValueError):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Stage width and height must be odd and positive (got {width}x{height})")


class StageBusyError(DungeonError, RuntimeError):
    pass


__all__ = ["DungeonError", "InvalidDimensionsError", "StageBusyError"]
