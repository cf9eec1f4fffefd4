"""Cell states for the Game of Life."""

from enum import IntEnum


class Cell(IntEnum):
    """State of a single cell. The integer values are stored in the grid buffers."""

    DEAD = 0
    ALIVE = 1

    @classmethod
    def of(cls, value: object) -> "Cell":
        """Coerce a truthy/falsy value to a cell state."""
        return cls.ALIVE if value else cls.DEAD
