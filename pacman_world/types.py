"""Common type aliases, enumerations and protocols.

``Cell`` values double as the integers used in level files and in the grid
observation exposed by the Gymnasium wrapper.
"""

from enum import IntEnum
from typing import Protocol, Tuple


class Cell(IntEnum):
    """Kind of a single grid tile."""

    EMPTY = 0
    WALL = 1
    YELLOW_PELLET = 2
    PINK_PELLET = 3


PELLET_CELLS: Tuple[Cell, ...] = (Cell.YELLOW_PELLET, Cell.PINK_PELLET)


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the game rules draw from.

    Any object with these two methods can drive the game, which lets tests
    script exact outcomes.
    """

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...
