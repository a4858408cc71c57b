"""Static level description."""

from dataclasses import dataclass
from typing import Tuple

from pacman_world.components import Position
from pacman_world.types import Cell


@dataclass(frozen=True)
class Level:
    """Immutable map plus start parameters.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        cells: Row-major tuple of rows, ``cells[y][x]``; only ``EMPTY`` and
            ``WALL`` appear here, pellets are placed on reset.
        start: Player start position (never a wall).
        bonus_probability: Chance per tick that an absent bonus spawns.
    """

    width: int
    height: int
    cells: Tuple[Tuple[Cell, ...], ...]
    start: Position
    bonus_probability: float

    def cell_at(self, pos: Position) -> Cell:
        return self.cells[pos.y][pos.x]
