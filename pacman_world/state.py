"""Immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the whole
game at a single instant. All rules are pure functions that take a previous
``State`` (plus a random source or an ``Action``) and return a *new*
``State``; no mutation happens in-place.

Design notes:

* The grid is a persistent vector of persistent row vectors
    (``pyrsistent.PVector``), indexed ``grid[y][x]``. Eating a pellet produces
    a new grid sharing every untouched row with the old one.
* ``bonus`` is ``None`` while the cherry is off the board.
* ``turn`` counts ticks since the last reset and ``games`` counts resets;
    neither influences the rules.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from pacman_world.components import Position
from pacman_world.config import DEFAULT_SCORE_CONFIG, ScoreConfig
from pacman_world.levels import Level
from pacman_world.types import Cell

Grid = PVector[PVector[Cell]]


def grid_from_level(level: Level) -> Grid:
    """Build the persistent grid for a freshly loaded level."""
    return pvector(pvector(row) for row in level.cells)


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        width (int): Grid width in tiles.
        height (int): Grid height in tiles.
        grid (Grid): Row-major cell kinds.
        start (Position): Where the player is placed on reset.
        bonus_probability (float): Chance per tick that an absent bonus spawns.
        player (Position): Current player position.
        enemy (Position): Current enemy position.
        bonus (Position | None): Bonus position, ``None`` when absent.
        score (int): Points in the current game.
        turn (int): Ticks since the last reset.
        games (int): Number of games started so far.
        scores (ScoreConfig): Point values for pellets and bonus.
    """

    # Level
    width: int
    height: int
    grid: Grid
    start: Position
    bonus_probability: float

    # Entities
    player: Position
    enemy: Position
    bonus: Optional[Position] = None

    # Status
    score: int = 0
    turn: int = 0
    games: int = 0

    # Config
    scores: ScoreConfig = DEFAULT_SCORE_CONFIG

    def cell_at(self, pos: Position) -> Cell:
        """Cell kind at ``pos``, which must lie inside the grid."""
        return self.grid[pos.y][pos.x]

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate ``(position, cell)`` pairs column by column."""
        for x in range(self.width):
            for y in range(self.height):
                yield Position(x, y), self.grid[y][x]

    @property
    def description(self) -> Dict[str, Any]:
        """Compact summary of the dynamic fields, for logs and debugging."""
        return {
            "player": self.player,
            "enemy": self.enemy,
            "bonus": self.bonus,
            "score": self.score,
            "turn": self.turn,
            "games": self.games,
        }
