"""Mutable game handle.

:class:`GameState` keeps the current :class:`State` and the random source,
and forwards ``reset`` / ``tick`` / ``handle_input`` to the pure reducers in
:mod:`pacman_world.step`. Front ends that are driven by timers and key
events hold one instance and call it sequentially.

Usage:

``game = GameState.from_file("assets/levels/classic.txt", rng=random.Random(7))``
"""

import random
from typing import Optional

from pacman_world.actions import Action
from pacman_world.components import Position
from pacman_world.config import DEFAULT_SCORE_CONFIG, ScoreConfig
from pacman_world.levels import Level, load_level
from pacman_world.state import Grid, State
from pacman_world.step import handle_input, new_game, reset, tick
from pacman_world.types import Cell, RandomSource


class GameState:
    """Current game plus the random source driving it.

    Arguments:
        level: Parsed level to play.
        rng: Random source; a fresh unseeded ``random.Random`` if omitted.
        scores: Point values.
    """

    def __init__(
        self,
        level: Level,
        rng: Optional[RandomSource] = None,
        scores: ScoreConfig = DEFAULT_SCORE_CONFIG,
    ):
        self.level = level
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._state = new_game(level, self._rng, scores)

    @classmethod
    def from_file(
        cls,
        path: str,
        rng: Optional[RandomSource] = None,
        scores: ScoreConfig = DEFAULT_SCORE_CONFIG,
    ) -> "GameState":
        return cls(load_level(path), rng=rng, scores=scores)

    # Operations

    def reset(self) -> None:
        self._state = reset(self._state, self._rng)

    def handle_input(self, action: Action) -> None:
        self._state = handle_input(self._state, action)

    def tick(self) -> None:
        self._state = tick(self._state, self._rng)

    # Read-only accessors

    @property
    def state(self) -> State:
        return self._state

    @property
    def grid(self) -> Grid:
        return self._state.grid

    @property
    def width(self) -> int:
        return self._state.width

    @property
    def height(self) -> int:
        return self._state.height

    @property
    def player(self) -> Position:
        return self._state.player

    @property
    def enemy(self) -> Position:
        return self._state.enemy

    @property
    def bonus(self) -> Optional[Position]:
        return self._state.bonus

    @property
    def score(self) -> int:
        return self._state.score

    def cell_at(self, pos: Position) -> Cell:
        return self._state.cell_at(pos)
