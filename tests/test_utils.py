from typing import List, Optional, Sequence

from pyrsistent import pvector

from pacman_world.components import Position
from pacman_world.config import DEFAULT_SCORE_CONFIG, ScoreConfig
from pacman_world.levels import Level
from pacman_world.state import State
from pacman_world.types import Cell

LAYOUT_CELLS = {
    "#": Cell.WALL,
    ".": Cell.EMPTY,
    "y": Cell.YELLOW_PELLET,
    "p": Cell.PINK_PELLET,
}


class ScriptedRandom:
    """Random source that replays fixed draws and fails loudly when exhausted."""

    def __init__(
        self, floats: Sequence[float] = (), ints: Sequence[int] = ()
    ) -> None:
        self.floats: List[float] = list(floats)
        self.ints: List[int] = list(ints)

    def random(self) -> float:
        assert self.floats, "unexpected random() draw"
        return self.floats.pop(0)

    def randrange(self, stop: int) -> int:
        assert self.ints, "unexpected randrange() draw"
        value = self.ints.pop(0)
        assert 0 <= value < stop, f"scripted {value} outside range({stop})"
        return value

    @property
    def exhausted(self) -> bool:
        return not self.floats and not self.ints


def parse_layout(layout: Sequence[str]) -> List[List[Cell]]:
    return [[LAYOUT_CELLS[ch] for ch in row] for row in layout]


def make_level(
    layout: Sequence[str],
    start: tuple[int, int] = (1, 1),
    bonus_probability: float = 0.0,
) -> Level:
    """Level from a picture: ``#`` wall, ``.`` empty."""
    rows = parse_layout(layout)
    return Level(
        width=len(rows[0]),
        height=len(rows),
        cells=tuple(tuple(row) for row in rows),
        start=Position(*start),
        bonus_probability=bonus_probability,
    )


def make_state(
    layout: Sequence[str],
    player: tuple[int, int],
    enemy: tuple[int, int],
    bonus: Optional[tuple[int, int]] = None,
    start: Optional[tuple[int, int]] = None,
    bonus_probability: float = 0.0,
    score: int = 0,
    games: int = 1,
    scores: ScoreConfig = DEFAULT_SCORE_CONFIG,
) -> State:
    """State from a picture: ``#`` wall, ``.`` empty, ``y``/``p`` pellets."""
    rows = parse_layout(layout)
    return State(
        width=len(rows[0]),
        height=len(rows),
        grid=pvector(pvector(row) for row in rows),
        start=Position(*(start or player)),
        bonus_probability=bonus_probability,
        player=Position(*player),
        enemy=Position(*enemy),
        bonus=Position(*bonus) if bonus is not None else None,
        score=score,
        games=games,
        scores=scores,
    )


def count_cells(state: State, cell: Cell) -> int:
    return sum(1 for _, c in state.cells() if c == cell)


CLASSIC_TEXT = """\
7 5 1 1 0.1
1 1 1 1 1 1 1
1 0 0 0 0 0 1
1 0 1 0 1 0 1
1 0 0 0 0 0 1
1 1 1 1 1 1 1
"""
