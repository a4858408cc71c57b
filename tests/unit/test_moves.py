import random
from typing import Tuple

import pytest

from pacman_world.actions import Action
from pacman_world.components import Position
from pacman_world.moves import open_directions, random_move, step_position
from pacman_world.types import Cell
from pacman_world.utils.grid import is_wall_at
from tests.test_utils import ScriptedRandom, make_state

CORRIDOR = [
    "#####",
    "#...#",
    "#####",
]


@pytest.mark.parametrize(
    "start, action, expected",
    [
        ((2, 2), Action.UP, (2, 1)),
        ((2, 2), Action.DOWN, (2, 3)),
        ((2, 2), Action.LEFT, (1, 2)),
        ((2, 2), Action.RIGHT, (3, 2)),
        # no bounds check
        ((0, 0), Action.LEFT, (-1, 0)),
        ((0, 0), Action.UP, (0, -1)),
    ],
)
def test_step_position(
    start: Tuple[int, int], action: Action, expected: Tuple[int, int]
) -> None:
    assert step_position(Position(*start), action) == Position(*expected)


def test_open_directions_in_corridor() -> None:
    state = make_state(CORRIDOR, player=(1, 1), enemy=(2, 1))
    assert open_directions(state, Position(1, 1)) == [Action.RIGHT]
    assert set(open_directions(state, Position(2, 1))) == {Action.LEFT, Action.RIGHT}


def test_random_move_redraws_until_open() -> None:
    state = make_state(CORRIDOR, player=(3, 1), enemy=(1, 1))
    # DOWN, UP, LEFT hit walls; RIGHT is open
    rng = ScriptedRandom(ints=[0, 1, 3, 2])

    assert random_move(state, Position(1, 1), rng) == Position(2, 1)
    assert rng.exhausted


@pytest.mark.parametrize(
    "draw, expected",
    [
        (2, (3, 1)),  # right
        (3, (1, 1)),  # left
    ],
)
def test_random_move_picks_drawn_direction(
    draw: int, expected: Tuple[int, int]
) -> None:
    state = make_state(CORRIDOR, player=(1, 1), enemy=(2, 1))
    rng = ScriptedRandom(ints=[draw])
    assert random_move(state, Position(2, 1), rng) == Position(*expected)


def test_random_move_boxed_in_stays_put() -> None:
    state = make_state(["###", "#.#", "###"], player=(1, 1), enemy=(1, 1))
    rng = ScriptedRandom()  # any draw would fail

    assert random_move(state, Position(1, 1), rng) == Position(1, 1)


def test_random_move_treats_outside_as_wall() -> None:
    state = make_state(["..."], player=(2, 0), enemy=(0, 0))
    assert is_wall_at(state, Position(-1, 0))
    # LEFT leaves the grid, RIGHT is open
    rng = ScriptedRandom(ints=[3, 2])

    assert random_move(state, Position(0, 0), rng) == Position(1, 0)
    assert rng.exhausted


def test_random_move_never_enters_walls() -> None:
    state = make_state(
        [
            "######",
            "#....#",
            "#.##.#",
            "#....#",
            "######",
        ],
        player=(1, 1),
        enemy=(1, 1),
    )
    rng = random.Random(3)
    pos = Position(1, 1)
    for _ in range(500):
        next_pos = random_move(state, pos, rng)
        assert state.cell_at(next_pos) != Cell.WALL
        assert abs(next_pos.x - pos.x) + abs(next_pos.y - pos.y) == 1
        pos = next_pos
