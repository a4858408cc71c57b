"""Directional movement helpers.

Maps :class:`Action` values onto grid deltas and implements the random
cardinal step used by the enemy and the bonus item.

Contract for :func:`random_move`:

* Each attempt picks one of the four directions uniformly.
* Attempts into walls are rejected and redrawn.
* A mover with no open neighbour stays where it is instead of looping
  forever.
"""

from typing import Dict, List, Tuple

from pacman_world.actions import Action
from pacman_world.components import Position
from pacman_world.state import State
from pacman_world.types import RandomSource
from pacman_world.utils.grid import is_wall_at

DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}

# Draw order for random moves
RANDOM_DIRECTIONS: List[Action] = [Action.DOWN, Action.UP, Action.RIGHT, Action.LEFT]


def step_position(pos: Position, action: Action) -> Position:
    """Adjacent tile in the direction of ``action`` (no bounds check)."""
    dx, dy = DIRECTION_DELTAS[action]
    return Position(pos.x + dx, pos.y + dy)


def open_directions(state: State, pos: Position) -> List[Action]:
    """Directions from ``pos`` whose target tile is not a wall."""
    return [
        action
        for action in RANDOM_DIRECTIONS
        if not is_wall_at(state, step_position(pos, action))
    ]


def random_move(state: State, pos: Position, rng: RandomSource) -> Position:
    """One random cardinal step from ``pos`` that does not enter a wall.

    Returns ``pos`` unchanged if all four neighbours are walls.
    """
    if not open_directions(state, pos):
        return pos
    while True:
        action = RANDOM_DIRECTIONS[rng.randrange(len(RANDOM_DIRECTIONS))]
        next_pos = step_position(pos, action)
        if not is_wall_at(state, next_pos):
            return next_pos
