"""Grid helpers.

Pure predicates and samplers over a :class:`State` grid, shared by the
movement code and the reset / spawn rules.
"""

from pacman_world.components import Position
from pacman_world.state import State
from pacman_world.types import Cell, RandomSource


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the level rectangle."""
    return 0 <= pos.x < state.width and 0 <= pos.y < state.height


def is_wall_at(state: State, pos: Position) -> bool:
    """Return True if ``pos`` is a wall or outside the grid."""
    return not is_in_bounds(state, pos) or state.cell_at(pos) == Cell.WALL


def random_open_position(state: State, rng: RandomSource) -> Position:
    """Pick a non-wall tile uniformly at random.

    Draws ``(x, y)`` pairs until one is not a wall. Loaded levels always have
    at least one open tile (the player start), so the loop terminates.
    """
    while True:
        x = rng.randrange(state.width)
        y = rng.randrange(state.height)
        pos = Position(x, y)
        if not is_wall_at(state, pos):
            return pos
