"""Pellet systems.

Placing pellets on reset and eating them when the player steps on one.
"""

from dataclasses import replace

from pyrsistent import pvector

from pacman_world.state import State
from pacman_world.types import Cell, PELLET_CELLS, RandomSource


def pellet_fill_system(state: State, rng: RandomSource) -> State:
    """Turn every empty tile into a pellet of random color.

    Each tile gets an independent draw: below 0.5 is yellow, otherwise pink.
    Walls and tiles that still hold a pellet are left alone. Tiles are visited
    column by column.
    """
    rows = [list(row) for row in state.grid]
    for x in range(state.width):
        for y in range(state.height):
            if rows[y][x] == Cell.EMPTY:
                rows[y][x] = (
                    Cell.YELLOW_PELLET if rng.random() < 0.5 else Cell.PINK_PELLET
                )
    return replace(state, grid=pvector(pvector(row) for row in rows))


def pellet_system(state: State) -> State:
    """Eat the pellet under the player, if any."""
    pos = state.player
    cell = state.cell_at(pos)
    if cell not in PELLET_CELLS:
        return state
    row = state.grid[pos.y].set(pos.x, Cell.EMPTY)
    return replace(
        state,
        grid=state.grid.set(pos.y, row),
        score=state.score + state.scores.pellet_value(cell),
    )
