"""Bonus (cherry) systems.

The bonus wanders like the enemy while on the board, is eaten when it shares
a tile with the player, and respawns at random with the level's per-tick
probability while absent.
"""

from dataclasses import replace

from pacman_world.moves import random_move
from pacman_world.state import State
from pacman_world.types import RandomSource
from pacman_world.utils.grid import random_open_position


def bonus_collision_system(state: State) -> State:
    """Award the bonus and clear it if the player stands on it."""
    if state.bonus is None or state.bonus != state.player:
        return state
    return replace(state, bonus=None, score=state.score + state.scores.bonus)


def bonus_moving_system(state: State, rng: RandomSource) -> State:
    """Random step for a present bonus."""
    if state.bonus is None:
        return state
    return replace(state, bonus=random_move(state, state.bonus, rng))


def bonus_spawn_system(state: State, rng: RandomSource) -> State:
    """Maybe place an absent bonus on a random open tile.

    No collision check happens on the spawn tick itself; a bonus spawned
    under the player is eaten on the next move or tick.
    """
    if state.bonus is not None:
        return state
    if rng.random() < state.bonus_probability:
        return replace(state, bonus=random_open_position(state, rng))
    return state


def bonus_system(state: State, rng: RandomSource) -> State:
    """Per-tick bonus update: move and collide if present, else maybe spawn."""
    if state.bonus is not None:
        state = bonus_moving_system(state, rng)
        return bonus_collision_system(state)
    return bonus_spawn_system(state, rng)
