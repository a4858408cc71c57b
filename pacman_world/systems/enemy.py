"""Enemy (bunny) movement system."""

from dataclasses import replace

from pacman_world.moves import random_move
from pacman_world.state import State
from pacman_world.types import RandomSource


def enemy_system(state: State, rng: RandomSource) -> State:
    """Move the enemy one random step that avoids walls."""
    return replace(state, enemy=random_move(state, state.enemy, rng))
