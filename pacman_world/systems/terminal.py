"""Caught condition.

The game has no win condition; the only terminal event is the enemy landing
on the player, which restarts the game.
"""

from pacman_world.state import State


def is_caught(state: State) -> bool:
    """Return True if the enemy shares a tile with the player."""
    return state.player == state.enemy
