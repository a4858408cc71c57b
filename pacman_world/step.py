"""State reducers and tick orchestration.

This module wires the rule systems together. The exported reducers are the
only way gameplay progresses and all of them are pure: they return a *new*
:class:`pacman_world.state.State`.

* :func:`reset` starts a game over on the current map.
* :func:`handle_input` applies one player keypress.
* :func:`tick` advances the enemy and the bonus by one time-step.

Ordering within a tick:

1. ``enemy_system`` moves the enemy.
2. ``bonus_system`` moves (and possibly awards) a present bonus, or maybe
    spawns an absent one.
3. If the enemy now shares the player's tile the game is reset.

Player/enemy contact caused by a keypress is only noticed on the next tick.
"""

import logging
from dataclasses import replace

from pacman_world.actions import Action, MOVE_ACTIONS
from pacman_world.config import DEFAULT_SCORE_CONFIG, ScoreConfig
from pacman_world.levels import Level
from pacman_world.moves import step_position
from pacman_world.state import State, grid_from_level
from pacman_world.systems.bonus import bonus_collision_system, bonus_system
from pacman_world.systems.enemy import enemy_system
from pacman_world.systems.pellet import pellet_fill_system, pellet_system
from pacman_world.systems.terminal import is_caught
from pacman_world.types import RandomSource
from pacman_world.utils.grid import is_wall_at, random_open_position

logger = logging.getLogger(__name__)


def new_game(
    level: Level, rng: RandomSource, scores: ScoreConfig = DEFAULT_SCORE_CONFIG
) -> State:
    """Build the first state for ``level`` and reset it.

    Arguments:
        level (Level): Parsed level.
        rng (RandomSource): Source for every random decision.
        scores (ScoreConfig): Point values.

    Returns:
        State: A ready-to-play state with ``games == 1``.
    """
    state = State(
        width=level.width,
        height=level.height,
        grid=grid_from_level(level),
        start=level.start,
        bonus_probability=level.bonus_probability,
        player=level.start,
        enemy=level.start,
        scores=scores,
    )
    return reset(state, rng)


def reset(state: State, rng: RandomSource) -> State:
    """Start the game over on the same map.

    The player goes back to the start; the bonus and then the enemy are placed
    on random open tiles; every empty tile is refilled with a pellet; score
    and turn go to zero.
    """
    state = replace(state, player=state.start)
    state = replace(state, bonus=random_open_position(state, rng))
    state = replace(state, enemy=random_open_position(state, rng))
    state = replace(state, score=0, turn=0, games=state.games + 1)
    state = pellet_fill_system(state, rng)
    logger.debug("Game %d started: %s", state.games, state.description)
    return state


def handle_input(state: State, action: Action) -> State:
    """Apply a single player action.

    A move into a wall is ignored. Whatever the outcome of the move, the
    pellet and bonus under the player are then eaten.

    Raises:
        ValueError: If ``action`` is not a known action.
    """
    if action in MOVE_ACTIONS:
        target = step_position(state.player, action)
        if not is_wall_at(state, target):
            state = replace(state, player=target)
    elif action != Action.WAIT:
        raise ValueError(f"Action is not valid: {action!r}")

    state = pellet_system(state)
    state = bonus_collision_system(state)
    return state


def tick(state: State, rng: RandomSource) -> State:
    """Advance the enemy and bonus by one time-step.

    Returns a freshly reset state if the enemy catches the player.
    """
    state = enemy_system(state, rng)
    state = bonus_system(state, rng)
    if is_caught(state):
        logger.info(
            "Caught at %s with score %d after %d ticks",
            state.player,
            state.score,
            state.turn + 1,
        )
        return reset(state, rng)
    return replace(state, turn=state.turn + 1)
