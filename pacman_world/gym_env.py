"""Gymnasium environment wrapper for Pacman World.

One environment step is one player action followed by one tick, the same
cadence as a keypress between two timer ticks. Reward is the delta of
``state.score`` per step, and 0 on the step where the player is caught (the
game restarts with score 0). ``terminated`` is ``True`` when the enemy caught
the player during the step; ``truncated`` when the optional ``max_steps``
limit is reached.

Observation schema:

``{"image": np.ndarray(H,W,4), "grid": np.ndarray(rows,cols), "info": {"status": {...}, "entities": {...}, "config": {...}}}``

Usage:

``env = PacmanEnv(level_path="assets/levels/classic.txt", seed=0)``
"""

import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from pacman_world.actions import Action, GymAction
from pacman_world.components import Position
from pacman_world.config import DEFAULT_SCORE_CONFIG, ScoreConfig
from pacman_world.levels import Level, load_level
from pacman_world.renderer.texture import (
    DEFAULT_ASSET_ROOT,
    DEFAULT_RESOLUTION,
    DEFAULT_TEXTURE_MAP,
    TextureMap,
    TextureRenderer,
)
from pacman_world.state import State
from pacman_world.step import handle_input, new_game, tick
from pacman_world.types import Cell

ObsType = Dict[str, Any]

GYM_TO_ACTION: Dict[GymAction, Action] = {
    GymAction.UP: Action.UP,
    GymAction.DOWN: Action.DOWN,
    GymAction.LEFT: Action.LEFT,
    GymAction.RIGHT: Action.RIGHT,
    GymAction.WAIT: Action.WAIT,
}


def _position_dict(pos: Optional[Position]) -> Dict[str, int]:
    """Serialize a position; ``-1`` coordinates stand for an absent entity."""
    if pos is None:
        return {"x": -1, "y": -1}
    return {"x": int(pos.x), "y": int(pos.y)}


def grid_array(state: State) -> np.ndarray:
    """Row-major ``int8`` array of :class:`Cell` values."""
    return np.array([[int(cell) for cell in row] for row in state.grid], dtype=np.int8)


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, turn, games)."""
    return {
        "score": int(state.score),
        "turn": int(state.turn),
        "games": int(state.games),
    }


def env_entities_observation_dict(state: State) -> Dict[str, Any]:
    return {
        "player": _position_dict(state.player),
        "enemy": _position_dict(state.enemy),
        "bonus": _position_dict(state.bonus),
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (dimensions, start, spawn probability)."""
    return {
        "width": state.width,
        "height": state.height,
        "start": _position_dict(state.start),
        "bonus_probability": float(state.bonus_probability),
    }


class PacmanEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Pacman World.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`pacman_world.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        level: Optional[Level] = None,
        level_path: Optional[str] = None,
        seed: Optional[int] = None,
        max_steps: Optional[int] = None,
        scores: ScoreConfig = DEFAULT_SCORE_CONFIG,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        render_texture_map: TextureMap = DEFAULT_TEXTURE_MAP,
        render_asset_root: str = DEFAULT_ASSET_ROOT,
    ):
        """Create a new environment instance.

        Arguments:
            level: Parsed level; takes precedence over ``level_path``.
            level_path: Level file to load when ``level`` is not given.
            seed: Seed for the game's random source.
            max_steps: Truncate episodes after this many steps (no limit if None).
            scores: Point values.
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            render_texture_map: Mapping of sprite names to asset paths.
            render_asset_root: Directory the texture map paths are relative to.
        """
        from gymnasium import spaces

        if level is None:
            if level_path is None:
                raise ValueError("Either level or level_path must be provided")
            level = load_level(level_path)

        self.level = level
        self.scores = scores
        self.max_steps = max_steps
        self._rng = random.Random(seed)
        self._render_mode = render_mode
        self._texture_renderer = TextureRenderer(
            resolution=render_resolution,
            texture_map=render_texture_map,
            asset_root=render_asset_root,
        )

        # Runtime state
        self.state: Optional[State] = None
        self._steps = 0
        self._last_score = 0

        cell_size = max(1, render_resolution // level.width)
        render_width: int = cell_size * level.width
        render_height: int = cell_size * level.height

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        position_space = spaces.Dict(
            {
                "x": int_box(-1, level.width - 1),
                "y": int_box(-1, level.height - 1),
            }
        )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "grid": spaces.Box(
                    low=int(min(Cell)),
                    high=int(max(Cell)),
                    shape=(level.height, level.width),
                    dtype=np.int8,
                ),
                "info": spaces.Dict(
                    {
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000_000),
                                "turn": int_box(0, 1_000_000_000),
                                "games": int_box(0, 1_000_000_000),
                            }
                        ),
                        "entities": spaces.Dict(
                            {
                                "player": position_space,
                                "enemy": position_space,
                                "bonus": position_space,
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                                "start": position_space,
                                "bonus_probability": spaces.Box(
                                    low=0.0, high=1.0, shape=(), dtype=np.float64
                                ),
                            }
                        ),
                    }
                ),
            }
        )

        # Actions
        self.action_space = spaces.Discrete(len(GymAction))

        # Initialize first episode
        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Reseeds the game's random source when given.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.state = new_game(self.level, self._rng, self.scores)
        self._steps = 0
        self._last_score = self.state.score
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one player action followed by one tick.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action: Action = GYM_TO_ACTION[GymAction(int(action))]

        prev_games = self.state.games
        self.state = handle_input(self.state, step_action)
        self.state = tick(self.state, self._rng)
        self._steps += 1

        terminated = self.state.games != prev_games
        reward = 0.0 if terminated else float(self.state.score - self._last_score)
        self._last_score = self.state.score
        truncated = self.max_steps is not None and self._steps >= self.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._texture_renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "status": env_status_observation_dict(self.state),
            "entities": env_entities_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        """Internal helper constructing the full observation."""
        assert self.state is not None
        img = self._texture_renderer.render(self.state)
        return {
            "image": np.array(img),
            "grid": grid_array(self.state),
            "info": self.state_info(),
        }

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
