"""Scoring configuration and user-supplied settings.

The level file decides *where* things are; :class:`ScoreConfig` decides what
eating them is worth. Defaults reproduce the classic values (5 per pellet,
400 per cherry).
"""

from dataclasses import dataclass
from typing import Optional

from pacman_world.types import Cell

PELLET_SCORE = 5
BONUS_SCORE = 400


@dataclass(frozen=True)
class ScoreConfig:
    """Point values awarded on consumption.

    Attributes:
        yellow_pellet: Points for a yellow pellet.
        pink_pellet: Points for a pink pellet.
        bonus: Points for the bonus cherry.
    """

    yellow_pellet: int = PELLET_SCORE
    pink_pellet: int = PELLET_SCORE
    bonus: int = BONUS_SCORE

    def __post_init__(self) -> None:
        if min(self.yellow_pellet, self.pink_pellet, self.bonus) < 0:
            raise ValueError(f"Score values must be non-negative: {self}")

    def pellet_value(self, cell: Cell) -> int:
        """Return the points for eating ``cell`` (0 for non-pellet cells)."""
        if cell == Cell.YELLOW_PELLET:
            return self.yellow_pellet
        if cell == Cell.PINK_PELLET:
            return self.pink_pellet
        return 0


DEFAULT_SCORE_CONFIG = ScoreConfig()


def parse_seed(text: str) -> Optional[int]:
    """Seed typed by the user, or ``None`` for blank or non-integer text."""
    try:
        return int(text)
    except ValueError:
        return None
