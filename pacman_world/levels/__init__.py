"""Level description and level-file loading.

A :class:`Level` is the static part of a game: wall layout, player start and
the per-tick bonus spawn probability. See :mod:`pacman_world.levels.loader`
for the text format.
"""

from .level import Level
from .loader import LevelFormatError, load_level, load_level_or_exit, parse_level

__all__ = [
    "Level",
    "LevelFormatError",
    "load_level",
    "load_level_or_exit",
    "parse_level",
]
