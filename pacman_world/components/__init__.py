"""Value objects shared by the state, systems and renderer."""

from .position import Position

__all__ = ["Position"]
