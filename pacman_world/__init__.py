"""Pacman World: a small grid arcade game.

A player token moves on a fixed grid collecting pellets, avoids a randomly
wandering bunny and can grab a bonus cherry that shows up now and then.
Game rules live in pure reducers (:mod:`pacman_world.step`) over an immutable
:class:`pacman_world.state.State`; :class:`pacman_world.game.GameState` wraps
them for callers that prefer a mutable handle.
"""
