"""Rule systems.

Each system is a pure function ``State -> State`` (some also take a random
source) handling one concern. :mod:`pacman_world.step` decides the order.
"""
