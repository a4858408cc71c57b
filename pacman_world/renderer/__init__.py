"""Rendering subpackage.

Turns immutable ``State`` snapshots into Pillow images: flat-colored tiles,
pellet discs, sprite textures for the player, enemy and bonus, and the score.

See :mod:`pacman_world.renderer.texture` for the texture map and drawing
routine.
"""
