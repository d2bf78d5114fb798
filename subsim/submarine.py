"""The player-controlled submarine."""

from __future__ import annotations

import os

from subsim.scene_object import SceneObject, load_scene_object

SUBMARINE_SPEED = 0.025
DEFAULT_SUBMARINE_ROTATION = 90.0
DEFAULT_SUBMARINE_SCALE = 0.004
DEFAULT_SUBMARINE_YAW = 90.0
DEFAULT_SUBMARINE_SHINE = 150.0

SUBMARINE_START_POSITION = (0.0, 2.0, -2.0)
SUBMARINE_MESH_PATH = "resources/assets/submarine/submarine-smooth.txt"

_DIFFUSE_YELLOW = (1.0, 1.0, 0.0)
_SPECULAR_WHITE = (1.0, 1.0, 1.0)


def load_submarine(path: str | os.PathLike[str] = SUBMARINE_MESH_PATH) -> SceneObject:
    """Load the submarine mesh and give it its starting place and material."""
    submarine = load_scene_object(path)
    submarine.position = SUBMARINE_START_POSITION
    submarine.diffuse = (*_DIFFUSE_YELLOW, submarine.diffuse[3])
    submarine.specular = (*_SPECULAR_WHITE, submarine.specular[3])
    submarine.rotation = DEFAULT_SUBMARINE_ROTATION
    submarine.scale = DEFAULT_SUBMARINE_SCALE
    submarine.shine = DEFAULT_SUBMARINE_SHINE
    return submarine