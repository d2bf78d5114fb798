"""The coral scattered over the sea floor."""

from __future__ import annotations

import os
from pathlib import Path

from subsim.geometry import Vector
from subsim.scene_object import SceneObject, load_scene_object

CORAL_COUNT = 14
CORAL_HEIGHT = -1.0
CORAL_SCALE = 2.0
CORAL_DIRECTORY = "resources/assets/coral"

CORAL_POSITIONS: tuple[Vector, ...] = (
    (8.5, CORAL_HEIGHT, 0.0),
    (0.0, CORAL_HEIGHT, 8.0),
    (5.0, CORAL_HEIGHT, 5.0),
    (0.0, CORAL_HEIGHT, 7.0),
    (-7.0, CORAL_HEIGHT, 0.0),
    (-2.5, CORAL_HEIGHT, -2.5),
    (2.5, CORAL_HEIGHT, -2.5),
    (-2.5, CORAL_HEIGHT, 2.5),
    (-5.0, CORAL_HEIGHT, 5.0),
    (2.5, CORAL_HEIGHT, 2.5),
    (5.0, CORAL_HEIGHT, -5.0),
    (-5.0, CORAL_HEIGHT, -5.0),
    (0.0, CORAL_HEIGHT, -2.5),
    (5.0, CORAL_HEIGHT, 0.5),
)

_DIFFUSE_CORAL = (0.0, 1.0, 0.5)


def coral_paths(directory: str | os.PathLike[str] = CORAL_DIRECTORY) -> list[Path]:
    """Mesh file paths coral_1.txt .. coral_N.txt inside the directory."""
    base = Path(directory)
    return [base / f"coral_{number}.txt" for number in range(1, CORAL_COUNT + 1)]


def load_corals(directory: str | os.PathLike[str] = CORAL_DIRECTORY) -> list[SceneObject]:
    """Load every coral mesh and place it at its fixed position."""
    corals = []
    for path, position in zip(coral_paths(directory), CORAL_POSITIONS):
        coral = load_scene_object(path)
        coral.position = position
        coral.diffuse = (*_DIFFUSE_CORAL, coral.diffuse[3])
        coral.scale = CORAL_SCALE
        corals.append(coral)
    return corals