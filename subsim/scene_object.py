"""Placed, coloured objects built from meshes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from subsim.geometry import Vector
from subsim.mesh import Mesh, load_mesh

Color = tuple[float, float, float, float]


@dataclass
class SceneObject:
    """A mesh with position, heading, motion and material."""

    mesh: Mesh = field(default_factory=Mesh)
    position: Vector = (0.0, 0.0, 0.0)
    direction: Vector = (0.0, 0.0, 0.0)
    speed: float = 0.0
    rotation: float = 0.0
    scale: float = 1.0
    ambient: Color = (0.0, 0.0, 0.0, 0.0)
    diffuse: Color = (1.0, 1.0, 1.0, 1.0)
    specular: Color = (0.0, 0.0, 0.0, 0.0)
    shine: float = 0.0

    def advance(self) -> None:
        """Move one step along the direction, scaled by speed."""
        self.position = tuple(
            p + d * self.speed for p, d in zip(self.position, self.direction)
        )


def load_scene_object(path: str | os.PathLike[str]) -> SceneObject:
    """Create an object with default properties from a mesh file."""
    return SceneObject(mesh=load_mesh(path))