"""The whole underwater scene: its parts, per-frame stepping and the start-up command."""

from __future__ import annotations

import argparse
import os
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from subsim.boid_physics import BOID_APEX, BOID_BASE
from subsim.boids import Flock
from subsim.camera import Camera
from subsim.controls import Controls
from subsim.coral import load_corals
from subsim.geometry import Vector, triangle_normal
from subsim.scene_object import SceneObject
from subsim.submarine import load_submarine
from subsim.water import WaterSurface

RESOURCE_DIRECTORY = "resources"
SUBMARINE_MESH = Path("assets") / "submarine" / "submarine-smooth.txt"
CORAL_MESH_DIRECTORY = Path("assets") / "coral"

WATER_POSITION: Vector = (0.0, 10.0, 0.0)

Triangle = tuple[Vector, Vector, Vector]

_CONTROLS_LINES = (
    "Scene Controls",
    "-------------------",
    "u:\t\t\ttoggle wire frame mode",
    "b:\t\t\ttoggle fog",
    "f:\t\t\ttoggle full screen window",
    "",
    "Camera Controls",
    "-------------------",
    "W:\t\t\tMove forward",
    "S\t\t\tMove backwards",
    "A:\t\t\tMove right",
    "D\t\t\tMove left",
    "Up Arrow:\t\tMove up",
    "Down Arrow:\t\tMove down",
    "Mouse to the right:\trotates the camera to the right of the submarine",
    "Mouse to the left:\trotates the camera to the left of the submarine",
    "Mouse upwards:\t\trotates the camera to the top of the submarine",
    "Mouse downwards:\trotates the camera to the bottom of the submarine",
)


def boid_model() -> list[tuple[Vector, Triangle]]:
    """The six faces of the boid pyramid as (normal, triangle) pairs in drawing order."""
    apex = (0.0, 0.0, BOID_APEX)
    top_left = (BOID_BASE, BOID_BASE, -BOID_APEX)
    top_right = (-BOID_BASE, BOID_BASE, -BOID_APEX)
    bottom_left = (BOID_BASE, -BOID_BASE, -BOID_APEX)
    bottom_right = (-BOID_BASE, -BOID_BASE, -BOID_APEX)

    normal_top = triangle_normal(apex, top_left, top_right)
    normal_left = triangle_normal(apex, bottom_left, top_left)
    normal_bottom = triangle_normal(apex, bottom_right, bottom_left)
    normal_right = triangle_normal(apex, bottom_right, top_right)
    normal_base_left = triangle_normal(top_left, bottom_left, top_right)
    normal_base_right = triangle_normal(top_right, bottom_left, bottom_right)

    return [
        (normal_top, (apex, top_left, top_right)),
        (normal_left, (apex, bottom_left, top_left)),
        (normal_bottom, (apex, bottom_left, bottom_right)),
        (normal_right, (apex, bottom_right, top_right)),
        (normal_base_left, (top_left, bottom_left, top_right)),
        (normal_base_right, (top_right, bottom_left, bottom_right)),
    ]


def controls_text() -> str:
    """The help text listing the scene and camera controls."""
    return "\n".join(_CONTROLS_LINES) + "\n"


@dataclass
class Scene:
    """Everything that lives in the simulation and changes from frame to frame."""

    submarine: SceneObject
    corals: list[SceneObject] = field(default_factory=list)
    flock: Flock = field(default_factory=Flock)
    water: WaterSurface = field(default_factory=WaterSurface)
    camera: Camera = field(default_factory=Camera)
    controls: Controls | None = None

    def __post_init__(self) -> None:
        if self.controls is None:
            self.controls = Controls(submarine=self.submarine, camera=self.camera)

    @classmethod
    def load(
        cls,
        resources: str | os.PathLike[str] = RESOURCE_DIRECTORY,
        rng: random.Random | None = None,
    ) -> Scene:
        """Build a scene from the mesh files under a resource directory."""
        root = Path(resources)
        return cls(
            submarine=load_submarine(root / SUBMARINE_MESH),
            corals=load_corals(root / CORAL_MESH_DIRECTORY),
            flock=Flock(rng=rng),
        )

    def step(self, elapsed_ms: float) -> None:
        """Advance water, submarine, camera and flock by one frame."""
        self.water.update(elapsed_ms)
        self.submarine.advance()
        self.camera.follow(self.submarine.position)
        self.flock.update()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the controls, load the scene and run it for a number of frames."""
    parser = argparse.ArgumentParser(prog="subsim", description="Underwater submarine scene.")
    parser.add_argument(
        "--resources",
        default=RESOURCE_DIRECTORY,
        help="directory holding the assets folder",
    )
    parser.add_argument("--steps", type=int, default=0, help="number of frames to simulate")
    parser.add_argument("--seed", type=int, default=None, help="seed for the flock's start")
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must not be negative")

    print(controls_text(), end="")

    try:
        scene = Scene.load(args.resources, rng=random.Random(args.seed))
    except (OSError, ValueError) as error:
        print(f"subsim: cannot load scene: {error}", file=sys.stderr)
        return 1

    start = time.monotonic()
    for _ in range(args.steps):
        if scene.controls.quit_requested:
            break
        scene.step((time.monotonic() - start) * 1000.0)

    x, y, z = scene.submarine.position
    print(f"submarine at ({x:.3f}, {y:.3f}, {z:.3f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())