"""A camera orbiting a target at a fixed distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

from subsim.geometry import PI, Vector

DEFAULT_CAMERA_POSITION: Vector = (-1.0, 2.0, -2.0)
DEFAULT_CAMERA_FORWARD: Vector = (0.0, 0.0, 1.0)
DEFAULT_CAMERA_LOOK_AT: Vector = (0.0, 0.0, 0.0)
DEFAULT_CAMERA_THETA = PI
DEFAULT_CAMERA_PHI = PI / 180.0
DEFAULT_CAMERA_FOV = 110.0
DEFAULT_CAMERA_NEAR_PLANE = 0.1
DEFAULT_CAMERA_FAR_PLANE = 100.0

FOLLOW_DISTANCE = 1.5


@dataclass
class Camera:
    """Camera placement given by spherical angles theta (azimuth) and phi (elevation)."""

    position: Vector = DEFAULT_CAMERA_POSITION
    forward: Vector = DEFAULT_CAMERA_FORWARD
    look_at: Vector = DEFAULT_CAMERA_LOOK_AT
    theta: float = DEFAULT_CAMERA_THETA
    phi: float = DEFAULT_CAMERA_PHI
    fov: float = DEFAULT_CAMERA_FOV

    def follow(self, target: Vector) -> None:
        """Place the camera on its orbit around the target point and look at it."""
        x, y, z = target
        horizontal = FOLLOW_DISTANCE * math.cos(self.phi)
        self.position = (
            x + horizontal * math.sin(self.theta),
            y + FOLLOW_DISTANCE * math.sin(self.phi),
            z + horizontal * math.cos(self.theta),
        )
        self.look_at = (x, y, z)