import math

import pytest

from subsim.camera import (
    DEFAULT_CAMERA_FOV,
    DEFAULT_CAMERA_PHI,
    DEFAULT_CAMERA_THETA,
    FOLLOW_DISTANCE,
    Camera,
)


def test_defaults():
    camera = Camera()
    assert camera.theta == DEFAULT_CAMERA_THETA
    assert camera.phi == DEFAULT_CAMERA_PHI
    assert camera.fov == DEFAULT_CAMERA_FOV
    assert camera.fov == 110.0


def test_follow_looks_at_target():
    camera = Camera()
    camera.follow((3.0, 4.0, -5.0))
    assert camera.look_at == (3.0, 4.0, -5.0)


@pytest.mark.parametrize("theta, phi", [(0.0, 0.0), (1.0, 0.5), (-2.0, -1.2), (3.0, 1.5)])
def test_follow_keeps_fixed_distance(theta, phi):
    camera = Camera(theta=theta, phi=phi)
    target = (1.0, -2.0, 0.5)
    camera.follow(target)
    assert math.dist(camera.position, target) == pytest.approx(FOLLOW_DISTANCE)


def test_follow_behind_target_at_zero_angles():
    camera = Camera(theta=0.0, phi=0.0)
    camera.follow((0.0, 0.0, 0.0))
    assert camera.position == pytest.approx((0.0, 0.0, FOLLOW_DISTANCE))


def test_follow_tracks_moving_target():
    camera = Camera(theta=0.7, phi=0.3)
    camera.follow((0.0, 0.0, 0.0))
    first = camera.position
    camera.follow((2.0, 1.0, -1.0))
    offset = tuple(b - a for a, b in zip(first, camera.position))
    assert offset == pytest.approx((2.0, 1.0, -1.0))