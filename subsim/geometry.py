"""Vector helpers for the simulation's 3D math."""

from __future__ import annotations

import math

PI = 3.14159265
_DEGREE_TO_RADIAN = PI / 180.0

Vector = tuple[float, float, float]


def normalize(vector: Vector) -> Vector:
    """Return the vector scaled to unit length."""
    x, y, z = vector
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return (x / length, y / length, z / length)


def is_zero(vector: Vector) -> bool:
    """True when every component of the vector is zero."""
    return all(component == 0.0 for component in vector)


def cross(a: Vector, b: Vector) -> Vector:
    """Cross product of two vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def degree_to_radian(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * _DEGREE_TO_RADIAN


def radian_to_degree(radian: float) -> float:
    """Convert radians to degrees."""
    return radian / _DEGREE_TO_RADIAN


def pitch_degree(vector: Vector) -> float:
    """Elevation of a unit vector above the horizontal plane, in degrees."""
    return radian_to_degree(math.asin(vector[1]))


def yaw_degree(vector: Vector) -> float:
    """Rotation of a vector around the vertical axis, in degrees."""
    return radian_to_degree(math.atan2(vector[0], vector[2]))


def direction_from_angles(pitch: float, yaw: float) -> Vector:
    """Unit direction vector built from pitch and yaw given in radians."""
    return normalize(
        (
            math.cos(pitch) * math.cos(yaw),
            math.sin(yaw),
            math.cos(pitch) * math.sin(yaw),
        )
    )


def triangle_normal(p1: Vector, p2: Vector, p3: Vector) -> Vector:
    """Unit normal of the triangle p1, p2, p3 by the right-hand rule."""
    e1 = (p2[0] - p1[0], p2[1] - p1[1], p2[2] - p1[2])
    e2 = (p3[0] - p1[0], p3[1] - p1[1], p3[2] - p1[2])
    return normalize(cross(e1, e2))