"""Boid state, environment bounds and the steering vectors of a flock."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from subsim.geometry import Vector, normalize

ENVIRONMENT_RADIUS_XZ = 10.0
ENVIRONMENT_HEIGHT = 10.0
ENVIRONMENT_FLOOR_Y = -1.0

BOID_COUNT = 40
BOID_SPEED = 0.01
BOID_NEIGHBORHOOD_SIZE = 6

BOID_APEX = 2.0
BOID_BASE = 1.0
BOID_AMBIENT = 0.2
BOID_DIFFUSE = 1.0
BOID_SPECULAR = 1.0
BOID_SHINE = 20.0
BOID_SCALE = 0.1

BOID_TRIGGER_ENVIRONMENT = 2.0
BOID_STRENGTH_ENVIRONMENT = 0.1
BOID_STRENGTH_COHESION = 0.002

_EPSILON = 1e-6


@dataclass
class Boid:
    """A single flock member with a position and a unit heading."""

    position: Vector = (0.0, 0.0, 0.0)
    direction: Vector = (0.0, 0.0, 1.0)

    def advance(self) -> None:
        """Move one step along the heading at the flock speed."""
        self.position = tuple(
            p + d * BOID_SPEED for p, d in zip(self.position, self.direction)
        )


def distance(a: Boid, b: Boid) -> float:
    """Euclidean distance between two boids."""
    return math.dist(a.position, b.position)


def distance_to_wall(boid: Boid) -> float:
    """Distance from the boid to the cylindrical wall."""
    x, _, z = boid.position
    return ENVIRONMENT_RADIUS_XZ - math.hypot(x, z)


def distance_to_floor(boid: Boid) -> float:
    """Height of the boid above the floor."""
    return boid.position[1] - ENVIRONMENT_FLOOR_Y


def distance_to_ceiling(boid: Boid) -> float:
    """Distance from the boid down from the ceiling."""
    return ENVIRONMENT_HEIGHT - boid.position[1]


def min_distance_to_environment(boid: Boid) -> float:
    """Distance to the closest of wall, floor and ceiling."""
    return min(distance_to_wall(boid), distance_to_floor(boid), distance_to_ceiling(boid))


def _repulsion(gap: float) -> float:
    return BOID_STRENGTH_ENVIRONMENT / (gap * gap + _EPSILON)


def environment_target_direction(boid: Boid) -> Vector:
    """Unit steering vector pushing the boid away from nearby bounds."""
    x, y, z = 0.0, 0.0, 0.0

    wall = distance_to_wall(boid)
    if wall < BOID_TRIGGER_ENVIRONMENT:
        strength = _repulsion(wall)
        x -= boid.position[0] * strength
        z -= boid.position[2] * strength

    floor = distance_to_floor(boid)
    if floor < BOID_TRIGGER_ENVIRONMENT:
        y += _repulsion(floor)

    ceiling = distance_to_ceiling(boid)
    if ceiling < BOID_TRIGGER_ENVIRONMENT:
        y -= _repulsion(ceiling)

    dx, dy, dz = boid.direction
    return normalize((x - dx, y - dy, z - dz))


def alignment_target_direction(boid: Boid, neighbors: Iterable[Boid]) -> Vector:
    """Unit vector from the boid's heading toward its neighbours' mean heading."""
    headings = [neighbor.direction for neighbor in neighbors]
    if not headings:
        raise ValueError("alignment needs at least one neighbor")
    count = len(headings)
    average = tuple(sum(axis) / count for axis in zip(*headings))
    return normalize(tuple(a - d for a, d in zip(average, boid.direction)))


def cohesion_target_direction(boid: Boid, neighbors: Iterable[Boid]) -> Vector:
    """Unit vector toward the neighbours' centre, weighted by inverse squared distance."""
    sums = [0.0, 0.0, 0.0]
    total_weight = 0.0
    for neighbor in neighbors:
        gap = distance(boid, neighbor)
        if gap == 0.0:
            raise ValueError("neighbor occupies the same position as the boid")
        weight = BOID_STRENGTH_COHESION / (gap * gap)
        for axis, value in enumerate(neighbor.position):
            sums[axis] += value * weight
        total_weight += weight
    if total_weight == 0.0:
        raise ValueError("cohesion needs at least one neighbor")
    centre = (value / total_weight for value in sums)
    return normalize(tuple(c - p for c, p in zip(centre, boid.position)))