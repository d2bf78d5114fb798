"""Flocking rules: neighbour search, boundary avoidance and steering."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from subsim.boid_physics import (
    BOID_NEIGHBORHOOD_SIZE,
    BOID_STRENGTH_COHESION,
    BOID_STRENGTH_ENVIRONMENT,
    BOID_TRIGGER_ENVIRONMENT,
    Boid,
    alignment_target_direction,
    cohesion_target_direction,
    distance,
    environment_target_direction,
    min_distance_to_environment,
)
from subsim.geometry import Vector, normalize

BOID_TRIGGER_SEPARATE = 1.0
BOID_STRENGTH_SEPARATE = 0.005
BOID_STRENGTH_ALIGNMENT = 0.00125

_EPSILON = 0.000001


@dataclass(frozen=True)
class Neighbor:
    """A nearby boid: its distance from the subject and its place in the population."""

    distance: float
    index: int


def find_neighbors(subject: Boid, population: Sequence[Boid]) -> list[Neighbor]:
    """Return the closest members of the population, nearest first.

    The very closest entry is taken to be the subject itself and is skipped.
    """
    if len(population) <= BOID_NEIGHBORHOOD_SIZE:
        raise ValueError(
            f"population needs more than {BOID_NEIGHBORHOOD_SIZE} boids"
        )
    ranked = sorted(
        (Neighbor(distance(subject, other), index) for index, other in enumerate(population)),
        key=lambda neighbor: neighbor.distance,
    )
    return ranked[1 : BOID_NEIGHBORHOOD_SIZE + 1]


def environment_triggered(boid: Boid) -> bool:
    """True when the boid is close enough to a boundary to steer away from it."""
    return min_distance_to_environment(boid) < BOID_TRIGGER_ENVIRONMENT


def _nudge(boid: Boid, target: Vector, strength: float) -> None:
    boid.direction = normalize(
        tuple(d + t * strength for d, t in zip(boid.direction, target))
    )


def avoid_environment(boid: Boid) -> None:
    """Turn the boid away from nearby walls, floor and ceiling."""
    _nudge(boid, environment_target_direction(boid), BOID_STRENGTH_ENVIRONMENT)


def _separate(boid: Boid, closest: Boid) -> None:
    gap = distance(boid, closest)
    if gap >= BOID_TRIGGER_SEPARATE:
        return
    away = normalize(tuple(p - q for p, q in zip(boid.position, closest.position)))
    strength = 1.0 / (gap * gap + _EPSILON) * BOID_STRENGTH_SEPARATE
    _nudge(boid, away, strength)


def steer_with_neighbors(boid: Boid, population: Sequence[Boid]) -> None:
    """Apply alignment, separation and cohesion using the given population's states."""
    neighbors = find_neighbors(boid, population)
    neighbor_boids = [population[neighbor.index] for neighbor in neighbors]

    _nudge(boid, alignment_target_direction(boid, neighbor_boids), BOID_STRENGTH_ALIGNMENT)
    _separate(boid, neighbor_boids[0])
    _nudge(boid, cohesion_target_direction(boid, neighbor_boids), BOID_STRENGTH_COHESION)