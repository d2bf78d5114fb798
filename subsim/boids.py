"""A flock of boids stepped through time."""

from __future__ import annotations

import dataclasses
import random

from subsim.boid_behavior import avoid_environment, environment_triggered, steer_with_neighbors
from subsim.boid_physics import BOID_COUNT, BOID_NEIGHBORHOOD_SIZE, Boid
from subsim.geometry import normalize


class Flock:
    """Current boid states plus the states of the previous step."""

    def __init__(self, count: int = BOID_COUNT, rng: random.Random | None = None) -> None:
        if count <= BOID_NEIGHBORHOOD_SIZE:
            raise ValueError(f"a flock needs more than {BOID_NEIGHBORHOOD_SIZE} boids")
        rng = rng if rng is not None else random.Random()
        self.current: list[Boid] = [self._random_boid(rng) for _ in range(count)]
        self.previous: list[Boid] = [
            Boid(position=(0.0, 0.0, 0.0), direction=(0.0, 0.0, 0.0)) for _ in range(count)
        ]

    @staticmethod
    def _random_boid(rng: random.Random) -> Boid:
        position = (
            rng.random() * 8.0 - 4.0,
            float(rng.randrange(8)) + 1.0,
            rng.random() * 8.0 - 4.0,
        )
        direction = normalize((rng.random(), rng.random(), rng.random()))
        return Boid(position=position, direction=direction)

    def update(self) -> None:
        """Steer and move every boid, then remember the new states."""
        for boid in self.current:
            if environment_triggered(boid):
                avoid_environment(boid)
            else:
                steer_with_neighbors(boid, self.previous)
            boid.advance()
        self.previous = [dataclasses.replace(boid) for boid in self.current]