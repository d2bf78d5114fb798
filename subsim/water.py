"""Animated water surface on a square vertex grid."""

from __future__ import annotations

import math
from collections.abc import Iterator

from subsim.geometry import Vector

WATER_GRID_SIZE = 100
WATER_SIZE = 100.0
WAVE_AMPLITUDE = 0.5
_TIME_SCALE = 0.001


class WaterSurface:
    """A flat grid of vertices centred on the origin whose heights follow a wave."""

    def __init__(self, grid_size: int = WATER_GRID_SIZE, size: float = WATER_SIZE) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1")
        self.grid_size = grid_size
        step = size / grid_size
        start = -size / 2.0
        self.vertices: list[list[Vector]] = [
            [(start + j * step, 0.0, start + i * step) for j in range(grid_size + 1)]
            for i in range(grid_size + 1)
        ]

    def update(self, elapsed_ms: float) -> None:
        """Set each vertex height from a sine wave of its z and the elapsed time."""
        phase = elapsed_ms * _TIME_SCALE
        self.vertices = [
            [(x, math.sin(z + phase) * WAVE_AMPLITUDE, z) for x, _, z in row]
            for row in self.vertices
        ]

    def strips(self) -> Iterator[list[Vector]]:
        """Yield one quad strip per grid row, alternating lower and upper vertices."""
        for lower, upper in zip(self.vertices, self.vertices[1:]):
            yield [vertex for pair in zip(lower, upper) for vertex in pair]