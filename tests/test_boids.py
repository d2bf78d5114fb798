import math
import random

import pytest

from subsim.boid_physics import BOID_COUNT, BOID_NEIGHBORHOOD_SIZE, BOID_SPEED, Boid
from subsim.boids import Flock
from subsim.geometry import normalize


def _length(vector):
    return math.sqrt(sum(c * c for c in vector))


def test_default_flock_size():
    flock = Flock(rng=random.Random(1))
    assert len(flock.current) == BOID_COUNT
    assert len(flock.previous) == BOID_COUNT


def test_initial_positions_within_bounds():
    flock = Flock(rng=random.Random(2))
    for boid in flock.current:
        x, y, z = boid.position
        assert -4.0 <= x <= 4.0
        assert -4.0 <= z <= 4.0
        assert 1.0 <= y <= 8.0
        assert y == int(y)


def test_initial_directions_are_unit_and_non_negative():
    flock = Flock(rng=random.Random(3))
    for boid in flock.current:
        assert _length(boid.direction) == pytest.approx(1.0)
        assert all(component >= 0.0 for component in boid.direction)


def test_same_seed_gives_same_flock():
    first = Flock(rng=random.Random(4))
    second = Flock(rng=random.Random(4))
    assert [b.position for b in first.current] == [b.position for b in second.current]
    assert [b.direction for b in first.current] == [b.direction for b in second.current]


def test_previous_starts_at_origin():
    flock = Flock(rng=random.Random(5))
    assert all(boid.position == (0.0, 0.0, 0.0) for boid in flock.previous)


def test_update_moves_each_boid_by_speed():
    flock = Flock(rng=random.Random(6))
    before = [boid.position for boid in flock.current]
    flock.update()
    for start, boid in zip(before, flock.current):
        assert math.dist(start, boid.position) == pytest.approx(BOID_SPEED)


def test_update_records_previous_as_copies():
    flock = Flock(rng=random.Random(7))
    flock.update()
    assert [b.position for b in flock.previous] == [b.position for b in flock.current]
    assert [b.direction for b in flock.previous] == [b.direction for b in flock.current]
    assert all(p is not c for p, c in zip(flock.previous, flock.current))


def test_directions_stay_unit_over_many_updates():
    flock = Flock(rng=random.Random(8))
    for _ in range(20):
        flock.update()
    for boid in flock.current:
        assert _length(boid.direction) == pytest.approx(1.0)


def test_boid_near_floor_turns_upward():
    flock = Flock(rng=random.Random(9))
    start = normalize((1.0, -1.0, 0.0))
    flock.current[0] = Boid(position=(0.0, -0.5, 0.0), direction=start)
    flock.update()
    assert flock.current[0].direction[1] > start[1]


def test_flock_too_small_is_rejected():
    with pytest.raises(ValueError):
        Flock(count=BOID_NEIGHBORHOOD_SIZE, rng=random.Random(10))


def test_smallest_flock_can_update():
    flock = Flock(count=BOID_NEIGHBORHOOD_SIZE + 1, rng=random.Random(11))
    flock.update()
    assert len(flock.current) == BOID_NEIGHBORHOOD_SIZE + 1
    assert all(_length(b.direction) == pytest.approx(1.0) for b in flock.current)