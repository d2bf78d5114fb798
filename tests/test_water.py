import pytest

from subsim.water import WATER_GRID_SIZE, WATER_SIZE, WaterSurface


def test_default_grid_shape():
    water = WaterSurface()
    assert len(water.vertices) == WATER_GRID_SIZE + 1
    assert all(len(row) == WATER_GRID_SIZE + 1 for row in water.vertices)


def test_initial_grid_is_flat_and_centred():
    water = WaterSurface()
    half = WATER_SIZE / 2.0
    assert water.vertices[0][0] == (-half, 0.0, -half)
    assert water.vertices[-1][-1] == pytest.approx((half, 0.0, half))
    assert all(v[1] == 0.0 for row in water.vertices for v in row)


def test_x_varies_along_rows_and_z_along_columns():
    water = WaterSurface(grid_size=4, size=8.0)
    assert [v[0] for v in water.vertices[0]] == [-4.0, -2.0, 0.0, 2.0, 4.0]
    assert [row[0][2] for row in water.vertices] == [-4.0, -2.0, 0.0, 2.0, 4.0]


def test_update_bounds_and_keeps_xz():
    water = WaterSurface(grid_size=10, size=20.0)
    before = [[(v[0], v[2]) for v in row] for row in water.vertices]
    water.update(1234.0)
    after = [[(v[0], v[2]) for v in row] for row in water.vertices]
    assert before == after
    assert all(abs(v[1]) <= 0.5 for row in water.vertices for v in row)


def test_update_height_depends_only_on_z():
    water = WaterSurface(grid_size=6, size=12.0)
    water.update(500.0)
    for row in water.vertices:
        heights = {v[1] for v in row}
        assert len(heights) == 1


def test_update_is_not_cumulative():
    a = WaterSurface(grid_size=5)
    b = WaterSurface(grid_size=5)
    a.update(100.0)
    a.update(2000.0)
    b.update(2000.0)
    assert a.vertices == b.vertices


def test_strips_shape():
    water = WaterSurface(grid_size=3, size=3.0)
    strips = list(water.strips())
    assert len(strips) == 3
    assert all(len(strip) == 8 for strip in strips)


def test_strip_alternates_rows():
    water = WaterSurface(grid_size=2, size=2.0)
    first = next(water.strips())
    assert first[0::2] == water.vertices[0]
    assert first[1::2] == water.vertices[1]


def test_invalid_grid_size_raises():
    with pytest.raises(ValueError):
        WaterSurface(grid_size=0)