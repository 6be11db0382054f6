import math

import pytest

from ktbgame.constants import Face
from ktbgame.geometry import facing_direction, tile_distance


@pytest.mark.parametrize("x,y", [(0, 0), (3, 7), (14, 5), (107, 34)])
def test_tile_distance_zero_at_tile_centre(x, y):
    assert tile_distance(x + 0.5, y + 0.5, x, y) == 0.0


@pytest.mark.parametrize(
    "origin,tile",
    [((1.0, 2.0), (4, 6)), ((14.5, 5.5), (20, 3)), ((0.0, 0.0), (-3, 9))],
)
def test_tile_distance_symmetric(origin, tile):
    ox, oy = origin
    tx, ty = tile
    forward = tile_distance(ox, oy, tx, ty)
    backward = tile_distance(tx + 0.5, ty + 0.5, ox - 0.5, oy - 0.5)
    assert math.isclose(forward, backward)


def test_tile_distance_right_triangle():
    assert math.isclose(tile_distance(0.5, 0.5, 3, 4), 5.0)


def test_tile_distance_non_negative():
    for ox, oy, x, y in [(2.3, 9.1, 0, 0), (0.0, 0.0, 5, 5), (-1.0, 4.0, 2, -2)]:
        assert tile_distance(ox, oy, x, y) >= 0.0


@pytest.mark.parametrize(
    "side,rx,ry,expected",
    [
        (0, 1.0, 0.0, Face.WEST),
        (0, 0.0, 0.5, Face.WEST),
        (0, -0.2, 0.0, Face.EAST),
        (1, 0.0, 1.0, Face.NORTH),
        (1, 0.3, 0.0, Face.NORTH),
        (1, 0.0, -0.7, Face.SOUTH),
    ],
)
def test_facing_direction(side, rx, ry, expected):
    assert facing_direction(side, rx, ry) is expected


def test_facing_direction_invalid_side():
    with pytest.raises(ValueError):
        facing_direction(2, 1.0, 1.0)