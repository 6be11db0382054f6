"""Distances on the tile grid and the face a ray hits."""

import math

from .constants import Face


def tile_distance(origin_x: float, origin_y: float, x: float, y: float) -> float:
    """Distance from (origin_x, origin_y) to the centre of tile (x, y).

    The centre is taken as (x + 0.5, y + 0.5).
    """
    return math.hypot(x + 0.5 - origin_x, y + 0.5 - origin_y)


def facing_direction(side: int, ray_dir_x: float, ray_dir_y: float) -> Face:
    """Wall face hit by a ray that crossed an x side (0) or a y side (1)."""
    if side == 0:
        return Face.WEST if ray_dir_x >= 0 else Face.EAST
    if side == 1:
        return Face.NORTH if ray_dir_y >= 0 else Face.SOUTH
    raise ValueError(f"side must be 0 or 1, not {side!r}")