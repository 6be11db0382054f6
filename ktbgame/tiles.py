"""Classification of map tile characters."""

from typing import Sequence

_CASTABLE_LETTERS = frozenset("ABDHY")


def is_castable(c: str) -> bool:
    """Whether rays stop at (or draw) this tile."""
    return "1" <= c <= "9" or c in _CASTABLE_LETTERS


def is_collision(c: str) -> bool:
    """Whether this tile blocks movement. Doors ('3') and '9' are passable."""
    if c in ("3", "9"):
        return False
    return is_castable(c)


def is_transparent(c: str, level: int) -> bool:
    """Whether rays see through this tile on the given level."""
    return c == "3" or (c == "4" and level == 0) or c == "D"


def is_sprite(c: str) -> bool:
    """Whether this tile holds a billboard sprite."""
    return c in ("T", "Z")


def is_bounds(sizes: Sequence[int], x: int, y: int) -> bool:
    """Whether (x, y) lies on or beyond the edge of a map with these row lengths."""
    return x <= 0 or y <= 0 or y >= len(sizes) or x >= sizes[y]