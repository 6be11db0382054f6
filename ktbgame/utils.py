"""Small helpers: colour parsing, number widths and the millisecond clock."""

import sys
import time
from typing import Sequence


def color_atoi(line: str, start: int = 0) -> int:
    """Parse one colour component (0-255) starting at ``start``.

    Leading spaces are skipped. The number must have one to three digits and
    be followed by the end of the line, a comma, a space or a newline.
    Raises ValueError otherwise.
    """
    while start < len(line) and line[start] == " ":
        start += 1
    end = start
    while end < len(line) and line[end].isascii() and line[end].isdigit():
        end += 1
    digits = line[start:end]
    if not 1 <= len(digits) <= 3:
        raise ValueError(f"invalid colour component in {line!r}")
    if end < len(line) and line[end] not in ", \n":
        raise ValueError(f"unexpected character after colour in {line!r}")
    value = int(digits)
    if value > 255:
        raise ValueError(f"colour component out of range: {value}")
    return value


def rgb_to_hex(rgb: Sequence[int]) -> int:
    """Pack an (r, g, b) triple into a 0xRRGGBB integer."""
    red, green, blue = rgb
    return blue + green * 256 + red * 65536


def int_len(n: int) -> int:
    """Number of characters needed to print ``n`` in decimal."""
    length = 1
    if n < 0:
        n = -n
        length += 1
    while n > 9:
        length += 1
        n //= 10
    return length


def first_map_char(s: str) -> int:
    """Index of the first character of ``s`` that is not a space."""
    return len(s) - len(s.lstrip(" "))


def get_time() -> int:
    """Current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def put_error(message: str) -> None:
    """Write ``message`` to standard error."""
    sys.stderr.write(message)
    sys.stderr.flush()