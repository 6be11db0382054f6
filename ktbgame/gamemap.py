"""Loading of level files into a mutable tile grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import IO, Iterable, Iterator, Union

from .state import Sprite
from .tiles import is_sprite


class MapError(Exception):
    """Raised when a level file cannot be read."""


@dataclass
class GameMap:
    """A level: rows of tile characters, their lengths and the sprites found in it."""

    content: list[list[str]]
    sizes: list[int]
    width: int
    height: int
    sprites: list[Sprite] = field(default_factory=list)

    def tile(self, x: int, y: int) -> str:
        """Character at column ``x`` of row ``y``, or "" outside the map."""
        if 0 <= y < len(self.content):
            row = self.content[y]
            if 0 <= x < len(row):
                return row[x]
        return ""


def iter_lines(stream: Union[IO[str], IO[bytes], Iterable]) -> Iterator[str]:
    """Yield the lines of ``stream`` with their trailing newline kept.

    Byte streams are decoded as Latin-1 so every byte maps to one character.
    """
    for line in stream:
        if isinstance(line, (bytes, bytearray)):
            line = bytes(line).decode("latin-1")
        if line:
            yield line


def _scan_sprites(content: list[list[str]]) -> list[Sprite]:
    return [
        Sprite(x=x + 0.5, y=y + 0.5)
        for y, row in enumerate(content)
        for x, char in enumerate(row)
        if is_sprite(char)
    ]


def load_map(path: Union[str, PathLike]) -> GameMap:
    """Read a level file.

    Each line becomes one row, cut at its newline. ``width`` is the length of
    the longest raw line, newline included. Raises MapError if the file
    cannot be opened.
    """
    try:
        with open(path, "rb") as handle:
            lines = list(iter_lines(handle))
    except OSError as exc:
        raise MapError(f"unable to open the map: {path}") from exc
    content = [list(line.removesuffix("\n")) for line in lines]
    return GameMap(
        content=content,
        sizes=[len(row) for row in content],
        width=max((len(line) for line in lines), default=0),
        height=len(lines),
        sprites=_scan_sprites(content),
    )