"""Pixel buffers with a colour key for transparency."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Union

import numpy as np

from .constants import GROUND_COLOR, HEIGHT, SKY_COLOR, TRANSPARENT_COLOR, WIDTH


@dataclass(eq=False)
class Texture:
    """An image stored as a (height, width) array of 0xRRGGBB values."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def new(cls, width: int, height: int) -> Texture:
        """A black texture of the given size."""
        return cls(np.zeros((height, width), dtype=np.uint32))

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        """Colour at (x, y); the transparent colour outside the texture."""
        if not self._inside(x, y):
            return TRANSPARENT_COLOR
        return int(self.pixels[y, x])

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set (x, y) to ``color`` unless it is outside or the transparent colour."""
        color &= 0xFFFFFFFF
        if self._inside(x, y) and color != TRANSPARENT_COLOR:
            self.pixels[y, x] = color

    def paste(self, src: Texture, x: int, y: int) -> None:
        """Copy ``src`` with its top-left corner at (x, y), skipping transparent pixels."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + src.width, self.width), min(y + src.height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        region = src.pixels[y0 - y:y1 - y, x0 - x:x1 - x]
        mask = region != TRANSPARENT_COLOR
        self.pixels[y0:y1, x0:x1][mask] = region[mask]

    def paste_scaled(self, src: Texture, x: int, y: int) -> None:
        """Stretch ``src`` over this texture from (x, y) to its bottom-right edge."""
        if self.width == 0 or self.height == 0:
            return
        xs = np.arange(max(x, 0), self.width)
        ys = np.arange(max(y, 0), self.height)
        fx = ((xs - x) * (src.width / self.width)).astype(np.int64)
        fy = ((ys - y) * (src.height / self.height)).astype(np.int64)
        keep_x, keep_y = fx < src.width, fy < src.height
        xs, fx = xs[keep_x], fx[keep_x]
        ys, fy = ys[keep_y], fy[keep_y]
        if xs.size == 0 or ys.size == 0:
            return
        block = src.pixels[np.ix_(fy, fx)]
        target = self.pixels[np.ix_(ys, xs)]
        mask = block != TRANSPARENT_COLOR
        target[mask] = block[mask]
        self.pixels[np.ix_(ys, xs)] = target

    def reset_sky_ground(self) -> None:
        """Paint the upper half of the screen area sky blue and the lower half green."""
        half = HEIGHT // 2
        self.pixels[:half, :WIDTH] = SKY_COLOR
        self.pixels[half:HEIGHT, :WIDTH] = GROUND_COLOR


def load_texture(path: Union[str, PathLike]) -> Texture:
    """Load an image file; fully transparent pixels get the transparent colour.

    Raises OSError if the image cannot be read.
    """
    import pygame

    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as exc:
        raise OSError(f"cannot load texture: {path}") from exc
    width, height = surface.get_size()
    raw = np.frombuffer(pygame.image.tostring(surface, "RGBA"), dtype=np.uint8)
    rgba = raw.reshape(height, width, 4).astype(np.uint32)
    pixels = (rgba[..., 0] << 16) | (rgba[..., 1] << 8) | rgba[..., 2]
    pixels[rgba[..., 3] == 0] = TRANSPARENT_COLOR
    return Texture(pixels.astype(np.uint32))