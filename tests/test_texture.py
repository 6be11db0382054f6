import pygame
import pytest

from ktbgame.constants import GROUND_COLOR, HEIGHT, SKY_COLOR, TRANSPARENT_COLOR, WIDTH
from ktbgame.texture import Texture, load_texture


def filled(width, height, color):
    tex = Texture.new(width, height)
    tex.pixels[:, :] = color
    return tex


def test_new_is_black_with_size():
    tex = Texture.new(5, 3)
    assert (tex.width, tex.height) == (5, 3)
    assert all(tex.get_pixel(x, y) == 0 for x in range(5) for y in range(3))


def test_put_get_round_trip():
    tex = Texture.new(4, 4)
    tex.put_pixel(2, 3, 0x123456)
    assert tex.get_pixel(2, 3) == 0x123456


def test_transparent_colour_not_written():
    tex = filled(2, 2, 7)
    tex.put_pixel(0, 0, TRANSPARENT_COLOR)
    assert tex.get_pixel(0, 0) == 7


def test_outside_reads_transparent_and_writes_nothing():
    tex = filled(2, 2, 7)
    assert tex.get_pixel(-1, 0) == TRANSPARENT_COLOR
    assert tex.get_pixel(0, 2) == TRANSPARENT_COLOR
    tex.put_pixel(5, 5, 9)
    tex.put_pixel(-1, 1, 9)
    assert (tex.pixels == 7).all()


def test_paste_skips_transparent():
    src = Texture.new(2, 2)
    src.put_pixel(0, 0, 1)
    src.put_pixel(1, 0, 2)
    src.put_pixel(0, 1, 3)
    src.pixels[1, 1] = TRANSPARENT_COLOR
    dest = filled(4, 4, 7)
    dest.paste(src, 1, 1)
    assert dest.get_pixel(1, 1) == 1
    assert dest.get_pixel(2, 1) == 2
    assert dest.get_pixel(1, 2) == 3
    assert dest.get_pixel(2, 2) == 7
    assert dest.get_pixel(0, 0) == 7


def test_paste_clipped_at_edges():
    src = Texture.new(2, 2)
    src.pixels[:, :] = [[1, 2], [3, 4]]
    dest = filled(3, 3, 7)
    dest.paste(src, -1, -1)
    assert dest.get_pixel(0, 0) == 4
    assert int((dest.pixels == 7).sum()) == 8


def test_paste_entirely_outside_is_noop():
    dest = filled(3, 3, 7)
    dest.paste(filled(2, 2, 1), 10, 10)
    assert (dest.pixels == 7).all()


def test_paste_scaled_single_pixel_fills_target():
    dest = filled(6, 4, 7)
    dest.paste_scaled(filled(1, 1, 5), 0, 0)
    assert (dest.pixels == 5).all()


def test_paste_scaled_doubles():
    src = Texture.new(2, 2)
    src.pixels[:, :] = [[1, 2], [3, 4]]
    dest = Texture.new(4, 4)
    dest.paste_scaled(src, 0, 0)
    for y in range(4):
        for x in range(4):
            assert dest.get_pixel(x, y) == src.get_pixel(x // 2, y // 2)


def test_paste_scaled_keeps_transparent_out():
    src = filled(1, 1, TRANSPARENT_COLOR)
    dest = filled(3, 3, 7)
    dest.paste_scaled(src, 0, 0)
    assert (dest.pixels == 7).all()


def test_reset_sky_ground():
    tex = Texture.new(WIDTH, HEIGHT)
    tex.reset_sky_ground()
    assert tex.get_pixel(0, 0) == SKY_COLOR
    assert tex.get_pixel(WIDTH - 1, HEIGHT // 2 - 1) == SKY_COLOR
    assert tex.get_pixel(0, HEIGHT // 2) == GROUND_COLOR
    assert tex.get_pixel(WIDTH - 1, HEIGHT - 1) == GROUND_COLOR


def test_load_texture_round_trip(tmp_path):
    surface = pygame.Surface((2, 1))
    surface.set_at((0, 0), pygame.Color(0x12, 0x34, 0x56))
    surface.set_at((1, 0), pygame.Color(255, 0, 255))
    path = tmp_path / "t.bmp"
    pygame.image.save(surface, str(path))
    tex = load_texture(path)
    assert (tex.width, tex.height) == (2, 1)
    assert tex.get_pixel(0, 0) == 0x123456
    assert tex.get_pixel(1, 0) == TRANSPARENT_COLOR


def test_load_texture_missing(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "none.xpm")