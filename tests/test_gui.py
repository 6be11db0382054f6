import numpy as np
import pytest

from ktbgame.constants import HEIGHT, TEX_AMT, WIDTH, Face, Mouse, Tex
from ktbgame.gamemap import GameMap
from ktbgame.gui import (
    draw_credits,
    draw_digits,
    draw_gui,
    draw_minimap,
    draw_weapons,
    update_chad_healthbar,
    update_screen,
)
from ktbgame.state import Game
from ktbgame.texture import Texture

ROWS = [
    "1111111",
    "1000001",
    "1000001",
    "1000E01",
    "1000001",
    "1000001",
    "1111111",
]


def _textures(size=4):
    out = []
    for index in range(TEX_AMT):
        tex = Texture.new(size, size)
        tex.pixels[:] = index + 1
        out.append(tex)
    return out


def _map(rows):
    content = [list(r) for r in rows]
    return GameMap(content=content, sizes=[len(r) for r in content],
                   width=max(len(r) for r in rows), height=len(rows))


@pytest.fixture
def game():
    gmap = _map(ROWS)
    g = Game(maps=[gmap], map=gmap, textures=_textures())
    g.player.cam.buff = Texture.new(WIDTH, HEIGHT)
    g.player.x = 3.5
    g.player.y = 3.5
    g.player.cam.turn_to(Face.EAST)
    return g


def test_digits_left_aligned(game):
    buff = game.player.cam.buff
    draw_digits(game, buff, 42, 0)
    assert buff.pixels[0, 0] == Tex.GUI_4 + 1
    assert buff.pixels[0, 4] == Tex.GUI_2 + 1
    assert buff.pixels[0, 8] == 0


def test_seconds_are_padded_with_zero(game):
    buff = game.player.cam.buff
    draw_digits(game, buff, 7, 1)
    assert buff.pixels[0, WIDTH - 1] == Tex.GUI_7 + 1
    assert buff.pixels[0, WIDTH - 5] == Tex.GUI_0 + 1


def test_minutes_left_of_separator(game):
    buff = game.player.cam.buff
    draw_digits(game, buff, 5, 2)
    row = buff.pixels[0]
    sep_cols = np.flatnonzero(row == Tex.GUI_SEP + 1)
    digit_cols = np.flatnonzero(row == Tex.GUI_5 + 1)
    assert len(sep_cols) == 4
    assert len(digit_cols) == 4
    assert digit_cols.max() < sep_cols.min()


def test_second_line_alignment(game):
    buff = game.player.cam.buff
    draw_digits(game, buff, 9, 3)
    assert buff.pixels[4, WIDTH - 1] == Tex.GUI_9 + 1
    assert buff.pixels[0, WIDTH - 1] == 0


def test_digits_rejects_bad_input(game):
    buff = game.player.cam.buff
    with pytest.raises(ValueError):
        draw_digits(game, buff, 1, 7)
    with pytest.raises(ValueError):
        draw_digits(game, buff, -3, 0)


@pytest.mark.parametrize("elapsed,state", [(150, 2), (250, 1)])
def test_gun_animation(game, elapsed, state):
    game.shoot_timer = 5
    draw_weapons(game, elapsed)
    assert game.shoot_state == state
    assert game.player.cam.buff.pixels[0, 0] == Tex.GUN_0 + state + 1


def test_gun_animation_ends(game):
    game.shoot_timer = 5
    game.shoot_state = 2
    draw_weapons(game, 300)
    assert game.shoot_state == 0
    assert game.shoot_timer == 0


def test_portal_gun_broken_on_boss_level(game):
    game.curr_slot = 1
    game.curr_level = 2
    draw_weapons(game, 0)
    assert game.shoot_state == 3
    assert game.player.cam.buff.pixels[0, 0] == Tex.PORTALG_BROKEN + 1


def test_portal_gun_right_click(game):
    game.curr_slot = 1
    game.shoot_timer = 5
    game.curr_click = Mouse.RIGHT_CLICK
    draw_weapons(game, 150)
    assert game.player.cam.buff.pixels[0, 0] == Tex.PORTALG_1R + 1


def test_weapon_hidden_without_both_slots(game):
    game.slots = [True, False]
    draw_weapons(game, 1000)
    assert game.player.cam.buff.pixels[0, 0] == 0


def test_credits_skipped_after_bad_ending(game):
    game.ending = 3
    draw_credits(game)
    assert game.credits_y == HEIGHT
    assert not game.player.cam.buff.pixels.any()


def test_credits_scroll_up(game):
    draw_credits(game)
    assert game.credits_y == HEIGHT - 2


def test_credits_next_page(game):
    game.credits_y = -10
    draw_credits(game)
    assert game.credits_curr == 1
    assert game.credits_y == HEIGHT


def test_last_credit_page_stops(game):
    game.credits_curr = 2
    game.credits_y = HEIGHT // 2 - 2
    draw_credits(game)
    assert game.credits_y == HEIGHT // 2 - 2


def test_healthbar_width_follows_health(game):
    game.chad_hp = 10
    update_chad_healthbar(game)
    pixels = game.player.cam.buff.pixels
    left = WIDTH // 2 - 200
    assert pixels[100, left] == 0x00CC00
    assert pixels[109, left + 39] == 0x00CC00
    assert pixels[100, left + 40] == 0
    assert pixels[110, left] == 0


def test_healthbar_empty_when_dead(game):
    game.chad_hp = 0
    update_chad_healthbar(game)
    assert not game.player.cam.buff.pixels.any()


def test_minimap_tiles(game):
    draw_minimap(game)
    pixels = game.player.cam.buff.pixels
    walls = sum(row.count("1") for row in ROWS)
    assert np.count_nonzero(pixels == Tex.GUI_MAPWALL + 1) == walls * 16
    assert np.count_nonzero(pixels == Tex.GUI_MAPEXIT + 1) == 16
    assert np.count_nonzero(pixels == Tex.GUI_MAPPLAYER + 1) == 16
    assert pixels[14, 10] == Tex.GUI_MAPWALL + 1


def test_gui_shows_bully_count_and_inventory(game):
    game.slots = [True, False]
    game.bullies_amt = 3
    draw_gui(game)
    pixels = game.player.cam.buff.pixels
    assert pixels[0, 0] == Tex.GUI_3 + 1
    assert np.count_nonzero(pixels == Tex.GUI_INV_EMPTY_0 + 1) == 16


def test_gui_hides_bully_count(game):
    game.slots = [True, False]
    game.hide_bullies_amt = True
    draw_gui(game)
    assert game.player.cam.buff.pixels[0, 0] == 0


def test_update_screen_looks_at_wall(game):
    update_screen(game)
    assert (game.looking_x, game.looking_y) == (6, 3)
    assert game.last_frame > 0
    assert game.player.cam.z_buffer[WIDTH // 2] > 0