"""Heads-up display, minimap, credits and the per-frame screen update."""

from __future__ import annotations

import math

from .constants import COPS_TIMER, HEIGHT, WIDTH, Mouse, Tex
from .raycasting import raycast, raycast_floor_ceiling, raycast_z_buffer
from .state import Game
from .texture import Texture
from .tiles import is_collision
from .utils import get_time, int_len
from .zbuffer import fill_z_buffer

_HEALTH_COLOR = 0x00CC00
_HEALTH_TOP = 100
_HEALTH_THICKNESS = 10
_SPLASH_MS = 3000
_FPS_REFRESH_MS = 500


def draw_digits(game: Game, target: Texture, digits: int, align: int) -> None:
    """Draw ``digits`` with the digit font.

    ``align`` 0 writes from the top-left corner, 1 writes seconds (padded to
    two digits) at the top-right, 2 writes minutes left of a separator and
    3 writes on the second line at the right. Raises ValueError for another
    alignment or a negative number.
    """
    if align not in (0, 1, 2, 3):
        raise ValueError(f"unknown alignment: {align!r}")
    if digits < 0:
        raise ValueError(f"cannot draw a negative number: {digits}")
    font = game.textures[Tex.GUI_0]
    w, h = font.width, font.height
    count = int_len(digits)
    value = digits
    for j in range(count):
        glyph = game.textures[Tex.GUI_0 + value % 10]
        if align == 0:
            target.paste(glyph, w * (count - j - 1), 0)
        elif align == 1:
            if digits < 10:
                target.paste(font, WIDTH - w * (j + 2), 0)
            target.paste(glyph, WIDTH - w * (j + 1), 0)
        elif align == 2:
            target.paste(game.textures[Tex.GUI_SEP], WIDTH - w * (j + 2) - w // 2, 0)
            target.paste(glyph, WIDTH - w * (j + 3) - w // 2, 0)
        else:
            target.paste(glyph, WIDTH - w * (j + 1), h)
        value //= 10


def draw_weapons(game: Game, elapsed: int) -> None:
    """Advance the weapon animation by ``elapsed`` ms since the last shot and draw it."""
    slot = game.curr_slot
    if not slot and elapsed >= 300:
        game.shoot_state = 0
        game.shoot_timer = 0
    elif not slot and game.shoot_timer and elapsed >= 200:
        game.shoot_state = 1
    elif not slot and game.shoot_timer and elapsed >= 100:
        game.shoot_state = 2
    if slot and game.curr_level == 2:
        game.shoot_state = 3
    elif slot and elapsed >= 200:
        game.shoot_state = 0
        game.shoot_timer = 0
    elif slot and game.shoot_timer and elapsed >= 100:
        game.shoot_state = 2 if game.curr_click == Mouse.RIGHT_CLICK else 1
    weapon = game.textures[Tex.GUN_0 + game.shoot_state + 3 * slot]
    if game.slots[0] and game.slots[1]:
        game.player.cam.buff.paste_scaled(weapon, 0, 0)


def update_chad_healthbar(game: Game) -> None:
    """Fill the boss health bar in proportion to its remaining health."""
    if not game.chad_hp:
        return
    buff = game.player.cam.buff
    left = WIDTH // 2 - 200
    right = left + game.chad_hp * 4
    x0, x1 = max(left, 0), min(right, buff.width)
    y0 = _HEALTH_TOP
    y1 = min(_HEALTH_TOP + _HEALTH_THICKNESS, buff.height)
    if x0 < x1 and y0 < y1:
        buff.pixels[y0:y1, x0:x1] = _HEALTH_COLOR


def draw_gui(game: Game) -> None:
    """Draw inventory, bully counter, countdown, frame rate, boss bar and weapon."""
    buff = game.player.cam.buff
    slot = game.curr_slot
    if game.slots[0] and game.slots[1]:
        inventory = game.textures[Tex.GUI_INV_FULL_0 + slot]
    else:
        inventory = game.textures[Tex.GUI_INV_EMPTY_0 + slot]
    buff.paste(inventory, WIDTH // 2 - inventory.width // 2,
               HEIGHT - 44 - inventory.height)
    if not game.hide_bullies_amt:
        draw_digits(game, buff, game.bullies_amt, 0)
    time_left = max(COPS_TIMER - (get_time() - game.start) // 1000, 0)
    time_left = max(time_left + game.time_m, 0)
    draw_digits(game, buff, time_left % 60, 1)
    draw_digits(game, buff, time_left // 60, 2)
    frames = math.floor(1.0 / game.fps) if game.fps > 0 else 0
    draw_digits(game, buff, frames, 3)
    if game.curr_level == 2 and game.chad_phase > 0:
        bar = game.textures[Tex.GUI_HEALTHBAR]
        buff.paste(bar, WIDTH // 2 - bar.width // 2, 0)
        hearts = game.textures[Tex.GUI_HP_0 + game.player.hp - 1]
        buff.paste(hearts, 10, game.textures[Tex.GUI_0].height + 10)
        update_chad_healthbar(game)
    draw_weapons(game, get_time() - game.shoot_timer)


def draw_credits(game: Game) -> None:
    """Scroll the credit pages up the screen; the last one stops in the middle."""
    if game.ending:
        return
    page = game.textures[Tex.CREDITS_0 + game.credits_curr]
    game.player.cam.buff.paste(page, WIDTH // 2 - page.width // 2, game.credits_y)
    resting = (game.credits_curr == 2
               and game.credits_y == HEIGHT // 2 - page.height // 2)
    if not resting:
        game.credits_y -= 2
    if game.credits_y < -page.height and game.credits_curr < 2:
        game.credits_curr += 1
        game.credits_y = HEIGHT


def draw_minimap(game: Game) -> None:
    """Draw walls, exits and the player as small tiles below the bully counter."""
    buff = game.player.cam.buff
    wall = game.textures[Tex.GUI_MAPWALL]
    exit_tile = game.textures[Tex.GUI_MAPEXIT]
    top = game.textures[Tex.GUI_0].height
    if game.curr_level == 2 and game.chad_phase > 0:
        top += game.textures[Tex.GUI_HP_0].height
    for y, row in enumerate(game.map.content):
        for x, c in enumerate(row):
            xpos, ypos = 10 * (x + 1), top + 10 * (y + 1)
            if is_collision(c) and c != " ":
                buff.paste(wall, xpos, ypos)
            if c == "E":
                buff.paste(exit_tile, xpos, ypos)
    player = game.player
    buff.paste(game.textures[Tex.GUI_MAPPLAYER],
               10 * (int(player.x) + 1), top + 10 * (int(player.y) + 1))


def update_screen(game: Game) -> None:
    """Render one frame of the level into the camera buffer and update the frame rate."""
    buff = game.player.cam.buff
    buff.reset_sky_ground()
    raycast_floor_ceiling(game)
    fill_z_buffer(game)
    raycast(game)
    raycast_z_buffer(game)
    draw_gui(game)
    if game.show_map:
        draw_minimap(game)
    if get_time() - game.splash_timer <= _SPLASH_MS:
        buff.paste(game.textures[Tex.GUI_SPLASH_0 + game.curr_level],
                   WIDTH // 2 - 300, HEIGHT // 2 - 225)
    if get_time() - game.last_fps_update >= _FPS_REFRESH_MS:
        game.fps = (get_time() - game.last_frame) / 1000.0
        game.last_fps_update = get_time()
    game.last_frame = get_time()