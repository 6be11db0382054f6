"""Game setup, input handling, the main loop and the window driver."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .assets import load_assets
from .constants import (
    COPS_TIMER,
    GAME_TITLE,
    HEIGHT,
    MUS_LVL1,
    MUS_LVL1_DUR,
    MUS_MENU,
    MUS_MENU_DUR,
    SND_PORTAL_SHOOT,
    SND_SHOOT,
    WIDTH,
    Key,
    Mouse,
    Tex,
)
from .enemies import generate_enemies, shoot_enemy, update_chad, update_enemies
from .gamemap import MapError, load_map
from .geometry import facing_direction
from .gui import draw_credits, update_screen
from .player import move_player, rotate_player, tp_player_spawn
from .sound import SoundPlayer
from .state import Game, Player, Portal
from .texture import Texture, load_texture
from .utils import get_time, put_error

_MAP_FILES = (
    "maps/bonus/lvl1.cub",
    "maps/bonus/lvl2.cub",
    "maps/bonus/lvl3.cub",
    "maps/bonus/backrooms.cub",
)
_WHEEL_DELAY_MS = 300
_EDGE = 10


def init_values(game: Game) -> None:
    """Reset everything for a new game on the first level and spawn its enemies."""
    now = get_time()
    game.curr_level = 0
    game.player = Player()
    game.mouse_middle_x = WIDTH // 2
    cam = game.player.cam
    cam.speed_m = 0.1
    cam.speed_r = 0.033 * 1.8 / 1.5
    cam.map_x = 0
    cam.map_y = 0
    cam.hit = False
    cam.buff = Texture.new(WIDTH, HEIGHT)
    game.portals = [Portal(), Portal()]
    game.enemies = []
    game.bullies_amt = 0
    game.z_buffer = []
    game.ending = 0
    game.curr_slot = 0
    game.slots = [True, True]
    game.last_wheel = now
    game.show_map = False
    game.last_frame = now
    game.last_fps_update = now
    game.fps = 1.0
    game.hide_bullies_amt = False
    game.looking_x = 0
    game.looking_y = 0
    game.time_m = 0
    game.freeze_player = False
    game.chad_timer = 0
    game.chad_phase = 0
    game.chad_hp = 100
    game.credits_curr = 0
    game.credits_y = HEIGHT
    game.sound.looped = None
    game.sound.loop_start = 0
    game.sound.loop_time = 0
    game.shoot_state = 0
    game.shoot_timer = 0
    game.curr_click = 0
    generate_enemies(game, 1)
    tp_player_spawn(game)


def place_portal(game: Game, index: int) -> None:
    """Put portal ``index`` on the wall face at the centre of the screen.

    Nothing happens on the boss and later levels, or if the other portal
    already occupies that face.
    """
    if game.curr_level >= 2:
        return
    face = facing_direction(game.side, game.ray_dir_x, game.ray_dir_y)
    other = game.portals[1 - index]
    if (other.is_placed and other.map_x == game.looking_x
            and other.map_y == game.looking_y and other.face == face):
        return
    portal = game.portals[index]
    portal.map_x = game.looking_x
    portal.map_y = game.looking_y
    portal.face = face
    portal.is_placed = True


def use_weapon(game: Game, button: int) -> None:
    """Fire the weapon in the current slot with the given mouse button."""
    game.shoot_timer = get_time()
    game.curr_click = button
    portal_gun = game.curr_slot == 1 and game.slots[1]
    if button == Mouse.LEFT_CLICK and portal_gun:
        if game.curr_level != 2:
            game.sound.play(SND_PORTAL_SHOOT, False, False, False)
        place_portal(game, 0)
    if button == Mouse.RIGHT_CLICK and portal_gun:
        if game.curr_level != 2:
            game.sound.play(SND_PORTAL_SHOOT, False, False, False)
        place_portal(game, 1)
    if (button == Mouse.LEFT_CLICK and game.curr_slot == 0 and game.slots[0]
            and get_time() - game.start > 100):
        game.sound.play(SND_SHOOT, False, False, True)
        shoot_enemy(game)


def key_pressed(game: Game, keycode: int) -> None:
    """Handle a key going down; Escape closes the game."""
    if keycode == Key.ESCAPE:
        close_game(game)
    if game.scene != 1:
        return
    player = game.player
    if keycode in (Key.W, Key.S) and not player.moving_x:
        player.moving_x = keycode
    if keycode in (Key.A, Key.D) and not player.moving_y:
        player.moving_y = keycode
    if keycode in (Key.RIGHT, Key.LEFT) and not player.rotating:
        player.rotating = keycode
    if keycode in (Key.ONE, Key.TWO):
        game.curr_slot = keycode - Key.ONE
    if keycode == Key.TAB and game.curr_level != 3:
        game.show_map = not game.show_map


def key_released(game: Game, keycode: int) -> None:
    """Handle a key going up: stop the movement or rotation it started."""
    if game.scene != 1:
        return
    player = game.player
    if keycode in (Key.W, Key.S) and player.moving_x:
        player.moving_x = 0
    if keycode in (Key.A, Key.D) and player.moving_y:
        player.moving_y = 0
    if keycode in (Key.RIGHT, Key.LEFT) and player.rotating:
        player.rotating = 0


def mouse_click(game: Game, button: int) -> None:
    """Start the game from the menu, switch weapons with the wheel, or shoot."""
    if game.scene == 0 and button == Mouse.LEFT_CLICK:
        game.sound.stop_all()
        game.scene = 1
        game.start = get_time()
        game.last_frame = game.start
        game.splash_timer = game.start
        game.tmp_tex = None
        game.sound.play_loop(MUS_LVL1, MUS_LVL1_DUR)
    if game.scene == 1:
        if (button in (Mouse.WHEEL_DOWN, Mouse.WHEEL_UP)
                and get_time() - game.last_wheel > _WHEEL_DELAY_MS):
            game.last_wheel = get_time()
            game.curr_slot = int(not game.curr_slot)
        if button in (Mouse.LEFT_CLICK, Mouse.RIGHT_CLICK):
            use_weapon(game, button)


def mouse_move(game: Game, x: int) -> None:
    """Turn the view when the pointer moves sideways or rests at a screen edge."""
    if game.scene != 1:
        return
    move = 0
    if x > game.mouse_middle_x or x > WIDTH - 11:
        move = Key.RIGHT
    elif x < game.mouse_middle_x or x < _EDGE:
        move = Key.LEFT
    if move:
        rotate_player(game, move)
        game.mouse_middle_x = x


def main_loop(game: Game) -> None:
    """Run one frame: music, enemies, rendering, movement, timer and scene screens."""
    game.sound.tick()
    buff = game.player.cam.buff
    if game.scene == 1:
        update_enemies(game)
        update_screen(game)
        if game.curr_level == 2:
            update_chad(game)
        player = game.player
        both = player.moving_x and player.moving_y
        player.cam.speed_m = 0.05 if both else 0.1
        if player.moving_x:
            move_player(game, player.moving_x)
        if player.moving_y:
            move_player(game, player.moving_y)
        if player.rotating:
            rotate_player(game, player.rotating)
    if game.scene == 0:
        buff.reset_sky_ground()
        buff.paste_scaled(game.textures[Tex.MENU_BG], 0, 0)
    if game.scene == 1:
        elapsed = (get_time() - game.start) // 1000
        if COPS_TIMER - elapsed + game.time_m < 1:
            game.ending = 1 + game.curr_level
            game.scene = 2
    if game.scene == 2:
        if game.ending:
            game.sound.stop_all()
        buff.reset_sky_ground()
        buff.paste_scaled(game.textures[Tex.END_0_BG + game.ending], 0, 0)
        draw_credits(game)


def close_game(game: Game) -> None:
    """Stop all sounds, drop every resource and end the program with status 0."""
    game.sound.stop_all()
    game.z_buffer = []
    game.maps = []
    game.map = None
    game.tmp_tex = None
    game.enemies = []
    game.textures = []
    game.player.cam.buff = None
    raise SystemExit(0)


def _present(screen, tex: Texture) -> None:
    import pygame

    surface = pygame.Surface((tex.width, tex.height), 0, 32)
    pygame.surfarray.blit_array(surface, tex.pixels.T)
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def _run(screen, game: Game) -> None:
    import pygame

    keys = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_TAB: Key.TAB,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_1: Key.ONE,
        pygame.K_2: Key.TWO,
    }
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close_game(game)
            elif event.type == pygame.KEYDOWN and event.key in keys:
                key_pressed(game, keys[event.key])
            elif event.type == pygame.KEYUP and event.key in keys:
                key_released(game, keys[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN:
                mouse_click(game, event.button)
            elif event.type == pygame.MOUSEMOTION:
                mouse_move(game, event.pos[0])
        main_loop(game)
        if game.scene == 1:
            x, _ = pygame.mouse.get_pos()
            if (x < _EDGE or x > WIDTH - 11) and 0 <= x < WIDTH:
                mouse_move(game, x)
        _present(screen, game.player.cam.buff)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the levels and assets, open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="ktbgame", description=GAME_TITLE)
    parser.add_argument("--root", default=".",
                        help="directory holding the maps and assets folders")
    args = parser.parse_args(argv)
    root = Path(args.root)
    try:
        maps = [load_map(root / name) for name in _MAP_FILES]
    except MapError as exc:
        put_error(f"Error: {exc}\n")
        put_error("Error while parsing the map!\n")
        return 1

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT), 0, 32)
        pygame.display.set_caption(GAME_TITLE)
        game = Game(maps=maps, map=maps[0],
                    sound=SoundPlayer(audio_dir=str(root / "assets" / "audio")))
        game.scene = 0
        game.tmp_tex = load_texture(root / "assets" / "loading_splash.xpm")
        _present(screen, game.tmp_tex)
        game.sound.play(SND_SHOOT, False, False, False)
        game.textures = load_assets(lambda path: load_texture(root / path))
        init_values(game)
        game.sound.play_loop(MUS_MENU, MUS_MENU_DUR)
        _run(screen, game)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    finally:
        pygame.quit()
    return 0