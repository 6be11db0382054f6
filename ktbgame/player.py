"""Player spawning, movement, rotation, level changes and portal travel."""

from __future__ import annotations

import math

from .constants import (
    MUS_BACKROOMS,
    MUS_BACKROOMS_DUR,
    MUS_LVL2,
    MUS_LVL2_DUR,
    SND_PORTAL_TP,
    Face,
    Key,
)
from .enemies import generate_enemies
from .state import Game
from .tiles import is_collision
from .utils import get_time
from .zbuffer import fill_z_buffer

_SPAWNS = {
    0: (Face.SOUTH, 14.5, 5.5),
    1: (Face.WEST, 27.5, 2.5),
    2: (Face.EAST, 1.5, 3.5),
    3: (Face.EAST, 46.5, 37.5),
}

_EXIT_OFFSETS = {
    Face.NORTH: (0.5, -0.2),
    Face.SOUTH: (0.5, 1.2),
    Face.WEST: (-0.2, 0.5),
    Face.EAST: (1.2, 0.5),
}

_NEAR = 0.1


def tp_player_spawn(game: Game) -> None:
    """Rebuild the draw list and put the player at the current level's spawn."""
    fill_z_buffer(game)
    spawn = _SPAWNS.get(game.curr_level)
    if spawn is None:
        return
    face, x, y = spawn
    game.player.cam.turn_to(face)
    game.player.x, game.player.y = x, y


def change_level(game: Game, dest: int) -> None:
    """Switch to level ``dest``: new map, enemies, spawn point and music."""
    game.curr_level = dest
    for portal in game.portals:
        portal.is_placed = False
    game.map = game.maps[dest]
    if dest != 2:
        game.splash_timer = get_time()
    game.enemies = []
    if dest == 1:
        generate_enemies(game, 3)
    if dest == 2:
        generate_enemies(game, -1)
    if dest == 3:
        game.slots = [False, False]
        game.show_map = False
        game.hide_bullies_amt = True
        generate_enemies(game, -2)
    tp_player_spawn(game)
    game.sound.stop_all()
    if dest == 1:
        game.sound.play_loop(MUS_LVL2, MUS_LVL2_DUR)
    elif dest == 3:
        game.sound.play_loop(MUS_BACKROOMS, MUS_BACKROOMS_DUR)


def apply_moves(game: Game, new_x: float, new_y: float) -> None:
    """Move towards (new_x, new_y) axis by axis, then handle exits and portals."""
    if game.freeze_player:
        return
    player = game.player
    if not is_collision(game.map.tile(int(new_x), int(player.y))):
        player.x = new_x
    if not is_collision(game.map.tile(int(player.x), int(new_y))):
        player.y = new_y
    if game.map.tile(int(player.x), int(player.y)) == "E" and not game.bullies_amt:
        change_level(game, game.curr_level + 1)
    if game.map.tile(int(player.x), int(player.y)) == "S":
        change_level(game, 3)
    do_portals(game)


def move_player(game: Game, keycode: int) -> None:
    """Walk forward, back or sideways for one of the W, A, S, D keys.

    Raises ValueError for any other key.
    """
    player = game.player
    cam = player.cam
    offsets = {
        Key.W: (cam.dir_x, cam.dir_y),
        Key.S: (-cam.dir_x, -cam.dir_y),
        Key.A: (cam.dir_y, -cam.dir_x),
        Key.D: (-cam.dir_y, cam.dir_x),
    }
    if keycode not in offsets:
        raise ValueError(f"not a movement key: {keycode!r}")
    dx, dy = offsets[Key(keycode)]
    apply_moves(game, player.x + dx * cam.speed_m, player.y + dy * cam.speed_m)


def rotate_player(game: Game, keycode: int) -> None:
    """Turn the view right or left by the camera's rotation speed."""
    if game.freeze_player:
        return
    cam = game.player.cam
    if keycode == Key.RIGHT:
        angle = cam.speed_r
    elif keycode == Key.LEFT:
        angle = -cam.speed_r
    else:
        return
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    cam.dir_x, cam.dir_y = (cam.dir_x * cos_a - cam.dir_y * sin_a,
                            cam.dir_x * sin_a + cam.dir_y * cos_a)
    cam.plane_x, cam.plane_y = (cam.plane_x * cos_a - cam.plane_y * sin_a,
                                cam.plane_x * sin_a + cam.plane_y * cos_a)


def teleport(game: Game, dest: int) -> None:
    """Put the player just outside portal ``dest``, looking away from its wall."""
    portal = game.portals[dest]
    face = Face(portal.face)
    off_x, off_y = _EXIT_OFFSETS[face]
    game.player.x = portal.map_x + off_x
    game.player.y = portal.map_y + off_y
    game.player.cam.turn_to(face)
    game.sound.play(SND_PORTAL_TP, False, False, False)


def do_portals(game: Game) -> None:
    """Teleport the player if both portals are placed and one is touched."""
    if not all(portal.is_placed for portal in game.portals):
        return
    player = game.player
    for index, portal in enumerate(game.portals):
        mx, my = portal.map_x, portal.map_y
        if portal.face == Face.NORTH and int(player.x) == mx and abs(player.y - my) < _NEAR:
            teleport(game, 1 - index)
        if (portal.face == Face.SOUTH and int(player.x) == mx
                and abs(player.y - (my + 1)) < _NEAR):
            teleport(game, 1 - index)
        if portal.face == Face.WEST and abs(player.x - mx) < _NEAR and int(player.y) == my:
            teleport(game, 1 - index)
        if (portal.face == Face.EAST and abs(player.x - (mx + 1)) < _NEAR
                and int(player.y) == my):
            teleport(game, 1 - index)