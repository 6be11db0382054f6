"""Choosing the texture drawn for a wall cell, a sprite or an enemy."""

from __future__ import annotations

from typing import Optional

from .constants import EnemyType, Face, Tex
from .geometry import tile_distance
from .state import Camera, Game, Sprite

_OPEN_DISTANCE = 1.25


def _door_open(game: Game, x: int, y: int) -> bool:
    """Whether the player or a living enemy stands close enough to open (x, y)."""
    player = game.player
    if tile_distance(player.x, player.y, x, y) < _OPEN_DISTANCE:
        return True
    return any(
        tile_distance(enemy.x, enemy.y, x, y) < _OPEN_DISTANCE and not enemy.is_dead
        for enemy in game.enemies
    )


def _behind(game: Game, cam: Camera, x: int, y: int) -> str:
    """Tile on the side of (x, y) that the current ray came from."""
    tile = game.map.tile
    if cam.side == 0:
        return tile(x - 1, y) if cam.ray_dir_x >= 0 else tile(x + 1, y)
    if cam.side == 1:
        return tile(x, y - 1) if cam.ray_dir_y >= 0 else tile(x, y + 1)
    return ""


def is_portal(game: Game, x: int, y: int) -> Optional[Tex]:
    """Portal texture if a placed portal sits on (x, y) facing the ray, else None."""
    facing = game.player.cam.facing()
    found: Optional[Tex] = None
    for index, portal in enumerate(game.portals):
        if (portal.is_placed and portal.map_x == x and portal.map_y == y
                and portal.face == facing):
            found = Tex(Tex.PORTAL_0 + index)
    return found


def _outside_texture(c: str, is_open: bool) -> Tex:
    if c == "3":
        return Tex.DOOR_O_OUTSIDE if is_open else Tex.DOOR_C_OUTSIDE
    if c == "4":
        return Tex.WINDOW_OUTSIDE
    return Tex.WALL_OUTSIDE


def _inner_texture(game: Game, c: str, is_open: bool) -> Tex:
    level = game.curr_level
    lower = level > 0
    if c == "2" and level != 2:
        return Tex.WALL_SIGN_BSMT if lower else Tex.WALL_SIGN
    if c == "3" and level == 2:
        return Tex.DOOR_BOSS
    if c == "3":
        if lower:
            return Tex.DOOR_O_BSMT if is_open else Tex.DOOR_C_BSMT
        return Tex.DOOR_O if is_open else Tex.DOOR_C
    if c == "4":
        return Tex.WINDOW_BSMT if lower else Tex.WINDOW
    if c in ("5", "6", "7"):
        return Tex(Tex.BOARD_1 + ord(c) - ord("5"))
    if c in ("8", "9", "A"):
        return Tex.BUSH_BACKROOMS if c == "A" else Tex.BUSH
    if c == "1" and level == 3:
        return Tex.WALL_BACKROOMS
    special = {"B": Tex.WALL_CLOSET, "D": Tex.WALL_CELL,
               "H": Tex.WALL_SKELETON, "Y": Tex.WALL_END_DOOR}
    if c in special:
        return special[c]
    if level == 2:
        return Tex.WALL_BOSS
    return Tex.WALL_BSMT if lower else Tex.WALL


def get_texture(game: Game, x: int, y: int) -> Tex:
    """Texture of the wall cell (x, y) as seen by the current ray."""
    cam = game.player.cam
    c = game.map.tile(x, y)
    is_open = _door_open(game, x, y)
    if c == "2" and game.curr_level == 2 and cam.facing() == Face.WEST:
        return Tex.WALL_CHOICE
    portal = is_portal(game, x, y)
    if portal is not None:
        return portal
    behind = _behind(game, cam, x, y)
    if behind == "O" and c not in ("8", "9"):
        return _outside_texture(c, is_open)
    if behind in ("C", "4") and c in ("1", "2"):
        return Tex.WALL_CLASS
    return _inner_texture(game, c, is_open)


def get_texture_sprite(game: Game, sprite: Sprite) -> Tex:
    """Texture of a billboard sprite, chosen by the tile it stands on."""
    x = int(sprite.x // 1)
    y = int(sprite.y // 1)
    c = game.map.tile(x, y)
    if c == "T":
        return Tex(Tex.SPR_TREE_0 + (x + y) % 2)
    if c == "Z":
        return Tex.LOVEGIMP
    return Tex.SPR_TREE_0


def enemy_texture(kind: int, is_dead: bool, back: int, phase: int, now: int) -> Tex:
    """Animation frame of an enemy at time ``now`` (milliseconds)."""
    if kind == EnemyType.STUDENT and is_dead:
        return Tex.NPC_STUDENT_DEAD
    if kind in (EnemyType.BULLY, EnemyType.BULLY_BALL) and is_dead:
        return Tex.NPC_BULLY_DEAD
    if kind == EnemyType.STUDENT:
        return Tex(Tex.NPC_STUDENT_F_0 + (now % 500) // 250 + back * 2)
    if kind == EnemyType.BULLY:
        return Tex(Tex.NPC_BULLY_F_1 - (now % 500) // 250 + back * 2)
    if kind == EnemyType.NEXTBOT_1:
        return Tex.NPC_JERAU
    if kind == EnemyType.NEXTBOT_2:
        return Tex(Tex.NPC_PIRATE_0 + (now % 1200) // 150)
    if kind == EnemyType.NEXTBOT_3:
        return Tex.NPC_POULET
    if kind == EnemyType.CHAD and is_dead:
        return Tex.NPC_CHAD_D
    if kind == EnemyType.CHAD:
        return Tex(Tex.NPC_CHAD_H + phase)
    if kind == EnemyType.BULLY_BALL:
        return Tex.NPC_BULLY_BALL
    return Tex.SPR_TREE_0