"""Drawing walls, floor, ceiling, sprites and enemies by casting rays."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .constants import HEIGHT, TRANSPARENT_COLOR, WIDTH, ActorKind, Tex
from .state import Camera, Collision, Enemy, Game, Sprite
from .texture import Texture
from .texturing import enemy_texture, get_texture
from .tiles import is_bounds, is_castable, is_collision, is_transparent
from .utils import get_time
from .zbuffer import append_z_buffer, sort_z_buffer

_HALF_H = HEIGHT // 2
_HALF_W = WIDTH // 2
_AIM_HALF_SPAN = WIDTH // 4
_AIM_RANGE = 4
_NO_CEILING = frozenset("OGTS9")


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _tdiv_array(a: np.ndarray, b: int) -> np.ndarray:
    """Element-wise integer division by a positive ``b``, rounding towards zero."""
    return np.sign(a) * (np.abs(a) // b)


def _sample(tex: Texture, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Colours of ``tex`` at (xs, ys); the transparent colour outside it."""
    inside = (xs >= 0) & (xs < tex.width) & (ys >= 0) & (ys < tex.height)
    out = np.full(xs.shape, TRANSPARENT_COLOR, dtype=np.uint32)
    out[inside] = tex.pixels[ys[inside], xs[inside]]
    return out


def _blit(buff: Texture, xs: np.ndarray, ys: np.ndarray, colors: np.ndarray) -> None:
    """Write opaque colours to the pixels of ``buff`` that exist."""
    keep = ((colors != TRANSPARENT_COLOR) & (xs >= 0) & (xs < buff.width)
            & (ys >= 0) & (ys < buff.height))
    buff.pixels[ys[keep], xs[keep]] = colors[keep]


def _floor_tex_for(c: str, level: int) -> Tex:
    if level == 3:
        return Tex.CARPET
    if c == "E" and level == 0:
        return Tex.FLOOR_TRAPDOOR
    if c == "E" and level == 1:
        return Tex.GROUND_TRAPDOOR
    if c in ("O", "9") or level > 0:
        return Tex.GROUND
    if c == "S":
        return Tex.GROUND_BACKROOMS
    if c in ("G", "T"):
        return Tex.GRASS
    return Tex.FLOOR


def _ceiling_tex_for(c: str, level: int) -> Tex:
    if c == "F" and level == 1:
        return Tex.CEILING_BSMT_TRAPDOOR
    if c == "F" and level == 2:
        return Tex.GROUND_TRAPDOOR
    if level == 1:
        return Tex.CEILING_BSMT
    if level == 2:
        return Tex.GROUND
    return Tex.CEILING


def floor_texture(game: Game, cell: tuple[int, int]) -> Tex:
    """Floor texture of map cell ``cell`` = (x, y) on the current level."""
    x, y = cell
    return _floor_tex_for(game.map.tile(x, y), game.curr_level)


def raycast_floor_ceiling(game: Game) -> None:
    """Draw the floor on the lower half of the screen and the ceiling mirrored above."""
    player = game.player
    cam = player.cam
    gmap = game.map
    level = game.curr_level
    buff = cam.buff
    height = min(gmap.height, len(gmap.content))
    if height == 0:
        return

    rx0, ry0 = cam.dir_x - cam.plane_x, cam.dir_y - cam.plane_y
    rx1, ry1 = cam.dir_x + cam.plane_x, cam.dir_y + cam.plane_y
    ys = np.arange(_HALF_H, HEIGHT)
    row_distance = (0.5 * (HEIGHT - 1)) / (ys - (HEIGHT - 1) // 2)
    step_x = row_distance * (rx1 - rx0) / WIDTH
    step_y = row_distance * (ry1 - ry0) / WIDTH
    cols = np.arange(WIDTH)
    floor_x = (player.x + row_distance * rx0)[:, None] + step_x[:, None] * cols[None, :]
    floor_y = (player.y + row_distance * ry0)[:, None] + step_y[:, None] * cols[None, :]
    cell_x = np.trunc(floor_x).astype(np.int64)
    cell_y = np.trunc(floor_y).astype(np.int64)

    tf = game.textures[Tex.FLOOR]
    tc = game.textures[Tex.GROUND if level == 2 else Tex.CEILING]
    frac_x = floor_x - cell_x
    frac_y = floor_y - cell_y
    tx_floor = np.trunc(tf.width * frac_x).astype(np.int64)
    ty_floor = np.trunc(tf.height * frac_y).astype(np.int64)
    tx_ceil = np.trunc(tc.width * frac_x).astype(np.int64)
    ty_ceil = np.trunc(tc.height * frac_y).astype(np.int64)

    chars = sorted({c for row in gmap.content[:height] for c in row})
    codes = {c: i + 1 for i, c in enumerate(chars)}
    width = max((len(row) for row in gmap.content[:height]), default=0)
    grid = np.zeros((height, max(width, 1)), dtype=np.int64)
    for y, row in enumerate(gmap.content[:height]):
        grid[y, :len(row)] = [codes[c] for c in row]
    sizes = np.array([min(size, len(row)) for size, row in
                      zip(gmap.sizes, gmap.content[:height])], dtype=np.int64)

    inside = (cell_x >= 0) & (cell_y >= 0) & (cell_y < height)
    inside &= cell_x < sizes[np.clip(cell_y, 0, height - 1)]
    code = np.where(inside, grid[np.where(inside, cell_y, 0), np.where(inside, cell_x, 0)], 0)

    walkable = np.array([False] + [not is_collision(c) or is_transparent(c, level)
                                   for c in chars])
    floor_ids = np.array([0] + [int(_floor_tex_for(c, level)) for c in chars])
    ceil_ids = np.array([0] + [int(_ceiling_tex_for(c, level)) for c in chars])
    ceiled = np.array([False] + [c not in _NO_CEILING for c in chars])

    ok = inside & walkable[code]
    fids = floor_ids[code]
    cids = ceil_ids[code]
    has_ceiling = ceiled[code]
    xs2d = np.broadcast_to(cols[None, :], ok.shape)
    ys2d = np.broadcast_to(ys[:, None], ok.shape)

    for tex_id in np.unique(fids[ok]):
        sel = ok & (fids == tex_id)
        colors = _sample(game.textures[int(tex_id)], tx_floor[sel], ty_floor[sel])
        _blit(buff, xs2d[sel], ys2d[sel], colors)
    for tex_id in np.unique(cids[ok & has_ceiling]):
        sel = ok & has_ceiling & (cids == tex_id)
        colors = _sample(game.textures[int(tex_id)], tx_ceil[sel], ty_ceil[sel])
        _blit(buff, xs2d[sel], HEIGHT - 1 - ys2d[sel], colors)


def _save_looking_at(game: Game, coll: Collision) -> None:
    game.looking_x = coll.map_x
    game.looking_y = coll.map_y
    game.side = coll.side
    game.ray_dir_x = coll.ray_dir_x
    game.ray_dir_y = coll.ray_dir_y


def _fill_column(cam: Camera, x: int, coll: Collision) -> None:
    tex = coll.tex
    line_h = cam.line_h
    half = _tdiv(line_h, 2)
    top = max(-half + _HALF_H, 0)
    bottom = min(half + _HALF_H, HEIGHT)
    if top < bottom and line_h:
        step = tex.height / line_h
        tex_pos = (top - _HALF_H + half) * step
        ys = np.arange(top, bottom)
        tex_ys = np.trunc(tex_pos + step * np.arange(ys.size)).astype(np.int64)
        column = np.full(ys.size, tex.width - cam.tex_x - 1, dtype=np.int64)
        colors = _sample(tex, column, tex_ys)
        _blit(cam.buff, np.full(ys.size, x, dtype=np.int64), ys, colors)
    if coll.solid:
        cam.z_buffer[x] = cam.perp_wall_dist


def raycast_tex(game: Game, x: int, coll: Collision) -> None:
    """Draw the wall slice of ``coll`` in screen column ``x``.

    Raises ValueError if the collision carries no texture.
    """
    if coll.tex is None:
        raise ValueError("collision has no texture")
    player = game.player
    cam = player.cam
    if coll.side == 0:
        perp = (coll.map_x - player.x + (1 - coll.step_x) // 2) / coll.ray_dir_x
        wall_x = player.y + perp * coll.ray_dir_y
    else:
        perp = (coll.map_y - player.y + (1 - coll.step_y) // 2) / coll.ray_dir_y
        wall_x = player.x + perp * coll.ray_dir_x
    cam.perp_wall_dist = perp
    wall_x -= math.floor(wall_x)
    cam.wall_x = wall_x
    cam.tex_x = int(wall_x * coll.tex.width)
    if (coll.side == 0 and coll.ray_dir_x > 0) or (coll.side == 1 and coll.ray_dir_y < 0):
        cam.tex_x = coll.tex.width - cam.tex_x - 1
    if not perp:
        cam.line_h = HEIGHT
    else:
        ratio = HEIGHT / perp
        cam.line_h = int(ratio) if math.isfinite(ratio) else HEIGHT
    if x == _HALF_W and coll.solid:
        _save_looking_at(game, coll)
    _fill_column(cam, x, coll)


def _dup_coll(pending: Collision, cam: Camera) -> Collision:
    return Collision(
        x=pending.x, tex=pending.tex, map_x=cam.map_x, map_y=cam.map_y,
        side=cam.side, ray_dir_x=cam.ray_dir_x, ray_dir_y=cam.ray_dir_y,
        step_x=cam.step_x, step_y=cam.step_y, solid=False, dist=0.0,
    )


def _save_to_coll(game: Game, cam: Camera, x: int) -> Collision:
    return Collision(
        x=x, map_x=cam.map_x, map_y=cam.map_y, side=cam.side,
        tex=game.textures[get_texture(game, cam.map_x, cam.map_y)], solid=True,
        ray_dir_x=cam.ray_dir_x, ray_dir_y=cam.ray_dir_y,
        step_x=cam.step_x, step_y=cam.step_y,
    )


def _cast_column(game: Game, cam: Camera, x: int) -> Collision:
    gmap = game.map
    pending = Collision(x=x)
    while not cam.hit:
        cam.step()
        if is_bounds(gmap.sizes, cam.map_x, cam.map_y):
            cam.hit = True
        c = gmap.tile(cam.map_x, cam.map_y)
        if is_castable(c):
            pending.tex = game.textures[get_texture(game, cam.map_x, cam.map_y)]
            if not is_transparent(c, game.curr_level):
                cam.hit = True
            else:
                append_z_buffer(game, _dup_coll(pending, cam), ActorKind.WALL)
    return _save_to_coll(game, cam, x)


def raycast(game: Game) -> None:
    """Cast one ray per screen column and draw the first solid wall it meets.

    See-through walls crossed on the way are added to the draw list.
    """
    player = game.player
    cam = player.cam
    for x in range(WIDTH):
        cam.hit = False
        cam.map_x = int(player.x)
        cam.map_y = int(player.y)
        cam_x = 2.0 * x / WIDTH - 1.0
        cam.ray_dir_x = cam.dir_x + cam.plane_x * cam_x
        cam.ray_dir_y = cam.dir_y + cam.plane_y * cam_x
        if not cam.ray_dir_x:
            cam.delta_x = 1e30
        else:
            cam.delta_x = math.sqrt(1 + cam.ray_dir_y ** 2 / cam.ray_dir_x ** 2)
        if not cam.ray_dir_y:
            cam.delta_y = 1e30
        else:
            cam.delta_y = math.sqrt(1 + cam.ray_dir_x ** 2 / cam.ray_dir_y ** 2)
        if cam.ray_dir_x < 0:
            cam.step_x = -1
            cam.side_dist_x = (player.x - cam.map_x) * cam.delta_x
        else:
            cam.step_x = 1
            cam.side_dist_x = (cam.map_x + 1.0 - player.x) * cam.delta_x
        if cam.ray_dir_y < 0:
            cam.step_y = -1
            cam.side_dist_y = (player.y - cam.map_y) * cam.delta_y
        else:
            cam.step_y = 1
            cam.side_dist_y = (cam.map_y + 1.0 - player.y) * cam.delta_y
        raycast_tex(game, x, _cast_column(game, cam, x))


def _draw_billboard(game: Game, tex: Texture, rel_x: float, rel_y: float,
                    enemy: Optional[Enemy] = None) -> None:
    player = game.player
    cam = player.cam
    det = cam.plane_x * cam.dir_y - cam.dir_x * cam.plane_y
    if det == 0:
        return
    i_det = 1.0 / det
    transf_x = i_det * (cam.dir_y * rel_x - cam.dir_x * rel_y)
    transf_y = i_det * (-cam.plane_y * rel_x + cam.plane_x * rel_y)
    if transf_y == 0:
        return
    screen_f = _HALF_W * (1.0 + transf_x / transf_y)
    size_f = HEIGHT / transf_y
    if not (math.isfinite(screen_f) and math.isfinite(size_f)):
        return
    screen_x = int(screen_f)
    spr_h = abs(int(size_f))
    spr_w = spr_h
    draw_y0 = max(-(spr_h // 2) + _HALF_H, 0)
    draw_y1 = min(spr_h // 2 + _HALF_H, HEIGHT)
    left = -(spr_w // 2) + screen_x
    draw_x0 = max(left, 0)
    draw_x1 = min(spr_w // 2 + screen_x, WIDTH)

    if (enemy is not None and draw_x1 > _HALF_W - _AIM_HALF_SPAN
            and draw_x0 < _HALF_W + _AIM_HALF_SPAN
            and abs(enemy.x - player.x) < _AIM_RANGE
            and abs(enemy.y - player.y) < _AIM_RANGE
            and not enemy.is_dead):
        game.id_shootable = enemy.id

    if transf_y <= 0 or spr_w == 0 or draw_y0 >= draw_y1:
        return
    ys = np.arange(draw_y0, draw_y1, dtype=np.int64)
    d = ys * 256 - HEIGHT * 128 + spr_h * 128
    tex_ys = _tdiv_array(_tdiv_array(d * tex.height, spr_h), 256)
    for pix_x in range(draw_x0, min(draw_x1, WIDTH - 1) + 1):
        if not transf_y < cam.z_buffer[pix_x]:
            continue
        tex_x = _tdiv(_tdiv(256 * (pix_x - left) * tex.width, spr_w), 256)
        colors = _sample(tex, np.full(ys.size, tex_x, dtype=np.int64), tex_ys)
        _blit(cam.buff, np.full(ys.size, pix_x, dtype=np.int64), ys, colors)


def raycast_sprite(game: Game, sprite: Sprite) -> None:
    """Draw a billboard sprite, hidden behind nearer walls."""
    tex = game.textures[sprite.tex_id]
    _draw_billboard(game, tex, sprite.x - game.player.x, sprite.y - game.player.y)


def raycast_enemy(game: Game, enemy: Enemy) -> None:
    """Draw an enemy and mark it as the shooting target if it is in the crosshair."""
    tex_id = enemy_texture(enemy.kind, enemy.is_dead, enemy.back,
                           game.chad_phase, get_time())
    _draw_billboard(game, game.textures[tex_id],
                    enemy.x - game.player.x, enemy.y - game.player.y, enemy)


def raycast_z_buffer(game: Game) -> None:
    """Draw see-through walls, sprites and enemies from farthest to nearest."""
    game.id_shootable = -1
    sort_z_buffer(game)
    for actor in game.z_buffer:
        if actor.kind == ActorKind.WALL:
            raycast_tex(game, actor.item.x, actor.item)
        elif actor.kind == ActorKind.SPRITE:
            raycast_sprite(game, actor.item)
        elif actor.kind == ActorKind.ENEMY:
            raycast_enemy(game, actor.item)