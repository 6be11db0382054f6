import numpy as np
import pytest

from ktbgame.constants import HEIGHT, TEX_AMT, WIDTH, ActorKind, EnemyType, Face, Tex
from ktbgame.gamemap import GameMap
from ktbgame.raycasting import (
    floor_texture,
    raycast,
    raycast_enemy,
    raycast_floor_ceiling,
    raycast_sprite,
    raycast_tex,
    raycast_z_buffer,
)
from ktbgame.state import Actor, Collision, Enemy, Game, Sprite
from ktbgame.texture import Texture

ROOM = ["11111", "10001", "10001", "10001", "11111"]
DOOR_ROOM = ["1111111", "1000001", "1003001", "1000001", "1111111"]
WIDE_ROOM = ["111111111", "100000001", "100000001", "100000001", "111111111"]


def color_of(tex_id):
    return int(tex_id) + 1


def make_game(rows, x=2.5, y=2.5, face=Face.EAST, level=0):
    content = [list(r) for r in rows]
    gmap = GameMap(content=content, sizes=[len(r) for r in content],
                   width=max(len(r) for r in rows), height=len(rows))
    textures = [Texture(np.full((8, 8), color_of(i), dtype=np.uint32))
                for i in range(TEX_AMT)]
    game = Game(maps=[gmap], map=gmap, textures=textures, curr_level=level)
    game.player.x, game.player.y = x, y
    game.player.cam.turn_to(face)
    game.player.cam.buff = Texture.new(WIDTH, HEIGHT)
    return game


@pytest.mark.parametrize("char,level,expected", [
    ("0", 3, Tex.CARPET),
    ("E", 0, Tex.FLOOR_TRAPDOOR),
    ("E", 1, Tex.GROUND_TRAPDOOR),
    ("O", 0, Tex.GROUND),
    ("0", 1, Tex.GROUND),
    ("S", 0, Tex.GROUND_BACKROOMS),
    ("G", 0, Tex.GRASS),
    ("T", 0, Tex.GRASS),
    ("0", 0, Tex.FLOOR),
])
def test_floor_texture(char, level, expected):
    game = make_game(["111", "1" + char + "1", "111"], level=level)
    assert floor_texture(game, (1, 1)) == expected


@pytest.mark.parametrize("level,floor,ceiling", [
    (0, Tex.FLOOR, Tex.CEILING),
    (1, Tex.GROUND, Tex.CEILING_BSMT),
    (2, Tex.GROUND, Tex.GROUND),
    (3, Tex.CARPET, Tex.CEILING),
])
def test_floor_and_ceiling_colours(level, floor, ceiling):
    game = make_game(ROOM, level=level)
    raycast_floor_ceiling(game)
    buff = game.player.cam.buff
    assert buff.get_pixel(WIDTH // 2, HEIGHT - 1) == color_of(floor)
    assert buff.get_pixel(WIDTH // 2, 0) == color_of(ceiling)


def test_open_air_has_no_ceiling():
    game = make_game(["11111", "1OOO1", "1OOO1", "1OOO1", "11111"])
    raycast_floor_ceiling(game)
    buff = game.player.cam.buff
    assert buff.get_pixel(WIDTH // 2, HEIGHT - 1) == color_of(Tex.GROUND)
    assert buff.get_pixel(WIDTH // 2, 0) == 0


def test_raycast_draws_wall_in_front():
    game = make_game(ROOM)
    raycast(game)
    buff = game.player.cam.buff
    assert (game.looking_x, game.looking_y) == (4, 2)
    assert game.side == 0
    assert buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.WALL)
    assert buff.get_pixel(WIDTH // 2, 0) == 0


def test_raycast_fills_depth_for_every_column():
    game = make_game(ROOM)
    raycast(game)
    depths = game.player.cam.z_buffer
    assert len(depths) == WIDTH
    assert all(d > 0 for d in depths)
    assert game.z_buffer == []


def test_raycast_records_see_through_door():
    game = make_game(DOOR_ROOM, x=1.5)
    raycast(game)
    centre = [a for a in game.z_buffer if a.item.x == WIDTH // 2]
    assert len(centre) == 1
    door = centre[0]
    assert door.kind == ActorKind.WALL
    assert (door.item.map_x, door.item.map_y) == (3, 2)
    assert door.item.solid is False
    assert door.item.tex is game.textures[Tex.DOOR_C]
    assert game.looking_x == 6


def test_z_buffer_draws_door_over_wall_without_changing_depth():
    game = make_game(DOOR_ROOM, x=1.5)
    raycast(game)
    buff = game.player.cam.buff
    depth = game.player.cam.z_buffer[WIDTH // 2]
    assert buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.WALL)
    raycast_z_buffer(game)
    assert buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.DOOR_C)
    assert game.player.cam.z_buffer[WIDTH // 2] == depth


def test_raycast_tex_solid_updates_depth_and_target():
    game = make_game(ROOM)
    coll = Collision(x=WIDTH // 2, map_x=4, map_y=2, side=0, solid=True,
                     tex=game.textures[Tex.WALL], ray_dir_x=1.0, ray_dir_y=0.0,
                     step_x=1, step_y=1)
    raycast_tex(game, WIDTH // 2, coll)
    assert game.player.cam.z_buffer[WIDTH // 2] == pytest.approx(1.5)
    assert (game.looking_x, game.looking_y) == (4, 2)
    assert game.player.cam.buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.WALL)


def test_raycast_tex_see_through_keeps_depth():
    game = make_game(ROOM)
    game.player.cam.z_buffer[WIDTH // 2] = 99.0
    coll = Collision(x=WIDTH // 2, map_x=4, map_y=2, side=0, solid=False,
                     tex=game.textures[Tex.DOOR_C], ray_dir_x=1.0, ray_dir_y=0.0,
                     step_x=1, step_y=1)
    raycast_tex(game, WIDTH // 2, coll)
    assert game.player.cam.z_buffer[WIDTH // 2] == 99.0
    assert game.looking_x == 0
    assert game.player.cam.buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.DOOR_C)


def test_raycast_tex_without_texture_raises():
    game = make_game(ROOM)
    with pytest.raises(ValueError):
        raycast_tex(game, 0, Collision(side=0, ray_dir_x=1.0, step_x=1))


def test_sprite_in_front_is_drawn():
    game = make_game(WIDE_ROOM)
    game.player.cam.z_buffer = [100.0] * WIDTH
    raycast_sprite(game, Sprite(x=4.5, y=2.5, tex_id=Tex.SPR_TREE_0))
    assert game.player.cam.buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.SPR_TREE_0)


def test_sprite_hidden_by_nearer_wall():
    game = make_game(WIDE_ROOM)
    game.player.cam.z_buffer = [1.0] * WIDTH
    raycast_sprite(game, Sprite(x=4.5, y=2.5, tex_id=Tex.SPR_TREE_0))
    assert np.count_nonzero(game.player.cam.buff.pixels) == 0


def test_sprite_behind_player_is_not_drawn():
    game = make_game(WIDE_ROOM, x=4.5)
    game.player.cam.z_buffer = [100.0] * WIDTH
    raycast_sprite(game, Sprite(x=1.5, y=2.5, tex_id=Tex.SPR_TREE_0))
    assert np.count_nonzero(game.player.cam.buff.pixels) == 0


def test_enemy_in_crosshair_becomes_target():
    game = make_game(WIDE_ROOM)
    game.player.cam.z_buffer = [100.0] * WIDTH
    enemy = Enemy(x=4.5, y=2.5, kind=EnemyType.NEXTBOT_1, id=7)
    raycast_enemy(game, enemy)
    assert game.id_shootable == 7
    assert game.player.cam.buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.NPC_JERAU)


def test_dead_enemy_is_not_a_target():
    game = make_game(WIDE_ROOM)
    game.player.cam.z_buffer = [100.0] * WIDTH
    game.id_shootable = -1
    raycast_enemy(game, Enemy(x=4.5, y=2.5, kind=EnemyType.NEXTBOT_1, id=7, is_dead=True))
    assert game.id_shootable == -1


def test_z_buffer_sorted_far_to_near_and_target_reset():
    game = make_game(WIDE_ROOM)
    game.player.cam.z_buffer = [100.0] * WIDTH
    game.id_shootable = 5
    enemy = Enemy(x=4.5, y=2.5, kind=EnemyType.NEXTBOT_1, id=2)
    sprite = Sprite(x=6.5, y=2.5, tex_id=Tex.SPR_TREE_0)
    game.z_buffer = [Actor(ActorKind.ENEMY, enemy), Actor(ActorKind.SPRITE, sprite)]
    raycast_z_buffer(game)
    dists = [a.item.dist for a in game.z_buffer]
    assert dists == sorted(dists, reverse=True)
    assert game.z_buffer[0].item is sprite
    assert game.id_shootable == 2
    assert game.player.cam.buff.get_pixel(WIDTH // 2, HEIGHT // 2) == color_of(Tex.NPC_JERAU)


def test_empty_z_buffer_clears_target():
    game = make_game(WIDE_ROOM)
    game.id_shootable = 5
    raycast_z_buffer(game)
    assert game.id_shootable == -1