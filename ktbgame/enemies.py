"""Spawning, moving and shooting enemies, and the boss fight."""

from __future__ import annotations

import random

from .constants import MUS_BOSS, MUS_BOSS_DUR, MUS_END, EnemyType
from .geometry import tile_distance
from .state import Enemy, Game
from .tiles import is_castable, is_collision
from .utils import get_time

_NEXTBOTS = frozenset({EnemyType.NEXTBOT_1, EnemyType.NEXTBOT_2, EnemyType.NEXTBOT_3})
_CHASERS = _NEXTBOTS | {EnemyType.BULLY_BALL}
_WANDERERS = frozenset({EnemyType.STUDENT, EnemyType.BULLY})

_NEXTBOT_SPAWNS = ((107.5, 34.5), (20.5, 47.5), (75.5, 3.5))
_CHAD_SPAWN = (20.5, 3.5)
_MINION_SPAWNS = ((19.5, 2.5), (19.5, 3.5), (19.5, 4.5), (17.5, 1.5), (17.5, 5.5))
_ENTRANCE = (16, 3)
_EXIT = (22, 3)


def _random_dir() -> int:
    return -1 + 2 * random.randrange(2)


def _is_free(c: str) -> bool:
    return not is_collision(c) and not is_castable(c) and c != " "


def random_position(game: Game) -> tuple[float, float]:
    """Centre of a randomly chosen walkable tile of the current map.

    Raises ValueError if the map has no walkable tile.
    """
    content = game.map.content
    if not any(_is_free(c) for row in content for c in row):
        raise ValueError("no free tile to place an enemy on")
    modulus = max(game.map.width * game.map.height // 2, 1)
    while True:
        for y, row in enumerate(content):
            found = None
            for x, c in enumerate(row):
                if _is_free(c) and random.randrange(modulus) == 0:
                    found = (x + 0.5, y + 0.5)
            if found is not None:
                return found


def generate_one_enemy(game: Game, difficulty: int, index: int) -> Enemy:
    """Create a student or bully at a random spot and store it at ``index``.

    The higher ``difficulty``, the more likely a bully.
    """
    dirx = _random_dir()
    diry = _random_dir()
    if random.randrange(difficulty + 1) == 0:
        kind = EnemyType.STUDENT
    else:
        kind = EnemyType.BULLY
        game.bullies_amt += 1
    x, y = random_position(game)
    enemy = Enemy(x=x, y=y, kind=kind, dirx=dirx, diry=diry,
                  olddirx=dirx, olddiry=diry, id=index)
    if index < len(game.enemies):
        game.enemies[index] = enemy
    elif index == len(game.enemies):
        game.enemies.append(enemy)
    else:
        raise IndexError(f"enemy index {index} out of range")
    return enemy


def _generate_nextbots(game: Game) -> None:
    game.bullies_amt = 0
    game.enemies = []
    for i, (x, y) in enumerate(_NEXTBOT_SPAWNS):
        dirx = _random_dir()
        diry = _random_dir()
        game.enemies.append(Enemy(
            x=x, y=y, kind=EnemyType(EnemyType.NEXTBOT_1 + i),
            dirx=dirx, diry=diry, olddirx=dirx, olddiry=diry, id=i,
        ))


def _generate_chad(game: Game) -> None:
    game.bullies_amt = 0
    x, y = _CHAD_SPAWN
    game.enemies = [Enemy(x=x, y=y, kind=EnemyType.CHAD, id=0)]


def generate_enemies(game: Game, difficulty: int) -> None:
    """Replace the enemies for a level.

    -1 spawns the boss, -2 the three chasers; otherwise 25 or more
    students and bullies are scattered over the map.
    """
    game.enemies = []
    if difficulty == -1:
        _generate_chad(game)
    if difficulty == -2:
        _generate_nextbots(game)
    if difficulty < 0:
        return
    game.bullies_amt = 0
    count = 25 + random.randrange(5 + difficulty * 5)
    for i in range(count):
        generate_one_enemy(game, difficulty, i)


def _calc_dirs(enemy: Enemy) -> None:
    if random.randrange(10) == 0:
        enemy.dirx = random.randrange(3) - 1
        enemy.back = 0 if enemy.dirx == enemy.olddirx else 1
    if random.randrange(10) == 0:
        enemy.diry = random.randrange(3) - 1
        if enemy.dirx == enemy.olddirx:
            enemy.back = 0
    enemy.olddirx = enemy.dirx
    enemy.olddiry = enemy.diry


def _check_moves(game: Game, enemy: Enemy, speed: float) -> None:
    player = game.player
    tile = game.map.tile
    new_x, new_y = enemy.x, enemy.y
    if enemy.kind in _WANDERERS:
        new_x = enemy.x + speed * enemy.dirx
        new_y = enemy.y + speed * enemy.diry
    if enemy.kind in _CHASERS:
        new_x = enemy.x - speed * (1 if player.x < enemy.x else -1)
        new_y = enemy.y - speed * (1 if player.y < enemy.y else -1)
    new_x = max(new_x, 0.0)
    new_y = max(new_y, 0.0)
    if enemy.kind in _NEXTBOTS:
        if (not is_collision(tile(int(new_x), int(enemy.y)))
                and abs(enemy.x - player.x) > 0.1):
            enemy.x = new_x
        if (not is_collision(tile(int(enemy.x), int(new_y)))
                and abs(enemy.y - player.y) > 0.1):
            enemy.y = new_y
        return
    if not is_collision(tile(int(new_x), int(enemy.y))):
        enemy.x = new_x
    if not is_collision(tile(int(enemy.x), int(new_y))):
        enemy.y = new_y


def _check_kill(game: Game, enemy: Enemy) -> None:
    player = game.player
    kill = 0
    if (enemy.kind in _NEXTBOTS
            and tile_distance(player.x, player.y, enemy.x, enemy.y) < 0.85):
        kill = 5
    if (enemy.kind == EnemyType.BULLY_BALL
            and abs(enemy.x - player.x) < 0.4
            and abs(enemy.y - player.y) < 0.4):
        player.hp -= 1
        game.bullies_amt -= 1
        enemy.is_dead = True
    if not player.hp:
        kill = 3
    if kill:
        game.ending = kill
        game.scene = 2


def update_enemies(game: Game) -> None:
    """Move every living enemy one frame and check whether it kills the player."""
    for enemy in game.enemies:
        if enemy.is_dead:
            continue
        _calc_dirs(enemy)
        speed = 0.01 if enemy.kind == EnemyType.BULLY_BALL else 0.05
        _check_moves(game, enemy, speed)
        _check_kill(game, enemy)


def shoot_enemy(game: Game) -> None:
    """Hit the enemy currently in the crosshair, if any."""
    index = game.id_shootable
    if index == -1 or game.enemies[index].is_dead:
        return
    enemy = game.enemies[index]
    if enemy.kind == EnemyType.CHAD and not enemy.is_dead and game.chad_phase == 1:
        game.chad_hp -= 1
    if enemy.kind != EnemyType.CHAD or game.chad_hp == 0:
        enemy.is_dead = True
    if ((enemy.kind == EnemyType.BULLY and game.curr_level != 2)
            or enemy.kind == EnemyType.BULLY_BALL):
        game.bullies_amt -= 1
    if enemy.kind == EnemyType.BULLY and game.curr_level == 2:
        enemy.kind = EnemyType.BULLY_BALL
        enemy.is_dead = False
    if enemy.kind == EnemyType.STUDENT:
        game.time_m -= 20


def _clean_bodies(game: Game) -> None:
    game.enemies = [game.enemies[0].copy()]


def _chad_generate(game: Game) -> None:
    while True:
        game.enemies = [game.enemies[0].copy()]
        for index in range(1, len(_MINION_SPAWNS) + 1):
            generate_one_enemy(game, 1, index)
        for enemy, (x, y) in zip(game.enemies[1:], _MINION_SPAWNS):
            enemy.x, enemy.y = x, y
        if game.bullies_amt:
            return


def _update_chad_fight(game: Game) -> None:
    if game.chad_phase == 1:
        if not game.chad_timer:
            game.chad_timer = get_time()
        if (game.chad_timer
                and get_time() - game.chad_timer >= 3000 + random.randrange(2001)):
            game.chad_phase = 2
            game.chad_timer = 1
    if game.chad_phase == 2:
        if game.chad_timer == 1:
            _chad_generate(game)
            game.chad_timer = 0
        if game.bullies_amt == 0:
            _clean_bodies(game)
            game.chad_phase = 1


def update_chad(game: Game) -> None:
    """Drive the boss level: lock the arena, alternate fight phases, open the exit."""
    content = game.map.content
    if game.player.x >= 17.5 and not game.chad_timer and not game.chad_phase:
        game.chad_timer = get_time()
        game.freeze_player = True
        content[_ENTRANCE[1]][_ENTRANCE[0]] = "1"
        game.splash_timer = get_time()
    if (game.chad_timer and get_time() - game.chad_timer >= 3000
            and not game.chad_phase):
        game.chad_phase = 1
        game.freeze_player = False
        game.chad_timer = 0
        game.sound.play_loop(MUS_BOSS, MUS_BOSS_DUR)
    if not game.enemies[0].is_dead:
        _update_chad_fight(game)
    exit_x, exit_y = _EXIT
    if game.enemies[0].is_dead and content[exit_y][exit_x] == "1":
        content[exit_y][exit_x] = "3"
        game.sound.stop_all()
    if game.player.x > 33.5:
        game.scene = 2
        game.sound.play(MUS_END, False, False, False)