"""The list of see-through walls, sprites and enemies drawn back to front."""

from __future__ import annotations

from typing import Any

from .constants import ActorKind
from .geometry import tile_distance
from .state import Actor, Game
from .texturing import get_texture_sprite


def append_z_buffer(game: Game, item: Any, kind: ActorKind) -> Actor:
    """Add ``item`` to the draw list and return its entry."""
    actor = Actor(kind=ActorKind(kind), item=item)
    game.z_buffer.append(actor)
    return actor


def fill_z_buffer(game: Game) -> None:
    """Rebuild the draw list from the map's sprites and the enemies."""
    game.z_buffer = []
    for sprite in game.map.sprites:
        sprite.tex_id = get_texture_sprite(game, sprite)
        append_z_buffer(game, sprite, ActorKind.SPRITE)
    for enemy in game.enemies:
        append_z_buffer(game, enemy, ActorKind.ENEMY)


def _update_distances(game: Game) -> None:
    px, py = game.player.x, game.player.y
    for actor in game.z_buffer:
        item = actor.item
        if actor.kind == ActorKind.WALL:
            item.dist = tile_distance(px, py, item.map_x + 0.5, item.map_y + 0.5)
        else:
            item.dist = tile_distance(px, py, item.x, item.y)


def sort_z_buffer(game: Game) -> None:
    """Compute each entry's distance to the player and order farthest first."""
    _update_distances(game)
    game.z_buffer.sort(key=lambda actor: actor.item.dist, reverse=True)