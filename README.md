# ktbgame

**KTB! - Kill The Bullies!** is a raycasting first-person shooter. You walk
through a school and its basement, shoot the bullies and spare the students,
use a portal gun to get around walls, and face Chad in a boss fight. Take too
long and the cops arrive. Somewhere there is a way into the backrooms.

## Installing

```
pip install .
```

The game window, input and image loading use `pygame`; pixel buffers use
`numpy`. Music and sound effects are `.ogg` files played in the background
with the `paplay` command and stopped with `pkill`, so sound only works where
those commands exist. When they are missing, a message goes to standard error
and the game carries on silently.

## Running

The game reads its data from a directory that holds:

- `maps/bonus/lvl1.cub`, `maps/bonus/lvl2.cub`, `maps/bonus/lvl3.cub` and
  `maps/bonus/backrooms.cub`, the four level layouts;
- `assets/`, the XPM textures (walls, floors, sprites, GUI, weapons, endings)
  and `assets/loading_splash.xpm`, shown while the rest loads;
- `assets/audio/`, the `.ogg` music and sound effects.

Run it from that directory:

```
ktbgame
```

or point it at the directory:

```
ktbgame --root path/to/game-data
```

If a map cannot be read, an error goes to standard error and the command exits
with status 1. If a texture cannot be loaded, an `OSError` is raised.

## Controls

| Input                 | Action                                   |
|-----------------------|------------------------------------------|
| Left click (menu)     | start the game                           |
| `W` / `S`             | move forwards / backwards                |
| `A` / `D`             | strafe left / right                      |
| `←` / `→` or mouse    | turn                                     |
| `1` / `2`             | pick the gun / the portal gun            |
| Mouse wheel           | switch between the two weapons           |
| Left click            | shoot, or place the first portal         |
| Right click           | place the second portal                  |
| `Tab`                 | show or hide the minimap                 |
| `Esc`                 | quit                                     |

Resting the pointer at the left or right edge of the window keeps turning the
view. Portals can only be placed on the first two levels.

## Map files

A level is a plain text file, one row of tiles per line. Digits `1`-`9` and
the letters `A`, `B`, `D`, `H` and `Y` are walls of various kinds (`3` is a
door and `9` a bush you can walk through; `4` is a window, `5`-`7` boards,
`8` and `A` bushes). `E` is the exit trapdoor, which opens once every bully on
the level is gone, `S` leads to the backrooms, and `T` and `Z` hold sprites.
Tiles `O`, `G`, `T`, `S` and `9` have no ceiling drawn above them.

Load a level yourself with:

```python
from ktbgame.gamemap import load_map

level = load_map("maps/bonus/lvl1.cub")
print(level.width, level.height, len(level.sprites))
print(level.tile(1, 1))
```

`load_map` raises `ktbgame.gamemap.MapError` when the file cannot be opened.

## Modules

- `ktbgame.app` – setup, input handlers, the per-frame `main_loop` and `main`.
- `ktbgame.gamemap` – `GameMap` and `load_map`.
- `ktbgame.texture` – `Texture` pixel buffers and `load_texture`.
- `ktbgame.raycasting`, `ktbgame.zbuffer`, `ktbgame.texturing` – rendering.
- `ktbgame.gui` – HUD, minimap, credits and `update_screen`.
- `ktbgame.player`, `ktbgame.enemies` – movement, portals, levels and enemies.
- `ktbgame.sound` – `SoundPlayer`.
- `ktbgame.state`, `ktbgame.constants`, `ktbgame.assets`, `ktbgame.tiles`,
  `ktbgame.geometry`, `ktbgame.utils` – game data and helpers.

## Development

```
pip install -e ".[test]"
pytest
```