"""Data held by a running game: camera, player, actors and the game itself."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Optional

from .constants import HEIGHT, WIDTH, ActorKind, EnemyType, Face
from .geometry import facing_direction
from .sound import SoundPlayer
from .texture import Texture

if TYPE_CHECKING:
    from .gamemap import GameMap

_TURNS = {
    Face.NORTH: (0.0, -0.999, 0.66, 0.0),
    Face.SOUTH: (0.0, 0.999, -0.66, 0.0),
    Face.EAST: (0.999, 0.0, 0.0, 0.66),
    Face.WEST: (-0.999, 0.0, 0.0, -0.66),
}


@dataclass
class Camera:
    """View direction, projection plane and the state of the current ray."""

    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    map_x: int = 0
    map_y: int = 0
    hit: bool = False
    side: int = 0
    perp_wall_dist: float = 0.0
    line_h: int = 0
    speed_m: float = 0.1
    speed_r: float = 0.033 * 1.8 / 1.5
    wall_x: float = 0.0
    tex_x: int = 0
    buff: Optional[Texture] = None
    z_buffer: list[float] = field(default_factory=lambda: [0.0] * WIDTH)

    def turn_to(self, direction: int) -> None:
        """Face one of the four cardinal directions."""
        self.dir_x, self.dir_y, self.plane_x, self.plane_y = _TURNS[Face(direction)]

    def step(self) -> None:
        """Advance the ray by one grid cell along the nearer side."""
        if self.side_dist_x < self.side_dist_y:
            self.side_dist_x += self.delta_x
            self.map_x += self.step_x
            self.side = 0
        else:
            self.side_dist_y += self.delta_y
            self.map_y += self.step_y
            self.side = 1

    def facing(self) -> Face:
        """Wall face the current ray has hit."""
        return facing_direction(self.side, self.ray_dir_x, self.ray_dir_y)


@dataclass
class Player:
    x: float = 0.0
    y: float = 0.0
    moving_x: int = 0
    moving_y: int = 0
    rotating: int = 0
    cam: Camera = field(default_factory=Camera)
    hp: int = 3


@dataclass
class Sprite:
    x: float
    y: float
    dist: float = 0.0
    tex_id: int = 0


@dataclass
class Enemy:
    x: float = 0.0
    y: float = 0.0
    kind: EnemyType = EnemyType.STUDENT
    is_dead: bool = False
    dist: float = 0.0
    dirx: int = 0
    diry: int = 0
    olddirx: int = 0
    olddiry: int = 0
    back: int = 0
    id: int = 0

    def copy(self) -> Enemy:
        """An independent enemy with the same fields."""
        return replace(self)


@dataclass
class Portal:
    map_x: int = 0
    map_y: int = 0
    face: Optional[Face] = None
    is_placed: bool = False


@dataclass
class Collision:
    """A wall cell a ray went through or stopped at."""

    x: int = 0
    map_x: int = 0
    map_y: int = 0
    side: int = 0
    solid: bool = False
    dist: float = 0.0
    tex: Optional[Texture] = None
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    step_x: int = 0
    step_y: int = 0


@dataclass
class Actor:
    """An entry in the depth-sorted draw list."""

    kind: ActorKind
    item: Any


@dataclass
class Game:
    """Everything the main loop reads and changes."""

    maps: list[GameMap] = field(default_factory=list)
    map: Optional[GameMap] = None
    player: Player = field(default_factory=Player)
    textures: list[Texture] = field(default_factory=list)
    tmp_tex: Optional[Texture] = None
    sound: SoundPlayer = field(default_factory=SoundPlayer)
    scene: int = 0
    curr_slot: int = 0
    slots: list[bool] = field(default_factory=lambda: [True, True])
    last_wheel: int = 0
    start: int = 0
    show_map: bool = False
    last_frame: int = 0
    last_fps_update: int = 0
    fps: float = 1.0
    mouse_middle_x: int = WIDTH // 2
    curr_level: int = 0
    portals: list[Portal] = field(default_factory=lambda: [Portal(), Portal()])
    splash_timer: int = 0
    enemies: list[Enemy] = field(default_factory=list)
    bullies_amt: int = 0
    z_buffer: list[Actor] = field(default_factory=list)
    hide_bullies_amt: bool = False
    looking_x: int = 0
    looking_y: int = 0
    side: int = 0
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    ending: int = 0
    id_shootable: int = -1
    time_m: int = 0
    freeze_player: bool = False
    chad_timer: int = 0
    chad_phase: int = 0
    chad_hp: int = 100
    credits_curr: int = 0
    credits_y: int = HEIGHT
    shoot_state: int = 0
    shoot_timer: int = 0
    curr_click: int = 0