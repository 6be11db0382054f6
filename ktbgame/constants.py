"""Screen geometry, input codes, texture slots and sound names used by the game."""

from enum import IntEnum

GAME_TITLE = "KTB! - KILL THE BULLIES!"
WIDTH = 1200
HEIGHT = 900

COPS_TIMER = 480

MUS_MENU = "Mechanolith"
MUS_LVL1 = "Ecole"
MUS_LVL2 = "caca"
MUS_BOSS = "Donjon"
MUS_BACKROOMS = "Apprehension"
MUS_END = "gero"
SND_SHOOT = "shoot"
SND_PORTAL_SHOOT = "portal_shoot"
SND_PORTAL_TP = "portal_tp"
MUS_MENU_DUR = 55510
MUS_LVL1_DUR = 75789
MUS_LVL2_DUR = 132923
MUS_BOSS_DUR = 103784
MUS_BACKROOMS_DUR = 80248

TRANSPARENT_COLOR = 0xFF00FF
SKY_COLOR = 0x6AC9FB
GROUND_COLOR = 0x00DD00


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    ESCAPE = 65307
    TAB = 65289
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363
    ONE = 49
    TWO = 50


class Mouse(IntEnum):
    """Mouse button numbers."""

    LEFT_CLICK = 1
    RIGHT_CLICK = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class Tex(IntEnum):
    """Index of every texture in the loaded texture table."""

    MENU_BG = 0
    WALL = 1
    WALL_SIGN = 2
    WALL_CLASS = 3
    DOOR_C = 4
    DOOR_O = 5
    WINDOW = 6
    BOARD_1 = 7
    BOARD_2 = 8
    BOARD_3 = 9
    BUSH = 10
    BUSH_BACKROOMS = 11
    WALL_OUTSIDE = 12
    WINDOW_OUTSIDE = 13
    DOOR_C_OUTSIDE = 14
    DOOR_O_OUTSIDE = 15
    WALL_BSMT = 16
    WALL_SIGN_BSMT = 17
    WALL_CLOSET = 18
    WINDOW_BSMT = 19
    DOOR_C_BSMT = 20
    DOOR_O_BSMT = 21
    WALL_BOSS = 22
    WALL_CHOICE = 23
    WALL_CELL = 24
    WALL_SKELETON = 25
    DOOR_BOSS = 26
    WALL_BACKROOMS = 27
    FLOOR = 28
    FLOOR_TRAPDOOR = 29
    GROUND = 30
    GROUND_TRAPDOOR = 31
    GROUND_BACKROOMS = 32
    GRASS = 33
    CARPET = 34
    CEILING = 35
    CEILING_BSMT = 36
    CEILING_BSMT_TRAPDOOR = 37
    SPR_TREE_0 = 38
    SPR_TREE_1 = 39
    GUI_INV_EMPTY_0 = 40
    GUI_INV_EMPTY_1 = 41
    GUI_INV_FULL_0 = 42
    GUI_INV_FULL_1 = 43
    GUI_0 = 44
    GUI_1 = 45
    GUI_2 = 46
    GUI_3 = 47
    GUI_4 = 48
    GUI_5 = 49
    GUI_6 = 50
    GUI_7 = 51
    GUI_8 = 52
    GUI_9 = 53
    GUI_SEP = 54
    GUI_MAPWALL = 55
    GUI_MAPPLAYER = 56
    GUI_MAPEXIT = 57
    GUI_SPLASH_0 = 58
    GUI_SPLASH_1 = 59
    GUI_SPLASH_2 = 60
    GUI_SPLASH_3 = 61
    GUI_HEALTHBAR = 62
    GUI_HP_0 = 63
    GUI_HP_1 = 64
    GUI_HP_2 = 65
    PORTAL_0 = 66
    PORTAL_1 = 67
    NPC_JERAU = 68
    NPC_PIRATE_0 = 69
    NPC_PIRATE_1 = 70
    NPC_PIRATE_2 = 71
    NPC_PIRATE_3 = 72
    NPC_PIRATE_4 = 73
    NPC_PIRATE_5 = 74
    NPC_PIRATE_6 = 75
    NPC_PIRATE_7 = 76
    NPC_POULET = 77
    NPC_STUDENT_F_0 = 78
    NPC_STUDENT_F_1 = 79
    NPC_STUDENT_B_0 = 80
    NPC_STUDENT_B_1 = 81
    NPC_STUDENT_DEAD = 82
    NPC_BULLY_F_0 = 83
    NPC_BULLY_F_1 = 84
    NPC_BULLY_B_0 = 85
    NPC_BULLY_B_1 = 86
    NPC_BULLY_DEAD = 87
    NPC_CHAD_H = 88
    NPC_CHAD_I = 89
    NPC_CHAD_A = 90
    NPC_CHAD_D = 91
    NPC_BULLY_BALL = 92
    END_0_BG = 93
    END_1_BG = 94
    END_2_BG = 95
    END_3_BG = 96
    END_4_BG = 97
    END_5_BG = 98
    LOVEGIMP = 99
    CREDITS_0 = 100
    CREDITS_1 = 101
    CREDITS_2 = 102
    GUN_0 = 103
    GUN_1 = 104
    GUN_2 = 105
    PORTALG_0 = 106
    PORTALG_1B = 107
    PORTALG_1R = 108
    PORTALG_BROKEN = 109
    WALL_END_DOOR = 110


TEX_AMT = len(Tex)


class EnemyType(IntEnum):
    """Kinds of non-player characters."""

    STUDENT = 0
    BULLY = 1
    NEXTBOT_1 = 2
    NEXTBOT_2 = 3
    NEXTBOT_3 = 4
    CHAD = 5
    BULLY_BALL = 6


class Face(IntEnum):
    """Wall face a ray hits or a portal is placed on."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


class ActorKind(IntEnum):
    """Kinds of entries in the depth-sorted draw list."""

    WALL = 0
    SPRITE = 1
    ENEMY = 2