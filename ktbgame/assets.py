"""Texture file locations and loading of the whole texture table."""

from __future__ import annotations

from typing import Callable, TypeVar

from .constants import TEX_AMT, Tex

T = TypeVar("T")

_ASSET_PATHS: tuple[tuple[Tex, str], ...] = (
    (Tex.MENU_BG, "assets/menu_bg.xpm"),
    (Tex.WALL, "assets/wall.xpm"),
    (Tex.WALL_SIGN, "assets/wall_sign.xpm"),
    (Tex.DOOR_C, "assets/door_c.xpm"),
    (Tex.DOOR_O, "assets/door_o.xpm"),
    (Tex.WINDOW, "assets/window.xpm"),
    (Tex.BUSH, "assets/bush.xpm"),
    (Tex.BUSH_BACKROOMS, "assets/bush_backrooms.xpm"),
    (Tex.WALL_CLASS, "assets/wall_class.xpm"),
    (Tex.BOARD_1, "assets/board_1.xpm"),
    (Tex.BOARD_2, "assets/board_2.xpm"),
    (Tex.BOARD_3, "assets/board_3.xpm"),
    (Tex.WALL_OUTSIDE, "assets/wall_outside.xpm"),
    (Tex.WINDOW_OUTSIDE, "assets/win.xpm"),
    (Tex.DOOR_C_OUTSIDE, "assets/o_doorc.xpm"),
    (Tex.DOOR_O_OUTSIDE, "assets/o_dooro.xpm"),
    (Tex.WALL_BSMT, "assets/lvl2/wall.xpm"),
    (Tex.WALL_SIGN_BSMT, "assets/lvl2/wall_sign.xpm"),
    (Tex.WALL_CLOSET, "assets/lvl2/placar.xpm"),
    (Tex.WINDOW_BSMT, "assets/lvl2/window.xpm"),
    (Tex.DOOR_C_BSMT, "assets/lvl2/doorc.xpm"),
    (Tex.DOOR_O_BSMT, "assets/lvl2/dooro.xpm"),
    (Tex.WALL_BOSS, "assets/lvl3/wall.xpm"),
    (Tex.WALL_CHOICE, "assets/lvl3/wall_choice.xpm"),
    (Tex.WALL_CELL, "assets/lvl3/cell.xpm"),
    (Tex.WALL_SKELETON, "assets/lvl3/skelet.xpm"),
    (Tex.DOOR_BOSS, "assets/lvl3/door.xpm"),
    (Tex.WALL_BACKROOMS, "assets/backrooms.xpm"),
    (Tex.FLOOR, "assets/floor.xpm"),
    (Tex.FLOOR_TRAPDOOR, "assets/floor_trapdoor.xpm"),
    (Tex.GROUND, "assets/ground.xpm"),
    (Tex.GROUND_TRAPDOOR, "assets/lvl2/ground_trap.xpm"),
    (Tex.GROUND_BACKROOMS, "assets/ground_backrooms.xpm"),
    (Tex.GRASS, "assets/grass.xpm"),
    (Tex.CARPET, "assets/carpet.xpm"),
    (Tex.CEILING, "assets/ceiling.xpm"),
    (Tex.CEILING_BSMT, "assets/lvl2/ceiling.xpm"),
    (Tex.CEILING_BSMT_TRAPDOOR, "assets/lvl2/ceiling_trapdoor.xpm"),
    (Tex.SPR_TREE_0, "assets/tree_0.xpm"),
    (Tex.SPR_TREE_1, "assets/tree_1.xpm"),
    (Tex.PORTAL_0, "assets/portal_0.xpm"),
    (Tex.PORTAL_1, "assets/portal_1.xpm"),
    (Tex.GUI_INV_EMPTY_0, "assets/gui/inv_empty_0.xpm"),
    (Tex.GUI_INV_EMPTY_1, "assets/gui/inv_empty_1.xpm"),
    (Tex.GUI_INV_FULL_0, "assets/gui/inv_full_0.xpm"),
    (Tex.GUI_INV_FULL_1, "assets/gui/inv_full_1.xpm"),
    (Tex.GUI_0, "assets/gui/0.xpm"),
    (Tex.GUI_1, "assets/gui/1.xpm"),
    (Tex.GUI_2, "assets/gui/2.xpm"),
    (Tex.GUI_3, "assets/gui/3.xpm"),
    (Tex.GUI_4, "assets/gui/4.xpm"),
    (Tex.GUI_5, "assets/gui/5.xpm"),
    (Tex.GUI_6, "assets/gui/6.xpm"),
    (Tex.GUI_7, "assets/gui/7.xpm"),
    (Tex.GUI_8, "assets/gui/8.xpm"),
    (Tex.GUI_9, "assets/gui/9.xpm"),
    (Tex.GUI_SEP, "assets/gui/sep.xpm"),
    (Tex.GUI_MAPWALL, "assets/gui/minimap_wall.xpm"),
    (Tex.GUI_MAPPLAYER, "assets/gui/minimap_player.xpm"),
    (Tex.GUI_MAPEXIT, "assets/gui/minimap_exit.xpm"),
    (Tex.GUI_SPLASH_0, "assets/gui/splash_0.xpm"),
    (Tex.GUI_SPLASH_1, "assets/gui/splash_1.xpm"),
    (Tex.GUI_SPLASH_2, "assets/gui/splash_2.xpm"),
    (Tex.GUI_SPLASH_3, "assets/gui/splash_3.xpm"),
    (Tex.GUI_HEALTHBAR, "assets/gui/healthbar.xpm"),
    (Tex.GUI_HP_0, "assets/gui/hp_0.xpm"),
    (Tex.GUI_HP_1, "assets/gui/hp_1.xpm"),
    (Tex.GUI_HP_2, "assets/gui/hp_2.xpm"),
    (Tex.NPC_JERAU, "assets/npc/jerau.xpm"),
    (Tex.NPC_PIRATE_0, "assets/npc/pirate_0.xpm"),
    (Tex.NPC_PIRATE_1, "assets/npc/pirate_1.xpm"),
    (Tex.NPC_PIRATE_2, "assets/npc/pirate_2.xpm"),
    (Tex.NPC_PIRATE_3, "assets/npc/pirate_3.xpm"),
    (Tex.NPC_PIRATE_4, "assets/npc/pirate_4.xpm"),
    (Tex.NPC_PIRATE_5, "assets/npc/pirate_5.xpm"),
    (Tex.NPC_PIRATE_6, "assets/npc/pirate_6.xpm"),
    (Tex.NPC_PIRATE_7, "assets/npc/pirate_7.xpm"),
    (Tex.NPC_POULET, "assets/npc/poulet.xpm"),
    (Tex.NPC_STUDENT_F_0, "assets/npc/student_uf.xpm"),
    (Tex.NPC_STUDENT_F_1, "assets/npc/student_df.xpm"),
    (Tex.NPC_STUDENT_B_0, "assets/npc/student_ub.xpm"),
    (Tex.NPC_STUDENT_B_1, "assets/npc/student_db.xpm"),
    (Tex.NPC_STUDENT_DEAD, "assets/npc/student_dead.xpm"),
    (Tex.NPC_BULLY_F_0, "assets/npc/bully_uf.xpm"),
    (Tex.NPC_BULLY_F_1, "assets/npc/bully_df.xpm"),
    (Tex.NPC_BULLY_B_0, "assets/npc/bully_ub.xpm"),
    (Tex.NPC_BULLY_B_1, "assets/npc/bully_db.xpm"),
    (Tex.NPC_BULLY_DEAD, "assets/npc/bully_dead.xpm"),
    (Tex.NPC_CHAD_H, "assets/npc/chad_h.xpm"),
    (Tex.NPC_CHAD_I, "assets/npc/chad.xpm"),
    (Tex.NPC_CHAD_A, "assets/npc/chad_a.xpm"),
    (Tex.NPC_CHAD_D, "assets/npc/chad_d.xpm"),
    (Tex.NPC_BULLY_BALL, "assets/npc/bully_ball.xpm"),
    (Tex.END_0_BG, "assets/black.xpm"),
    (Tex.END_1_BG, "assets/ending_1.xpm"),
    (Tex.END_2_BG, "assets/ending_2.xpm"),
    (Tex.END_3_BG, "assets/ending_3.xpm"),
    (Tex.END_4_BG, "assets/ending_4.xpm"),
    (Tex.END_5_BG, "assets/ending_5.xpm"),
    (Tex.LOVEGIMP, "assets/ilovegimp.xpm"),
    (Tex.CREDITS_0, "assets/credits_0.xpm"),
    (Tex.CREDITS_1, "assets/credits_1.xpm"),
    (Tex.CREDITS_2, "assets/credits_2.xpm"),
    (Tex.GUN_0, "assets/weapon/gun1.xpm"),
    (Tex.GUN_1, "assets/weapon/gun2.xpm"),
    (Tex.GUN_2, "assets/weapon/gun3.xpm"),
    (Tex.PORTALG_0, "assets/weapon/portal1.xpm"),
    (Tex.PORTALG_1B, "assets/weapon/portalb.xpm"),
    (Tex.PORTALG_1R, "assets/weapon/portalr.xpm"),
    (Tex.PORTALG_BROKEN, "assets/weapon/impotent.xpm"),
    (Tex.WALL_END_DOOR, "assets/lvl3/end_door.xpm"),
)


def asset_paths() -> dict[Tex, str]:
    """Image file of every texture slot, in loading order."""
    return dict(_ASSET_PATHS)


def load_assets(loader: Callable[[str], T]) -> list[T]:
    """Load every texture with ``loader`` and return them indexed by Tex."""
    loaded = {slot: loader(path) for slot, path in _ASSET_PATHS}
    return [loaded[Tex(index)] for index in range(TEX_AMT)]