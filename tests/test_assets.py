import pytest

from ktbgame.assets import asset_paths, load_assets
from ktbgame.constants import TEX_AMT, Tex


def test_every_slot_has_a_path():
    paths = asset_paths()
    assert set(paths) == set(Tex)
    assert len(paths) == TEX_AMT


def test_paths_are_xpm_under_assets():
    for path in asset_paths().values():
        assert path.startswith("assets/")
        assert path.endswith(".xpm")


def test_paths_are_distinct():
    paths = list(asset_paths().values())
    assert len(set(paths)) == len(paths)


def test_known_paths():
    paths = asset_paths()
    assert paths[Tex.MENU_BG] == "assets/menu_bg.xpm"
    assert paths[Tex.WALL_END_DOOR] == "assets/lvl3/end_door.xpm"
    assert paths[Tex.END_0_BG] == "assets/black.xpm"


def test_load_assets_indexes_by_slot():
    textures = load_assets(lambda path: path)
    paths = asset_paths()
    assert len(textures) == TEX_AMT
    for slot in Tex:
        assert textures[slot] == paths[slot]


def test_load_assets_calls_loader_once_per_path():
    seen = []

    def loader(path):
        seen.append(path)
        return len(seen)

    load_assets(loader)
    assert sorted(seen) == sorted(asset_paths().values())


def test_load_assets_propagates_loader_errors():
    def loader(path):
        raise OSError(path)

    with pytest.raises(OSError):
        load_assets(loader)