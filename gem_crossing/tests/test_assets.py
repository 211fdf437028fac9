from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from gem_crossing.game import required_sprites
from gem_crossing.ui.assets import SPRITE_FILES, ResourceLoader, default_asset_root


class CountingRasteriser:
    def __init__(self):
        self.calls: List[Tuple[str, Tuple[int, int]]] = []

    def __call__(self, path: Path, size: Tuple[int, int]) -> str:
        self.calls.append((path.name, size))
        return f"surface:{path.name}"


def test_shipped_assets_cover_every_sprite():
    root = default_asset_root()

    assert set(required_sprites()) == set(SPRITE_FILES)
    for filename in SPRITE_FILES.values():
        assert (root / filename).exists()


def test_ready_callback_fires_once_everything_is_loaded():
    rasteriser = CountingRasteriser()
    loader = ResourceLoader(rasteriser=rasteriser)
    ready: List[bool] = []
    loader.on_ready(lambda: ready.append(loader.is_ready()))

    loader.load(required_sprites())

    assert ready == [True]
    assert len(rasteriser.calls) == 8
    assert loader.get("images/char-boy.png") == "surface:char-boy.svg"
    assert "images/Gem Blue.png" in loader


def test_loading_is_cached_and_late_listeners_fire_immediately():
    rasteriser = CountingRasteriser()
    loader = ResourceLoader(rasteriser=rasteriser, size=(10, 20))
    loader.load(["images/stone-block.png"])
    loader.load(["images/stone-block.png", "images/stone-block.png"])

    fired: List[str] = []
    loader.on_ready(lambda: fired.append("late"))

    assert rasteriser.calls == [("stone-block.svg", (10, 20))]
    assert fired == ["late"]


def test_unknown_or_unloaded_sprites_raise_key_error():
    loader = ResourceLoader(rasteriser=CountingRasteriser())

    with pytest.raises(KeyError):
        loader.get("images/char-boy.png")
    with pytest.raises(KeyError):
        loader.load(["images/Rock.png"])


def test_missing_asset_file_is_fatal(tmp_path: Path):
    loader = ResourceLoader(tmp_path, rasteriser=CountingRasteriser())

    with pytest.raises(FileNotFoundError):
        loader.load(["images/enemy-bug.png"])
