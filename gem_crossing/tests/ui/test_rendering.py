"""Pixel probes over the deterministic pygame rendering.

Every sprite is a solid colour block (see ``conftest.py``) so a probe tells
which sprite ended up on top at a given point.
"""

from __future__ import annotations

import random

from gem_crossing.game import CrossingGame, Scene, required_sprites
from gem_crossing.ui import CrossingGameUI, ResourceLoader
from gem_crossing.ui import layout


def make_ui(rasteriser) -> CrossingGameUI:
    game = CrossingGame(enemy_count=0, rng=random.Random(9))
    resources = ResourceLoader(rasteriser=rasteriser)
    resources.load(required_sprites())
    return CrossingGameUI(game, resources)


def color_at(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_welcome_draws_outlined_text_on_clear_surface(pygame_module, solid_rasteriser):
    ui = make_ui(solid_rasteriser)

    surface = ui.render()

    assert surface.get_size() == layout.SURFACE_SIZE
    assert color_at(surface, (5, 5)) == layout.BACKGROUND_COLOR
    text_band = [
        color_at(surface, (x, y))
        for x in range(0, surface.get_width(), 2)
        for y in range(250, 310)
    ]
    assert layout.TEXT_STROKE_COLOR in text_band


def test_level_draws_player_and_gems_above_tiles(pygame_module, solid_rasteriser, sprite_colors):
    ui = make_ui(solid_rasteriser)
    ui.game.confirm()

    surface = ui.render()

    # Player block covers the start tile, the grass row shows below it.
    assert color_at(surface, (250, 450)) == sprite_colors["char-boy.svg"]
    assert color_at(surface, (250, 580)) == sprite_colors["grass-block.svg"]
    # Blue gem sits over the stone row in the top right corner.
    assert color_at(surface, (450, 100)) == sprite_colors["Gem Blue.svg"]
    # Water fills the top left of the board where no gem is placed.
    assert color_at(surface, (150, 10)) == sprite_colors["water-block.svg"]


def test_win_scene_clears_level_artwork(pygame_module, solid_rasteriser):
    ui = make_ui(solid_rasteriser)
    ui.game.confirm()
    ui.render()

    ui.game.enter_scene(Scene.WIN)
    surface = ui.render()

    assert color_at(surface, (250, 450)) == layout.BACKGROUND_COLOR
