"""Smoke tests for the windowed application on the dummy video driver."""

from __future__ import annotations

from gem_crossing.game import Scene
from gem_crossing.ui import CrossingGameApp


def test_loop_starts_after_sprites_load(pygame_module, solid_rasteriser):
    app = CrossingGameApp(seed=3, rasteriser=solid_rasteriser)

    frames = app.run(max_frames=3)

    assert frames == 3
    assert app.resources.is_ready()
    assert app.game.scene is Scene.WELCOME


def test_key_release_is_delivered_to_the_game(pygame_module, solid_rasteriser):
    pygame = pygame_module
    app = CrossingGameApp(seed=3, enemy_count=0, rasteriser=solid_rasteriser)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN))

    app.run(max_frames=2)

    assert app.game.scene is Scene.LEVEL


def test_quit_event_stops_the_loop(pygame_module, solid_rasteriser):
    pygame = pygame_module
    app = CrossingGameApp(seed=3, rasteriser=solid_rasteriser)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    frames = app.run()

    assert frames == 1
    assert not app.loop.running
