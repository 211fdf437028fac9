"""Shared pytest fixtures for UI tests.

The tests force pygame into a deterministic headless configuration by using
the SDL ``dummy`` video and audio drivers.  Sprites are replaced by solid
colour blocks so pixel probes can tell them apart without an SVG backend.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator, Tuple

import pytest


os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

SPRITE_COLORS = {
    "stone-block.svg": (120, 120, 120),
    "water-block.svg": (40, 90, 220),
    "grass-block.svg": (60, 180, 60),
    "enemy-bug.svg": (220, 30, 30),
    "char-boy.svg": (250, 200, 40),
    "Gem Blue.svg": (0, 0, 255),
    "Gem Green.svg": (0, 255, 0),
    "Gem Orange.svg": (255, 140, 0),
}


@pytest.fixture(scope="session", autouse=True)
def configure_headless_environment() -> Generator[None, None, None]:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
    yield


@pytest.fixture(scope="session")
def pygame_module():
    import pygame

    pygame.display.init()
    pygame.font.init()
    try:
        yield pygame
    finally:
        pygame.quit()


@pytest.fixture
def solid_rasteriser(pygame_module):
    def rasterise(path: Path, size: Tuple[int, int]):
        surface = pygame_module.Surface(size)
        surface.fill(SPRITE_COLORS[path.name])
        return surface

    return rasterise


@pytest.fixture
def sprite_colors():
    return dict(SPRITE_COLORS)
