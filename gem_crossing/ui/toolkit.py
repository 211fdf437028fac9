"""Pygame rendering and key handling for the crossing game.

This module keeps rendering deterministic so it can be exercised in automated
tests using the SDL ``dummy`` video driver.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

from ..game import CrossingGame, Direction, Scene
from . import layout


# Pygame is imported lazily in ``ensure_pygame`` so test environments can
# control the SDL configuration (e.g. select the ``dummy`` video driver).
_PYGAME = None


def ensure_pygame():
    global _PYGAME
    if _PYGAME is None:
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
        _PYGAME = __import__("pygame")
        _PYGAME.display.init()
        _PYGAME.font.init()
    return _PYGAME


def direction_keys() -> Dict[int, Direction]:
    pygame = ensure_pygame()
    return {
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_UP: Direction.UP,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_DOWN: Direction.DOWN,
    }


def confirm_keys() -> Tuple[int, ...]:
    pygame = ensure_pygame()
    return (pygame.K_RETURN, pygame.K_KP_ENTER)


class CrossingGameUI:
    """Draws the current scene and turns key releases into game input."""

    def __init__(
        self,
        game: CrossingGame,
        resources,
        *,
        surface=None,
        use_display: bool = False,
        font=None,
    ) -> None:
        pygame = ensure_pygame()
        self.game = game
        self.resources = resources
        self.surface = surface or pygame.Surface(layout.SURFACE_SIZE)
        self.screen = None
        if use_display:
            self.screen = pygame.display.set_mode(self.surface.get_size())
        self.font = font or pygame.font.SysFont(layout.FONT_NAME, layout.FONT_SIZE)
        self.text_layout = layout.compute_text_layout(self.surface.get_size())
        self._directions = direction_keys()
        self._confirm = confirm_keys()

    # ------------------------------------------------------------------
    # Input handling
    def process_events(self, events: Iterable[object]) -> None:
        pygame = ensure_pygame()
        for event in events:
            if event.type == pygame.KEYUP:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> Optional[str]:
        """Apply a released key, returning which action it triggered."""

        if key in self._confirm:
            self.game.confirm()
            return "confirm"
        direction = self._directions.get(key)
        if direction is not None:
            self.game.move_player(direction)
            return direction.name.lower()
        return None

    # ------------------------------------------------------------------
    # Rendering helpers
    def render(self):
        pygame = ensure_pygame()
        self.surface.fill(layout.BACKGROUND_COLOR)
        if self.game.scene is Scene.LEVEL:
            self.game.render(self.surface, self.resources)
        else:
            message, prompt = self.game.message_lines()
            self.draw_text(message, self.text_layout.message)
            self.draw_text(prompt, self.text_layout.prompt)
        if self.screen:
            self.screen.blit(self.surface, (0, 0))
            pygame.display.flip()
        return self.surface

    def draw_text(self, text: str, anchor: Tuple[int, int]) -> None:
        """Draw ``text`` centred on ``anchor`` with a dark outline."""

        fill = self.font.render(text, True, layout.TEXT_COLOR)
        outline = self.font.render(text, True, layout.TEXT_STROKE_COLOR)
        rect = fill.get_rect()
        # The anchor marks the text baseline like a canvas fillText call.
        rect.midbottom = anchor
        stroke = layout.TEXT_STROKE_WIDTH
        for dx in range(-stroke, stroke + 1):
            for dy in range(-stroke, stroke + 1):
                if dx or dy:
                    self.surface.blit(outline, rect.move(dx, dy))
        self.surface.blit(fill, rect)


__all__ = ["CrossingGameUI", "ensure_pygame"]
