"""Layout constants for the gem crossing UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Canvas metrics
SURFACE_SIZE: Tuple[int, int] = (505, 606)
WINDOW_TITLE = "Gem Crossing"
FRAME_RATE: int = 60

# Sprite metrics, every sprite is drawn from a block sized image
SPRITE_SIZE: Tuple[int, int] = (101, 171)

# Overlay text
FONT_NAME = "impact"
FONT_SIZE: int = 40
TEXT_LINE_SPACING: int = 72
TEXT_STROKE_WIDTH: int = 3

# Colors expressed as RGB tuples
BACKGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)
TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
TEXT_STROKE_COLOR: Tuple[int, int, int] = (0, 0, 0)


@dataclass(frozen=True)
class TextLayout:
    """Anchor points for the two centred overlay lines."""

    message: Tuple[int, int]
    prompt: Tuple[int, int]


def compute_text_layout(size: Tuple[int, int] = SURFACE_SIZE) -> TextLayout:
    width, height = size
    center_x = width // 2
    center_y = height // 2
    return TextLayout(
        message=(center_x, center_y),
        prompt=(center_x, center_y + TEXT_LINE_SPACING),
    )

