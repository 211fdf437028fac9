"""Sprite catalogue and the resource loader used by the renderer."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from . import layout

try:  # pragma: no cover - optional dependency
    import pygame
except ImportError:  # pragma: no cover - optional dependency
    pygame = None  # type: ignore

try:  # pragma: no cover - optional dependency
    from PySide6.QtSvg import QSvgRenderer
    from PySide6.QtGui import QImage, QPainter
except ImportError:  # pragma: no cover - optional dependency
    QSvgRenderer = None  # type: ignore
    QImage = None  # type: ignore
    QPainter = None  # type: ignore


logger = logging.getLogger(__name__)

SPRITE_FILES: Mapping[str, str] = {
    "images/stone-block.png": "stone-block.svg",
    "images/water-block.png": "water-block.svg",
    "images/grass-block.png": "grass-block.svg",
    "images/enemy-bug.png": "enemy-bug.svg",
    "images/char-boy.png": "char-boy.svg",
    "images/Gem Blue.png": "Gem Blue.svg",
    "images/Gem Green.png": "Gem Green.svg",
    "images/Gem Orange.png": "Gem Orange.svg",
}

Rasteriser = Callable[[Path, Tuple[int, int]], "pygame.Surface"]


def default_asset_root() -> Path:
    return Path(__file__).resolve().parents[1] / "assets"


def _ensure_pygame() -> None:
    if pygame is None:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "pygame is required to load sprites. Install it with 'pip install pygame'."
        )


def _render_with_qt(svg_path: Path, size: Tuple[int, int]) -> "pygame.Surface":
    _ensure_pygame()
    renderer = QSvgRenderer(str(svg_path))
    image = QImage(size[0], size[1], QImage.Format_ARGB32_Premultiplied)
    image.fill(0)

    painter = QPainter(image)
    renderer.render(painter)
    painter.end()

    ptr = image.bits()
    ptr.setsize(image.width() * image.height() * 4)
    buffer = bytes(ptr)
    surface = pygame.image.frombuffer(buffer, size, "BGRA").convert_alpha()
    return surface.copy()


def _render_with_cairosvg(svg_path: Path, size: Tuple[int, int]) -> "pygame.Surface":
    _ensure_pygame()
    try:  # pragma: no cover - optional dependency
        import cairosvg
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "Neither PySide6 nor cairosvg is installed; cannot rasterise sprites."
        ) from exc

    png_bytes = cairosvg.svg2png(
        url=str(svg_path), output_width=size[0], output_height=size[1]
    )
    return pygame.image.load(io.BytesIO(png_bytes)).convert_alpha()


def rasterise_svg(svg_path: Path, size: Tuple[int, int]) -> "pygame.Surface":
    """Render a single SVG to the requested resolution."""

    if QSvgRenderer is not None:  # pragma: no cover - optional dependency
        return _render_with_qt(svg_path, size)
    return _render_with_cairosvg(svg_path, size)


class ResourceLoader:
    """Preloads sprites by id and notifies listeners once all are ready.

    Sprite ids are the image paths the game refers to; each maps to an SVG in
    ``asset_root`` which is rasterised once and cached.
    """

    def __init__(
        self,
        asset_root: Optional[Path] = None,
        *,
        size: Tuple[int, int] = layout.SPRITE_SIZE,
        rasteriser: Optional[Rasteriser] = None,
        files: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.asset_root = Path(asset_root or default_asset_root())
        self.size = size
        self.rasteriser = rasteriser or rasterise_svg
        self.files = dict(files or SPRITE_FILES)
        self._cache: Dict[str, "pygame.Surface"] = {}
        self._pending: List[str] = []
        self._callbacks: List[Callable[[], None]] = []

    def load(self, sprite_ids: Iterable[str]) -> None:
        for sprite_id in sprite_ids:
            if sprite_id in self._cache or sprite_id in self._pending:
                continue
            self._pending.append(sprite_id)

        while self._pending:
            sprite_id = self._pending[0]
            self._cache[sprite_id] = self._load_one(sprite_id)
            self._pending.pop(0)

        logger.info("Loaded %d sprites from %s", len(self._cache), self.asset_root)
        self._notify()

    def _load_one(self, sprite_id: str) -> "pygame.Surface":
        filename = self.files.get(sprite_id)
        if filename is None:
            raise KeyError(f"Unknown sprite '{sprite_id}'.")
        path = self.asset_root / filename
        if not path.exists():
            raise FileNotFoundError(path)
        return self.rasteriser(path, self.size)

    def is_ready(self) -> bool:
        return not self._pending

    def on_ready(self, callback: Callable[[], None]) -> None:
        """Register ``callback``; it runs immediately when nothing is pending."""

        if self._cache and self.is_ready():
            callback()
            return
        self._callbacks.append(callback)

    def _notify(self) -> None:
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def get(self, sprite_id: str) -> "pygame.Surface":
        try:
            return self._cache[sprite_id]
        except KeyError:
            raise KeyError(f"Sprite '{sprite_id}' has not been loaded.") from None

    def __contains__(self, sprite_id: str) -> bool:
        return sprite_id in self._cache
