"""Interactive window for playing the crossing game with pygame."""

from __future__ import annotations

import argparse
import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import pygame

from ..game import ENEMY_COUNT, CrossingGame, required_sprites
from ..loop import FrameLoop
from . import layout
from .assets import Rasteriser, ResourceLoader, default_asset_root
from .toolkit import CrossingGameUI

ASSET_ENV_VAR = "GEM_CROSSING_ASSET_ROOT"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UIDirectories:
    """Bundle with resolved directories required by the UI."""

    asset_root: Path


def _read_directory(env_var: str, fallback: Path) -> Path:
    value = os.environ.get(env_var)
    if value:
        return Path(value).expanduser()
    return fallback


def resolve_directories(check_exists: bool = True) -> UIDirectories:
    """Resolve UI directories using environment variables.

    Parameters
    ----------
    check_exists:
        When *True*, raise :class:`FileNotFoundError` if the resolved asset
        directory does not exist on disk.
    """

    asset_root = _read_directory(ASSET_ENV_VAR, default_asset_root())

    if check_exists and not asset_root.exists():
        raise FileNotFoundError(
            f"Required UI resource directory does not exist: {asset_root}"
        )

    return UIDirectories(asset_root=asset_root)


class CrossingGameApp:
    """Pygame driven application hosting one game session."""

    def __init__(
        self,
        *,
        directories: Optional[UIDirectories] = None,
        fps: int = layout.FRAME_RATE,
        enemy_count: int = ENEMY_COUNT,
        seed: Optional[int] = None,
        rasteriser: Optional[Rasteriser] = None,
    ) -> None:
        pygame.init()
        pygame.display.set_caption(layout.WINDOW_TITLE)
        self.screen = pygame.display.set_mode(layout.SURFACE_SIZE)
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.directories = directories or resolve_directories()
        self.game = CrossingGame(enemy_count=enemy_count, rng=random.Random(seed))
        self.resources = ResourceLoader(self.directories.asset_root, rasteriser=rasteriser)
        self.ui = CrossingGameUI(self.game, self.resources, surface=self.screen)
        self.loop = FrameLoop(self.frame, pacer=self._pace)
        self._max_frames: Optional[int] = None

    def _pace(self) -> None:
        self.clock.tick(self.fps)

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------
    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.loop.stop()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.loop.stop()
        elif event.type == pygame.KEYUP:
            self.ui.handle_key(event.key)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def frame(self, delta: float) -> None:
        for event in pygame.event.get():
            self.handle_event(event)
        if not self.loop.running:
            return
        self.game.update(delta)
        self.ui.render()
        pygame.display.flip()

    def _start_loop(self) -> None:
        logger.debug("Sprites ready, starting frame loop")
        self.loop.run(self._max_frames)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Preload sprites and play until the window closes.

        The frame loop only starts once every sprite is available. Returns the
        number of frames rendered.
        """

        self._max_frames = max_frames
        self.resources.on_ready(self._start_loop)
        self.resources.load(required_sprites())
        return self.loop.frames

    def close(self) -> None:
        pygame.quit()


def run(
    *,
    fps: int = layout.FRAME_RATE,
    enemy_count: int = ENEMY_COUNT,
    seed: Optional[int] = None,
) -> None:
    """Entry point helper that instantiates and runs the UI."""

    app = CrossingGameApp(fps=fps, enemy_count=enemy_count, seed=seed)
    try:
        app.run()
    finally:
        app.close()


def bootstrap_directories() -> UIDirectories:
    """Return resolved directories and print a short bootstrap message."""

    directories = resolve_directories()
    message = (
        "Gem Crossing bootstrap\n"
        f"  assets: {directories.asset_root}\n"
        f"Set {ASSET_ENV_VAR} to point to a custom sprite directory if needed."
    )
    print(message)
    return directories


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gem Crossing launcher")
    parser.add_argument(
        "--info",
        action="store_true",
        help="Print resolved resource directories and exit without launching the UI.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=layout.FRAME_RATE,
        help="Frame rate cap for the game loop.",
    )
    parser.add_argument(
        "--enemies",
        type=int,
        default=ENEMY_COUNT,
        help="Number of enemies sweeping across the board.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for enemy lanes and speeds.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log scene transitions and collisions.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.fps <= 0:
        raise SystemExit("--fps must be positive")
    if args.enemies < 0:
        raise SystemExit("--enemies cannot be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    bootstrap_directories()
    if args.info:
        return 0

    run(fps=args.fps, enemy_count=args.enemies, seed=args.seed)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation entry point
    raise SystemExit(main())
