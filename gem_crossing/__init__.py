"""Gem Crossing package."""

from .game import (
    CrossingGame,
    Direction,
    Enemy,
    GameBoard,
    GameState,
    Gem,
    Player,
    Scene,
)
from .loop import FrameLoop

__all__ = [
    "CrossingGame",
    "Direction",
    "Enemy",
    "FrameLoop",
    "GameBoard",
    "GameState",
    "Gem",
    "Player",
    "Scene",
]
