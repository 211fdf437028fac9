"""User interface package for the crossing game."""

from .assets import ResourceLoader
from .main import (
    ASSET_ENV_VAR,
    CrossingGameApp,
    UIDirectories,
    main,
    resolve_directories,
    run,
)
from .toolkit import CrossingGameUI

__all__ = [
    "ASSET_ENV_VAR",
    "UIDirectories",
    "CrossingGameApp",
    "CrossingGameUI",
    "ResourceLoader",
    "main",
    "resolve_directories",
    "run",
]
