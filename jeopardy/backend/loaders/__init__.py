"""Configuration loaders for the trivia board."""

from .settings_loader import (
    GameSettings,
    load_config,
    load_settings,
)

__all__ = [
    "GameSettings",
    "load_config",
    "load_settings",
]
