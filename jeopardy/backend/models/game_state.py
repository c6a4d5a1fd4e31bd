"""Game lifecycle state models."""

from __future__ import annotations

from enum import Enum


class GamePhase(str, Enum):
    """Lifecycle phase of the game controller."""
    EMPTY = "empty"       # No game started yet
    LOADING = "loading"   # Acquiring categories
    READY = "ready"       # Board loaded and playable
    FAILED = "failed"     # Acquisition gave up

    @property
    def is_loading(self) -> bool:
        return self is GamePhase.LOADING
