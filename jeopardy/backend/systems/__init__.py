"""Game systems for the trivia board."""

from .text import normalize_text
from .render_system import BoardRenderer
from .interaction_system import CellUpdate, InteractionHandler

__all__ = [
    "normalize_text",
    "BoardRenderer",
    "CellUpdate",
    "InteractionHandler",
]
