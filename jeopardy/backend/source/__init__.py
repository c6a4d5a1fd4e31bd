"""Remote clue acquisition for the trivia board."""

from .trivia_service import JServiceClient, TriviaService, get_trivia_service
from .clue_source import ClueSource

__all__ = [
    "TriviaService",
    "JServiceClient",
    "get_trivia_service",
    "ClueSource",
]
