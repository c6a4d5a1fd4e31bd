"""Data models for the trivia board."""

from .board import Board, Category, NUM_CATEGORIES, NUM_QUESTIONS_PER_CAT
from .clue import Clue, ClueRecord, RevealState
from .game_state import GamePhase

__all__ = [
    # Board
    "Board",
    "Category",
    "NUM_CATEGORIES",
    "NUM_QUESTIONS_PER_CAT",
    # Clue
    "Clue",
    "ClueRecord",
    "RevealState",
    # Game State
    "GamePhase",
]
