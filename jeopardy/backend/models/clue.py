"""Clue data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class RevealState(str, Enum):
    """How far a clue has been revealed on the board."""
    HIDDEN = "hidden"
    QUESTION_SHOWN = "question_shown"
    ANSWER_SHOWN = "answer_shown"

    def next(self) -> RevealState:
        """Return the state a click moves this one to.

        ANSWER_SHOWN is terminal and maps to itself.
        """
        transitions = {
            RevealState.HIDDEN: RevealState.QUESTION_SHOWN,
            RevealState.QUESTION_SHOWN: RevealState.ANSWER_SHOWN,
            RevealState.ANSWER_SHOWN: RevealState.ANSWER_SHOWN,
        }
        return transitions[self]

    @property
    def is_terminal(self) -> bool:
        return self is RevealState.ANSWER_SHOWN


def _as_text(value: Any) -> str:
    """Coerce a JSON field to display text; null becomes empty."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class ClueRecord:
    """One clue as the trivia service returns it.

    Only ``question``, ``answer``, ``category.id`` and ``category.title``
    are read; everything else in the payload is ignored.
    """
    question: str
    answer: str
    category_id: Any
    category_title: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClueRecord:
        category = data.get("category")
        if not isinstance(category, dict):
            category = {}
        return cls(
            question=_as_text(data.get("question")),
            # answers such as 4 come back as JSON numbers
            answer=_as_text(data.get("answer")),
            category_id=category.get("id", data.get("category_id")),
            category_title=_as_text(category.get("title")),
        )


@dataclass
class Clue:
    """A question/answer pair and how much of it the player has seen."""
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN

    @classmethod
    def from_record(cls, record: ClueRecord) -> Clue:
        return cls(question=record.question, answer=record.answer)

    def advance(self) -> bool:
        """Move one step along HIDDEN -> QUESTION_SHOWN -> ANSWER_SHOWN.

        Returns False when the clue was already fully revealed.
        """
        if self.reveal_state.is_terminal:
            return False
        self.reveal_state = self.reveal_state.next()
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "answer": self.answer,
            "reveal_state": self.reveal_state.value,
        }
