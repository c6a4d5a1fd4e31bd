"""Shared test fixtures for the trivia board."""

from typing import Any, Dict, List, Optional, Sequence

import pytest

from jeopardy.backend.game_manager import GameController
from jeopardy.backend.models import ClueRecord
from jeopardy.backend.source import ClueSource, TriviaService


def make_records(category_id: Any, count: int, title: Optional[str] = None) -> List[ClueRecord]:
    title = title or f"category {category_id}"
    return [
        ClueRecord(
            question=f"{title} question {i}",
            answer=f"{title} answer {i}",
            category_id=category_id,
            category_title=title,
        )
        for i in range(count)
    ]


class FakeTriviaService(TriviaService):
    """In-memory trivia service.

    ``draws`` scripts the category ids of successive random draws; once it
    runs out every draw returns ids 1..count. ``clue_counts`` sets how many
    clues a category holds (default 5).
    """

    def __init__(
        self,
        draws: Optional[Sequence[Sequence[Any]]] = None,
        clue_counts: Optional[Dict[Any, int]] = None,
    ):
        self.draws = [list(d) for d in (draws or [])]
        self.clue_counts = dict(clue_counts or {})
        self.random_calls = 0
        self.category_calls: List[Any] = []
        self.closed = False

    async def fetch_random_clues(self, count: int) -> List[ClueRecord]:
        self.random_calls += 1
        ids = self.draws.pop(0) if self.draws else list(range(1, count + 1))
        return [make_records(cid, 1)[0] for cid in ids]

    async def fetch_category_clues(self, category_id: Any) -> List[ClueRecord]:
        self.category_calls.append(category_id)
        return make_records(category_id, self.clue_counts.get(category_id, 5))

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def service():
    return FakeTriviaService()


@pytest.fixture
def source(service):
    return ClueSource(service, max_attempts=5)


@pytest.fixture
def controller(source):
    return GameController(source, max_attempts=5)
