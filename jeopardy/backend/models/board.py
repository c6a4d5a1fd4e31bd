"""Category and board data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .clue import Clue, RevealState

# Fixed board dimensions.
NUM_CATEGORIES = 6
NUM_QUESTIONS_PER_CAT = 5


@dataclass
class Category:
    """A titled column of clues."""
    category_id: Any
    title: str
    clues: List[Clue] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.category_id,
            "title": self.title,
            "clues": [clue.to_dict() for clue in self.clues],
        }


@dataclass
class Board:
    """Every category and clue for one game.

    Columns are categories, rows are clue indexes inside a category.
    """
    categories: List[Category] = field(default_factory=list)
    num_categories: int = NUM_CATEGORIES
    num_questions_per_cat: int = NUM_QUESTIONS_PER_CAT

    def __iter__(self) -> Iterator[Category]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def add_category(self, category: Category) -> None:
        self.categories.append(category)

    def clear(self) -> None:
        self.categories.clear()

    @property
    def category_ids(self) -> List[Any]:
        return [category.category_id for category in self.categories]

    def is_complete(self) -> bool:
        """Check the board has the right shape and no repeated category."""
        if len(self.categories) != self.num_categories:
            return False
        if len(set(self.category_ids)) != self.num_categories:
            return False
        return all(
            len(category.clues) == self.num_questions_per_cat
            for category in self.categories
        )

    def clue_at(self, row: int, column: int) -> Optional[Clue]:
        """Look up ``board[column].clues[row]``, or None off the grid."""
        if not 0 <= column < len(self.categories):
            return None
        clues = self.categories[column].clues
        if not 0 <= row < len(clues):
            return None
        return clues[row]

    def all_clues(self) -> Iterator[Clue]:
        for category in self.categories:
            yield from category.clues

    def count_in_state(self, state: RevealState) -> int:
        return sum(1 for clue in self.all_clues() if clue.reveal_state == state)

    def to_dict(self) -> Dict[str, Any]:
        return {"categories": [category.to_dict() for category in self.categories]}
