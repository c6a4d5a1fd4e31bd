"""Clue source - draws distinct categories and packages their clues."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..errors import AcquisitionFailedError, DuplicateCategoryCollision, IncompleteCategoryError
from ..models import Category, Clue, NUM_CATEGORIES, NUM_QUESTIONS_PER_CAT
from .trivia_service import TriviaService

logger = logging.getLogger(__name__)


class ClueSource:
    """Turns raw trivia service responses into board categories."""

    def __init__(
        self,
        service: TriviaService,
        num_categories: int = NUM_CATEGORIES,
        num_questions_per_cat: int = NUM_QUESTIONS_PER_CAT,
        max_attempts: int = 10,
    ):
        self.service = service
        self.num_categories = num_categories
        self.num_questions_per_cat = num_questions_per_cat
        self.max_attempts = max_attempts

    async def draw_category_ids(self) -> List[Any]:
        """Make one random draw and return its distinct category ids.

        Raises DuplicateCategoryCollision if the draw repeated a category.
        """
        records = await self.service.fetch_random_clues(self.num_categories)
        ids: List[Any] = []
        for record in records:
            if record.category_id is not None and record.category_id not in ids:
                ids.append(record.category_id)
        if len(ids) < self.num_categories:
            raise DuplicateCategoryCollision(found=len(ids), required=self.num_categories)
        return ids[: self.num_categories]

    async def acquire_category_ids(self) -> List[Any]:
        """Return exactly ``num_categories`` distinct category ids.

        Redraws on collision, up to ``max_attempts`` draws in total.
        """
        last_error: Optional[DuplicateCategoryCollision] = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await self.draw_category_ids()
            except DuplicateCategoryCollision as e:
                last_error = e
                logger.warning(
                    "[SOURCE] duplicate categories on draw %d/%d: %s",
                    attempt, self.max_attempts, e,
                )
        raise AcquisitionFailedError("distinct categories", self.max_attempts, last_error)

    async def acquire_category(self, category_id: Any) -> Category:
        """Fetch one category and keep its first ``num_questions_per_cat`` clues."""
        records = await self.service.fetch_category_clues(category_id)
        if len(records) < self.num_questions_per_cat:
            raise IncompleteCategoryError(
                category_id=category_id,
                found=len(records),
                required=self.num_questions_per_cat,
            )
        chosen = records[: self.num_questions_per_cat]
        return Category(
            category_id=category_id,
            title=records[0].category_title,
            clues=[Clue.from_record(record) for record in chosen],
        )
