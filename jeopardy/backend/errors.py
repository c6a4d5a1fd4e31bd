"""Exceptions raised while building and playing a board."""

from __future__ import annotations

from typing import Any, Optional


class TriviaError(Exception):
    """Base class for all game errors."""


class ClueSourceError(TriviaError):
    """The remote trivia service could not be reached or answered badly."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class DuplicateCategoryCollision(TriviaError):
    """A random draw referenced fewer distinct categories than required."""

    def __init__(self, found: int, required: int):
        super().__init__(f"random draw gave {found} distinct categories, need {required}")
        self.found = found
        self.required = required


class IncompleteCategoryError(TriviaError):
    """A category has fewer clues than a board column needs."""

    def __init__(self, category_id: Any, found: int, required: int):
        super().__init__(
            f"category {category_id} has {found} clues, need {required}"
        )
        self.category_id = category_id
        self.found = found
        self.required = required


class AcquisitionFailedError(TriviaError):
    """A bounded retry loop ran out of attempts."""

    def __init__(self, what: str, attempts: int, last_error: Optional[Exception] = None):
        super().__init__(f"could not acquire {what} after {attempts} attempts")
        self.what = what
        self.attempts = attempts
        self.last_error = last_error


class BoardNotReadyError(TriviaError):
    """A cell was activated while no finished board exists."""
