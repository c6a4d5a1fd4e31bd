"""Trivia service client - talks to a jService-compatible HTTP API."""

from __future__ import annotations

import abc
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..errors import ClueSourceError
from ..loaders import GameSettings
from ..models import ClueRecord

logger = logging.getLogger(__name__)


class TriviaService(abc.ABC):
    """Abstract base class for remote clue providers."""

    @abc.abstractmethod
    async def fetch_random_clues(self, count: int) -> List[ClueRecord]:
        """Return ``count`` randomly chosen clues."""

    @abc.abstractmethod
    async def fetch_category_clues(self, category_id: Any) -> List[ClueRecord]:
        """Return every clue filed under ``category_id``."""

    async def aclose(self) -> None:
        """Release any network resources."""


class JServiceClient(TriviaService):
    """jService HTTP client built on httpx."""

    def __init__(
        self,
        base_url: str = "https://jservice.io",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)
        logger.info("[JSERVICE] client ready: base_url=%s", self.base_url)

    async def fetch_random_clues(self, count: int) -> List[ClueRecord]:
        return await self._get_clues("/api/random", {"count": count})

    async def fetch_category_clues(self, category_id: Any) -> List[ClueRecord]:
        return await self._get_clues("/api/clues", {"category": category_id})

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_clues(self, path: str, params: Dict[str, Any]) -> List[ClueRecord]:
        logger.debug("[JSERVICE] GET %s params=%s", path, params)
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.exception("[JSERVICE] request failed: %s", path)
            raise ClueSourceError(f"trivia service request failed: {e}", url=path) from e
        except ValueError as e:
            raise ClueSourceError(f"trivia service sent invalid JSON: {e}", url=path) from e

        if not isinstance(payload, list):
            raise ClueSourceError(
                f"expected a list of clues, got {type(payload).__name__}", url=path
            )
        logger.debug("[JSERVICE] %s returned %d clues", path, len(payload))
        return [ClueRecord.from_dict(item) for item in payload if isinstance(item, dict)]


def get_trivia_service(settings: GameSettings) -> TriviaService:
    """Create the trivia service client from settings."""
    return JServiceClient(base_url=settings.base_url, timeout=settings.timeout_seconds)
