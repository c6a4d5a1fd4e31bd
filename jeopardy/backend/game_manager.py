"""Game controller that owns the board through its whole lifecycle."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .errors import (
    AcquisitionFailedError,
    BoardNotReadyError,
    ClueSourceError,
    IncompleteCategoryError,
)
from .loaders import GameSettings, load_settings
from .models import Board, GamePhase
from .source import ClueSource, TriviaService, get_trivia_service
from .systems import BoardRenderer, CellUpdate, InteractionHandler

logger = logging.getLogger(__name__)


class GameController:
    """Loads boards, hands them to the renderer and routes cell clicks.

    Phases run EMPTY -> LOADING -> READY, or LOADING -> FAILED when the
    retry budget is spent. Starting again from READY or FAILED goes back
    through LOADING with the old board thrown away.
    """

    def __init__(
        self,
        source: ClueSource,
        renderer: Optional[BoardRenderer] = None,
        max_attempts: int = 10,
    ):
        self.source = source
        self.renderer = renderer or BoardRenderer()
        self.interaction = InteractionHandler(self.renderer)
        self.max_attempts = max_attempts

        self.phase = GamePhase.EMPTY
        self.board: Optional[Board] = None
        self.error: Optional[str] = None
        self.games_started = 0
        # Bumped on every start so a superseded load can tell it is stale
        self._generation = 0

    @classmethod
    def from_settings(
        cls,
        settings: Optional[GameSettings] = None,
        service: Optional[TriviaService] = None,
    ) -> GameController:
        settings = settings or load_settings()
        service = service or get_trivia_service(settings)
        return cls(
            source=ClueSource(service, max_attempts=settings.max_attempts),
            renderer=BoardRenderer(settings.value_start, settings.value_step),
            max_attempts=settings.max_attempts,
        )

    # ============================================================
    # Lifecycle
    # ============================================================

    @property
    def button_label(self) -> str:
        return "RESTART" if self.games_started else "START"

    def begin_loading(self) -> int:
        """Drop the current board and enter LOADING. Returns the load generation."""
        self._generation += 1
        self.games_started += 1
        self.phase = GamePhase.LOADING
        self.board = None
        self.error = None
        logger.info("[GAME] loading board (game %d)", self.games_started)
        return self._generation

    async def build_board(self) -> Board:
        """Acquire a full board, starting over whenever a category cannot be used.

        Failures in the random draw are not retried here.
        """
        last_error: Optional[Exception] = None
        for attempt in range(1, self.max_attempts + 1):
            board = Board(
                num_categories=self.source.num_categories,
                num_questions_per_cat=self.source.num_questions_per_cat,
            )
            category_ids = await self.source.acquire_category_ids()
            try:
                for category_id in category_ids:
                    board.add_category(await self.source.acquire_category(category_id))
            except (IncompleteCategoryError, ClueSourceError) as e:
                last_error = e
                logger.warning(
                    "[GAME] %s; discarding board and starting over (attempt %d/%d)",
                    e, attempt, self.max_attempts,
                )
                continue

            if board.is_complete():
                return board
            logger.warning("[GAME] board failed shape check on attempt %d", attempt)

        raise AcquisitionFailedError("a complete board", self.max_attempts, last_error)

    async def load_board(self, generation: int) -> None:
        """Build a board for ``generation`` and publish it if still current."""
        try:
            board = await self.build_board()
        except (AcquisitionFailedError, ClueSourceError) as e:
            if generation != self._generation:
                return
            logger.error("[GAME] giving up on board: %s", e)
            self.phase = GamePhase.FAILED
            self.error = str(e)
            return
        except Exception as e:
            if generation != self._generation:
                return
            logger.exception("[GAME] unexpected error while loading board")
            self.phase = GamePhase.FAILED
            self.error = f"unexpected error while loading board: {e}"
            return

        if generation != self._generation:
            logger.info("[GAME] discarding board from superseded load %d", generation)
            return
        self.board = board
        self.phase = GamePhase.READY
        logger.info("[GAME] board ready: %s", ", ".join(c.title for c in board))

    async def start_game(self) -> Dict[str, Any]:
        """Load a fresh board and return the rendered snapshot."""
        generation = self.begin_loading()
        await self.load_board(generation)
        return self.snapshot()

    async def restart_game(self) -> Dict[str, Any]:
        logger.info("[GAME] restart requested")
        return await self.start_game()

    async def aclose(self) -> None:
        await self.source.service.aclose()

    # ============================================================
    # Interaction
    # ============================================================

    def activate_cell(self, row: int, column: int) -> CellUpdate:
        if self.phase != GamePhase.READY or self.board is None:
            raise BoardNotReadyError(f"no playable board (phase={self.phase.value})")
        return self.interaction.on_cell_activated(self.board, row, column)

    def snapshot(self) -> Dict[str, Any]:
        """Get the state the page needs to draw itself."""
        board_view = None
        if self.phase == GamePhase.READY:
            board_view = self.renderer.render_full_board(self.board)
        return {
            "phase": self.phase.value,
            "loading": self.phase.is_loading,
            "button_label": self.button_label,
            "error": self.error,
            "board": board_view,
        }
