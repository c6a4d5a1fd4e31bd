"""Tests for the game lifecycle controller."""

import asyncio

import pytest

from conftest import FakeTriviaService
from jeopardy.backend.errors import BoardNotReadyError, ClueSourceError
from jeopardy.backend.game_manager import GameController
from jeopardy.backend.loaders import GameSettings
from jeopardy.backend.models import ClueRecord, GamePhase, RevealState
from jeopardy.backend.source import ClueSource


def controller_for(service, max_attempts=5):
    return GameController(ClueSource(service, max_attempts=max_attempts), max_attempts=max_attempts)


def assert_board_shape(board):
    assert len(board) == 6
    assert len(set(board.category_ids)) == 6
    for category in board:
        assert len(category.clues) == 5


class BrokenService(FakeTriviaService):
    async def fetch_random_clues(self, count):
        raise ClueSourceError("trivia service request failed: boom", url="/api/random")


class MissingCategoryService(FakeTriviaService):
    """Answers 404 for the category ids in ``missing``."""

    def __init__(self, missing, **kwargs):
        super().__init__(**kwargs)
        self.missing = set(missing)

    async def fetch_category_clues(self, category_id):
        if category_id in self.missing:
            self.category_calls.append(category_id)
            raise ClueSourceError(f"404 for category {category_id}", url="/api/clues")
        return await super().fetch_category_clues(category_id)


class UnhashableIdService(FakeTriviaService):
    async def fetch_random_clues(self, count):
        self.random_calls += 1
        return [ClueRecord("q", "a", {"id": i}, "t") for i in range(count)]


# ------------------------------------------------------------------
# Lifecycle
# ------------------------------------------------------------------

class TestLifecycle:
    def test_initial_state(self, controller):
        snap = controller.snapshot()
        assert snap["phase"] == "empty"
        assert snap["loading"] is False
        assert snap["button_label"] == "START"
        assert snap["board"] is None
        assert snap["error"] is None

    def test_start_game_builds_full_board(self, controller):
        snap = asyncio.run(controller.start_game())
        assert controller.phase == GamePhase.READY
        assert_board_shape(controller.board)
        assert snap["phase"] == "ready"
        assert snap["button_label"] == "RESTART"
        assert len(snap["board"]["headers"]) == 6
        assert len(snap["board"]["rows"]) == 5

    def test_begin_loading_clears_board(self, controller):
        asyncio.run(controller.start_game())
        controller.begin_loading()
        snap = controller.snapshot()
        assert controller.board is None
        assert snap["phase"] == "loading"
        assert snap["loading"] is True
        assert snap["board"] is None

    def test_categories_fetched_in_draw_order(self, service, controller):
        asyncio.run(controller.start_game())
        assert service.category_calls == [1, 2, 3, 4, 5, 6]
        assert controller.board.category_ids == [1, 2, 3, 4, 5, 6]

    def test_from_settings(self, service):
        settings = GameSettings(max_attempts=2, value_start=100, value_step=100)
        controller = GameController.from_settings(settings, service=service)
        assert controller.max_attempts == 2
        assert controller.source.max_attempts == 2
        assert controller.renderer.placeholder(0) == "$100"

    def test_aclose_closes_service(self, service, controller):
        asyncio.run(controller.aclose())
        assert service.closed


# ------------------------------------------------------------------
# Recovery
# ------------------------------------------------------------------

class TestRecovery:
    def test_incomplete_category_restarts_whole_board(self, caplog):
        service = FakeTriviaService(
            draws=[[1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12]],
            clue_counts={3: 3},
        )
        controller = controller_for(service)
        with caplog.at_level("WARNING"):
            asyncio.run(controller.start_game())

        assert controller.phase == GamePhase.READY
        assert_board_shape(controller.board)
        assert controller.board.category_ids == [7, 8, 9, 10, 11, 12]
        # categories 1 and 2 were fetched, then thrown away with the board
        assert service.category_calls == [1, 2, 3, 7, 8, 9, 10, 11, 12]
        assert service.random_calls == 2
        assert "starting over" in caplog.text

    def test_gives_up_after_max_attempts(self):
        service = FakeTriviaService(clue_counts={1: 2})
        controller = controller_for(service, max_attempts=3)
        snap = asyncio.run(controller.start_game())

        assert controller.phase == GamePhase.FAILED
        assert controller.board is None
        assert service.random_calls == 3
        assert snap["phase"] == "failed"
        assert snap["loading"] is False
        assert "after 3 attempts" in snap["error"]

    def test_duplicate_draws_exhausted(self):
        service = FakeTriviaService(draws=[[1, 1, 1, 1, 1, 1]] * 5)
        controller = controller_for(service, max_attempts=2)
        asyncio.run(controller.start_game())
        assert controller.phase == GamePhase.FAILED
        assert "distinct categories" in controller.error

    def test_failed_category_request_restarts_whole_board(self):
        service = MissingCategoryService(
            missing={3},
            draws=[[1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12]],
        )
        controller = controller_for(service)
        asyncio.run(controller.start_game())

        assert controller.phase == GamePhase.READY
        assert controller.board.category_ids == [7, 8, 9, 10, 11, 12]
        assert service.random_calls == 2
        assert service.category_calls == [1, 2, 3, 7, 8, 9, 10, 11, 12]

    def test_failed_category_requests_exhaust_attempts(self):
        service = MissingCategoryService(missing={1})
        controller = controller_for(service, max_attempts=2)
        snap = asyncio.run(controller.start_game())
        assert snap["phase"] == "failed"
        assert service.random_calls == 2
        assert controller.board is None

    def test_malformed_payload_fails_instead_of_hanging(self, caplog):
        controller = controller_for(UnhashableIdService())
        generation = controller.begin_loading()
        with caplog.at_level("ERROR"):
            asyncio.run(controller.load_board(generation))
        assert controller.phase == GamePhase.FAILED
        assert controller.snapshot()["loading"] is False
        assert controller.error.startswith("unexpected error while loading board")
        assert "unexpected error" in caplog.text

    def test_malformed_payload_for_superseded_load_is_ignored(self):
        controller = controller_for(UnhashableIdService())
        stale = controller.begin_loading()
        controller.begin_loading()
        asyncio.run(controller.load_board(stale))
        assert controller.phase == GamePhase.LOADING
        assert controller.error is None

    def test_transport_failure_fails_game(self):
        controller = controller_for(BrokenService())
        snap = asyncio.run(controller.start_game())
        assert snap["phase"] == "failed"
        assert "boom" in snap["error"]

    def test_restart_after_failure(self):
        service = FakeTriviaService(
            draws=[[1, 2, 3, 4, 5, 6]],
            clue_counts={1: 0},
        )
        controller = controller_for(service, max_attempts=1)
        asyncio.run(controller.start_game())
        assert controller.phase == GamePhase.FAILED

        service.clue_counts.clear()
        snap = asyncio.run(controller.restart_game())
        assert snap["phase"] == "ready"
        assert snap["error"] is None

    def test_superseded_load_is_discarded(self, controller):
        first = controller.begin_loading()
        second = controller.begin_loading()

        asyncio.run(controller.load_board(first))
        assert controller.phase == GamePhase.LOADING
        assert controller.board is None

        asyncio.run(controller.load_board(second))
        assert controller.phase == GamePhase.READY
        assert_board_shape(controller.board)


# ------------------------------------------------------------------
# Interaction
# ------------------------------------------------------------------

class TestInteraction:
    def test_cell_before_ready_raises(self, controller):
        with pytest.raises(BoardNotReadyError):
            controller.activate_cell(0, 0)
        controller.begin_loading()
        with pytest.raises(BoardNotReadyError):
            controller.activate_cell(0, 0)

    def test_reveal_cycle(self, controller):
        asyncio.run(controller.start_game())
        clue = controller.board.clue_at(0, 0)
        clue.question, clue.answer = "2+2", "4"

        first = controller.activate_cell(0, 0)
        assert (first.text, first.state, first.changed) == ("2+2", "question_shown", True)
        assert first.hoverable is False

        second = controller.activate_cell(0, 0)
        assert (second.text, second.state, second.changed) == ("4", "answer_shown", True)

        third = controller.activate_cell(0, 0)
        assert (third.text, third.state, third.changed) == ("4", "answer_shown", False)
        assert clue.reveal_state == RevealState.ANSWER_SHOWN

    def test_click_off_grid_is_noop(self, controller):
        asyncio.run(controller.start_game())
        update = controller.activate_cell(5, 6)
        assert update.changed is False
        assert update.text is None
        assert controller.board.count_in_state(RevealState.HIDDEN) == 30

    def test_restart_resets_reveal_states(self, controller):
        asyncio.run(controller.start_game())
        controller.activate_cell(0, 0)
        controller.activate_cell(1, 2)
        controller.activate_cell(1, 2)
        old_board = controller.board

        snap = asyncio.run(controller.restart_game())
        assert controller.board is not old_board
        assert controller.board.count_in_state(RevealState.HIDDEN) == 30
        assert all(
            cell["state"] == "hidden"
            for row in snap["board"]["rows"]
            for cell in row
        )

    def test_snapshot_shows_revealed_text(self, controller):
        asyncio.run(controller.start_game())
        controller.activate_cell(2, 4)
        cell = controller.snapshot()["board"]["rows"][2][4]
        assert cell["text"] == "CATEGORY 5 QUESTION 2"
        assert cell["state"] == "question_shown"
