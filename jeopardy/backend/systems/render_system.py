"""Board renderer - projects a board into the grid the page draws."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import Board, Clue, RevealState
from .text import normalize_text


class BoardRenderer:
    """Builds header and cell views from a board.

    Holds no game state of its own: every call re-derives the view from
    the board it is given.
    """

    def __init__(self, value_start: int = 200, value_step: int = 200):
        self.value_start = value_start
        self.value_step = value_step

    def placeholder(self, row: int) -> str:
        """Dollar value shown on a hidden cell in ``row``."""
        return f"${self.value_start + row * self.value_step}"

    def cell_text(self, clue: Clue, row: int) -> str:
        if clue.reveal_state == RevealState.HIDDEN:
            return self.placeholder(row)
        if clue.reveal_state == RevealState.QUESTION_SHOWN:
            return normalize_text(clue.question)
        return normalize_text(clue.answer)

    def render_cell(self, clue: Clue, row: int, column: int) -> Dict[str, Any]:
        return {
            "row": row,
            "column": column,
            "text": self.cell_text(clue, row),
            "state": clue.reveal_state.value,
            "hoverable": clue.reveal_state == RevealState.HIDDEN,
        }

    def render_full_board(self, board: Optional[Board]) -> Optional[Dict[str, Any]]:
        """Render header titles and one row of cells per clue index."""
        if board is None or not board.categories:
            return None

        headers = [category.title.upper() for category in board]
        num_rows = min(len(category.clues) for category in board)
        rows: List[List[Dict[str, Any]]] = []
        for row in range(num_rows):
            rows.append([
                self.render_cell(category.clues[row], row, column)
                for column, category in enumerate(board)
            ])
        return {"headers": headers, "rows": rows}
