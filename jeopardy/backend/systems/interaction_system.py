"""Interaction handler - turns a cell click into a reveal step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models import Board
from .render_system import BoardRenderer


@dataclass
class CellUpdate:
    """What the page should paint into one cell after a click."""
    row: int
    column: int
    text: Optional[str]
    state: Optional[str]
    hoverable: bool
    changed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row": self.row,
            "column": self.column,
            "text": self.text,
            "state": self.state,
            "hoverable": self.hoverable,
            "changed": self.changed,
        }


class InteractionHandler:
    """Advances the clicked clue and reports the new cell contents."""

    def __init__(self, renderer: BoardRenderer):
        self.renderer = renderer

    def on_cell_activated(self, board: Board, row: int, column: int) -> CellUpdate:
        """Reveal the question, then the answer, of ``board[column].clues[row]``.

        Clicks off the grid and clicks on a fully revealed clue change nothing.
        """
        clue = board.clue_at(row, column)
        if clue is None:
            return CellUpdate(row, column, text=None, state=None, hoverable=False, changed=False)

        changed = clue.advance()
        cell = self.renderer.render_cell(clue, row, column)
        return CellUpdate(
            row=row,
            column=column,
            text=cell["text"],
            state=cell["state"],
            hoverable=cell["hoverable"],
            changed=changed,
        )
