"""Display text normalization for clue questions and answers."""

from __future__ import annotations

ITALIC_OPEN = "<I>"
ITALIC_CLOSE = "</I>"


def normalize_text(text: str) -> str:
    """Upper-case clue text and turn ``<i>...</i>`` markup into quotes.

    >>> normalize_text("the <i>great gatsby</i> author")
    'THE "GREAT GATSBY" AUTHOR'
    """
    text = text.upper()
    if ITALIC_OPEN in text:
        text = text.replace(ITALIC_OPEN, '"').replace(ITALIC_CLOSE, '"')
    return text.upper()
