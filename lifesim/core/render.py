"""Textual projections of a board.

Renderers emit one token per cell in row-major order and put the row
separator before every row except the first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifesim.utils.consts import HTML_ROW_SEPARATOR

if TYPE_CHECKING:
    from lifesim.interfaces.board import Board


def render_text(
    board: "Board",
    alive: str = "1",
    dead: str = "0",
    separator: str = "\n",
) -> str:
    """Render the board as text."""
    row_size = board.row_size
    parts: list[str] = []
    for index, cell in enumerate(board.cells):
        if index != 0 and index % row_size == 0:
            parts.append(separator)
        parts.append(alive if cell else dead)
    return "".join(parts)


def render_html(board: "Board") -> str:
    """Render the board as an HTML string of a number grid."""
    return render_text(board, separator=HTML_ROW_SEPARATOR)
