"""Terminal rendering of a board with highlighted legal squares and checks."""

from __future__ import annotations

from collections.abc import Set

from termcolor import colored

from sjakk.core.board import Board
from sjakk.core.types import FILES, Square

_EMPTY_LEGAL = "□"
_EMPTY_LEGAL_PLAIN = "·"

_WIDTH = 33  # 8 cells of 4 chars + closing bar


def _paint(text: str, colour: str) -> str:
    # Colour is chosen by the caller; tty and NO_COLOR are not consulted.
    return colored(text, colour, force_color=True)


def _cell(
    sq: Square,
    board: Board,
    legal: Set[Square],
    checked: Set[Square],
    color: bool,
) -> str:
    piece = board[sq]
    if piece is None:
        if sq not in legal:
            return "|   "
        if color:
            return f"| {_paint(_EMPTY_LEGAL, 'green')} "
        return f"| {_EMPTY_LEGAL_PLAIN} "

    glyph = piece.symbol
    if sq in checked:
        return f"| {_paint(glyph, 'red')} " if color else f"| {glyph}!"
    if sq in legal:
        return f"| {_paint(glyph, 'magenta')} " if color else f"|[{glyph}]"
    return f"| {glyph} "


def render_board(
    board: Board,
    legal: Set[Square] | None = None,
    *,
    color: bool = True,
) -> str:
    """Draw *board* as text, White at the bottom.

    Squares in *legal* are highlighted (green marker when empty, magenta piece
    when occupied); kings in check are drawn red. With ``color=False`` the
    highlights use plain characters instead of terminal colours.
    """
    legal = legal or set()
    checked = set(board.checked_kings())

    lines = ["   " + "_" * _WIDTH]
    for rank in range(7, -1, -1):
        cells = "".join(
            _cell(Square(rank, file), board, legal, checked, color)
            for file in range(8)
        )
        lines.append(f"{rank + 1}  {cells}|")
    lines.append("   " + "‾" * _WIDTH)
    lines.append("     " + "   ".join(FILES.upper()))
    return "\n".join(lines)
