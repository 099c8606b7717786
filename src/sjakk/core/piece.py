"""Piece entity: kind tag, color and current square."""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass, replace

from sjakk.core.enums import Color, PieceType
from sjakk.core.move_generator import pseudo_legal_moves
from sjakk.core.types import Square
from sjakk.i18n import t

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

# Letter used by the plain-text board dump (uppercase = white).
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


@dataclass(slots=True)
class Piece:
    """A single physical piece on the board.

    The square is only changed through :meth:`move_to`, which does not check
    legality. :class:`~sjakk.core.board.Board` is responsible for that.
    """

    piece_type: PieceType
    color: Color
    square: Square

    # ── Movement ─────────────────────────────────────────────────────────

    def get_moves(self, team: Set[Square], rival_team: Set[Square]) -> set[Square]:
        """Pseudo-legal destinations given own and rival occupancy.

        *team* includes this piece's own square; the two sets are disjoint.
        """
        return pseudo_legal_moves(self, team, rival_team)

    def move_to(self, target: Square) -> None:
        self.square = target

    def copy(self) -> Piece:
        return replace(self)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def letter(self) -> str:
        """ASCII letter, uppercase for white."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def name(self) -> str:
        """Localized piece name in the current language."""
        return t().piece_name(self.piece_type)

    def __str__(self) -> str:
        return self.letter
