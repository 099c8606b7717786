"""Board - piece placement, check detection and legal-move filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sjakk.core.enums import Color, PieceType
from sjakk.core.errors import PreconditionViolation
from sjakk.core.piece import Piece
from sjakk.core.types import Square, parse_square, square_name
from sjakk.i18n import t

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# color -> (officer rank, pawn rank)
_HOME_RANKS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (0, 1),
    Color.BLACK: (7, 6),
}


class Board:
    """Mutable board owning every piece, keyed by the square it stands on.

    Invariant: ``board[piece.square] is piece`` for every piece on the board.
    """

    __slots__ = ("_pieces",)

    def __init__(self) -> None:
        self._pieces: dict[Square, Piece] = {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._pieces.get(sq)

    def __contains__(self, sq: object) -> bool:
        return sq in self._pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._pieces.values()))

    def __len__(self) -> int:
        return len(self._pieces)

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._pieces

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own square, replacing any occupant."""
        self._pieces[piece.square] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Take the piece off *sq* and return it (None if the square was empty)."""
        return self._pieces.pop(sq, None)

    # -- Query helpers ------------------------------------------------------

    def occupant_color(self, sq: Square) -> Color | None:
        piece = self._pieces.get(sq)
        return piece.color if piece is not None else None

    def pieces(self, color: Color) -> list[Piece]:
        """All pieces of *color*."""
        return [piece for piece in self._pieces.values() if piece.color == color]

    def squares(self, color: Color) -> set[Square]:
        """Squares occupied by *color*."""
        return {sq for sq, piece in self._pieces.items() if piece.color == color}

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        for sq, piece in self._pieces.items():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        raise PreconditionViolation(f"No {color.name} king on board")

    def _require(self, sq: Square) -> Piece:
        piece = self._pieces.get(sq)
        if piece is None:
            raise PreconditionViolation(f"No piece on {square_name(sq)}")
        return piece

    # -- Mutation -----------------------------------------------------------

    def relocate(self, sq: Square, target: Square) -> Piece | None:
        """Move the piece on *sq* to *target* without any legality check.

        Whatever stands on *target* is removed and returned.
        """
        piece = self._require(sq)
        del self._pieces[sq]
        captured = self._pieces.pop(target, None)
        piece.move_to(target)
        self._pieces[target] = piece
        return captured

    def capture(self, sq: Square, target: Square) -> Piece:
        """Same state change as :meth:`relocate`, announced on the log."""
        piece = self._require(sq)
        victim = self._require(target)
        _LOGGER.info(
            "%s",
            t().capture_announcement.format(
                piece=piece.name,
                origin=square_name(sq),
                captured=victim.name,
                target=square_name(target),
            ),
        )
        self.relocate(sq, target)
        return victim

    def do_move(self, origin: str, target: str) -> Piece | None:
        """Apply a raw move given in square notation, e.g. ``do_move("e2", "e4")``.

        Both names are parsed before the board is touched; legality is not checked.
        """
        from_sq = parse_square(origin)
        to_sq = parse_square(target)
        return self.relocate(from_sq, to_sq)

    # -- Check detection / legality -----------------------------------------

    def pseudo_legal_destinations(self, sq: Square) -> set[Square]:
        """Destinations of the piece on *sq* ignoring whether its king is exposed."""
        piece = self._require(sq)
        return piece.get_moves(
            self.squares(piece.color), self.squares(piece.color.opposite())
        )

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by any opposing piece?"""
        king_sq = self.king_square(color)
        team = self.squares(color)
        rival_team = self.squares(color.opposite())
        for piece in self.pieces(color.opposite()):
            if king_sq in piece.get_moves(rival_team, team):
                return True
        return False

    def legal_destinations(self, sq: Square) -> set[Square]:
        """Destinations of the piece on *sq* that do not leave its own king in check.

        Every candidate is tried on a private copy of the board, so this board is
        never modified.
        """
        piece = self._require(sq)
        legal: set[Square] = set()
        for target in self.pseudo_legal_destinations(sq):
            trial = self.copy()
            trial.relocate(sq, target)
            if not trial.is_in_check(piece.color):
                legal.add(target)
        return legal

    def checked_kings(self) -> list[Square]:
        """King squares currently in check, White first."""
        return [
            self.king_square(color)
            for color in (Color.WHITE, Color.BLACK)
            if self.is_in_check(color)
        ]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._pieces = {sq: piece.copy() for sq, piece in self._pieces.items()}
        return b

    def clear(self) -> None:
        self._pieces = {}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for color, (officer_rank, pawn_rank) in _HOME_RANKS.items():
            for f, pt in enumerate(_BACK_RANK):
                b.place(Piece(PieceType.PAWN, color, Square(pawn_rank, f)))
                b.place(Piece(pt, color, Square(officer_rank, f)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Square(rank, file)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
