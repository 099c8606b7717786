"""GameSession - turn-taking on top of the rules engine.

The core :class:`~sjakk.core.board.Board` has no notion of whose turn it is.
This session tracks the side to move, only accepts legal moves, and emits
events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from sjakk.core.board import Board
from sjakk.core.enums import Color, PieceType
from sjakk.core.errors import PreconditionViolation
from sjakk.core.piece import Piece
from sjakk.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Piece, Square, "Piece | None"], None]  # mover, origin, captured
CheckCallback = Callable[[Color], None]  # color now in check


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Orchestrates one game: validates moves, switches turns, notifies listeners.

    With ``enforce_turns=False`` either side may move at any time; the side to
    move then simply follows the color of the last piece moved.
    """

    __slots__ = ("_board", "_side_to_move", "_enforce_turns", "events")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        *,
        enforce_turns: bool = True,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._enforce_turns = enforce_turns
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def enforce_turns(self) -> bool:
        return self._enforce_turns

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Reset to the starting position with White to move."""
        self._board = Board.initial()
        self._side_to_move = Color.WHITE

    def can_select(self, sq: Square) -> bool:
        """Whether the piece on *sq* may be moved now."""
        color = self._board.occupant_color(sq)
        if color is None:
            return False
        return not self._enforce_turns or color == self._side_to_move

    def legal_destinations(self, sq: Square) -> set[Square]:
        """Legal targets for the piece on *sq*, respecting the turn order.

        Squares holding a king are never offered.
        """
        if not self.can_select(sq):
            raise PreconditionViolation(
                f"No {self._side_to_move.name} piece on {square_name(sq)}"
            )
        return {
            target
            for target in self._board.legal_destinations(sq)
            if not self._holds_king(target)
        }

    def _holds_king(self, sq: Square) -> bool:
        piece = self._board[sq]
        return piece is not None and piece.piece_type == PieceType.KING

    def submit_move(self, origin: Square, target: Square) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if not self.can_select(origin):
            _LOGGER.debug("Rejected %s: not selectable", square_name(origin))
            return False
        if target not in self.legal_destinations(origin):
            _LOGGER.debug(
                "Rejected %s-%s: illegal", square_name(origin), square_name(target)
            )
            return False

        if self._board.is_empty(target):
            captured = self._board.relocate(origin, target)
        else:
            captured = self._board.capture(origin, target)

        mover = self._board[target]
        assert mover is not None
        self._side_to_move = mover.color.opposite()

        for cb in self.events.on_move:
            cb(mover, origin, captured)
        if self.is_in_check():
            for check_cb in self.events.on_check:
                check_cb(self._side_to_move)
        return True

    def is_in_check(self) -> bool:
        """Is the side to move in check?"""
        return self._board.is_in_check(self._side_to_move)
