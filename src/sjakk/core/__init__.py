"""Core domain layer - move generation and legality filtering.

Quick start::

    from sjakk.core import Board, parse_square

    board = Board.initial()
    board.do_move("f7", "f5")
    board.do_move("d1", "h5")
    print(board.legal_destinations(parse_square("g7")))   # {Square(rank=5, file=6)}
"""

from sjakk.core.enums import Color, PieceType
from sjakk.core.errors import ChessRuleError, InvalidNotation, PreconditionViolation
from sjakk.core.types import Square, parse_square, parse_squares, square_name
from sjakk.core.piece import Piece
from sjakk.core.board import Board

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ChessRuleError",
    "InvalidNotation",
    "PreconditionViolation",
    # Types / helpers
    "Square",
    "parse_square",
    "parse_squares",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
]
