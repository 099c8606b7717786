"""Pseudo-legal move generation for each piece kind.

Every generator takes the moving piece plus the squares held by its own team
and by the rival team, and returns the destinations allowed by the piece's
movement pattern. None of them look at check; that filter lives on
:class:`~sjakk.core.board.Board`.
"""

from __future__ import annotations

from collections.abc import Callable, Set
from typing import TYPE_CHECKING

from sjakk.core.enums import Color, PieceType
from sjakk.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from sjakk.core.piece import Piece

MoveFn = Callable[["Piece", Set[Square], Set[Square]], set[Square]]

# (d_rank, d_file)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, frozenset[Square]]:
    targets: dict[Square, frozenset[Square]] = {}
    for sq in ALL_SQUARES:
        moves = (sq.offset(dr, df) for dr, df in offsets)
        targets[sq] = frozenset(m for m in moves if m is not None)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ray: list[Square] = []
            step = sq.offset(dr, df)
            while step is not None:
                ray.append(step)
                step = step.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


# -- Shared walks -----------------------------------------------------------


def _walk_rays(
    rays: tuple[tuple[Square, ...], ...],
    team: Set[Square],
    rival_team: Set[Square],
) -> set[Square]:
    moves: set[Square] = set()
    for ray in rays:
        for to_sq in ray:
            if to_sq in team:
                break
            moves.add(to_sq)
            if to_sq in rival_team:
                break
    return moves


# -- Piece-specific generators ----------------------------------------------


def pawn_quiet_targets(piece: Piece) -> set[Square]:
    """Forward squares before any occupancy is taken into account.

    From the start rank both the one- and two-square advance are listed;
    the square jumped over is not inspected.
    """
    sq = piece.square
    forward = piece.color.forward
    steps = (1, 2) if sq.rank == PAWN_START_RANK[piece.color] else (1,)
    targets = (sq.offset(forward * n, 0) for n in steps)
    return {t for t in targets if t is not None}


def pawn_capture_targets(piece: Piece) -> set[Square]:
    """Forward diagonals that lie on the board."""
    sq = piece.square
    forward = piece.color.forward
    targets = (sq.offset(forward, -1), sq.offset(forward, 1))
    return {t for t in targets if t is not None}


def pawn_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    occupied = set(team) | set(rival_team)
    quiet = pawn_quiet_targets(piece) - occupied
    captures = pawn_capture_targets(piece) & set(rival_team)
    return quiet | captures


def knight_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    return {to_sq for to_sq in _KNIGHT_TARGETS[piece.square] if to_sq not in team}


def bishop_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    return _walk_rays(_BISHOP_RAYS[piece.square], team, rival_team)


def rook_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    return _walk_rays(_ROOK_RAYS[piece.square], team, rival_team)


def queen_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    return rook_moves(piece, team, rival_team) | bishop_moves(piece, team, rival_team)


def king_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    return {to_sq for to_sq in _KING_TARGETS[piece.square] if to_sq not in team}


_GENERATORS: dict[PieceType, MoveFn] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def pseudo_legal_moves(
    piece: Piece, team: Set[Square], rival_team: Set[Square]
) -> set[Square]:
    """Destinations for *piece* by movement pattern alone (may expose own king)."""
    return _GENERATORS[piece.piece_type](piece, team, rival_team)
