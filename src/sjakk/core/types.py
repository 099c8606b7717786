"""Square value type and algebraic-notation helpers.

Coordinates are ``(rank, file)`` pairs, both 0–7:
    a1 = (0, 0), h1 = (0, 7), a8 = (7, 0), h8 = (7, 7)

Rank 0 is White's back rank.
"""

from __future__ import annotations

from dataclasses import dataclass

from sjakk.core.errors import InvalidNotation

FILES = "abcdefgh"
RANKS = "12345678"


def on_board(rank: int, file: int) -> bool:
    """Whether ``(rank, file)`` lies inside the 8x8 board."""
    return 0 <= rank < 8 and 0 <= file < 8


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not on_board(self.rank, self.file):
            raise ValueError(f"Square out of range: ({self.rank}, {self.file})")

    def offset(self, d_rank: int, d_file: int) -> Square | None:
        """Square shifted by the given deltas, or None when it falls off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if not on_board(rank, file):
            return None
        return Square(rank, file)

    @property
    def is_light(self) -> bool:
        return (self.rank + self.file) % 2 == 1

    def __str__(self) -> str:
        return square_name(self)


def parse_square(text: str) -> Square:
    """Parse a square name, e.g. 'e4' → Square(3, 4). Case-insensitive."""
    if not isinstance(text, str):
        raise InvalidNotation(text)
    name = text.lower()
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise InvalidNotation(text)
    return Square(RANKS.index(name[1]), FILES.index(name[0]))


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(0, 0) → 'a1'."""
    return FILES[sq.file] + RANKS[sq.rank]


def parse_squares(*names: str) -> set[Square]:
    """Parse several square names into a set."""
    return {parse_square(name) for name in names}


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(rank, file) for rank in range(8) for file in range(8)
)
