"""Internationalisation strings for sjakk.

Usage::

    from sjakk.i18n import t, set_language

    set_language("Nynorsk")
    print(t().queen)            # "dronning"
    print(t().prompt_origin.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Strings:
    # ── Piece names ──────────────────────────────────────────────────────
    pawn: str
    knight: str
    bishop: str
    rook: str
    queen: str
    king: str

    color_white: str
    color_black: str

    # ── Board announcements ──────────────────────────────────────────────
    capture_announcement: str  # "{piece} from {origin} captures {captured} on {target}"

    # ── Terminal game ────────────────────────────────────────────────────
    welcome: str
    prompt_origin: str  # "{color} to move - pick a piece: "
    prompt_target: str  # "Move {piece} on {origin} to: "
    invalid_square: str  # "Not a square: {text}"
    not_your_piece: str  # "No {color} piece on {square}"
    no_legal_moves: str  # "{piece} on {square} has no legal moves"
    illegal_move: str  # "{piece} cannot move from {origin} to {target}"
    in_check: str  # "{color} is in check!"
    goodbye: str

    # ── Window ───────────────────────────────────────────────────────────
    window_title: str
    status_to_move: str  # "{color} to move"
    status_check: str  # "{color} to move - check!"

    def piece_name(self, piece_type: Enum) -> str:
        """Name for a :class:`~sjakk.core.enums.PieceType` member."""
        return getattr(self, piece_type.name.lower())

    def color_name(self, color: Enum) -> str:
        """Name for a :class:`~sjakk.core.enums.Color` member."""
        return getattr(self, f"color_{color.name.lower()}")


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    pawn="pawn",
    knight="knight",
    bishop="bishop",
    rook="rook",
    queen="queen",
    king="king",
    color_white="White",
    color_black="Black",
    capture_announcement="{piece} from {origin} captures {captured} on {target}",
    welcome="Welcome to sjakk! Type a square such as e2, or q to quit.",
    prompt_origin="{color} to move - pick a piece: ",
    prompt_target="Move {piece} on {origin} to: ",
    invalid_square="Not a square: {text}",
    not_your_piece="No {color} piece on {square}",
    no_legal_moves="The {piece} on {square} has no legal moves",
    illegal_move="The {piece} cannot move from {origin} to {target}",
    in_check="{color} is in check!",
    goodbye="Bye!",
    window_title="Sjakk",
    status_to_move="{color} to move",
    status_check="{color} to move - check!",
)

_NN = Strings(
    pawn="bonde",
    knight="springar",
    bishop="laupar",
    rook="tårn",
    queen="dronning",
    king="konge",
    color_white="Kvit",
    color_black="Svart",
    capture_announcement="{piece} frå {origin} fangar {captured} på {target}",
    welcome="Velkomen til sjakk! Skriv ei rute, til dømes e2, eller q for å avslutte.",
    prompt_origin="{color} sitt trekk - vel ei brikke: ",
    prompt_target="Flytt {piece} på {origin} til: ",
    invalid_square="Ikkje ei rute: {text}",
    not_your_piece="Inga brikke for {color} på {square}",
    no_legal_moves="{piece} på {square} har ingen lovlege trekk",
    illegal_move="{piece} kan ikkje flytte frå {origin} til {target}",
    in_check="{color} står i sjakk!",
    goodbye="Ha det!",
    window_title="Sjakk",
    status_to_move="{color} sitt trekk",
    status_check="{color} sitt trekk - sjakk!",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Nynorsk": _NN,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active string table."""
    return _current


def set_language(language: str) -> None:
    """Switch the active language; unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
