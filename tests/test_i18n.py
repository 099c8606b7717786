"""Tests for the language tables."""

from sjakk.core.enums import Color, PieceType
from sjakk.i18n import LANGUAGES, set_language, t


def test_default_is_english() -> None:
    assert t().piece_name(PieceType.KNIGHT) == "knight"
    assert t().color_name(Color.BLACK) == "Black"


def test_nynorsk_names() -> None:
    set_language("Nynorsk")
    assert [t().piece_name(pt) for pt in PieceType] == [
        "bonde", "springar", "laupar", "tårn", "dronning", "konge"
    ]
    assert t().color_name(Color.WHITE) == "Kvit"


def test_unknown_language_falls_back() -> None:
    set_language("Klingon")
    assert t().queen == "queen"


def test_every_language_fills_every_template() -> None:
    fields = {"piece": "p", "origin": "a1", "target": "a2", "captured": "c",
              "color": "C", "square": "s", "text": "x"}
    for language in LANGUAGES:
        set_language(language)
        s = t()
        for template in (s.capture_announcement, s.prompt_origin, s.prompt_target,
                         s.invalid_square, s.not_your_piece, s.no_legal_moves,
                         s.illegal_move, s.in_check, s.status_to_move, s.status_check):
            assert "{" not in template.format(**fields)
