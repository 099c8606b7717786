"""Tests for the terminal board renderer."""

import pytest
from termcolor import colored

from sjakk.core.board import Board
from sjakk.core.types import parse_square, parse_squares
from sjakk.ui.text_board import render_board


def _play(board: Board, *moves: str) -> Board:
    for move in moves:
        board.do_move(move[:2], move[2:])
    return board


def _row(text: str, rank: int) -> str:
    """Line of the rendering that shows *rank* (1-8)."""
    return text.splitlines()[9 - rank]


class TestLayout:
    def test_frame_and_footer(self) -> None:
        lines = render_board(Board.initial(), color=False).splitlines()
        assert len(lines) == 11
        assert lines[0] == "   " + "_" * 33
        assert lines[-1] == "     A   B   C   D   E   F   G   H"

    def test_back_ranks(self) -> None:
        text = render_board(Board.initial(), color=False)
        assert _row(text, 1) == "1  | ♖ | ♘ | ♗ | ♕ | ♔ | ♗ | ♘ | ♖ |"
        assert _row(text, 8) == "8  | ♜ | ♞ | ♝ | ♛ | ♚ | ♝ | ♞ | ♜ |"

    def test_empty_rank(self) -> None:
        text = render_board(Board.initial(), color=False)
        assert _row(text, 4) == "4  " + "|   " * 8 + "|"


class TestPlainHighlights:
    def test_empty_legal_squares(self) -> None:
        board = Board.initial()
        legal = board.legal_destinations(parse_square("e2"))
        text = render_board(board, legal, color=False)
        assert _row(text, 3) == "3  |   |   |   |   | · |   |   |   |"
        assert _row(text, 4) == "4  |   |   |   |   | · |   |   |   |"

    def test_capturable_piece(self) -> None:
        board = _play(Board.initial(), "a1d4")
        text = render_board(board, parse_squares("d7"), color=False)
        assert "|[♟]" in _row(text, 7)

    def test_checked_king(self) -> None:
        board = _play(Board.initial(), "f7f5", "d1h5")
        text = render_board(board, color=False)
        assert "| ♚!" in _row(text, 8)
        assert "!" not in _row(text, 1)


class TestAnsiHighlights:
    def test_green_marker_for_empty_legal(self) -> None:
        board = Board.initial()
        text = render_board(board, parse_squares("e3"))
        assert "\x1b[32m□\x1b[0m" in _row(text, 3)

    def test_magenta_capture_target(self) -> None:
        board = Board.initial()
        text = render_board(board, parse_squares("d7"))
        assert "\x1b[35m♟\x1b[0m" in _row(text, 7)

    def test_red_checked_king(self) -> None:
        board = _play(Board.initial(), "f7f5", "d1h5")
        assert "\x1b[31m♚\x1b[0m" in _row(render_board(board), 8)

    def test_no_escapes_without_highlights(self) -> None:
        assert "\x1b[" not in render_board(Board.initial())

    def test_colour_ignores_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        text = render_board(Board.initial(), parse_squares("e3"))
        assert colored("□", "green", force_color=True) in _row(text, 3)

    def test_plain_mode_has_no_escapes(self) -> None:
        board = _play(Board.initial(), "f7f5", "d1h5")
        assert "\x1b[" not in render_board(board, parse_squares("g6"), color=False)
