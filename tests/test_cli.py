"""Tests for the command-line harness and the terminal game loop."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from sjakk.cli import build_parser, main, run_terminal_game
from sjakk.core.enums import Color
from sjakk.core.types import parse_square
from sjakk.game.session import GameSession
from sjakk.settings import AppSettings


def _reader(answers: Iterable[str]):
    """Scripted stand-in for input(); raises EOFError once exhausted."""
    pending = iter(answers)

    def read(prompt: str) -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


def _run(
    answers: Iterable[str], session: GameSession | None = None
) -> tuple[GameSession, list[str]]:
    session = session if session is not None else GameSession()
    written: list[str] = []
    run_terminal_game(
        session, AppSettings(use_color=False), read=_reader(answers), write=written.append
    )
    return session, written


class TestParser:
    def test_move_forms(self) -> None:
        parser = build_parser()
        for text in ("e2e4", "e2-e4", "e2:e4"):
            args = parser.parse_args(["moves", "e4", "--after", text])
            assert args.after == [(parse_square("e2"), parse_square("e4"))]

    def test_bad_square_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as info:
            main(["moves", "z9"])
        assert info.value.code == 2

    def test_square_argument_is_stripped(self) -> None:
        args = build_parser().parse_args(["moves", " e2 "])
        assert args.square == parse_square("e2")

    def test_bad_move_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as info:
            main(["show", "--after", "e2e"])
        assert info.value.code == 2

    def test_settings_from_options(self) -> None:
        args = build_parser().parse_args(
            ["--no-color", "--language", "Nynorsk", "gui", "--free", "--theme", "Blue"]
        )
        settings = AppSettings.from_args(args)
        assert settings == AppSettings(
            language="Nynorsk",
            board_theme="Blue",
            show_legal_moves=True,
            use_color=False,
            enforce_turns=False,
        )


class TestMovesCommand:
    def test_blocking_pawn(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--no-color", "moves", "g7", "--after", "f7f5", "--after", "d1h5"])
        assert code == 0
        assert capsys.readouterr().out.split() == ["g6"]

    def test_rook_moves(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["moves", "d4", "--after", "a1d4"]) == 0
        assert set(capsys.readouterr().out.split()) == {
            "d3", "d5", "d6", "d7", "a4", "b4", "c4", "e4", "f4", "g4", "h4"
        }

    def test_empty_square_fails(self, caplog: pytest.LogCaptureFixture) -> None:
        assert main(["moves", "e4"]) == 1
        assert "No piece on e4" in caplog.messages


class TestShowCommand:
    def test_plain_board(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-color", "show"]) == 0
        out = capsys.readouterr().out
        assert "1  | ♖ | ♘ | ♗ | ♕ | ♔ | ♗ | ♘ | ♖ |" in out
        assert "\x1b[" not in out

    def test_highlight(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-color", "show", "--highlight", "e2"]) == 0
        out = capsys.readouterr().out
        assert "3  |   |   |   |   | · |   |   |   |" in out


class TestTerminalGame:
    def test_answers_are_stripped(self) -> None:
        session, _ = _run(["  e2 ", "e4\t", "q"])
        assert session.board.occupant_color(parse_square("e4")) == Color.WHITE

    def test_one_move_then_quit(self) -> None:
        session, written = _run(["e2", "e4", "q"])
        assert session.side_to_move == Color.BLACK
        assert session.board.occupant_color(parse_square("e4")) == Color.WHITE
        assert written[0].startswith("Welcome")
        assert written[-1] == "Bye!"

    def test_rejections(self) -> None:
        session, written = _run(["z9", "e7", "a1", "e2", "e5"])
        assert "Not a square: z9" in written
        assert "No White piece on e7" in written
        assert "The rook on a1 has no legal moves" in written
        assert "The pawn cannot move from e2 to e5" in written
        assert session.side_to_move == Color.WHITE
        assert written[-1] == "Bye!"

    def test_check_is_announced(self) -> None:
        _, written = _run(["e2", "e4", "f7", "f5", "d1", "h5", "quit"])
        assert "Black is in check!" in written

    def test_free_play(self) -> None:
        session, _ = _run(["d7", "d5"], GameSession(enforce_turns=False))
        assert session.board.occupant_color(parse_square("d5")) == Color.BLACK
