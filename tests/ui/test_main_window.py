"""Tests for MainWindow wiring between the board view and the game session."""

from __future__ import annotations

from sjakk.core.enums import Color
from sjakk.core.types import parse_square
from sjakk.i18n import set_language
from sjakk.settings import AppSettings
from sjakk.ui.main_window import MainWindow


def test_initial_status() -> None:
    window = MainWindow()
    assert window.status_text == "White to move"
    assert window.windowTitle() == "Sjakk"


def test_move_from_board_switches_side() -> None:
    window = MainWindow()
    window._board_view.move_made.emit(parse_square("e2"), parse_square("e4"))
    assert window.session.side_to_move == Color.BLACK
    assert window.status_text == "Black to move"


def test_rejected_move_keeps_side() -> None:
    window = MainWindow()
    window._board_view.move_made.emit(parse_square("e2"), parse_square("e5"))
    assert window.session.side_to_move == Color.WHITE


def test_check_status() -> None:
    window = MainWindow(AppSettings(enforce_turns=False))
    window._board_view.move_made.emit(parse_square("f7"), parse_square("f5"))
    window._board_view.move_made.emit(parse_square("e2"), parse_square("e4"))
    window._board_view.move_made.emit(parse_square("d1"), parse_square("h5"))
    assert window.status_text == "Black to move - check!"


def test_localized_status() -> None:
    set_language("Nynorsk")
    window = MainWindow()
    assert window.status_text == "Kvit sitt trekk"


def test_new_game_resets() -> None:
    window = MainWindow()
    window._board_view.move_made.emit(parse_square("e2"), parse_square("e4"))
    window.new_game()
    assert window.session.side_to_move == Color.WHITE
    assert window.session.board.occupant_color(parse_square("e2")) == Color.WHITE


def test_flip_shortcut_action() -> None:
    window = MainWindow()
    window._act_flip.trigger()
    assert window._board_view.board_scene.is_flipped()


def test_hidden_legal_moves_setting() -> None:
    window = MainWindow(AppSettings(show_legal_moves=False))
    scene = window._board_view.board_scene
    scene.select_square(parse_square("e2"))
    assert scene._legal_items == []
    assert scene.legal_targets == {parse_square("e3"), parse_square("e4")}
