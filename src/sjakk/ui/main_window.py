"""MainWindow - top-level window assembling the board and status bar."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from sjakk.core.types import Square, square_name
from sjakk.game.session import GameSession
from sjakk.i18n import t
from sjakk.settings import AppSettings
from sjakk.ui.board.board_view import BoardView
from sjakk.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: one board, one game session."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self._session = GameSession(enforce_turns=self._settings.enforce_turns)

        self.setWindowTitle(t().window_title)
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._setup_ui()
        self._setup_actions()
        self._apply_settings()

        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._session)
        self.setCentralWidget(self._board_view)
        self._board_view.move_made.connect(self._on_move_made)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_actions(self) -> None:
        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        self.addAction(self._act_new_game)

        self._act_flip = QAction(self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip)
        self.addAction(self._act_flip)

    def _apply_settings(self) -> None:
        self._board_view.apply_display(
            BoardTheme.named(self._settings.board_theme),
            self._settings.show_legal_moves,
        )

    # ── Game flow ────────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    def new_game(self) -> None:
        self._session.new_game()
        self._board_view.refresh()
        self._update_status()

    def _on_move_made(self, origin: Square, target: Square) -> None:
        if not self._session.submit_move(origin, target):
            _LOGGER.debug(
                "Board emitted rejected move %s-%s",
                square_name(origin),
                square_name(target),
            )
        self._board_view.refresh()
        self._update_status()

    def _on_flip(self) -> None:
        self._board_view.flip()

    def _update_status(self) -> None:
        s = t()
        color = s.color_name(self._session.side_to_move)
        template = s.status_check if self._session.is_in_check() else s.status_to_move
        self._status_label.setText(template.format(color=color))

    @property
    def status_text(self) -> str:
        return self._status_label.text()
