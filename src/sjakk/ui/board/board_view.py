"""BoardView - widget showing one game session's board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QWidget

from sjakk.ui.board.board_scene import BoardScene

if TYPE_CHECKING:
    from sjakk.game.session import GameSession
    from sjakk.ui.theme import BoardTheme


class BoardView(QGraphicsView):
    """Keeps the whole board visible at any widget size.

    Signals:
        move_made(Square, Square): A move picked on the board, not yet applied.
    """

    move_made = pyqtSignal(object, object)

    def __init__(
        self, session: GameSession | None = None, parent: QWidget | None = None
    ) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setMinimumSize(8 * 40, 8 * 40)

        self._scene.move_made.connect(self.move_made.emit)
        if session is not None:
            self._scene.set_session(session)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    # ── Session / display ────────────────────────────────────────────────

    def set_session(self, session: GameSession) -> None:
        self._scene.set_session(session)

    def refresh(self) -> None:
        """Redraw after the session's board changed."""
        self._scene.refresh()

    def flip(self) -> None:
        self._scene.set_flipped(not self._scene.is_flipped())

    def apply_display(self, theme: BoardTheme, show_legal_moves: bool) -> None:
        self._scene.set_theme(theme)
        self._scene.set_show_legal_moves(show_legal_moves)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
