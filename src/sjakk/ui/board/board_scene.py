"""BoardScene - QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from sjakk.core.enums import Color
from sjakk.core.types import ALL_SQUARES, FILES, Square
from sjakk.ui.theme import BoardTheme

if TYPE_CHECKING:
    from sjakk.core.piece import Piece
    from sjakk.game.session import GameSession


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Signals:
        move_made(Square, Square): Emitted when the user clicks a legal target
            after selecting a piece. The scene does not apply the move itself.
    """

    move_made = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._session: GameSession | None = None
        self._flipped = False

        # Interaction state
        self._selected_sq: Square | None = None
        self._legal_targets: set[Square] = set()
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_session(self, session: GameSession) -> None:
        """Attach the game whose board is displayed."""
        self._session = session
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces and the check highlight from the current board."""
        self._clear_selection()
        self._sync_pieces()
        self.highlight_check()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-square highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_items)

    def highlight_check(self) -> None:
        """Highlight every king that is in check."""
        self._clear_items(self._check_items)
        if self._session is None:
            return
        for king_sq in self._session.board.checked_kings():
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    def select_square(self, sq: Square) -> bool:
        """Select the piece on *sq* and show its legal targets.

        Returns False (and clears the selection) when the piece may not move now.
        """
        self._clear_selection()
        if self._session is None or not self._session.can_select(sq):
            return False

        self._selected_sq = sq
        self._highlight_items.append(
            self._make_highlight(sq, self._theme.highlight_from)
        )

        self._legal_targets = self._session.legal_destinations(sq)
        if self._show_legal_moves:
            board = self._session.board
            for target in self._legal_targets:
                color = (
                    self._theme.highlight_to
                    if board.is_empty(target)
                    else self._theme.highlight_capture
                )
                self._legal_items.append(self._make_highlight(target, color))
        return True

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    @property
    def legal_targets(self) -> set[Square]:
        return set(self._legal_targets)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in ALL_SQUARES:
            vf, vr = self._visual_coords(sq)
            color = self._theme.light_square if sq.is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            coord_color = (
                self._theme.coord_light if sq.is_light else self._theme.coord_dark
            )

            # Rank numbers (left edge)
            if sq.file == 0:
                self._add_coord(str(sq.rank + 1), font, coord_color, vf * t + 2, vr * t + 1)

            # File letters (bottom edge)
            if sq.rank == 0:
                self._add_coord(
                    FILES[sq.file], font, coord_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._session is None:
            return

        for piece in self._session.board:
            item = self._make_piece_item(piece)
            self.addItem(item)
            self._piece_items[piece.square] = item

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        t = self.TILE
        item = QGraphicsSimpleTextItem(piece.symbol)
        item.setFont(QFont("DejaVu Sans", int(t * 0.6)))
        fill = (
            self._theme.piece_white
            if piece.color == Color.WHITE
            else self._theme.piece_black
        )
        item.setBrush(QBrush(fill))
        item.setPen(QPen(QColor(0, 0, 0), 1))
        item.setToolTip(piece.name)

        vf, vr = self._visual_coords(piece.square)
        bounds = item.boundingRect()
        item.setPos(
            vf * t + (t - bounds.width()) / 2,
            vr * t + (t - bounds.height()) / 2,
        )
        item.setZValue(1)
        return item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._session is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        self.click_square(sq)
        super().mousePressEvent(event)

    def click_square(self, sq: Square) -> None:
        """Handle a click: submit a selected move or (re)select a piece."""
        if self._selected_sq is not None and sq in self._legal_targets:
            origin = self._selected_sq
            self._clear_selection()
            self.move_made.emit(origin, sq)
            return
        self.select_square(sq)

    # ── Selection / highlights ───────────────────────────────────────────

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._legal_targets = set()
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a board square to visual column/row."""
        if self._flipped:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Square(row, 7 - col)
        return Square(7 - row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
