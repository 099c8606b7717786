"""Qt board widgets."""

from sjakk.ui.board.board_scene import BoardScene
from sjakk.ui.board.board_view import BoardView

__all__ = ["BoardScene", "BoardView"]
