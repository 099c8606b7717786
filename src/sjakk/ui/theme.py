"""Visual theme constants and QSS styles for the sjakk window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # empty legal targets
    highlight_capture: QColor  # occupied legal targets
    highlight_check: QColor  # king in check
    piece_white: QColor
    piece_black: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 160, 0, 90),  # green
            highlight_capture=QColor(200, 0, 200, 90),  # magenta
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            highlight_capture=QColor(200, 0, 200, 90),
            highlight_check=QColor(255, 0, 0, 120),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 160, 0, 90),
            highlight_capture=QColor(200, 0, 200, 90),
            highlight_check=QColor(255, 0, 0, 120),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(20, 20, 20),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by display name; unknown names give the default theme."""
        theme_map = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return theme_map.get(name, cls.default)()


THEMES: list[str] = ["Classic", "Blue", "Green"]


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QStatusBar {
    background: #1e1e1e;
    color: #d4d4d4;
}
"""
