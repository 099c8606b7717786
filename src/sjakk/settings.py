"""User-configurable settings shared by the terminal and Qt front ends."""

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass

from sjakk.i18n import set_language


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True
    use_color: bool = True  # ANSI colors in the terminal renderer

    # Game
    enforce_turns: bool = True

    @classmethod
    def from_args(cls, args: Namespace) -> AppSettings:
        """Build settings from parsed command-line options."""
        defaults = cls()
        return cls(
            language=getattr(args, "language", defaults.language),
            board_theme=getattr(args, "theme", defaults.board_theme),
            show_legal_moves=not getattr(args, "hide_legal", False),
            use_color=not getattr(args, "no_color", False),
            enforce_turns=not getattr(args, "free", False),
        )

    def apply(self) -> None:
        """Activate process-wide settings (currently the UI language)."""
        set_language(self.language)
