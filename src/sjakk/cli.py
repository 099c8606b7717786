"""Command-line harness: terminal game, move queries and the Qt window."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from sjakk.core.board import Board
from sjakk.core.errors import InvalidNotation, PreconditionViolation
from sjakk.core.types import Square, parse_square, square_name
from sjakk.game.session import GameSession
from sjakk.i18n import LANGUAGES, t
from sjakk.settings import AppSettings
from sjakk.ui.text_board import render_board

_LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = frozenset({"q", "quit", "exit"})

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


# ── Argument types ───────────────────────────────────────────────────────────


def _square_arg(text: str) -> Square:
    try:
        return parse_square(text.strip())
    except InvalidNotation as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _move_arg(text: str) -> tuple[Square, Square]:
    """Parse 'e2e4', 'e2-e4' or 'e2:e4' into an (origin, target) pair."""
    cleaned = text.replace("-", "").replace(":", "").strip()
    if len(cleaned) != 4:
        raise argparse.ArgumentTypeError(f"Invalid move: {text!r}")
    return _square_arg(cleaned[:2]), _square_arg(cleaned[2:])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sjakk", description="Chess move legality engine"
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default="English",
        help="Language for piece names and messages (default: English)",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors in board output"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play a game in the terminal")
    play.add_argument(
        "--free", action="store_true", help="Let either side move at any time"
    )
    play.add_argument(
        "--hide-legal", action="store_true", help="Do not highlight legal squares"
    )

    moves = sub.add_parser("moves", help="List legal destinations for a piece")
    moves.add_argument("square", type=_square_arg, help="Square of the piece, e.g. e2")
    moves.add_argument(
        "--after",
        type=_move_arg,
        action="append",
        default=[],
        metavar="MOVE",
        help="Raw move applied first, e.g. f7f5 (repeatable)",
    )

    show = sub.add_parser("show", help="Print the board")
    show.add_argument(
        "--after",
        type=_move_arg,
        action="append",
        default=[],
        metavar="MOVE",
        help="Raw move applied first, e.g. d1h5 (repeatable)",
    )
    show.add_argument(
        "--highlight",
        type=_square_arg,
        default=None,
        metavar="SQUARE",
        help="Highlight the legal destinations of the piece on SQUARE",
    )

    gui = sub.add_parser("gui", help="Open the board window")
    gui.add_argument("--free", action="store_true", help="Let either side move at any time")
    gui.add_argument("--theme", default="Classic", help="Board colour theme")
    return parser


def configure_logging(level: str) -> None:
    """Route log records (including capture announcements) to the terminal."""
    logging.basicConfig(format="%(message)s", level=level, stream=sys.stdout)


# ── Commands ─────────────────────────────────────────────────────────────────


def _board_after(moves: Sequence[tuple[Square, Square]]) -> Board:
    board = Board.initial()
    for origin, target in moves:
        board.relocate(origin, target)
    return board


def cmd_moves(args: argparse.Namespace, settings: AppSettings) -> int:
    board = _board_after(args.after)
    legal = board.legal_destinations(args.square)
    print(" ".join(square_name(sq) for sq in sorted(legal)))
    return 0


def cmd_show(args: argparse.Namespace, settings: AppSettings) -> int:
    board = _board_after(args.after)
    legal = board.legal_destinations(args.highlight) if args.highlight else None
    print(render_board(board, legal, color=settings.use_color))
    return 0


def cmd_play(args: argparse.Namespace, settings: AppSettings) -> int:
    session = GameSession(enforce_turns=settings.enforce_turns)
    run_terminal_game(session, settings)
    return 0


def cmd_gui(args: argparse.Namespace, settings: AppSettings) -> int:
    from sjakk.app import run_application

    return run_application(settings, [sys.argv[0]])


_COMMANDS: dict[str, Callable[[argparse.Namespace, AppSettings], int]] = {
    "play": cmd_play,
    "moves": cmd_moves,
    "show": cmd_show,
    "gui": cmd_gui,
}


# ── Terminal game loop ───────────────────────────────────────────────────────


def _ask(read: ReadFn, prompt: str) -> str | None:
    """Read one answer; None means the player wants to stop."""
    try:
        answer = read(prompt).strip()
    except EOFError:
        return None
    if answer.lower() in _QUIT_WORDS:
        return None
    return answer


def run_terminal_game(
    session: GameSession,
    settings: AppSettings,
    read: ReadFn = input,
    write: WriteFn = print,
) -> None:
    """Interactive loop: pick a piece, see its legal squares, pick a target."""
    s = t()
    write(s.welcome)
    while True:
        board = session.board
        side = s.color_name(session.side_to_move)
        write(render_board(board, color=settings.use_color))
        if session.is_in_check():
            write(s.in_check.format(color=side))

        origin_text = _ask(read, s.prompt_origin.format(color=side))
        if origin_text is None:
            break
        try:
            origin = parse_square(origin_text)
        except InvalidNotation:
            write(s.invalid_square.format(text=origin_text))
            continue
        if not session.can_select(origin):
            write(s.not_your_piece.format(color=side, square=square_name(origin)))
            continue

        piece = board[origin]
        assert piece is not None
        legal = session.legal_destinations(origin)
        if not legal:
            write(s.no_legal_moves.format(piece=piece.name, square=square_name(origin)))
            continue
        shown = legal if settings.show_legal_moves else None
        write(render_board(board, shown, color=settings.use_color))

        target_text = _ask(
            read, s.prompt_target.format(piece=piece.name, origin=square_name(origin))
        )
        if target_text is None:
            break
        try:
            target = parse_square(target_text)
        except InvalidNotation:
            write(s.invalid_square.format(text=target_text))
            continue
        if not session.submit_move(origin, target):
            write(
                s.illegal_move.format(
                    piece=piece.name,
                    origin=square_name(origin),
                    target=square_name(target),
                )
            )
    write(s.goodbye)


# ── Entry point ──────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    settings = AppSettings.from_args(args)
    settings.apply()

    try:
        return _COMMANDS[args.command](args, settings)
    except PreconditionViolation as exc:
        _LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
