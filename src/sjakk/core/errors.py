"""Exceptions raised by the rules engine."""

from __future__ import annotations


class ChessRuleError(Exception):
    """Base class for every error raised by :mod:`sjakk.core`."""


class InvalidNotation(ChessRuleError, ValueError):
    """Square text that is not a file letter a-h followed by a rank digit 1-8."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid square name: {text!r}")
        self.text = text


class PreconditionViolation(ChessRuleError, LookupError):
    """The caller broke an operation's contract (e.g. moving from an empty square)."""
