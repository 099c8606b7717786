"""Game layer: turn-taking session built on the rules engine."""

from sjakk.game.session import GameEvents, GameSession

__all__ = ["GameEvents", "GameSession"]
