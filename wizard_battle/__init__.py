"""Wizard battle: a turn-based team duel driven by a line-oriented script."""

from .core.errors import InvalidInputError
from .game.game import Game, GameReport, solution

__all__ = ["Game", "GameReport", "InvalidInputError", "solution"]
