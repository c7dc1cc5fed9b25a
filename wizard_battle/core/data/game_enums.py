"""Centralized game enums.

This module contains the enums used across multiple modules, providing a
single source of truth for command keywords, warning kinds and game phases.
"""

from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Command keywords accepted by the interpreter."""
    ATTACK = "attack"
    HEAL = "heal"
    FLIP_VISIBILITY = "flip_visibility"
    SUPER = "super"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["CommandType"]:
        """Look up a command by its exact keyword, or None if unknown."""
        try:
            return cls(keyword)
        except ValueError:
            return None


class WarningType(Enum):
    """Rule violations that skip a command without aborting the run."""
    CANNOT_PLAY = auto()        # Actor is hidden
    PLAYER_FROZEN = auto()      # Actor has zero power
    DIFFERENT_TEAM = auto()     # Heal/super across teams
    CANNOT_HEAL_SELF = auto()
    CANNOT_SUPER_SELF = auto()


class GamePhase(Enum):
    """High level phases of a single run."""
    SETUP = auto()
    COMMANDS = auto()
    FINISHED = auto()
    ABORTED = auto()
