"""Core game engine components.

This package contains the fundamental engine systems:
- actions.py: command action classes and the ActionValidation result
- game_state.py: the run-scoped GameSession
"""

from .actions import (
    Action,
    ActionResult,
    ActionValidation,
    AttackAction,
    FlipVisibilityAction,
    HealAction,
    SuperAction,
    create_action,
)
from .game_state import GameSession

__all__ = [
    "Action",
    "ActionResult",
    "ActionValidation",
    "AttackAction",
    "FlipVisibilityAction",
    "HealAction",
    "SuperAction",
    "create_action",
    "GameSession",
]
