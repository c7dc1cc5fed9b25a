"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: TeamData and PlayerData records
- game_enums.py: command keywords, warning kinds and game phases
- game_info.py: fixed rule constants and message tables
"""

from .data_structures import PlayerData, TeamData
from .game_enums import CommandType, GamePhase, WarningType
from .game_info import (
    INVALID_INPUT_MESSAGE,
    MAX_POWER,
    MIN_POWER,
    TIE_MESSAGE,
    WARNING_MESSAGES,
    WINNER_TEMPLATE,
    clamp_power,
)

__all__ = [
    "PlayerData",
    "TeamData",
    "CommandType",
    "GamePhase",
    "WarningType",
    "INVALID_INPUT_MESSAGE",
    "MAX_POWER",
    "MIN_POWER",
    "TIE_MESSAGE",
    "WARNING_MESSAGES",
    "WINNER_TEMPLATE",
    "clamp_power",
]
