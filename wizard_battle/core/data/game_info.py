"""Static game rules and message tables.

The battle rules are fixed: every limit a validator or player operation
checks lives here so there is a single source of truth.
"""

from .game_enums import WarningType

MIN_TEAMS = 1
MAX_TEAMS = 10
MAX_PLAYERS = 100

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 20

MIN_POWER = 0
MAX_POWER = 1000

VISIBLE_TOKEN = "True"
HIDDEN_TOKEN = "False"

MERGED_PLAYER_PREFIX = "S_"

INVALID_INPUT_MESSAGE = "Invalid inputs"
TIE_MESSAGE = "It's a tie"
WINNER_TEMPLATE = "The chosen wizard is {team}"

WARNING_MESSAGES: dict[WarningType, str] = {
    WarningType.CANNOT_PLAY: "This player can't play",
    WarningType.PLAYER_FROZEN: "This player is frozen",
    WarningType.DIFFERENT_TEAM: "Both players should be from the same team",
    WarningType.CANNOT_HEAL_SELF: "The player cannot heal itself",
    WarningType.CANNOT_SUPER_SELF: "The player cannot do super action with itself",
}

MIN_COMMAND_TOKENS = 2
MAX_COMMAND_TOKENS = 3


def clamp_power(value: int) -> int:
    """Clamp a power value into the legal range."""
    return max(MIN_POWER, min(MAX_POWER, value))
