"""
Setup field validators.

Each validator takes one raw text field (plus whatever context it needs,
such as the team count) and returns the typed value. Any malformed field
raises :class:`InvalidInputError`; no finer distinction is made.
"""

import re
import string

from ..core.data.game_info import (
    HIDDEN_TOKEN,
    MAX_NAME_LENGTH,
    MAX_PLAYERS,
    MAX_POWER,
    MAX_TEAMS,
    MIN_NAME_LENGTH,
    MIN_POWER,
    MIN_TEAMS,
    VISIBLE_TOKEN,
)
from ..core.errors import InvalidInputError

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def parse_unsigned(raw: str) -> int:
    """Parse a non-negative decimal integer (optional leading ``+``)."""
    if not _UNSIGNED_PATTERN.fullmatch(raw):
        raise InvalidInputError(f"Not an unsigned integer: {raw!r}")
    return int(raw)


def validate_team_count(raw: str) -> int:
    value = parse_unsigned(raw)
    if not MIN_TEAMS <= value <= MAX_TEAMS:
        raise InvalidInputError(f"Team count out of range: {value}")
    return value


def validate_player_count(raw: str, team_count: int) -> int:
    """At least one player per team, at most ``MAX_PLAYERS`` in total."""
    value = parse_unsigned(raw)
    if not team_count <= value <= MAX_PLAYERS:
        raise InvalidInputError(f"Player count out of range: {value}")
    return value


def validate_name(raw: str) -> str:
    """Names start with an ASCII capital and continue with letters only.

    The trailing letters may be any alphabetic character, not just ASCII.
    Length limits apply to the UTF-8 encoded size, so non-ASCII letters
    count for more than one.
    """
    if not MIN_NAME_LENGTH <= len(raw.encode("utf-8")) <= MAX_NAME_LENGTH:
        raise InvalidInputError(f"Name length out of range: {raw!r}")
    if raw[0] not in string.ascii_uppercase:
        raise InvalidInputError(f"Name must start with a capital letter: {raw!r}")
    if not all(symbol.isalpha() for symbol in raw[1:]):
        raise InvalidInputError(f"Name must contain only letters: {raw!r}")
    return raw


def validate_team_number(raw: str, team_count: int) -> int:
    value = parse_unsigned(raw)
    if value >= team_count:
        raise InvalidInputError(f"Team number out of range: {value}")
    return value


def validate_power(raw: str) -> int:
    value = parse_unsigned(raw)
    if not MIN_POWER <= value <= MAX_POWER:
        raise InvalidInputError(f"Power out of range: {value}")
    return value


def validate_visibility(raw: str) -> bool:
    if raw == VISIBLE_TOKEN:
        return True
    if raw == HIDDEN_TOKEN:
        return False
    raise InvalidInputError(f"Unknown visibility token: {raw!r}")
