"""Game events published while a battle script runs.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the ``turn`` (1-based command number, 0 during setup)
- Events carry player names and power snapshots, never live records
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class EventType(Enum):
    """Types of game events that managers can subscribe to."""
    # Setup Events
    TEAM_REGISTERED = auto()
    PLAYER_SPAWNED = auto()

    # Command Events
    PLAYER_ATTACKED = auto()
    PLAYER_HEALED = auto()
    VISIBILITY_FLIPPED = auto()
    PLAYERS_MERGED = auto()
    RULE_VIOLATED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()

    # Game State Events
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    GAME_ABORTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all game events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class TeamRegistered(GameEvent):
    """Event emitted when a team is added during setup."""
    team_index: int
    team_name: str

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.TEAM_REGISTERED)


@dataclass(frozen=True)
class PlayerSpawned(GameEvent):
    """Event emitted when a player joins the roster."""
    name: str
    team_number: int
    power: int
    is_visible: bool

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_SPAWNED)


@dataclass(frozen=True)
class PlayerAttacked(GameEvent):
    """Event emitted after a successful attack."""
    attacker: str
    target: str
    attacker_power: int
    target_power: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_ATTACKED)


@dataclass(frozen=True)
class PlayerHealed(GameEvent):
    """Event emitted after a successful heal."""
    healer: str
    target: str
    healer_power: int
    target_power: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_HEALED)


@dataclass(frozen=True)
class VisibilityFlipped(GameEvent):
    """Event emitted after a player toggles visibility."""
    name: str
    is_visible: bool

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.VISIBILITY_FLIPPED)


@dataclass(frozen=True)
class PlayersMerged(GameEvent):
    """Event emitted when two players are replaced by a super player."""
    first: str
    second: str
    merged_name: str
    power: int
    team_number: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYERS_MERGED)


@dataclass(frozen=True)
class RuleViolated(GameEvent):
    """Event emitted when a command is skipped with a warning."""
    command: str
    message: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.RULE_VIOLATED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event for requesting a log message."""
    message: str
    category: str = "SYSTEM"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event for debug output from a named source."""
    message: str
    source: str = "unknown"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """Event emitted when setup is complete and commands begin."""
    team_count: int
    player_count: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_STARTED)


@dataclass(frozen=True)
class GameEnded(GameEvent):
    """Event emitted once the outcome is known."""
    winner: Optional[str]
    warning_count: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_ENDED)


@dataclass(frozen=True)
class GameAborted(GameEvent):
    """Event emitted when a fatal input error stops the run."""
    reason: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_ABORTED)
