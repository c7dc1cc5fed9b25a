"""
Log management for game messages and debugging.

The log manager listens to the event bus and keeps a categorized, bounded
record of what happened during a run. It is purely diagnostic: the battle
report is built from the session, never from this log.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional

from ..core.events.event_manager import EventManager
from ..core.events.events import (
    DebugMessage,
    EventType,
    GameAborted,
    GameEnded,
    GameEvent,
    GameStarted,
    LogMessage as LogEvent,
    PlayerAttacked,
    PlayerHealed,
    PlayersMerged,
    PlayerSpawned,
    RuleViolated,
    TeamRegistered,
    VisibilityFlipped,
)


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Run start/end, file handling
    SETUP = auto()      # Teams and players being registered
    BATTLE = auto()     # Successful commands
    WARNING = auto()    # Rule violations
    ERROR = auto()      # Fatal input errors
    DEBUG = auto()      # Interpreter internals


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    turn: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            category_tags = {
                LogCategory.SYSTEM: "SYS",
                LogCategory.SETUP: "SET",
                LogCategory.BATTLE: "BTL",
                LogCategory.WARNING: "WRN",
                LogCategory.ERROR: "ERR",
                LogCategory.DEBUG: "DBG",
            }
            parts.append(f"[{category_tags.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class LogManager:
    """Collects game events as categorized log messages."""

    def __init__(
        self,
        event_manager: EventManager,
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        log_dir: str = "logs",
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager to subscribe to
            max_messages: Maximum number of messages kept in the buffer
            default_level: Minimum level returned by get_messages
            log_dir: Directory used by save_log_to_file
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.log_dir = log_dir
        self.event_manager = event_manager

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.SETUP: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # SYSTEM and BATTLE default to INFO
        }

        self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        handlers = {
            EventType.LOG_MESSAGE: self._handle_log_message_event,
            EventType.DEBUG_MESSAGE: self._handle_debug_message_event,
            EventType.TEAM_REGISTERED: self._handle_setup_event,
            EventType.PLAYER_SPAWNED: self._handle_setup_event,
            EventType.PLAYER_ATTACKED: self._handle_battle_event,
            EventType.PLAYER_HEALED: self._handle_battle_event,
            EventType.VISIBILITY_FLIPPED: self._handle_battle_event,
            EventType.PLAYERS_MERGED: self._handle_battle_event,
            EventType.RULE_VIOLATED: self._handle_rule_violated,
            EventType.GAME_STARTED: self._handle_game_state_event,
            EventType.GAME_ENDED: self._handle_game_state_event,
            EventType.GAME_ABORTED: self._handle_game_state_event,
        }
        for event_type, handler in handlers.items():
            self.event_manager.subscribe(
                event_type, handler, subscriber_name=f"LogManager.{event_type.name.lower()}"
            )

    def _handle_log_message_event(self, event: GameEvent) -> None:
        if isinstance(event, LogEvent):
            try:
                category = LogCategory[event.category.upper()]
            except (KeyError, AttributeError):
                category = LogCategory.SYSTEM
            self.log(event.message, category, event.turn)

    def _handle_debug_message_event(self, event: GameEvent) -> None:
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG, event.turn)

    def _handle_setup_event(self, event: GameEvent) -> None:
        if isinstance(event, TeamRegistered):
            self.log(f"Team {event.team_index}: {event.team_name}", LogCategory.SETUP)
        elif isinstance(event, PlayerSpawned):
            visibility = "visible" if event.is_visible else "hidden"
            self.log(
                f"{event.name} joins team {event.team_number} with {event.power} power ({visibility})",
                LogCategory.SETUP,
            )

    def _handle_battle_event(self, event: GameEvent) -> None:
        if isinstance(event, PlayerAttacked):
            text = (f"{event.attacker} attacks {event.target}: "
                    f"{event.attacker_power} / {event.target_power}")
        elif isinstance(event, PlayerHealed):
            text = (f"{event.healer} heals {event.target}: "
                    f"{event.healer_power} / {event.target_power}")
        elif isinstance(event, VisibilityFlipped):
            state = "visible" if event.is_visible else "hidden"
            text = f"{event.name} is now {state}"
        elif isinstance(event, PlayersMerged):
            text = (f"{event.first} and {event.second} merge into {event.merged_name} "
                    f"with {event.power} power")
        else:
            return
        self.log(text, LogCategory.BATTLE, event.turn)

    def _handle_rule_violated(self, event: GameEvent) -> None:
        if isinstance(event, RuleViolated):
            self.log(f"'{event.command}' skipped: {event.message}", LogCategory.WARNING, event.turn)

    def _handle_game_state_event(self, event: GameEvent) -> None:
        if isinstance(event, GameStarted):
            self.log(f"Battle started with {event.team_count} teams and "
                     f"{event.player_count} players", LogCategory.SYSTEM)
        elif isinstance(event, GameEnded):
            result = event.winner if event.winner is not None else "tie"
            self.log(f"Battle ended after {event.turn} commands ({result}, "
                     f"{event.warning_count} warnings)", LogCategory.SYSTEM, event.turn)
        elif isinstance(event, GameAborted):
            self.log(f"Battle aborted: {event.reason}", LogCategory.ERROR, event.turn)

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM, turn: int = 0) -> None:
        """Add a message to the log."""
        self.messages.append(LogMessage(text=text, category=category, turn=turn))

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Get recent messages, filtered by category or by the current level.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Categories to include (None filters by log level)
        """
        if categories:
            filtered = [msg for msg in self.messages if msg.category in categories]
        else:
            filtered = [
                msg for msg in self.messages
                if self.category_levels.get(msg.category, LogLevel.INFO).value >= self.log_level.value
            ]

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def save_log_to_file(self) -> Optional[str]:
        """Save all messages to a timestamped file in ``log_dir``.

        Returns:
            The path written, or None if the file could not be written
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = os.path.join(self.log_dir, f"battle_{timestamp}.log")

        try:
            os.makedirs(self.log_dir, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Wizard Battle - Game Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                for msg in self.messages:
                    timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{timestamp_str}] [{msg.category.name}] [turn {msg.turn}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Game log saved to {filepath}")
        return filepath
