"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Publisher-subscriber event routing
- events.py: Event definitions for inter-system communication
"""

from .event_manager import EventManager
from .events import (
    DebugMessage,
    EventType,
    GameAborted,
    GameEnded,
    GameEvent,
    GameStarted,
    LogMessage,
    PlayerAttacked,
    PlayerHealed,
    PlayersMerged,
    PlayerSpawned,
    RuleViolated,
    TeamRegistered,
    VisibilityFlipped,
)

__all__ = [
    "EventManager",
    "DebugMessage",
    "EventType",
    "GameAborted",
    "GameEnded",
    "GameEvent",
    "GameStarted",
    "LogMessage",
    "PlayerAttacked",
    "PlayerHealed",
    "PlayersMerged",
    "PlayerSpawned",
    "RuleViolated",
    "TeamRegistered",
    "VisibilityFlipped",
]
