"""
Event bus connecting the interpreter, the setup loader and the log manager.

Publishers queue immutable events; subscribers registered for an event type
(or for every type) are called in publication order when the queue is
processed. A run is single threaded, so delivery is synchronous.
"""

from collections import defaultdict, deque
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


EventSubscriber = Callable[["GameEvent"], None]


class EventManager:
    """Central event bus for game system communication."""

    def __init__(self, enable_debug_logging: bool = False):
        """Initialize the event manager.

        Args:
            enable_debug_logging: Whether to report bus activity to the debug callback
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []

        # (event, source) pairs in publication order
        self._event_queue: deque[tuple["GameEvent", str]] = deque()

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Optional name for debugging
        """
        self._subscribers[event_type].append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to {event_type.name} events")

    def subscribe_all(
        self,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Subscribe to all events (universal subscriber)."""
        self._universal_subscribers.append(subscriber)

        subscriber_display = subscriber_name or getattr(subscriber, '__name__', 'anonymous')
        self._debug_log(f"Subscribed {subscriber_display} to ALL events")

    def publish(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Queue an event for the next process_events call.

        Args:
            event: The event to publish
            source: Optional source identifier for debugging
        """
        source = source or "unknown"
        self._event_queue.append((event, source))
        self._debug_log(f"Published {event.__class__.__name__} (source: {source})")

    def publish_immediate(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Deliver an event right away, bypassing the queue."""
        self._process_event(event, source or "immediate")

    def process_events(self) -> int:
        """Deliver every queued event.

        Returns:
            Number of events processed
        """
        processed_count = 0
        while self._event_queue:
            event, source = self._event_queue.popleft()
            self._process_event(event, source)
            processed_count += 1
        return processed_count

    def _process_event(self, event: "GameEvent", source: str) -> None:
        """Notify every subscriber of a single event.

        A failing subscriber is reported through the debug callback and does
        not stop delivery to the remaining subscribers.
        """
        self._debug_log(f"Processing {event.__class__.__name__} from {source} (turn: {event.turn})")

        subscribers = self._subscribers.get(event.event_type, []) + self._universal_subscribers
        for subscriber in subscribers:
            try:
                subscriber(event)
            except Exception as e:
                self._debug_log(
                    f"Error in subscriber {getattr(subscriber, '__name__', 'anonymous')}: {e}"
                )

