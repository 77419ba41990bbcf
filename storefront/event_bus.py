"""
In-memory event bus for store notifications.

The store announces what happens on its floor (a department opens, a customer
walks in, a checkout finishes) by publishing events here. Anything that wants
to react, such as the console driver or a test, subscribes by event type.

Design decisions:
- Synchronous delivery, handlers run in subscription order
- Type-based subscriptions plus a wildcard for "everything"
- A failing handler is logged and does not stop the remaining handlers
- Published events are kept in an in-memory log for inspection unless
  logging is switched off with ``set_logging(False)``
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from uuid import uuid4

logger = logging.getLogger("event_bus")

WILDCARD = "*"


@dataclass
class Event:
    """
    Record of something that happened in the store.

    Attributes:
        event_type: Name used for routing (see ``storefront.events.EventTypes``)
        payload: Event data; plain JSON-friendly values only
        source: Component that published the event
        event_id: Unique identifier for this event instance
        timestamp: When the event was created
    """
    event_type: str
    payload: dict[str, Any]
    source: str
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return f"Event({self.event_type}, id={self.event_id[:8]}, source={self.source})"


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe hub.

    Example:
        bus = EventBus()
        bus.subscribe("CustomerEntered", lambda e: print(e.payload["customer_name"]))
        bus.publish(Event(
            event_type="CustomerEntered",
            source="store",
            payload={"customer_name": "Alice", "store_name": "Online Store"},
        ))
    """

    def __init__(self, log_events: bool = True):
        self._subscribers: dict[str, list[EventHandler]] = defaultdict(list)
        self._event_log: list[Event] = []
        self._log_events = log_events

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """Call ``handler`` for every event of ``event_type``."""
        self._subscribers[event_type].append(handler)
        logger.debug(f"Subscribed handler to '{event_type}' events")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Call ``handler`` for every event regardless of type."""
        self._subscribers[WILDCARD].append(handler)
        logger.debug("Subscribed handler to ALL events")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> bool:
        """
        Remove a handler.

        Returns:
            True if the handler was subscribed and has been removed
        """
        try:
            self._subscribers[event_type].remove(handler)
        except ValueError:
            return False
        logger.debug(f"Unsubscribed handler from '{event_type}' events")
        return True

    def publish(self, event: Event) -> int:
        """
        Deliver an event to its subscribers.

        Returns:
            Number of handlers that were called
        """
        if self._log_events:
            self._event_log.append(event)
        logger.debug(f"Publishing: {event}")

        handlers = self._subscribers.get(event.event_type, []) + self._subscribers.get(WILDCARD, [])
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Handler raised exception for {event}: {e}")

        return len(handlers)

    def get_subscriber_count(self, event_type: str) -> int:
        return len(self._subscribers.get(event_type, []))

    def get_event_log(self) -> list[Event]:
        """Copy of every event published so far, oldest first."""
        return self._event_log.copy()

    def clear_event_log(self) -> None:
        self._event_log.clear()

    def set_logging(self, enabled: bool) -> None:
        """Turn the in-memory event log on or off. Long-running processes turn it off."""
        self._log_events = enabled


# Module-level default bus, used when a component is not handed one
_default_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """Get the default event bus, creating it on first use."""
    global _default_bus
    if _default_bus is None:
        _default_bus = EventBus()
    return _default_bus


def reset_event_bus() -> EventBus:
    """Replace the default event bus with a fresh one."""
    global _default_bus
    _default_bus = EventBus()
    return _default_bus
