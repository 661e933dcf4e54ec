"""
Typed event bus for decoupled communication.

Uses Enums for event types so listeners never match on magic strings.
The dialogue engine publishes its notifications here and listens for
choice selections coming back from the presentation layer.

Usage:
    bus = EventBus()

    # Subscribe
    bus.subscribe(DialogueEvent.ENDED, on_dialogue_ended)

    # Publish
    bus.publish(DialogueEvent.CHOICE_SELECTED, index=1)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Union
from weakref import WeakMethod, ref

logger = logging.getLogger(__name__)


class DialogueEvent(Enum):
    """Notifications exchanged between the dialogue engine and its collaborators."""
    # Engine -> listeners
    STARTED = auto()            # conversation=<display id>
    UPDATED = auto()            # speaker, text, choices
    CHOICES_AVAILABLE = auto()  # choices=<tuple of labels>, indices are stable
    CHOICE_MADE = auto()        # index, label, target
    ENDED = auto()
    DIAGNOSTIC = auto()         # error=<DialogueError>

    # Presentation -> engine
    CHOICE_SELECTED = auto()    # index


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get event data by key (dict-style)."""
        return self.data[key]


EventHandler = Callable[[Event], None]

# A stored handler: the callable itself, or a weak reference to it
_HandlerRef = Union[EventHandler, ref, WeakMethod]


class EventBus:
    """
    Publish/subscribe hub shared by the engine, input and presentation.

    Handlers run in subscription order. Weakly held handlers disappear once
    their owner is garbage collected. An event published from inside a
    handler is queued and delivered after the current one finishes, so a
    listener always sees the engine in a settled state.
    """

    def __init__(self):
        self._handlers: dict[Enum, list[_HandlerRef]] = {}
        self._queue: list[Event] = []
        self._dispatching = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        weak: bool = True,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            weak: If True, hold the handler weakly (bound methods of short-lived
                listeners then unsubscribe themselves)
        """
        if weak:
            handler_ref = WeakMethod(handler) if hasattr(handler, "__self__") else ref(handler)
        else:
            handler_ref = handler

        self._handlers.setdefault(event_type, []).append(handler_ref)

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The Event object
        """
        event = Event(type=event_type, data=data)
        self._queue.append(event)

        if not self._dispatching:
            self._drain()
        return event

    def _drain(self) -> None:
        self._dispatching = True
        try:
            while self._queue:
                self._dispatch(self._queue.pop(0))
        finally:
            self._dispatching = False

    def _dispatch(self, event: Event) -> None:
        handlers = self._handlers.get(event.type)
        if not handlers:
            return

        # Iterate a snapshot, handlers may subscribe while running
        for handler_ref in list(handlers):
            handler = _resolve(handler_ref)
            if handler is None:
                continue

            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event.type}")

        # Drop handlers whose owners were collected
        handlers[:] = [h for h in handlers if _resolve(h) is not None]


def _resolve(handler_ref: _HandlerRef) -> EventHandler | None:
    if isinstance(handler_ref, ref):
        return handler_ref()
    return handler_ref
