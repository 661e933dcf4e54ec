"""
Diagnostics channel for authoring errors.

Bad dialogue data must never take the game down. Errors are logged,
kept in a short history for tooling, and published on the event bus.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Optional

from colloquy.core.events import DialogueEvent, EventBus
from colloquy.dialogue.errors import DialogueError


class Diagnostics:
    """Collects and broadcasts dialogue errors."""

    def __init__(self, events: Optional[EventBus] = None, history: int = 100):
        self.events = events
        self._history: deque[DialogueError] = deque(maxlen=history)
        self.logger = logging.getLogger(__name__)

    def report(self, error: DialogueError) -> None:
        """Report an authoring error."""
        self.logger.error(f"[dialogue] {error}")
        self._history.append(error)

        if self.events is not None:
            self.events.publish(DialogueEvent.DIAGNOSTIC, error=error)

    @property
    def history(self) -> list[DialogueError]:
        """Reported errors, oldest first."""
        return list(self._history)

    @property
    def last(self) -> Optional[DialogueError]:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()
