"""
Dialogue error taxonomy.

Authoring errors (bad documents, unknown conversation ids) are reported
through Diagnostics by the engine rather than raised to the game loop.
"""

from __future__ import annotations

from typing import Iterable


class DialogueError(Exception):
    """Base class for all dialogue errors."""


class DocumentError(DialogueError):
    """The dialogue document is malformed or misses a required section."""

    def __init__(self, message: str, path: str = "", source: str = ""):
        self.path = path
        self.source = source

        prefix = f"{source}: " if source else ""
        where = f" (at {path})" if path else ""
        super().__init__(f"{prefix}{message}{where}")


class ConversationNotFound(DialogueError):
    """A conversation id (start, jump or choice target) is not registered."""

    def __init__(
        self,
        conversation_id: str | None,
        known_ids: Iterable[str] = (),
        context: str = "start",
    ):
        self.conversation_id = conversation_id
        self.known_ids = list(known_ids)
        self.context = context

        known = ", ".join(self.known_ids) if self.known_ids else "<none>"
        super().__init__(
            f"{context}: conversation '{conversation_id}' not found. Known: {known}"
        )


class DanglingChoice(DialogueError):
    """A choice index does not match the pending choice set."""

    def __init__(self, index: int, available: int):
        self.index = index
        self.available = available
        super().__init__(f"Choice {index} is not available ({available} pending)")


class ConversationBusy(DialogueError):
    """`start` was refused because another conversation is running."""

    def __init__(self, requested: str, running: str):
        self.requested = requested
        self.running = running
        super().__init__(
            f"Cannot start '{requested}' while '{running}' is running"
        )


class JumpLimitExceeded(DialogueError):
    """A chain of jumps went on for longer than the configured hop limit."""

    def __init__(self, conversation_id: str, hops: int):
        self.conversation_id = conversation_id
        self.hops = hops
        super().__init__(
            f"Jump chain exceeded {hops} hops at '{conversation_id}' (cyclic goto?)"
        )
