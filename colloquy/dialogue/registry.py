"""
Conversation registry - id -> Conversation lookup.

Authors type ids inconsistently ("Intro", "intro ", "INTRO"), so every id is
normalized (surrounding whitespace trimmed, case folded) both when stored and
when looked up.
"""

from __future__ import annotations

from typing import Iterable, Optional

from colloquy.dialogue.errors import ConversationNotFound
from colloquy.dialogue.models import Conversation, DialogueNode


def normalize_id(conversation_id: Optional[str]) -> str:
    """Normalized lookup key for a conversation id."""
    if conversation_id is None:
        return ""
    return conversation_id.strip().casefold()


class ConversationRegistry:
    """
    Stores conversations keyed by normalized id.

    Usage:
        registry = ConversationRegistry()
        registry.register("Intro ", nodes)
        registry.lookup("intro")  # -> Conversation(id="Intro")
    """

    def __init__(self):
        self._conversations: dict[str, Conversation] = {}

    def register(
        self,
        conversation_id: str,
        nodes: Iterable[DialogueNode] = (),
    ) -> Conversation:
        """
        Register a conversation, replacing any previous one with the same id.

        Returns:
            The stored conversation
        """
        key = normalize_id(conversation_id)
        if not key:
            raise ValueError("Conversation id must not be empty")

        conversation = Conversation(id=conversation_id.strip(), nodes=tuple(nodes))
        # Drop first so a re-registered id moves to the end of known_ids()
        self._conversations.pop(key, None)
        self._conversations[key] = conversation
        return conversation

    def add(self, conversation: Conversation) -> Conversation:
        """Register an already built conversation."""
        return self.register(conversation.id, conversation.nodes)

    def replace(self, conversations: Iterable[Conversation]) -> None:
        """Swap the whole registry content for a new set of conversations."""
        fresh = ConversationRegistry()
        for conversation in conversations:
            fresh.add(conversation)
        self._conversations = fresh._conversations

    def lookup(self, conversation_id: Optional[str]) -> Optional[Conversation]:
        """Get a conversation by id, or None when it is unknown."""
        key = normalize_id(conversation_id)
        if not key:
            return None
        return self._conversations.get(key)

    def require(
        self,
        conversation_id: Optional[str],
        context: str = "start",
    ) -> Conversation:
        """
        Get a conversation by id.

        Raises:
            ConversationNotFound: With the list of known ids
        """
        conversation = self.lookup(conversation_id)
        if conversation is None:
            raise ConversationNotFound(
                conversation_id.strip() if conversation_id else conversation_id,
                self.known_ids(),
                context=context,
            )
        return conversation

    def known_ids(self) -> list[str]:
        """Registered ids as authored (trimmed), in registration order."""
        return [conversation.id for conversation in self._conversations.values()]

    def clear(self) -> None:
        self._conversations.clear()

    def __len__(self) -> int:
        return len(self._conversations)

    def __contains__(self, conversation_id: object) -> bool:
        if not isinstance(conversation_id, str):
            return False
        return self.lookup(conversation_id) is not None
