"""
Dialogue input adapter.

Turns discrete player intents into engine calls. Intents come either from
code (a proximity trigger calling `request_start`) or from raw pygame key
events routed through `handle_event`.

Usage:
    dialogue_input = DialogueInput(engine)

    for event in pygame.event.get():
        if dialogue_input.handle_event(event):
            continue  # dialogue consumed the key
        ...
"""

from __future__ import annotations

from typing import Any

import pygame

from colloquy.core.actions import Action, CHOICE_ACTIONS, DEFAULT_KEY_BINDINGS
from colloquy.core.events import DialogueEvent, Event
from colloquy.dialogue.engine import DialogueEngine


class DialogueInput:
    """
    Routes advance / choose / start intents to a DialogueEngine.

    Keeps a highlighted choice for keyboard navigation; the highlight resets
    whenever a new choice set is presented.
    """

    def __init__(
        self,
        engine: DialogueEngine,
        key_bindings: dict[Action, list[int]] | None = None,
    ):
        self.engine = engine
        self.highlighted = 0

        # Key bindings (action -> list of keys)
        self._key_bindings = {
            action: list(keys)
            for action, keys in (key_bindings or DEFAULT_KEY_BINDINGS).items()
        }
        self._reverse_key_bindings: dict[int, list[Action]] = {}
        self._rebuild_reverse_bindings()

        engine.events.subscribe(DialogueEvent.CHOICES_AVAILABLE, self._on_choices_available)

    def _rebuild_reverse_bindings(self) -> None:
        """Build reverse lookup: key -> actions."""
        self._reverse_key_bindings.clear()
        for action, keys in self._key_bindings.items():
            for key in keys:
                self._reverse_key_bindings.setdefault(key, []).append(action)

    def bind(self, action: Action, keys: list[int]) -> None:
        """Replace the keys bound to an action."""
        self._key_bindings[action] = list(keys)
        self._rebuild_reverse_bindings()

    def keys_for(self, action: Action) -> list[int]:
        return list(self._key_bindings.get(action, []))

    # Intents

    def request_advance(self) -> None:
        """Advance the conversation unless a choice is waiting."""
        if self.engine.pending_choices:
            return
        self.engine.advance()

    def request_choice(self, index: int) -> None:
        self.engine.choose(index)

    def request_start(self, conversation_id: str) -> bool:
        return self.engine.start(conversation_id)

    # Raw input

    def handle_event(self, event: Any) -> bool:
        """
        Feed a pygame event.

        Returns:
            True if the dialogue consumed the event (do not pass it on)
        """
        if not self.engine.is_active:
            return False
        if event.type != pygame.KEYDOWN:
            return False

        for action in self._reverse_key_bindings.get(event.key, []):
            if self.perform(action):
                return True
        return False

    def perform(self, action: Action) -> bool:
        """
        Apply a semantic action.

        Returns:
            True if the action meant something in the current state
        """
        choices = self.engine.pending_choices

        if action is Action.INTERACT:
            # Interact only advances; with choices open it is still swallowed
            self.request_advance()
            return True

        if action is Action.CONFIRM:
            if choices:
                self.request_choice(self.highlighted)
            else:
                self.request_advance()
            return True

        if not choices:
            return False

        if action is Action.MENU_UP:
            self.highlighted = (self.highlighted - 1) % len(choices)
            return True

        if action is Action.MENU_DOWN:
            self.highlighted = (self.highlighted + 1) % len(choices)
            return True

        if action in CHOICE_ACTIONS:
            index = CHOICE_ACTIONS.index(action)
            if index < len(choices):
                self.request_choice(index)
                return True

        return False

    def _on_choices_available(self, event: Event) -> None:
        self.highlighted = 0
