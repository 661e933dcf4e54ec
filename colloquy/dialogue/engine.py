"""
Dialogue engine - walks conversations node by node.

The engine owns the run state (current conversation, cursor, pending
choices) and is driven entirely from outside: `start`, `advance`, `choose`
and `end` run synchronously to completion and return. While waiting for a
choice the engine simply does nothing until `choose` is called.

Usage:
    events = EventBus()
    engine = DialogueEngine(events, presenter=TextPresenter())
    engine.load_file("dialogue/dialogue.json")

    engine.start("intro")
    engine.advance()
    engine.choose(0)
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional

from colloquy.core.config import DialogueConfig, RestartPolicy
from colloquy.core.events import DialogueEvent, Event, EventBus
from colloquy.dialogue.diagnostics import Diagnostics
from colloquy.dialogue.errors import (
    ConversationBusy,
    ConversationNotFound,
    DanglingChoice,
    DocumentError,
    JumpLimitExceeded,
)
from colloquy.dialogue.models import Choice, Conversation, DialogueDocument, DialogueNode
from colloquy.dialogue.parser import parse, parse_file
from colloquy.dialogue.presentation import NullPresenter, Presenter
from colloquy.dialogue.registry import ConversationRegistry
from colloquy.dialogue.variables import VariableStore


class DialogueState(Enum):
    """State of the traversal."""
    IDLE = auto()             # no conversation running
    DISPLAYING = auto()       # a line is shown, advance moves on
    AWAITING_CHOICE = auto()  # a line with choices is shown, only choose moves on


class DialogueEngine:
    """
    Runs one conversation at a time.

    Handles:
    - Loading dialogue documents into the registry and variable store
    - Walking nodes, applying assignments and following jumps
    - Presenting lines and choices through a Presenter
    - Publishing STARTED / UPDATED / CHOICES_AVAILABLE / ENDED notifications
    - Reporting authoring errors through Diagnostics instead of raising
    """

    def __init__(
        self,
        events: Optional[EventBus] = None,
        presenter: Optional[Presenter] = None,
        config: Optional[DialogueConfig] = None,
        registry: Optional[ConversationRegistry] = None,
        variables: Optional[VariableStore] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.events = events if events is not None else EventBus()
        self.presenter = presenter if presenter is not None else NullPresenter()
        self.config = config if config is not None else DialogueConfig()
        self.registry = registry if registry is not None else ConversationRegistry()
        self.variables = variables if variables is not None else VariableStore()
        self.diagnostics = (
            diagnostics if diagnostics is not None
            else Diagnostics(self.events, history=self.config.diagnostics_history)
        )
        self.logger = logging.getLogger(__name__)

        # Run state
        self._active = False
        self._conversation: Optional[Conversation] = None
        self._index = -1
        self._pending: tuple[Choice, ...] = ()

        # Choice buttons answer on the bus
        self.events.subscribe(DialogueEvent.CHOICE_SELECTED, self._on_choice_selected)

    # Loading

    def load(self, raw: str | bytes, source: str = "<string>") -> bool:
        """
        Load a dialogue document from text.

        A document that fails to parse is reported and leaves the previously
        loaded conversations and variables untouched.

        Returns:
            True if the document was loaded
        """
        try:
            document = parse(raw, source=source)
        except DocumentError as e:
            self.diagnostics.report(e)
            return False

        self.apply_document(document, source)
        return True

    def load_file(self, path: str | Path | None = None) -> bool:
        """Load a dialogue document file (defaults to config.document_path)."""
        path = Path(path) if path is not None else self.config.document_path
        try:
            document = parse_file(path)
        except DocumentError as e:
            self.diagnostics.report(e)
            return False

        self.apply_document(document, str(path))
        return True

    def apply_document(self, document: DialogueDocument, source: str = "<document>") -> None:
        """Replace registered conversations and variables with a parsed document."""
        self.registry.replace(document.conversations)
        self.variables.reset(document.variables)
        self.logger.info(f"Loaded {len(self.registry)} conversations from {source}")

    # Run state

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def state(self) -> DialogueState:
        if not self._active:
            return DialogueState.IDLE
        if self._pending:
            return DialogueState.AWAITING_CHOICE
        return DialogueState.DISPLAYING

    @property
    def current_conversation(self) -> Optional[Conversation]:
        return self._conversation

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_node(self) -> Optional[DialogueNode]:
        """Node under the cursor, None before the first node or when idle."""
        if self._conversation is None:
            return None
        if 0 <= self._index < len(self._conversation.nodes):
            return self._conversation.nodes[self._index]
        return None

    @property
    def pending_choices(self) -> tuple[str, ...]:
        """Labels of the choices waiting for an answer."""
        return tuple(choice.text for choice in self._pending)

    # Flow

    def start(self, conversation_id: str) -> bool:
        """
        Start a conversation and show its first line.

        Returns:
            True if the conversation was found and started
        """
        try:
            conversation = self.registry.require(conversation_id, context="start")
        except ConversationNotFound as e:
            self.diagnostics.report(e)
            return False

        if self._active and self._conversation is not None:
            if self.config.restart_policy is RestartPolicy.REJECT:
                self.diagnostics.report(
                    ConversationBusy(conversation.id, self._conversation.id)
                )
                return False
            self.logger.warning(
                f"Starting '{conversation.id}' replaces running '{self._conversation.id}'"
            )

        self._active = True
        self._conversation = conversation
        self._index = -1
        self._pending = ()

        self.events.publish(DialogueEvent.STARTED, conversation=conversation.id)
        self.advance()
        return True

    def advance(self) -> None:
        """
        Move to the next node.

        Does nothing while idle or while a choice is pending. Jump nodes are
        followed silently until a node with a line is reached.
        """
        if not self._active or self._pending:
            return

        hops = 0
        while True:
            self._index += 1
            if self._index >= len(self._conversation.nodes):
                self.end()
                return

            node = self._conversation.nodes[self._index]

            for name, value in node.assignments.items():
                self.variables.set(name, value)

            if not node.has_jump:
                break

            hops += 1
            if hops > self.config.max_jump_hops:
                self.diagnostics.report(
                    JumpLimitExceeded(node.jump, self.config.max_jump_hops)
                )
                self.end()
                return

            try:
                target = self.registry.require(
                    node.jump, context=f"goto in '{self._conversation.id}'"
                )
            except ConversationNotFound as e:
                self.diagnostics.report(e)
                self.end()
                return

            self.logger.debug(f"goto '{self._conversation.id}' -> '{target.id}'")
            self._conversation = target
            self._index = -1

        self._show(node)

    def choose(self, index: int) -> None:
        """
        Answer the pending choice set.

        Indices that do not match the pending set are ignored. A choice whose
        target does not exist is reported; the engine then stays on the
        current line with the choices cleared.
        """
        try:
            choice = self._pending_choice(index)
        except DanglingChoice as e:
            self.logger.debug(f"Ignoring choice: {e}")
            return

        self.events.publish(
            DialogueEvent.CHOICE_MADE,
            index=index,
            label=choice.text,
            target=choice.target,
        )

        try:
            target = self.registry.require(
                choice.target, context=f"choice in '{self._conversation.id}'"
            )
        except ConversationNotFound as e:
            self.diagnostics.report(e)
            self._pending = ()
            self.presenter.clear_choices()
            node = self.current_node
            self.events.publish(
                DialogueEvent.UPDATED,
                speaker=node.speaker if node else "",
                text=node.text if node else "",
                choices=(),
            )
            return

        self.logger.debug(f"choice {index} -> '{target.id}'")
        self._conversation = target
        self._index = -1
        self._pending = ()
        self.presenter.clear_choices()
        self.advance()

    def end(self) -> None:
        """End the conversation. Safe to call when nothing is running."""
        self._active = False
        self._conversation = None
        self._index = -1
        self._pending = ()

        self.presenter.hide()
        self.events.publish(DialogueEvent.ENDED)

    # Listeners

    def on_updated(self, callback: Callable[[Event], None]) -> None:
        """Call `callback` after every rendered line."""
        self.events.subscribe(DialogueEvent.UPDATED, callback, weak=False)

    def on_ended(self, callback: Callable[[Event], None]) -> None:
        """Call `callback` whenever a conversation ends."""
        self.events.subscribe(DialogueEvent.ENDED, callback, weak=False)

    # Internals

    def _show(self, node: DialogueNode) -> None:
        self.presenter.render_line(node.speaker, node.text)
        self.presenter.clear_choices()
        self._pending = ()

        if node.has_choices:
            self._pending = node.choices
            labels = self.pending_choices
            self.logger.debug(f"Presenting {len(labels)} choices")
            self.presenter.render_choices(labels)
            self.events.publish(DialogueEvent.CHOICES_AVAILABLE, choices=labels)

        self.events.publish(
            DialogueEvent.UPDATED,
            speaker=node.speaker,
            text=node.text,
            choices=self.pending_choices,
        )

    def _pending_choice(self, index: int) -> Choice:
        # bool is an int subclass but never a choice index
        valid = isinstance(index, int) and not isinstance(index, bool)
        if not self._active or not valid or not 0 <= index < len(self._pending):
            raise DanglingChoice(index, len(self._pending))
        return self._pending[index]

    def _on_choice_selected(self, event: Event) -> None:
        self.choose(event.get("index"))
