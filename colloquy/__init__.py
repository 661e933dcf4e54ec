"""
Colloquy

A branching-dialogue interpreter for games.

Quick Start:
    from colloquy import DialogueEngine, EventBus, TextPresenter

    engine = DialogueEngine(EventBus(), presenter=TextPresenter())
    engine.load_file("dialogue/dialogue.json")
    engine.start("intro")
    engine.advance()
"""

__version__ = "0.1.0"

# Re-export the public API for convenience
from colloquy.core import (
    EventBus,
    Event,
    DialogueEvent,
    Action,
    DialogueConfig,
    RestartPolicy,
)

from colloquy.dialogue import (
    DialogueEngine,
    DialogueState,
    Presenter,
    NullPresenter,
    TextPresenter,
    ConversationRegistry,
    VariableStore,
    Diagnostics,
    Scalar,
    parse,
    parse_file,
    DialogueError,
    DocumentError,
    ConversationNotFound,
)

from colloquy.input import DialogueInput

__all__ = [
    # Core
    "EventBus",
    "Event",
    "DialogueEvent",
    "Action",
    "DialogueConfig",
    "RestartPolicy",
    # Dialogue
    "DialogueEngine",
    "DialogueState",
    "Presenter",
    "NullPresenter",
    "TextPresenter",
    "ConversationRegistry",
    "VariableStore",
    "Diagnostics",
    "Scalar",
    "parse",
    "parse_file",
    "DialogueError",
    "DocumentError",
    "ConversationNotFound",
    # Input
    "DialogueInput",
]
