"""
Core module.

Exports:
- EventBus, Event, DialogueEvent: Event system
- Action: Input actions
- DialogueConfig, RestartPolicy: Configuration
"""

from colloquy.core.events import EventBus, Event, EventHandler, DialogueEvent
from colloquy.core.actions import Action, CHOICE_ACTIONS, DEFAULT_KEY_BINDINGS
from colloquy.core.config import DialogueConfig, RestartPolicy

__all__ = [
    # Events
    "EventBus",
    "Event",
    "EventHandler",
    "DialogueEvent",
    # Input
    "Action",
    "CHOICE_ACTIONS",
    "DEFAULT_KEY_BINDINGS",
    # Config
    "DialogueConfig",
    "RestartPolicy",
]
