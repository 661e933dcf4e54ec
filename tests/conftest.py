import copy
import json
import os
import sys
import pytest
from unittest.mock import MagicMock

# Ensure colloquy can be imported without installing
sys.path.append(os.getcwd())

SAMPLE_DOCUMENT = {
    "variables": {"gold": 10, "met_mira": False, "player_name": "Ari"},
    "conversations": {
        "Intro ": [
            {"speaker": "Mira", "text": "Hello there.", "set": {"met_mira": True}},
            {
                "speaker": "Mira",
                "text": "Where to?",
                "choices": [
                    {"text": "The shop", "goto": "shop"},
                    {"text": "Goodbye", "goto": " FAREWELL "},
                    {"text": "Somewhere else", "goto": "nowhere"},
                ],
            },
            {"speaker": "Mira", "text": "Suit yourself."},
        ],
        "shop": [
            {"speaker": "Bram", "text": "Welcome to the shop."},
            {"speaker": "Bram", "text": "Come again."},
        ],
        "farewell": [
            {"speaker": "Mira", "text": "Safe travels."},
        ],
        "chain": [
            {"set": {"step": 1}, "goto": "chain2"},
        ],
        "chain2": [
            {"set": {"step": 2, "gold": 99}, "goto": "chain3"},
        ],
        "chain3": [
            {"set": {"step": 3}, "goto": "SHOP"},
        ],
        "lost": [
            {"speaker": "Mira", "text": "Follow me.", "set": {"followed": True}},
            {"goto": "missing"},
        ],
        "loop_a": [{"goto": "loop_b"}],
        "loop_b": [{"goto": "loop_a"}],
        "empty": [],
    },
}


@pytest.fixture
def sample_document():
    """Fresh copy of the sample document data."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_text(sample_document):
    """Sample document serialized as JSON text."""
    return json.dumps(sample_document)


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from colloquy.core.events import EventBus
    return EventBus()


@pytest.fixture
def presenter():
    """Presenter mock recording every call."""
    from colloquy.dialogue.presentation import NullPresenter
    return MagicMock(spec=NullPresenter)


@pytest.fixture
def recorded_events(event_bus):
    """List of (event type, data) for every dialogue notification."""
    from colloquy.core.events import DialogueEvent

    received = []

    def record(event):
        received.append((event.type, dict(event.data)))

    for event_type in DialogueEvent:
        if event_type is not DialogueEvent.CHOICE_SELECTED:
            event_bus.subscribe(event_type, record, weak=False)
    return received


@pytest.fixture
def engine(event_bus, presenter, sample_text):
    """Engine with the sample document loaded."""
    from colloquy.dialogue.engine import DialogueEngine

    engine = DialogueEngine(event_bus, presenter=presenter)
    assert engine.load(sample_text, source="sample")
    return engine
