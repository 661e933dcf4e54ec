import logging

from colloquy.core.events import DialogueEvent
from colloquy.dialogue.diagnostics import Diagnostics
from colloquy.dialogue.errors import ConversationNotFound, DocumentError


def test_report_logs_records_and_publishes(event_bus, caplog):
    published = []
    event_bus.subscribe(DialogueEvent.DIAGNOSTIC, lambda e: published.append(e["error"]), weak=False)
    diagnostics = Diagnostics(event_bus)
    error = ConversationNotFound("tavern", ["intro", "shop"])

    with caplog.at_level(logging.ERROR, logger="colloquy.dialogue.diagnostics"):
        diagnostics.report(error)

    assert "conversation 'tavern' not found. Known: intro, shop" in caplog.text
    assert diagnostics.history == [error]
    assert diagnostics.last is error
    assert published == [error]


def test_history_is_bounded():
    diagnostics = Diagnostics(history=2)

    for i in range(3):
        diagnostics.report(DocumentError(f"error {i}"))

    assert [str(e) for e in diagnostics.history] == ["error 1", "error 2"]


def test_works_without_event_bus():
    diagnostics = Diagnostics()
    diagnostics.report(DocumentError("broken"))

    assert diagnostics.last is not None


def test_clear():
    diagnostics = Diagnostics()
    diagnostics.report(DocumentError("broken"))
    diagnostics.clear()

    assert diagnostics.history == []
    assert diagnostics.last is None
