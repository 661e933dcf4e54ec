import gc
import logging
from colloquy.core.events import DialogueEvent

def test_publish_delivers_event_data(event_bus):
    received = []
    event_bus.subscribe(DialogueEvent.CHOICE_SELECTED, received.append, weak=False)

    event = event_bus.publish(DialogueEvent.CHOICE_SELECTED, index=2)

    assert received == [event]
    assert event.type is DialogueEvent.CHOICE_SELECTED
    assert event["index"] == 2
    assert event.get("label", "none") == "none"

def test_publish_without_subscribers(event_bus):
    event = event_bus.publish(DialogueEvent.ENDED)

    assert event.data == {}

def test_handlers_run_in_subscription_order(event_bus):
    order = []

    event_bus.subscribe(DialogueEvent.ENDED, lambda e: order.append("first"), weak=False)
    event_bus.subscribe(DialogueEvent.ENDED, lambda e: order.append("second"), weak=False)

    event_bus.publish(DialogueEvent.ENDED)

    assert order == ["first", "second"]

def test_other_event_types_not_delivered(event_bus):
    received = []
    event_bus.subscribe(DialogueEvent.STARTED, received.append, weak=False)

    event_bus.publish(DialogueEvent.ENDED)

    assert received == []

def test_weak_method_dropped_when_owner_collected(event_bus):
    received = []

    class Listener:
        def on_ended(self, event):
            received.append(event)

    listener = Listener()
    event_bus.subscribe(DialogueEvent.ENDED, listener.on_ended)
    event_bus.publish(DialogueEvent.ENDED)
    assert len(received) == 1

    del listener
    gc.collect()
    event_bus.publish(DialogueEvent.ENDED)

    assert len(received) == 1

def test_strong_handler_survives(event_bus):
    received = []
    event_bus.subscribe(DialogueEvent.ENDED, lambda e: received.append(e), weak=False)

    gc.collect()
    event_bus.publish(DialogueEvent.ENDED)

    assert len(received) == 1

def test_events_published_while_dispatching_are_queued(event_bus):
    order = []

    def on_selected(event):
        order.append("selected:start")
        event_bus.publish(DialogueEvent.UPDATED)
        order.append("selected:end")

    event_bus.subscribe(DialogueEvent.CHOICE_SELECTED, on_selected, weak=False)
    event_bus.subscribe(DialogueEvent.UPDATED, lambda e: order.append("updated"), weak=False)

    event_bus.publish(DialogueEvent.CHOICE_SELECTED, index=0)

    assert order == ["selected:start", "selected:end", "updated"]

def test_handler_error_is_logged_not_raised(event_bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    event_bus.subscribe(DialogueEvent.ENDED, broken, weak=False)
    event_bus.subscribe(DialogueEvent.ENDED, received.append, weak=False)

    with caplog.at_level(logging.ERROR, logger="colloquy.core.events"):
        event_bus.publish(DialogueEvent.ENDED)

    assert len(received) == 1
    assert "Error in event handler" in caplog.text

    # Bus is still usable afterwards
    event_bus.publish(DialogueEvent.ENDED)
    assert len(received) == 2
