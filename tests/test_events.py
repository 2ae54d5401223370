import pytest
from eventmanager import EventManager, EventTypes


class GameEvents(EventTypes):
    WORK = "work"
    SLEEP = "sleep"
    _HIDDEN = "hidden"
    lower = "ignored"


class ExtendedEvents(GameEvents):
    EAT = "eat"


def test_event_types_members():
    assert GameEvents.members() == {"WORK": "work", "SLEEP": "sleep"}
    assert GameEvents.values() == ["work", "sleep"]


def test_event_types_inheritance():
    assert ExtendedEvents.values() == ["work", "sleep", "eat"]
    assert ExtendedEvents.contains("eat")
    assert not GameEvents.contains("eat")


def test_work_scenario():
    """Unbound listener first, then the same call bound to its target."""
    events = EventManager()
    calls = []
    target = object()

    def on_work(*args):
        calls.append(args)

    events.on(GameEvents.WORK, on_work)
    events.on(GameEvents.WORK, on_work, target)
    events.emit(GameEvents.WORK, "Alice", 30)

    assert calls == [("Alice", 30), (target, "Alice", 30)]


def test_sleep_scenario():
    events = EventManager()
    calls = []

    off, sleep_id = events.once(GameEvents.SLEEP, lambda name, minutes: calls.append((name, minutes)))
    events.emit(GameEvents.SLEEP, "Bob", 15)

    assert calls == [("Bob", 15)]
    assert events.get_event_nodes(GameEvents.SLEEP) == ()

    off()
    events.off(sleep_id)
    assert len(events) == 0


def test_listener_error_is_not_swallowed():
    events = EventManager()

    def buggy(name, minutes):
        raise KeyError(name)

    events.on(GameEvents.WORK, buggy)

    with pytest.raises(KeyError):
        events.emit(GameEvents.WORK, "Alice", 30)
