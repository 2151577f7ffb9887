from __future__ import annotations

from skyseas.game.app.event_bus import EventBus
from skyseas.game.app.events import EventKind, GameEvent


def test_event_bus_subscribe_publish_unsubscribe() -> None:
    bus = EventBus()
    received: list[GameEvent] = []
    sub = bus.subscribe(received.append)

    event = GameEvent(kind=EventKind.GAME_STARTED)
    assert bus.publish(event) == 1
    assert received == [event]

    bus.unsubscribe(sub)
    assert bus.publish(event) == 0
    assert received == [event]


def test_event_bus_filters_by_kind() -> None:
    bus = EventBus()
    strikes: list[GameEvent] = []
    everything: list[GameEvent] = []
    bus.subscribe(strikes.append, kinds=[EventKind.STRIKE])
    bus.subscribe(everything.append)

    assert bus.publish(GameEvent(kind=EventKind.RECON, actor=0)) == 1
    assert bus.publish(GameEvent(kind=EventKind.STRIKE, actor=0)) == 2
    assert [e.kind for e in strikes] == [EventKind.STRIKE]
    assert len(everything) == 2


def test_unsubscribe_unknown_is_noop() -> None:
    bus = EventBus()
    sub = bus.subscribe(lambda _event: None)
    bus.unsubscribe(sub)
    bus.unsubscribe(sub)
    assert bus.publish(GameEvent(kind=EventKind.VICTORY)) == 0
