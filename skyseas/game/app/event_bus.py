"""In-process pub/sub for game events."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from skyseas.game.app.events import EventKind, GameEvent

EventHandler = Callable[[GameEvent], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


class EventBus:
    """Delivers each published event to handlers subscribed to its kind."""

    def __init__(self) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[frozenset[EventKind] | None, EventHandler]] = {}

    def subscribe(
        self, handler: EventHandler, kinds: Iterable[EventKind] | None = None
    ) -> Subscription:
        """Subscribe *handler* to *kinds*, or to every event when omitted."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (frozenset(kinds) if kinds is not None else None, handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    def publish(self, event: GameEvent) -> int:
        """Publish one event and return number of invoked handlers."""
        invoked = 0
        for kinds, handler in tuple(self._subscriptions.values()):
            if kinds is None or event.kind in kinds:
                handler(event)
                invoked += 1
        return invoked
