"""Bounded battle log fed from the event bus."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import UTC, datetime

from skyseas.game.app.event_bus import EventBus, Subscription
from skyseas.game.app.events import GameEvent
from skyseas.game.core.models import DEFAULT_LOG_CAPACITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Timestamped event."""

    ts: datetime
    event: GameEvent


class EventLog:
    """Keeps the newest events first, dropping the oldest past capacity."""

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self._subscription: Subscription | None = None

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def attach(self, bus: EventBus) -> None:
        """Start recording every event published on *bus*."""
        if self._subscription is not None:
            return
        self._subscription = bus.subscribe(self.record)

    def record(self, event: GameEvent) -> None:
        self._entries.appendleft(LogEntry(ts=datetime.now(UTC), event=event))
        logger.info(
            "game_event kind=%s actor=%s",
            event.kind.value,
            event.actor,
            extra={
                "event_kind": event.kind.value,
                "actor": event.actor,
                "layer": event.layer.value if event.layer is not None else None,
                "cell": event.cell,
                "outcome": event.outcome,
                "unit": event.unit.value if event.unit is not None else None,
            },
        )

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> list[LogEntry]:
        """Return entries, newest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
