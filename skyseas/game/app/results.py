"""Command results returned across the controller boundary."""

from __future__ import annotations

from dataclasses import dataclass

from skyseas.game.app.events import GameEvent
from skyseas.game.core.errors import Rejection


@dataclass(frozen=True, slots=True)
class Success:
    """Accepted command with its primary event and any follow-up events.

    ``cells`` is returned to the caller only and never published, so a
    placement stays private to the player who made it.
    """

    event: GameEvent
    extra: tuple[GameEvent, ...] = ()
    cells: tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        return True

    @property
    def events(self) -> tuple[GameEvent, ...]:
        return (self.event, *self.extra)

    @classmethod
    def of(cls, events: list[GameEvent]) -> Success:
        return cls(event=events[0], extra=tuple(events[1:]))


@dataclass(frozen=True, slots=True)
class Rejected:
    """Refused command; the session was left unchanged."""

    reason: Rejection
    message: str

    @property
    def ok(self) -> bool:
        return False


type CommandResult = Success | Rejected
