"""Phase transition table: setup -> battle -> game over."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from skyseas.game.core.models import Phase
from skyseas.game.core.placement import is_complete
from skyseas.game.core.session import GameSession


@dataclass(frozen=True, slots=True)
class PhaseContext:
    """Transition evaluation context."""

    trigger: str
    source: Phase
    target: Phase
    session: GameSession


type PhaseGuard = Callable[[PhaseContext], bool]


@dataclass(frozen=True, slots=True)
class PhaseTransition:
    """One row of the transition table."""

    trigger: str
    source: Phase
    target: Phase
    guard: PhaseGuard | None = None


def _fleets_locked(context: PhaseContext) -> bool:
    return all(player.locked and is_complete(player) for player in context.session.players)


def _winner_declared(context: PhaseContext) -> bool:
    return context.session.winner is not None


PHASE_TRANSITIONS: tuple[PhaseTransition, ...] = (
    PhaseTransition("begin_battle", Phase.SETUP, Phase.BATTLE, guard=_fleets_locked),
    PhaseTransition("victory", Phase.BATTLE, Phase.GAME_OVER, guard=_winner_declared),
)


def resolve_phase(session: GameSession, trigger: str) -> Phase | None:
    """Return the phase *trigger* leads to from the session's phase, if any."""
    for transition in PHASE_TRANSITIONS:
        if transition.trigger != trigger:
            continue
        if transition.source is not session.phase:
            continue
        context = PhaseContext(
            trigger=trigger,
            source=session.phase,
            target=transition.target,
            session=session,
        )
        if transition.guard is not None and not transition.guard(context):
            continue
        return transition.target
    return None


def advance_phase(session: GameSession, trigger: str) -> bool:
    """Apply *trigger* to the session. Returns whether a transition matched."""
    target = resolve_phase(session, trigger)
    if target is None:
        return False
    session.phase = target
    return True
