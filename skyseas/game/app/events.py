"""Structured game events emitted by successful commands.

Events carry data only; presentation layers decide how to word or animate them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from skyseas.game.core.battle import ReconReport, StrikeReport, TurnReport
from skyseas.game.core.models import Layer, UnitType
from skyseas.game.core.setup_phase import LockInReport
from skyseas.game.core.superiority import QueryAnswer


class EventKind(StrEnum):
    GAME_STARTED = "GAME_STARTED"
    UNIT_PLACED = "UNIT_PLACED"
    PLACEMENT_RANDOMIZED = "PLACEMENT_RANDOMIZED"
    PLACEMENT_CLEARED = "PLACEMENT_CLEARED"
    LOCKED_IN = "LOCKED_IN"
    BATTLE_STARTED = "BATTLE_STARTED"
    LAYER_SELECTED = "LAYER_SELECTED"
    ACTION_SELECTED = "ACTION_SELECTED"
    STRIKE = "STRIKE"
    SHIP_SUNK = "SHIP_SUNK"
    PLANE_DISABLED = "PLANE_DISABLED"
    RECON = "RECON"
    QUERY_ANSWERED = "QUERY_ANSWERED"
    TURN_ENDED = "TURN_ENDED"
    PLANE_RETURNED = "PLANE_RETURNED"
    VICTORY = "VICTORY"


@dataclass(frozen=True, slots=True)
class GameEvent:
    """One thing that happened, keyed by kind."""

    kind: EventKind
    actor: int | None = None
    layer: Layer | None = None
    cell: int | None = None
    outcome: str | None = None
    unit: UnitType | None = None
    data: dict[str, object] = field(default_factory=dict)


def strike_events(report: StrikeReport) -> list[GameEvent]:
    """Primary STRIKE event followed by any consequences."""
    defender = 1 - report.attacker
    events = [
        GameEvent(
            kind=EventKind.STRIKE,
            actor=report.attacker,
            layer=report.layer,
            cell=report.index,
            outcome=report.outcome.value,
            data={"unit_kind": report.unit_kind.value} if report.unit_kind is not None else {},
        )
    ]
    if report.sunk:
        events.append(
            GameEvent(
                kind=EventKind.SHIP_SUNK,
                actor=report.attacker,
                layer=report.layer,
                cell=report.index,
                unit=report.unit,
                data={"owner": defender},
            )
        )
    if report.disabled:
        events.append(
            GameEvent(
                kind=EventKind.PLANE_DISABLED,
                actor=report.attacker,
                layer=report.layer,
                cell=report.index,
                unit=report.unit,
                data={"owner": defender},
            )
        )
    if report.victory:
        events.append(GameEvent(kind=EventKind.VICTORY, actor=report.attacker))
    return events


def recon_event(report: ReconReport) -> GameEvent:
    return GameEvent(
        kind=EventKind.RECON,
        actor=report.attacker,
        layer=report.layer,
        cell=report.center,
        data={
            "occupied": report.occupied,
            "cleared_fog": report.cleared_fog,
            "cells": list(report.cells),
        },
    )


def query_event(answer: QueryAnswer) -> GameEvent:
    return GameEvent(
        kind=EventKind.QUERY_ANSWERED,
        actor=answer.asked_by,
        layer=answer.layer,
        outcome="YES" if answer.answer else "NO",
        data={"query": answer.query.value, "line": answer.line, "label": answer.label},
    )


def turn_events(report: TurnReport) -> list[GameEvent]:
    """TURN_ENDED followed by a PLANE_RETURNED per repaired plane."""
    events = [
        GameEvent(
            kind=EventKind.TURN_ENDED,
            actor=report.ended_by,
            data={"next_player": report.next_player},
        )
    ]
    events.extend(
        GameEvent(kind=EventKind.PLANE_RETURNED, actor=report.ended_by, layer=Layer.AIR, unit=unit)
        for unit in report.returned
    )
    return events


def lock_in_events(report: LockInReport) -> list[GameEvent]:
    events = [
        GameEvent(
            kind=EventKind.LOCKED_IN,
            actor=report.player,
            data={"next_setup_player": report.next_setup_player},
        )
    ]
    if report.battle_started:
        events.append(GameEvent(kind=EventKind.BATTLE_STARTED, actor=0))
    return events
