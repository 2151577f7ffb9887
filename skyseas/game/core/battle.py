"""Strike, recon and turn resolution."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from skyseas.game.core.errors import Rejection, StateError, ValidationError
from skyseas.game.core.geometry import cell_name, index_in_bounds, neighborhood
from skyseas.game.core.models import (
    DISABLE_TURNS,
    BattleAction,
    Layer,
    Phase,
    StrikeOutcome,
    UnitKind,
    UnitType,
)
from skyseas.game.core.phase_flow import advance_phase
from skyseas.game.core.player import Player
from skyseas.game.core.session import GameSession, require_phase


@dataclass(frozen=True, slots=True)
class StrikeReport:
    """Outcome of a single strike."""

    attacker: int
    layer: Layer
    index: int
    outcome: StrikeOutcome
    unit: UnitType | None = None
    unit_kind: UnitKind | None = None
    sunk: bool = False
    disabled: bool = False
    victory: bool = False


@dataclass(frozen=True, slots=True)
class ReconReport:
    """Outcome of a 3x3 recon scan."""

    attacker: int
    layer: Layer
    center: int
    cells: tuple[int, ...]
    occupied: int
    cleared_fog: int


@dataclass(frozen=True, slots=True)
class TurnReport:
    """Outcome of ending a turn."""

    ended_by: int
    next_player: int
    returned: tuple[UnitType, ...] = ()


def remaining_ship_count(player: Player) -> int:
    """Count placed ships with at least one cell not yet hit."""
    return sum(
        1
        for unit in player.units_of(UnitKind.SHIP)
        if unit.placed and not player.sea.all_hit(unit.cells)
    )


def is_sunk(player: Player, unit_type: UnitType) -> bool:
    unit = player.units[unit_type]
    return unit.kind is UnitKind.SHIP and unit.placed and player.sea.all_hit(unit.cells)


def _require_target(index: int) -> None:
    if not index_in_bounds(index):
        raise ValidationError(Rejection.OUT_OF_BOUNDS, f"Cell {index} is off the grid.")


def strike(session: GameSession, layer: Layer, index: int) -> StrikeReport:
    """Resolve a strike by the active player on the defender's *layer*."""
    require_phase(session, Phase.BATTLE)
    _require_target(index)
    defender = session.defender
    target = defender.layer(layer)
    if target.was_targeted(index):
        raise StateError(
            Rejection.ALREADY_TARGETED,
            f"Already targeted {layer.value.upper()} {cell_name(index)}.",
        )

    unit = defender.unit_at(layer, index)
    if unit is None:
        target.misses[index] = True
        target.fog[index] = True
        return StrikeReport(
            attacker=session.active_player,
            layer=layer,
            index=index,
            outcome=StrikeOutcome.MISS,
        )

    target.hits[index] = True
    disabled = False
    sunk = False
    if unit.kind is UnitKind.PLANE:
        if target.all_hit(unit.cells) and unit.disabled_turns <= 0:
            unit.disabled_turns = DISABLE_TURNS
            disabled = True
    else:
        sunk = target.all_hit(unit.cells)

    victory = False
    if remaining_ship_count(defender) == 0:
        session.winner = session.active_player
        victory = advance_phase(session, "victory")

    return StrikeReport(
        attacker=session.active_player,
        layer=layer,
        index=index,
        outcome=StrikeOutcome.HIT,
        unit=unit.unit_type,
        unit_kind=unit.kind,
        sunk=sunk,
        disabled=disabled,
        victory=victory,
    )


def recon(session: GameSession, layer: Layer, center: int) -> ReconReport:
    """Scan the 3x3 window around *center*: clear fog and count occupied cells."""
    require_phase(session, Phase.BATTLE)
    _require_target(center)
    target = session.defender.layer(layer)
    window = list(neighborhood(center))

    cleared = int(np.count_nonzero(target.fog[window]))
    target.fog[window] = False
    occupied = int(np.count_nonzero(target.occupancy[window]))
    return ReconReport(
        attacker=session.active_player,
        layer=layer,
        center=center,
        cells=tuple(window),
        occupied=occupied,
        cleared_fog=cleared,
    )


def end_turn(session: GameSession) -> TurnReport:
    """Tick the ending player's plane timers and hand the turn over."""
    require_phase(session, Phase.BATTLE)
    owner = session.attacker
    returned: list[UnitType] = []
    for unit in owner.units_of(UnitKind.PLANE):
        if unit.disabled_turns <= 0:
            continue
        unit.disabled_turns -= 1
        if unit.disabled_turns == 0:
            owner.air.clear_hits(unit.cells)
            returned.append(unit.unit_type)

    ended_by = session.active_player
    session.active_player = session.defender_index
    session.battle_action = BattleAction.STRIKE
    session.query_used = False
    return TurnReport(ended_by=ended_by, next_player=session.active_player, returned=tuple(returned))
