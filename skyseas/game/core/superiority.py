"""Air superiority and the once-per-turn yes/no query."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from skyseas.game.core.catalog import SHIP_SPECS
from skyseas.game.core.errors import Rejection, StateError, ValidationError
from skyseas.game.core.geometry import column_label
from skyseas.game.core.layer import LayerState
from skyseas.game.core.models import BOARD_SIZE, Layer, Phase, QueryType, UnitKind
from skyseas.game.core.player import Player
from skyseas.game.core.session import GameSession, require_phase

_SHIP_CODES = np.array([spec.unit_type.code for spec in SHIP_SPECS], dtype=np.int16)


@dataclass(frozen=True, slots=True)
class QueryAnswer:
    """Answer to one superiority query."""

    asked_by: int
    query: QueryType
    line: int
    label: str
    layer: Layer
    answer: bool


def active_plane_count(player: Player) -> int:
    """Count placed planes that are not currently disabled."""
    return sum(
        1 for unit in player.units_of(UnitKind.PLANE) if unit.placed and unit.disabled_turns <= 0
    )


def has_superiority(session: GameSession, player_index: int) -> bool:
    """Strictly more active planes than the opponent; ties give nobody superiority."""
    own = active_plane_count(session.players[player_index])
    other = active_plane_count(session.players[1 - player_index])
    return own > other


def parse_column(raw: str) -> int:
    value = raw.strip().upper()
    if len(value) != 1 or not "A" <= value <= column_label(BOARD_SIZE - 1):
        raise ValidationError(
            Rejection.INVALID_QUERY_INPUT,
            f"Use a column letter A-{column_label(BOARD_SIZE - 1)}.",
        )
    return ord(value) - ord("A")


def parse_row(raw: str) -> int:
    message = f"Use a row number 1-{BOARD_SIZE}."
    try:
        row = int(raw.strip())
    except ValueError:
        raise ValidationError(Rejection.INVALID_QUERY_INPUT, message) from None
    if not 1 <= row <= BOARD_SIZE:
        raise ValidationError(Rejection.INVALID_QUERY_INPUT, message)
    return row - 1


def _line(layer: LayerState, query: QueryType, line: int) -> np.ndarray:
    grid = LayerState.as_grid(layer.occupancy)
    return grid[:, line] if query.by_column else grid[line, :]


def evaluate_query(defender: Player, battle_layer: Layer, query: QueryType, line: int) -> bool:
    """Scan one full row or column of the defender's grid."""
    if query.ships_only:
        return bool(np.isin(_line(defender.sea, query, line), _SHIP_CODES).any())
    return bool(np.any(_line(defender.layer(battle_layer), query, line)))


def ask_query(session: GameSession, query: QueryType, raw_value: str) -> QueryAnswer:
    """Answer a yes/no question for the active player and consume their query."""
    require_phase(session, Phase.BATTLE)
    if not has_superiority(session, session.active_player):
        raise StateError(
            Rejection.NO_SUPERIORITY, "You do not have air superiority this turn."
        )
    if session.query_used:
        raise StateError(
            Rejection.QUERY_ALREADY_USED, "You already used your question this turn."
        )

    line = parse_column(raw_value) if query.by_column else parse_row(raw_value)
    layer = Layer.SEA if query.ships_only else session.battle_layer
    answer = evaluate_query(session.defender, session.battle_layer, query, line)
    session.query_used = True
    return QueryAnswer(
        asked_by=session.active_player,
        query=query,
        line=line,
        label=column_label(line) if query.by_column else str(line + 1),
        layer=layer,
        answer=answer,
    )
